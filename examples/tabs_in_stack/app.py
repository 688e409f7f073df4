"""Tabs inside a stack: screens subscribe to their own focus events.

A root stack holds a tab navigator and a settings screen. Each screen
registers listeners on the registry of the navigator that owns it, the
way a screen component would on mount.

Run:
    python app.py
"""

from waypoint import NavigationAction, NavigationTree, state_from_dict


def build_state(root_index: int = 0, tab_index: int = 0):
    return state_from_dict(
        {
            "index": root_index,
            "routes": [
                {
                    "key": "tabs",
                    "routeName": "Tabs",
                    "index": tab_index,
                    "routes": [
                        {"key": "feed", "routeName": "Feed"},
                        {"key": "inbox", "routeName": "Inbox"},
                    ],
                },
                {"key": "settings", "routeName": "Settings"},
            ],
        }
    )


def watch(tree: NavigationTree, log: list[str]) -> None:
    """Subscribe every leaf screen to didFocus/didBlur."""
    screens = {
        ("tabs",): ("feed", "inbox"),
        (): ("settings",),
    }
    for path, keys in screens.items():
        registry = tree.navigation(path).events
        for key in keys:
            subscriber = registry.create(key)
            for event_type in ("didFocus", "didBlur"):
                subscriber.add_listener(
                    event_type,
                    lambda payload, key=key, event_type=event_type: log.append(f"{key}.{event_type}"),
                )


def run() -> list[str]:
    log: list[str] = []
    with NavigationTree(build_state()) as tree:
        watch(tree, log)
        tree.start()
        tree.dispatch(NavigationAction("JumpTo", {"routeName": "Inbox"}), build_state(tab_index=1))
        tree.dispatch(NavigationAction("Navigate", {"routeName": "Settings"}), build_state(1, 1))
        tree.dispatch(NavigationAction("Back"), build_state(0, 1))
    return log


if __name__ == "__main__":
    for line in run():
        print(line)
