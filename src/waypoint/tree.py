"""Navigation tree — hosts one focus tracker per navigator.

``NavigationTree`` plays the part of the embedding UI: it commits new
root states, keeps a ``FocusTracker`` mounted for every navigator present
in the state, and announces each commit with a root ``action``::

    with NavigationTree(initial, on_event=recorder) as tree:
        tree.start()
        tree.dispatch(NavigationAction("Navigate"), next_state)

Trackers for navigators that appear in a new state are mounted before
the ``action`` goes out; trackers for navigators that vanished are
detached first. Without ``on_event`` each tracker broadcasts straight
into its navigation's ``EventRegistry``; with it, every emission at every
level is reported to ``on_event`` and then broadcast.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeAlias

from waypoint._internal.types import OnEvent
from waypoint.config import FocusConfig
from waypoint.focus.sinks import CallbackSink, EmitterSink, EventSink
from waypoint.focus.tracker import FocusTracker
from waypoint.navigation import Navigation
from waypoint.state import NavigationAction, NavigationState

logger = logging.getLogger("waypoint.tree")

Path: TypeAlias = tuple[str, ...]

INIT_ACTION = NavigationAction("Init")


def navigator_paths(state: NavigationState) -> Iterator[Path]:
    """Yield the key path of every nested navigator, parents before children.

    The root itself is the empty path ``()``.
    """
    yield ()
    stack: list[tuple[Path, NavigationState]] = [((), state)]
    while stack:
        path, node = stack.pop(0)
        for route in node.routes:
            if isinstance(route, NavigationState):
                child_path = (*path, route.key)
                yield child_path
                stack.append((child_path, route))


class NavigationTree:
    """Embedding host: state commits, tracker mounting, root actions."""

    __slots__ = ("_config", "_on_event", "_root", "_started", "_trackers")

    def __init__(
        self,
        initial_state: NavigationState,
        *,
        config: FocusConfig | None = None,
        on_event: OnEvent | None = None,
    ) -> None:
        self._config = config or FocusConfig()
        self._on_event = on_event
        self._root = Navigation.root(initial_state)
        self._trackers: dict[Path, FocusTracker] = {}
        self._started = False
        self._reconcile()

    @property
    def root(self) -> Navigation:
        return self._root

    @property
    def state(self) -> NavigationState:
        return self._root.state

    @property
    def mounted_paths(self) -> list[Path]:
        return list(self._trackers)

    def tracker(self, path: Path = ()) -> FocusTracker:
        """Return the tracker mounted at ``path``. Raises ``KeyError`` if none."""
        try:
            return self._trackers[path]
        except KeyError:
            msg = f"No navigator mounted at {'/'.join(path) or '<root>'!r}"
            raise KeyError(msg) from None

    def navigation(self, path: Path = ()) -> Navigation:
        """Navigation object for the navigator at ``path``."""
        nav = self._root
        for key in path:
            nav = nav.child(key)
        return nav

    # -- Lifecycle --

    def start(self, action: NavigationAction = INIT_ACTION) -> None:
        """Announce the initial state. The root focuses its first route here."""
        if self._started:
            msg = "NavigationTree already started."
            raise RuntimeError(msg)
        self._started = True
        self._root.emit_action(action, None)

    def dispatch(self, action: NavigationAction, state: NavigationState) -> None:
        """Commit ``state`` as the result of ``action`` and propagate focus."""
        if not self._started:
            msg = "Call start() before dispatching actions."
            raise RuntimeError(msg)
        last_state = self._root.commit(state)
        self._reconcile()
        self._root.emit_action(action, last_state)

    def close(self) -> None:
        """Detach every tracker, deepest first."""
        for path in sorted(self._trackers, key=len, reverse=True):
            self._unmount(path)
        self._started = False

    def __enter__(self) -> NavigationTree:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- Internal --

    def _reconcile(self) -> None:
        wanted = list(navigator_paths(self._root.state))
        wanted_set = set(wanted)

        for path in sorted(self._trackers, key=len, reverse=True):
            if path not in wanted_set:
                self._unmount(path)

        for path in wanted:
            if path not in self._trackers:
                self._mount(path)

    def _mount(self, path: Path) -> None:
        nav = self.navigation(path)
        tracker = FocusTracker(nav, self._sink_for(nav), self._config)
        tracker.attach()
        self._trackers[path] = tracker
        logger.debug("Mounted navigator %s", "/".join(path) or "<root>")

    def _unmount(self, path: Path) -> None:
        tracker = self._trackers.pop(path)
        try:
            tracker.detach()
        finally:
            if path:
                self.navigation(path[:-1]).forget_child(path[-1])
        logger.debug("Unmounted navigator %s", "/".join(path) or "<root>")

    def _sink_for(self, nav: Navigation) -> EventSink:
        on_event = self._on_event
        if on_event is None:
            return EmitterSink(nav.events)

        def report_and_broadcast(target: str, event_type: str, data: Any) -> None:
            on_event(target, event_type, data)
            nav.events.emit(event_type, target=target, data=data)

        return CallbackSink(report_and_broadcast)
