"""Tests for waypoint.navigation — in-memory navigation objects."""

import pytest
from _builders import stack

from waypoint.errors import InvalidStateError
from waypoint.navigation import Navigation
from waypoint.state import NavigationAction, NavigationState, Route, state_from_dict

TREE = state_from_dict(
    {
        "index": 0,
        "routes": [
            {"key": "tabs", "index": 1, "routes": [{"key": "feed"}, {"key": "inbox"}]},
            {"key": "settings"},
        ],
    }
)


class TestRoot:
    def test_root_is_focused_and_parentless(self) -> None:
        nav = Navigation.root(TREE)
        assert nav.is_focused() is True
        assert nav.dangerously_get_parent() is None
        assert nav.is_root is True
        assert nav.key == "root"

    def test_commit_returns_previous(self) -> None:
        nav = Navigation.root(stack("a"))
        previous = nav.commit(stack("a", "b", index=1))
        assert previous == stack("a")
        assert nav.state.active_route == Route("b")

    def test_commit_rejects_leaf(self) -> None:
        nav = Navigation.root(stack("a"))
        with pytest.raises(InvalidStateError):
            nav.commit(Route("a"))  # type: ignore[arg-type]

    def test_emit_action_reaches_listeners(self) -> None:
        nav = Navigation.root(stack("a"))
        received = []
        nav.add_listener("action", received.append)

        payload = nav.emit_action(NavigationAction("Init"), None)

        assert received == [payload]
        assert payload.type == "action"
        assert payload.state == stack("a")
        assert payload.last_state is None

    def test_remove_listener(self) -> None:
        nav = Navigation.root(stack("a"))
        received = []
        nav.add_listener("action", received.append)
        nav.remove_listener("action", received.append)
        nav.emit_action(NavigationAction("Init"), None)
        assert received == []

    def test_needs_exactly_one_of_state_or_parent(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            Navigation("root")


class TestChild:
    def test_child_is_cached(self) -> None:
        root = Navigation.root(TREE)
        assert root.child("tabs") is root.child("tabs")

    def test_child_state_tracks_parent(self) -> None:
        root = Navigation.root(TREE)
        tabs = root.child("tabs")
        assert tabs.state.active_route.key == "inbox"

        root.commit(
            state_from_dict(
                {"index": 0, "routes": [{"key": "tabs", "routes": [{"key": "feed"}, {"key": "inbox"}]}]}
            )
        )
        assert tabs.state.active_route.key == "feed"

    def test_child_focus_follows_parent_selection(self) -> None:
        root = Navigation.root(TREE)
        tabs = root.child("tabs")
        assert tabs.is_focused() is True

        root.commit(
            NavigationState(key="root", routes=TREE.routes, index=1),
        )
        assert tabs.is_focused() is False

    def test_grandchild_focus_needs_whole_chain(self) -> None:
        state = state_from_dict(
            {
                "index": 1,
                "routes": [
                    {"key": "outer", "routes": [{"key": "inner", "routes": [{"key": "x"}]}]},
                    {"key": "other"},
                ],
            }
        )
        inner = Navigation.root(state).child("outer").child("inner")
        # inner is the active child of outer, but outer is in the background
        assert inner.is_focused() is False

    def test_parent_link(self) -> None:
        root = Navigation.root(TREE)
        assert root.child("tabs").dangerously_get_parent() is root
        assert root.child("tabs").is_root is False

    def test_listeners_go_through_parent_registry(self) -> None:
        root = Navigation.root(TREE)
        tabs = root.child("tabs")
        received = []
        tabs.add_listener("willFocus", received.append)

        root.events.emit("willFocus", target="tabs", data="payload")
        root.events.emit("willFocus", target="settings", data="other")

        assert received == ["payload"]
        tabs.remove_listener("willFocus", received.append)
        assert root.events.listener_count("willFocus", "tabs") == 0

    def test_state_of_removed_route(self) -> None:
        root = Navigation.root(TREE)
        tabs = root.child("tabs")
        root.commit(stack("settings"))
        with pytest.raises(InvalidStateError, match="no longer"):
            _ = tabs.state

    def test_state_of_leaf_route(self) -> None:
        root = Navigation.root(TREE)
        with pytest.raises(InvalidStateError, match="not a navigator"):
            _ = root.child("settings").state

    def test_children_cannot_commit_or_emit(self) -> None:
        tabs = Navigation.root(TREE).child("tabs")
        with pytest.raises(RuntimeError):
            tabs.commit(stack("a"))
        with pytest.raises(RuntimeError):
            tabs.emit_action(NavigationAction("Init"), None)

    def test_forget_child(self) -> None:
        root = Navigation.root(TREE)
        tabs = root.child("tabs")
        root.forget_child("tabs")
        root.forget_child("never-created")
        assert root.child("tabs") is not tabs
