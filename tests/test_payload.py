"""Tests for waypoint.events.payload — context strings and enrichment."""

import pytest
from _builders import stack

from waypoint.events.payload import EnrichedPayload, TransitionPayload, build_context, enrich
from waypoint.state import NavigationAction, Route


class TestBuildContext:
    def test_root_fallback(self) -> None:
        assert build_context("home", "Init", None) == "home:Init_Root"

    def test_empty_parent_context_uses_fallback(self) -> None:
        assert build_context("home", "Init", "") == "home:Init_Root"

    def test_chained(self) -> None:
        assert build_context("inbox", "Navigate", "tabs:Navigate_Root") == "inbox:Navigate_tabs:Navigate_Root"

    def test_custom_root(self) -> None:
        assert build_context("home", "Init", None, root="App") == "home:Init_App"


class TestEnrich:
    def test_narrows_to_child_routes(self) -> None:
        payload = TransitionPayload(
            type="action",
            action=NavigationAction("Navigate"),
            state=stack("a", "b", index=1),
            last_state=stack("a", "b"),
        )

        enriched = enrich(payload, Route("b"), Route("a"))

        assert isinstance(enriched, EnrichedPayload)
        assert enriched.state == Route("b")
        assert enriched.last_state == Route("a")
        assert enriched.action is payload.action
        assert enriched.type == "action"
        assert enriched.context == "b:Navigate_Root"

    def test_is_a_transition_payload(self) -> None:
        enriched = enrich(
            TransitionPayload(type="action", action=NavigationAction("Init"), state=stack("a")),
            Route("a"),
            None,
        )
        assert isinstance(enriched, TransitionPayload)
        assert enriched.last_state is None

    def test_frozen(self) -> None:
        payload = TransitionPayload(type="action", action=NavigationAction("Init"), state=stack("a"))
        with pytest.raises(AttributeError):
            payload.context = "x"  # type: ignore[misc]


class TestNavigatorAccessors:
    def test_navigator_state(self) -> None:
        payload = TransitionPayload(type="action", action=NavigationAction("Init"), state=stack("a"))
        assert payload.navigator_state == stack("a")
        assert payload.last_navigator_state is None

    def test_leaf_routes_are_not_navigators(self) -> None:
        payload = TransitionPayload(
            type="action",
            action=NavigationAction("Init"),
            state=Route("a"),
            last_state=Route("b"),
        )
        assert payload.navigator_state is None
        assert payload.last_navigator_state is None
