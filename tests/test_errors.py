"""Tests for waypoint.errors — exception hierarchy."""

import pytest

from waypoint.errors import ConfigurationError, InvalidStateError, ScenarioError, WaypointError
from waypoint.state import NavigationState


class TestHierarchy:
    @pytest.mark.parametrize("exc", [ConfigurationError, InvalidStateError, ScenarioError])
    def test_subclasses_waypoint_error(self, exc: type[Exception]) -> None:
        assert issubclass(exc, WaypointError)

    def test_waypoint_error_is_exception(self) -> None:
        assert issubclass(WaypointError, Exception)


class TestCatchability:
    def test_invalid_state_caught_as_base(self) -> None:
        with pytest.raises(WaypointError):
            NavigationState(key="root", routes=())
