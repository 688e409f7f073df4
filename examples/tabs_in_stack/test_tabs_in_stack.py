"""Tests for the tabs-in-stack example."""

from pathlib import Path

from waypoint.cli import main


class TestTabsInStack:
    def test_focus_log(self, example_module) -> None:
        assert example_module.run() == [
            "feed.didFocus",
            "inbox.didFocus",
            "feed.didBlur",
            "settings.didFocus",
            "inbox.didBlur",
            "inbox.didFocus",
            "settings.didBlur",
        ]

    def test_scenario_file_is_valid(self, example_module, capsys) -> None:
        scenario = Path(example_module.__file__).parent / "scenario.json"
        main(["check", str(scenario)])
        assert capsys.readouterr().out.startswith("OK: 3 state(s)")
