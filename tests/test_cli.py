"""Mini README: Tests for the Typer command line.

Structure:
    * test_simulate_without_autopilot_records_crash - a headless run reaches the ledger.
    * test_simulate_with_autopilot_scores - the scripted player clears obstacles.
    * test_scoreboard_on_empty_ledger - a fresh install prints zeroed results.
    * test_run_follows_configured_environment - production disables auto-reload.
"""

from __future__ import annotations

from typing import Dict

import pytest
from typer.testing import CliRunner

from budgetjump.configuration import get_settings
import main_budget_jump
from main_budget_jump import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("BUDGETJUMP_DATA_DIRECTORY", str(tmp_path))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_simulate_without_autopilot_records_crash() -> None:
    result = runner.invoke(cli, ["simulate", "--no-autopilot", "--record", "--seed", "3"])

    assert result.exit_code == 0, result.output
    assert "State: game_over" in result.output
    assert "Score: 0" in result.output
    assert "Lifetime badges: 1" in result.output

    board = runner.invoke(cli, ["scoreboard"])
    assert board.exit_code == 0, board.output
    assert "High score: 0" in board.output
    assert "Lifetime badges: 1" in board.output


def test_simulate_with_autopilot_scores() -> None:
    result = runner.invoke(cli, ["simulate", "--seed", "3", "--max-ticks", "600"])

    assert result.exit_code == 0, result.output
    score_line = next(line for line in result.output.splitlines() if line.startswith("Score:"))
    assert int(score_line.split(":")[1]) >= 1


def test_scoreboard_on_empty_ledger() -> None:
    result = runner.invoke(cli, ["scoreboard"])

    assert result.exit_code == 0, result.output
    assert "High score: 0" in result.output
    assert "No achievements unlocked yet." in result.output


@pytest.mark.parametrize(
    ("environment", "flags", "expected_reload"),
    [
        ("development", [], True),
        ("production", [], False),
        ("production", ["--development"], True),
    ],
)
def test_run_follows_configured_environment(monkeypatch, environment, flags, expected_reload) -> None:
    calls: Dict[str, object] = {}

    def fake_run(app: str, **kwargs: object) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setenv("BUDGETJUMP_ENVIRONMENT", environment)
    get_settings.cache_clear()
    monkeypatch.setattr(main_budget_jump.uvicorn, "run", fake_run)

    result = runner.invoke(cli, ["run", *flags])

    assert result.exit_code == 0, result.output
    assert calls["app"] == "budgetjump.interface.web_app:create_application"
    assert calls["reload"] is expected_reload
    assert calls["factory"] is True
