"""
Tests for the command-line driver.
"""

import json

import pytest

from play_worldcup import main, simulate_game
from worldcup.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run the CLI with default settings, whatever the environment holds."""
    monkeypatch.chdir(tmp_path)
    for var in ("ROUNDS", "DICE_COUNT", "DIE_FACES", "SEED", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"WORLDCUP_{var}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_simulate_game_is_reproducible():
    first = simulate_game(["A", "B", "C"], rounds=30, seed=3, verbose=False)
    second = simulate_game(["A", "B", "C"], rounds=30, seed=3, verbose=False)

    assert first.winner == second.winner
    assert [(p.name, p.money) for p in first.players] == [(p.name, p.money) for p in second.players]


def test_main_prints_scoreboard(capsys):
    code = main(["Ann", "Bob", "--rounds", "3", "--seed", "1"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("=== Round: 0\n")
    assert "=== Winner: " in out
    assert "GAME OVER" in out


def test_main_writes_jsonl_log(tmp_path, capsys):
    log_file = tmp_path / "run.jsonl"

    code = main(["Ann", "Bob", "--rounds", "2", "--seed", "5", "--quiet", "--log-file", str(log_file)])

    assert code == 0
    assert capsys.readouterr().out == ""
    events = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert events[0]["event_type"] == "round_start"
    assert events[-1]["event_type"] == "game_won"


def test_main_reports_too_few_players(capsys):
    code = main(["Solo", "--rounds", "3"])

    assert code == 2
    assert "Cannot start game" in capsys.readouterr().err


def test_main_custom_dice_count():
    """--dice changes both the configured count and the dice supplied."""
    assert main(["Ann", "Bob", "--rounds", "1", "--dice", "3", "--quiet"]) == 0
