"""
Tests for the JSONL scoreboard.
"""

import json

from worldcup import FixedDie, ZeroDie, create_game

from game_logger import GameLogger


def test_logger_writes_one_line_per_notification(tmp_path):
    log_file = tmp_path / "game.jsonl"
    logger = GameLogger(str(log_file))
    game = create_game(["Player-1", "Player-2"], [FixedDie([12, 1]), ZeroDie()], logger)

    game.play(5)

    lines = log_file.read_text().splitlines()
    events = [json.loads(line) for line in lines]
    assert [e["event_type"] for e in events] == ["round_start", "turn", "game_won"]
    assert [e["event_id"] for e in events] == [0, 1, 2]

    turn = events[1]
    assert turn["player_name"] == "Player-1"
    assert turn["status"] == "*** bankrupt ***"
    assert turn["field_name"] == "Season start"
    assert turn["money"] == 0
    assert turn["round_number"] == 0

    assert events[2]["winner_name"] == "Player-2"
    assert logger.read_events() == events


def test_logger_truncates_existing_file(tmp_path):
    log_file = tmp_path / "game.jsonl"
    log_file.write_text("stale\n")

    logger = GameLogger(str(log_file))

    assert log_file.read_text() == ""
    assert logger.event_count == 0


def test_logger_default_filename(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    logger = GameLogger()

    assert logger.log_file.startswith("worldcup_game_")
    assert logger.log_file.endswith(".jsonl")
    assert (tmp_path / logger.log_file).exists()
