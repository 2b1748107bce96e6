"""Shared test fixtures for World Cup tests."""

import pytest

from worldcup import Board, FixedDie, PlayerState, TextScoreBoard, ZeroDie, create_game


@pytest.fixture
def board():
    """Fresh standard board."""
    return Board()


@pytest.fixture
def player():
    """A solvent player on the first field."""
    return PlayerState("Alice")


@pytest.fixture
def scoreboard():
    return TextScoreBoard()


@pytest.fixture
def fixed_game(scoreboard):
    """
    Factory for a game whose roll totals follow ``rolls`` exactly.

    One fixed die carries the totals and a zero die fills the second slot.
    """

    def _make(rolls, num_players=2):
        names = [f"Player-{i}" for i in range(1, num_players + 1)]
        dice = [FixedDie(rolls), ZeroDie()]
        return create_game(names, dice, scoreboard)

    return _make
