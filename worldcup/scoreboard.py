"""
Scoreboards receive round starts, turn summaries and the winner.
"""

from abc import ABC, abstractmethod
from typing import List


class ScoreBoard(ABC):
    """
    Abstract base class for result sinks.

    The engine calls these methods in order and never concurrently for
    one game.
    """

    @abstractmethod
    def on_round(self, round_no: int) -> None:
        """A new round is starting."""
        pass

    @abstractmethod
    def on_turn(self, player_name: str, player_status: str, field_name: str, money: int) -> None:
        """
        Summary of one player's turn.

        Args:
            player_name: Name of the player.
            player_status: Status label (in play, waiting, bankrupt).
            field_name: Name of the field the player stands on.
            money: Money left after the turn.
        """
        pass

    @abstractmethod
    def on_win(self, player_name: str) -> None:
        """The game is over and ``player_name`` won."""
        pass


class NullScoreBoard(ScoreBoard):
    """Ignores every notification."""

    def on_round(self, round_no: int) -> None:
        """Ignore the round start."""

    def on_turn(self, player_name: str, player_status: str, field_name: str, money: int) -> None:
        """Ignore the turn summary."""

    def on_win(self, player_name: str) -> None:
        """Ignore the winner."""


class TextScoreBoard(ScoreBoard):
    """Collects a plain-text transcript of the game."""

    def __init__(self):
        self.lines: List[str] = []

    def on_round(self, round_no: int) -> None:
        self.lines.append(f"=== Round: {round_no}")

    def on_turn(self, player_name: str, player_status: str, field_name: str, money: int) -> None:
        self.lines.append(f"{player_name} [{player_status}] [{money}] - {field_name}")

    def on_win(self, player_name: str) -> None:
        self.lines.append(f"=== Winner: {player_name}")

    def text(self) -> str:
        """The transcript so far, one line per notification."""
        return "".join(line + "\n" for line in self.lines)

    def __str__(self) -> str:
        return self.text()
