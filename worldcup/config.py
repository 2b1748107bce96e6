"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class GameConfig:
    """Configuration for a World Cup game."""

    starting_money: int = 1000
    dice_count: int = 2

    min_players: int = 2
    max_players: int = 11

    bookmaker_cycle: int = 3


@dataclass
class FieldData:
    """Static description of one board field."""

    name: str
    kind: str
    gift: int = 0
    bonus: int = 0
    fee: int = 0
    bet: int = 0
    weight: float = 1.0
    suspension: int = 0


STANDARD_BOARD: List[FieldData] = [
    FieldData("Season start", "beginning", gift=50),
    FieldData("Match against San Marino", "match", fee=160, weight=1.0),
    FieldData("Day off training", "empty"),
    FieldData("Match against Liechtenstein", "match", fee=220, weight=1.0),
    FieldData("Yellow card", "yellow_card", suspension=3),
    FieldData("Match against Mexico", "match", fee=300, weight=2.5),
    FieldData("Match against Saudi Arabia", "match", fee=280, weight=2.5),
    FieldData("Bookmaker", "bookmaker", bet=100),
    FieldData("Match against Argentina", "match", fee=250, weight=2.5),
    FieldData("Goal", "goal", bonus=120),
    FieldData("Match against France", "match", fee=400, weight=4.0),
    FieldData("Penalty kick", "penalty", fee=180),
]
