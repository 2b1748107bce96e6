"""
World Cup board game engine.

A deterministic simulation of a football-themed board game: players roll
dice around a circular board of fields that pay, charge, suspend or pool
money until one player is left or the rounds run out.
"""

from .game import WorldCup, create_game
from .player import PlayerState
from .board import Board
from .config import GameConfig
from .dice import Dice, Die, FixedDie, RandomDie, ZeroDie
from .scoreboard import NullScoreBoard, ScoreBoard, TextScoreBoard

__all__ = [
    "WorldCup",
    "create_game",
    "PlayerState",
    "Board",
    "GameConfig",
    "Dice",
    "Die",
    "FixedDie",
    "RandomDie",
    "ZeroDie",
    "NullScoreBoard",
    "ScoreBoard",
    "TextScoreBoard",
]
