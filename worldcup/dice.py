"""
Dice used to move players around the board.

The engine only needs something with a ``roll()`` method returning a
non-negative integer. ``Dice`` combines a fixed number of such dice into
a single roll per turn.
"""

import random
from abc import ABC, abstractmethod
from itertools import cycle
from typing import Iterable, List, Optional

from worldcup.exceptions import TooFewDiceError, TooManyDiceError


class Die(ABC):
    """A single source of roll outcomes."""

    @abstractmethod
    def roll(self) -> int:
        """Return the next outcome (always >= 0)."""
        pass


class RandomDie(Die):
    """A fair die backed by its own seedable RNG."""

    def __init__(self, faces: int = 6, seed: Optional[int] = None):
        self.faces = faces
        self.rng = random.Random(seed)

    def roll(self) -> int:
        return self.rng.randint(1, self.faces)


class FixedDie(Die):
    """Repeats a fixed sequence of outcomes forever."""

    def __init__(self, rolls: Iterable[int]):
        self.rolls = list(rolls)
        if not self.rolls:
            raise ValueError("FixedDie needs at least one outcome")
        self._outcomes = cycle(self.rolls)

    def roll(self) -> int:
        return next(self._outcomes)


class ZeroDie(Die):
    """Always rolls zero."""

    def roll(self) -> int:
        return 0


class Dice:
    """
    A set of dice rolled together.

    The number of dice is fixed up front; the actual dice are added one
    by one before the game starts.
    """

    def __init__(self, dice_count: int = 2):
        self.dice_count = dice_count
        self.dice: List[Die] = []

    def __len__(self) -> int:
        return len(self.dice)

    def add_die(self, die: Optional[Die]) -> None:
        """Add a die. ``None`` is ignored."""
        if die is not None:
            self.dice.append(die)

    def validate(self) -> None:
        """
        Check that exactly the configured number of dice was supplied.

        Raises:
            TooFewDiceError: Fewer dice than configured.
            TooManyDiceError: More dice than configured.
        """
        if len(self.dice) < self.dice_count:
            raise TooFewDiceError(f"Expected {self.dice_count} dice, got {len(self.dice)}")
        if len(self.dice) > self.dice_count:
            raise TooManyDiceError(f"Expected {self.dice_count} dice, got {len(self.dice)}")

    def roll(self) -> int:
        """Roll every die in the order it was added and return the total."""
        self.validate()
        return sum(die.roll() for die in self.dice)
