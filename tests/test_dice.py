"""
Tests for dice and the dice aggregator.
"""

import pytest

from worldcup.dice import Dice, FixedDie, RandomDie, ZeroDie
from worldcup.exceptions import ConfigurationError, TooFewDiceError, TooManyDiceError


def test_roll_sums_all_dice():
    dice = Dice(2)
    dice.add_die(FixedDie([3]))
    dice.add_die(FixedDie([4]))

    assert dice.roll() == 7


def test_fixed_die_cycles():
    die = FixedDie([1, 2, 3])

    assert [die.roll() for _ in range(7)] == [1, 2, 3, 1, 2, 3, 1]


def test_fixed_die_requires_outcomes():
    with pytest.raises(ValueError):
        FixedDie([])


def test_zero_die():
    assert ZeroDie().roll() == 0


def test_random_die_is_reproducible_with_seed():
    first = RandomDie(seed=7)
    second = RandomDie(seed=7)

    rolls = [first.roll() for _ in range(20)]

    assert rolls == [second.roll() for _ in range(20)]
    assert all(1 <= r <= 6 for r in rolls)


def test_adding_none_is_ignored():
    dice = Dice(2)
    dice.add_die(None)
    dice.add_die(ZeroDie())
    dice.add_die(None)

    assert len(dice) == 1


def test_too_few_dice():
    dice = Dice(2)
    dice.add_die(ZeroDie())

    with pytest.raises(TooFewDiceError):
        dice.validate()
    with pytest.raises(TooFewDiceError):
        dice.roll()


def test_too_many_dice():
    dice = Dice(2)
    for _ in range(3):
        dice.add_die(ZeroDie())

    with pytest.raises(TooManyDiceError):
        dice.roll()


def test_dice_errors_are_configuration_errors():
    assert issubclass(TooFewDiceError, ConfigurationError)
    assert issubclass(TooManyDiceError, ConfigurationError)
    assert not issubclass(TooFewDiceError, TooManyDiceError)
