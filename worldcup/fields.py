"""
Board field definitions and their effects.

Every field is a ``Field`` tagged with a ``FieldType``. Passing through a
field and landing on it are resolved by ``pass_field`` and
``land_on_field``, which dispatch on the tag. Build fields with the
constructor function for the variant rather than by hand.
"""

from dataclasses import dataclass
from enum import Enum

from worldcup.config import FieldData
from worldcup.player import PlayerState


class FieldType(Enum):
    """Types of fields on the board."""

    BEGINNING = "beginning"
    GOAL = "goal"
    PENALTY = "penalty"
    YELLOW_CARD = "yellow_card"
    BOOKMAKER = "bookmaker"
    MATCH = "match"
    EMPTY = "empty"


@dataclass
class Field:
    """
    A single board field.

    Only the parameters relevant to ``field_type`` are used. ``visitors``
    (bookmaker) and ``pool`` (match) change during play and belong to this
    field for the whole game.
    """

    name: str
    field_type: FieldType
    amount: int = 0
    weight: float = 1.0
    suspension: int = 0
    cycle: int = 3

    visitors: int = 0
    pool: int = 0

    def pass_field(self, player: PlayerState) -> None:
        """Apply the effect of ``player`` moving through this field."""
        if self.field_type == FieldType.BEGINNING:
            player.take(self.amount)
        elif self.field_type == FieldType.MATCH:
            self.pool += player.pay(self.amount)

    def land_on_field(self, player: PlayerState) -> None:
        """Apply the effect of ``player`` stopping on this field."""
        if self.field_type in (FieldType.BEGINNING, FieldType.GOAL):
            player.take(self.amount)

        elif self.field_type == FieldType.PENALTY:
            player.pay(self.amount)

        elif self.field_type == FieldType.YELLOW_CARD:
            player.suspend(self.suspension)

        elif self.field_type == FieldType.BOOKMAKER:
            # First visitor of every cycle wins the bet, the rest lose it
            if self.visitors == 0:
                player.take(self.amount)
            else:
                player.pay(self.amount)
            self.visitors = (self.visitors + 1) % self.cycle

        elif self.field_type == FieldType.MATCH:
            if player.take(int(self.pool * self.weight)):
                self.pool = 0

    def __repr__(self) -> str:
        return f"Field(name='{self.name}', type={self.field_type.value})"


def beginning_field(name: str, gift: int = 50) -> Field:
    """Pays ``gift`` both when passed and when landed on."""
    return Field(name, FieldType.BEGINNING, amount=gift)


def goal_field(name: str, bonus: int) -> Field:
    return Field(name, FieldType.GOAL, amount=bonus)


def penalty_field(name: str, fee: int) -> Field:
    return Field(name, FieldType.PENALTY, amount=fee)


def yellow_card_field(name: str, suspension: int) -> Field:
    return Field(name, FieldType.YELLOW_CARD, suspension=suspension)


def bookmaker_field(name: str, bet: int, cycle: int = 3) -> Field:
    """Every ``cycle``-th visitor wins ``bet``, the others pay it."""
    return Field(name, FieldType.BOOKMAKER, amount=bet, cycle=cycle)


def match_field(name: str, fee: int, weight: float) -> Field:
    """
    Collects ``fee`` from every passing player into a pool; the player who
    lands here receives the pool scaled by ``weight``.
    """
    return Field(name, FieldType.MATCH, amount=fee, weight=weight)


def empty_field(name: str) -> Field:
    return Field(name, FieldType.EMPTY)


def create_field(data: FieldData, bookmaker_cycle: int = 3) -> Field:
    """
    Build a field from its static description.

    Raises:
        ValueError: If ``data.kind`` is not a known field type.
    """
    field_type = FieldType(data.kind)

    if field_type == FieldType.BEGINNING:
        return beginning_field(data.name, data.gift)
    elif field_type == FieldType.GOAL:
        return goal_field(data.name, data.bonus)
    elif field_type == FieldType.PENALTY:
        return penalty_field(data.name, data.fee)
    elif field_type == FieldType.YELLOW_CARD:
        return yellow_card_field(data.name, data.suspension)
    elif field_type == FieldType.BOOKMAKER:
        return bookmaker_field(data.name, data.bet, bookmaker_cycle)
    elif field_type == FieldType.MATCH:
        return match_field(data.name, data.fee, data.weight)
    else:
        return empty_field(data.name)
