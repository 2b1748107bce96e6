"""
The circular game board.
"""

from typing import List, Optional

from worldcup.config import STANDARD_BOARD, FieldData
from worldcup.fields import Field, FieldType, create_field
from worldcup.player import PlayerState


class Board:
    """The World Cup game board, 12 fields in the standard layout."""

    def __init__(self, layout: Optional[List[FieldData]] = None, bookmaker_cycle: int = 3):
        layout = STANDARD_BOARD if layout is None else layout
        if not layout:
            raise ValueError("Board needs at least one field")
        self.fields: List[Field] = [create_field(data, bookmaker_cycle) for data in layout]

    def __len__(self) -> int:
        return len(self.fields)

    def get_field(self, position: int) -> Field:
        """Get the field at the given position."""
        return self.fields[position % len(self.fields)]

    def get_field_name(self, position: int) -> str:
        """Name of the field at the given position."""
        return self.get_field(position).name

    def find_fields(self, field_type: FieldType) -> List[int]:
        """Positions of all fields of the given type."""
        return [i for i, f in enumerate(self.fields) if f.field_type == field_type]

    def player_move(self, player: PlayerState, steps: int) -> int:
        """
        Move a player forward by ``steps`` fields.

        Every field strictly between the start and the destination gets its
        pass effect, in board order. The destination then gets its land
        effect. A roll of zero re-lands on the current field.

        Returns:
            The new position.
        """
        size = len(self.fields)
        start = player.field
        destination = (start + steps) % size

        for offset in range(1, steps):
            self.fields[(start + offset) % size].pass_field(player)

        player.move(destination)
        self.fields[destination].land_on_field(player)
        return destination
