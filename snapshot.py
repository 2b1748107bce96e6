"""
Public snapshot serialization of a game.

Produces a JSON-friendly view of the roster and the board, including the
money currently pooled on match fields.
"""

from __future__ import annotations

from typing import Any, Dict, List

from worldcup.fields import FieldType
from worldcup.game import WorldCup


def serialize_snapshot(game: WorldCup) -> Dict[str, Any]:
    """Serialize a game into a stable JSON dict.

    The snapshot includes:
    - round_number, game_over and winner
    - players still in the roster, in turn order
    - every board field with its type and mutable state
    """
    players: List[Dict[str, Any]] = []
    for player in game.players:
        players.append(
            {
                "name": player.name,
                "money": player.money,
                "field": player.field,
                "field_name": game.board.get_field_name(player.field),
                "suspension": player.suspension,
                "is_bankrupt": player.is_bankrupt,
                "status": player.status,
            }
        )

    fields: List[Dict[str, Any]] = []
    for position, field in enumerate(game.board.fields):
        entry: Dict[str, Any] = {
            "position": position,
            "name": field.name,
            "type": field.field_type.value,
        }
        if field.field_type == FieldType.MATCH:
            entry["pool"] = field.pool
        elif field.field_type == FieldType.BOOKMAKER:
            entry["visitors"] = field.visitors
        fields.append(entry)

    return {
        "round_number": game.round_number,
        "game_over": game.game_over,
        "winner": game.winner,
        "players": players,
        "board": fields,
    }
