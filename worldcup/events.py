"""
Engine event logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    ROUND_START = "round_start"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    TURN_END = "turn_end"
    BANKRUPTCY = "bankruptcy"
    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = self.player if self.player is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(
        self,
        event_type: EventType,
        player: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, player, dict(details or {})))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def get_recent_events(self, count: int = 10) -> List[GameEvent]:
        """Get the most recent N events."""
        if count <= 0:
            return []
        return self.events[-count:]

    def of_type(self, event_type: EventType) -> List[GameEvent]:
        """Get all events of one type, oldest first."""
        return [e for e in self.events if e.event_type == event_type]
