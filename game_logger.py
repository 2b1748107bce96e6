"""
JSONL logger for World Cup games.

Acts as a scoreboard and writes every notification to a JSONL file.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from worldcup.scoreboard import ScoreBoard


class GameLogger(ScoreBoard):
    """Scoreboard that writes game events to a JSONL file."""

    def __init__(self, log_file: Optional[str] = None):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"worldcup_game_{timestamp}.jsonl"

        self.log_file = log_file
        self.event_count = 0
        self.current_round: Optional[int] = None

        # Create/clear log file
        with open(self.log_file, "w"):
            pass

    def log_event(self, event_type: str, **kwargs: Any) -> None:
        """
        Log a game event to the JSONL file.

        Args:
            event_type: Type of event (e.g., "round_start", "turn", "game_won")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(event) + "\n")

        self.event_count += 1

    def on_round(self, round_no: int) -> None:
        self.current_round = round_no
        self.log_event("round_start", round_number=round_no)

    def on_turn(self, player_name: str, player_status: str, field_name: str, money: int) -> None:
        self.log_event(
            "turn",
            round_number=self.current_round,
            player_name=player_name,
            status=player_status,
            field_name=field_name,
            money=money,
        )

    def on_win(self, player_name: str) -> None:
        self.log_event("game_won", round_number=self.current_round, winner_name=player_name)

    def read_events(self) -> List[Dict[str, Any]]:
        """Read back every event written so far."""
        with open(self.log_file) as f:
            return [json.loads(line) for line in f if line.strip()]
