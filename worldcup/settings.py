"""
Runtime configuration using pydantic-settings.

Environment variables (prefix: WORLDCUP_):
    WORLDCUP_ROUNDS      - Maximum number of rounds per game (default: 100)
    WORLDCUP_DICE_COUNT  - Number of dice rolled each turn (default: 2)
    WORLDCUP_DIE_FACES   - Faces on each random die (default: 6)
    WORLDCUP_SEED        - Seed for the random dice (default: none)
    WORLDCUP_LOG_LEVEL   - Logging level for the CLI (default: WARNING)
    WORLDCUP_LOG_FILE    - JSONL file for scoreboard events (default: none)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorldCupSettings(BaseSettings):
    """Defaults for running games from the command line."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="WORLDCUP_",
    )

    rounds: int = Field(default=100, ge=0, description="Maximum number of rounds.")
    dice_count: int = Field(default=2, ge=1, description="Dice rolled each turn.")
    die_faces: int = Field(default=6, ge=1, description="Faces on each random die.")
    seed: Optional[int] = Field(default=None, description="Seed for reproducible dice.")
    log_level: str = Field(default="WARNING")
    log_file: Optional[str] = Field(default=None, description="JSONL event log path.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard logging level name, case-insensitively."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> WorldCupSettings:
    """Return cached settings instance."""
    return WorldCupSettings()
