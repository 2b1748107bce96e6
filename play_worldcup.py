#!/usr/bin/env python3
"""
Minimal CLI for simulating World Cup games.

Runs one game with random dice and prints the round-by-round
scoreboard followed by the final standings.
"""

import argparse
import logging
import sys
from typing import List, Optional

from worldcup.config import GameConfig
from worldcup.dice import RandomDie
from worldcup.exceptions import ConfigurationError
from worldcup.game import WorldCup, create_game
from worldcup.scoreboard import TextScoreBoard
from worldcup.settings import get_settings
from game_logger import GameLogger

DEFAULT_NAMES = ["Lewandowski", "Messi", "Ronaldo"]


class TeeScoreBoard(TextScoreBoard):
    """Text scoreboard that also forwards every notification to a JSONL logger."""

    def __init__(self, logger: Optional[GameLogger] = None):
        super().__init__()
        self.logger = logger

    def on_round(self, round_no: int) -> None:
        super().on_round(round_no)
        if self.logger:
            self.logger.on_round(round_no)

    def on_turn(self, player_name: str, player_status: str, field_name: str, money: int) -> None:
        super().on_turn(player_name, player_status, field_name, money)
        if self.logger:
            self.logger.on_turn(player_name, player_status, field_name, money)

    def on_win(self, player_name: str) -> None:
        super().on_win(player_name)
        if self.logger:
            self.logger.on_win(player_name)


def print_game_summary(game: WorldCup) -> None:
    """Print final game summary."""
    print("\n" + "=" * 60)
    print("GAME OVER")
    print("=" * 60)

    print(f"\nWinner: {game.winner}")
    print("\nRemaining players:")
    for player in game.players:
        print(f"  {player.name}: {player.money} ({player.status})")

    print(f"\nRounds played: {game.round_number}")


def simulate_game(
    names: List[str],
    rounds: int,
    seed: Optional[int] = None,
    dice_count: int = 2,
    die_faces: int = 6,
    verbose: bool = True,
    log_file: Optional[str] = None,
) -> WorldCup:
    """
    Simulate a complete game.

    Args:
        names: Player names in turn order
        rounds: Maximum number of rounds
        seed: Random seed for reproducibility
        dice_count: Number of dice rolled each turn
        die_faces: Faces on each die
        verbose: Whether to print the scoreboard
        log_file: Path to JSONL log file (None = no JSONL log)
    """
    logger = GameLogger(log_file) if log_file is not None else None
    scoreboard = TeeScoreBoard(logger)

    # Each die gets its own seed so the run is reproducible
    dice = [
        RandomDie(die_faces, None if seed is None else seed + i)
        for i in range(dice_count)
    ]
    config = GameConfig(dice_count=dice_count)
    game = create_game(names, dice, scoreboard, config)

    game.play(rounds)

    if verbose:
        print(scoreboard.text(), end="")
        print_game_summary(game)
        if logger:
            print(f"\nGame logged to: {logger.log_file}")

    return game


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Simulate a World Cup board game")
    parser.add_argument(
        "players",
        nargs="*",
        default=DEFAULT_NAMES,
        help="Player names in turn order (default: %(default)s)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=settings.rounds,
        help="Maximum number of rounds",
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument(
        "--dice",
        type=int,
        default=settings.dice_count,
        help="Number of dice rolled each turn",
    )
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument(
        "--log-file",
        type=str,
        default=settings.log_file,
        help="Path to JSONL log file",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        simulate_game(
            names=args.players,
            rounds=args.rounds,
            seed=args.seed,
            dice_count=args.dice,
            die_faces=settings.die_faces,
            verbose=not args.quiet,
            log_file=args.log_file,
        )
    except ConfigurationError as e:
        print(f"Cannot start game: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
