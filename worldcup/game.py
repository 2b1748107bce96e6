"""
Main game engine.
"""

import logging
from typing import Iterable, List, Optional

from worldcup.board import Board
from worldcup.config import GameConfig
from worldcup.dice import Dice, Die
from worldcup.events import EventLog, EventType
from worldcup.exceptions import GameFinishedError, TooFewPlayersError, TooManyPlayersError
from worldcup.player import PlayerState
from worldcup.scoreboard import NullScoreBoard, ScoreBoard

logger = logging.getLogger(__name__)


class WorldCup:
    """
    Runs one game: a roster of players taking turns around the board.

    Players move in the order they were added. Each round every remaining
    player takes one turn; bankrupt players drop out immediately. The game
    ends after the requested number of rounds or when a single player is
    left, and the richest remaining player wins.
    """

    def __init__(self, config: Optional[GameConfig] = None, board: Optional[Board] = None):
        self.config = config or GameConfig()
        self.board = board or Board(bookmaker_cycle=self.config.bookmaker_cycle)
        self.dice = Dice(self.config.dice_count)
        self.players: List[PlayerState] = []
        self.scoreboard: ScoreBoard = NullScoreBoard()
        self.event_log = EventLog()

        self.round_number = 0
        self.game_over = False
        self.winner: Optional[str] = None

    def add_die(self, die: Optional[Die]) -> None:
        """Add a die. ``None`` is accepted and ignored."""
        self._check_not_finished()
        self.dice.add_die(die)

    def add_player(self, name: str) -> PlayerState:
        """Add a player at the end of the turn order."""
        self._check_not_finished()
        player = PlayerState(name, self.config.starting_money)
        self.players.append(player)
        return player

    def set_scoreboard(self, scoreboard: Optional[ScoreBoard]) -> None:
        """Report results to ``scoreboard``. ``None`` keeps the current one."""
        if scoreboard is not None:
            self.scoreboard = scoreboard

    def get_player(self, name: str) -> Optional[PlayerState]:
        """First player in the roster with the given name, if any."""
        for player in self.players:
            if player.name == name:
                return player
        return None

    def _check_not_finished(self) -> None:
        if self.game_over:
            raise GameFinishedError("This game has already been played")

    def _validate(self) -> None:
        if len(self.players) > self.config.max_players:
            raise TooManyPlayersError(
                f"At most {self.config.max_players} players allowed, got {len(self.players)}"
            )
        if len(self.players) < self.config.min_players:
            raise TooFewPlayersError(
                f"At least {self.config.min_players} players required, got {len(self.players)}"
            )
        self.dice.validate()

    def play(self, rounds: int) -> str:
        """
        Play at most ``rounds`` rounds.

        Returns:
            Name of the winner.

        Raises:
            TooManyPlayersError: Roster is larger than allowed.
            TooFewPlayersError: Roster is too small to start.
            TooManyDiceError: More dice than configured.
            TooFewDiceError: Fewer dice than configured.
            GameFinishedError: ``play`` was already called on this game.
        """
        self._check_not_finished()
        self._validate()

        logger.info(f"Starting game with {len(self.players)} players for at most {rounds} rounds")
        self.event_log.log(
            EventType.GAME_START,
            details={"players": [p.name for p in self.players], "rounds": rounds},
        )

        while self.round_number < rounds and len(self.players) > 1:
            self._play_round()
            self.round_number += 1

        return self._finish()

    def _play_round(self) -> None:
        self.scoreboard.on_round(self.round_number)
        self.event_log.log(EventType.ROUND_START, details={"round": self.round_number})

        i = 0
        while i < len(self.players):
            player = self.players[i]
            self._play_turn(player)

            if player.is_bankrupt:
                # The next player slides into slot i, so i stays put
                del self.players[i]
                logger.info(f"{player.name} went bankrupt in round {self.round_number}")
                self.event_log.log(
                    EventType.BANKRUPTCY,
                    player=player.name,
                    details={"round": self.round_number, "field": player.field},
                )
                if len(self.players) == 1:
                    break
            else:
                i += 1

    def _play_turn(self, player: PlayerState) -> None:
        player.wait_if_needed()

        if not player.is_waiting:
            total = self.dice.roll()
            self.event_log.log(EventType.DICE_ROLL, player=player.name, details={"total": total})
            start = player.field
            destination = self.board.player_move(player, total)
            self.event_log.log(
                EventType.MOVE,
                player=player.name,
                details={"from": start, "to": destination, "steps": total},
            )

        field_name = self.board.get_field_name(player.field)
        self.scoreboard.on_turn(player.name, player.status, field_name, player.money)
        self.event_log.log(
            EventType.TURN_END,
            player=player.name,
            details={"status": player.status, "field": field_name, "money": player.money},
        )
        logger.debug(f"{player.name} [{player.status}] [{player.money}] - {field_name}")

    def _finish(self) -> str:
        """Pick the richest remaining player; ties go to the earliest one."""
        winner = self.players[0]
        for player in self.players:
            if player.money > winner.money:
                winner = player

        self.game_over = True
        self.winner = winner.name
        self.scoreboard.on_win(winner.name)
        self.event_log.log(
            EventType.GAME_END,
            player=winner.name,
            details={"rounds_played": self.round_number, "money": winner.money},
        )
        logger.info(f"{winner.name} wins after {self.round_number} rounds with {winner.money}")
        return winner.name


def create_game(
    player_names: Iterable[str],
    dice: Iterable[Optional[Die]],
    scoreboard: Optional[ScoreBoard] = None,
    config: Optional[GameConfig] = None,
) -> WorldCup:
    """Set up a game with the given players, dice and scoreboard."""
    game = WorldCup(config)
    for die in dice:
        game.add_die(die)
    for name in player_names:
        game.add_player(name)
    game.set_scoreboard(scoreboard)
    return game
