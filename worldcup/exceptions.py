"""
Custom exception hierarchy for the World Cup engine.

Only startup configuration problems are errors. Running out of money
during play is a regular game outcome (bankruptcy) and is never raised.
"""


class WorldCupError(Exception):
    """Base exception for all game-related errors."""


class ConfigurationError(WorldCupError):
    """The game cannot start with the current setup."""


class TooManyDiceError(ConfigurationError):
    """More dice were added than the game is configured for."""


class TooFewDiceError(ConfigurationError):
    """Fewer dice were added than the game is configured for."""


class TooManyPlayersError(ConfigurationError):
    """Roster exceeds the maximum number of players."""


class TooFewPlayersError(ConfigurationError):
    """Roster is too small for a game to start."""


class GameFinishedError(WorldCupError):
    """The game has already been played."""
