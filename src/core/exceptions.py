"""
Custom exceptions shared across layers.

The domain layer raises them, the service layer catches `GameError` and reports the message to the player.
NOTE: None of these subclass ValueError, so pydantic validators let them through unchanged.
"""


class GameError(Exception):
    """Top-level exception for anything the game refuses to do."""


class InvalidCoordinateError(GameError):
    """Square label or indices that do not exist on the 9x8 board."""


class InvalidCommandError(GameError):
    """A command whose arguments cannot be interpreted."""


class GameStateError(GameError):
    """Operation is not allowed in the current game status."""


class IllegalMoveError(GameError):
    """Move request that breaks the movement rules."""


class NotYourTurnError(GameError):
    """Trying to move a piece of the player who is not to move."""


class SetupSourceError(GameError):
    """Setup file could not be found or read."""


class InvalidSetupError(GameError):
    """Setup file contains a line that is not a valid SET command."""
