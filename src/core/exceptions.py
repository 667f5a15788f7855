"""
Custom exceptions shared by all layers.

Every domain error derives from GameError, so the service layer (and anything above it) can catch a single type.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""


class IllegalMoveError(GameError):
    """A pawn move or a wall placement breaks the rules."""


class PlayerNotFoundError(GameError):
    """A player name does not match any piece on the board."""


class TooFewPlayersError(GameError):
    """A game needs at least two players."""


class UnsupportedPlayerCountError(GameError):
    """Quoridor is played by two or four players. Nothing in between."""


class NotYourTurnError(GameError):
    """Someone tried to act while another player is to move."""


class GameStateError(GameError):
    """The requested action does not fit the current state of the game."""


class InvalidNotationError(GameError):
    """A cell or wall string could not be parsed."""


class RepositoryError(GameError):
    """Failure in the repository layer (e.g. unknown game id)."""


class InvalidRequestError(GameError):
    """Request data rejected by the API models. Not a ValueError, so pydantic lets it through unwrapped."""
