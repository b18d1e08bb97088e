"""
errors.py - Exception hierarchy for the Gomoku game engine

Every error raised for a rejected move is recoverable: the game controller
turns it into a rejection and the same player keeps the turn. Only
InvalidSizeError prevents a game from starting.
"""


class GameError(Exception):
    pass


class InvalidSizeError(GameError, ValueError):
    """A board was requested with a size smaller than one."""


class PositionTakenError(GameError):
    """The requested cell is already occupied."""


class InputError(GameError):
    """A move could not be turned into a coordinate on the board."""


class MalformedInputError(InputError):
    """The raw move text is not two integer tokens."""


class OutOfBoundsError(InputError, IndexError):
    """A coordinate lies outside [0, size)."""
