"""Errors raised by the game engine."""


class Game2048Error(Exception):
    """Base class for all engine errors."""


class InvalidSizeError(Game2048Error, ValueError):
    """The board size is not a positive integer (or the grid doesn't match it)."""


class OutOfBoundsError(Game2048Error, IndexError):
    """A cell position resolves outside the grid."""


class InvalidObstaclesError(Game2048Error, ValueError):
    """The obstacle count is negative or leaves no room on the board."""
