"""
Exception types for the Othello engine.
"""


class OthelloError(Exception):
    """Base class for every error raised by the engine."""


class OutOfBoundsError(OthelloError, IndexError):
    """A position lies outside the board grid."""


class IllegalMoveError(OthelloError, ValueError):
    """A move targets an occupied cell or flips nothing."""


class InvalidStateError(OthelloError, RuntimeError):
    """An operation was attempted in a game state that does not permit it."""
