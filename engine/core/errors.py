"""Exceptions raised when callers break the engine's move contract."""


class IllegalMoveError(ValueError):
    """A move targets an out-of-range or occupied cell, or places no mark."""


class GameOverError(RuntimeError):
    """A move was requested for a position that is already decided."""
