"""Exceptions raised by the tictac core.

Both are contract violations: callers are expected to check ``is_legal``
before ``play`` and ``is_terminal`` before ``minimax``.
"""


class TictacError(Exception):
    """Base class for tictac errors."""


class IllegalMoveError(TictacError, ValueError):
    """A move targets an occupied or out-of-range cell, or the game is over."""


class InvalidStateError(TictacError, ValueError):
    """An operation was applied to a position it is not defined for."""
