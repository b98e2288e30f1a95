"""Exceptions raised by the reversi rules engine.

Every error is raised before the board is mutated, so callers can catch it and
carry on with the same board.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "ReversiError",
    "OutOfBoundsError",
    "IllegalMoveError",
    "InvalidColorError",
]


class ReversiError(ValueError):
    """Base class for all rules-engine errors."""


class OutOfBoundsError(ReversiError, IndexError):
    def __init__(self, pos: Any) -> None:
        super().__init__(f"Position {pos!r} is off the board.")
        self.pos = pos


class IllegalMoveError(ReversiError):
    def __init__(self, pos: Any, color: Any, reason: Optional[str] = None) -> None:
        message = f"Can't place {color} piece at {pos!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message + ".")
        self.pos = pos
        self.color = color
        self.reason = reason


class InvalidColorError(ReversiError):
    def __init__(self, color: Any) -> None:
        super().__init__(f"Unknown piece colour {color!r}; expected 'black' or 'white'.")
        self.color = color
