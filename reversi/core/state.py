from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from .errors import InvalidColorError

Position = Tuple[int, int]


class PieceColor(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opposite(self) -> "PieceColor":
        return PieceColor.WHITE if self is PieceColor.BLACK else PieceColor.BLACK

    @property
    def code(self) -> int:
        """Cell value used in the board array (0 is reserved for empty)."""
        return 1 if self is PieceColor.BLACK else 2

    @staticmethod
    def from_code(code: int) -> "PieceColor":
        return PieceColor.BLACK if code == 1 else PieceColor.WHITE

    @staticmethod
    def parse(value: Union["PieceColor", str]) -> "PieceColor":
        if isinstance(value, PieceColor):
            return value
        if isinstance(value, str):
            try:
                return PieceColor(value.lower())
            except ValueError:
                pass
        raise InvalidColorError(value)


ColorLike = Union[PieceColor, str]


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WIN = "black_win"
    WHITE_WIN = "white_win"
    DRAW = "draw"


@dataclass
class Piece:
    color: PieceColor

    def __post_init__(self) -> None:
        self.color = PieceColor.parse(self.color)

    def flip(self) -> None:
        self.color = self.color.opposite

    def __str__(self) -> str:
        return "B" if self.color is PieceColor.BLACK else "W"


@dataclass(frozen=True)
class MoveRecord:
    position: Position
    color: PieceColor
    flipped: Tuple[Position, ...] = field(default_factory=tuple)

    @property
    def flip_count(self) -> int:
        return len(self.flipped)
