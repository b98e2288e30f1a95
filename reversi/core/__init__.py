"""Core game logic for the reversi engine."""

from .errors import IllegalMoveError, InvalidColorError, OutOfBoundsError, ReversiError
from .state import GameResult, MoveRecord, Piece, PieceColor, Position
from .rules import (
    BOARD_SIZE,
    DIRECTIONS,
    NUM_CELLS,
    STARTING_PIECES,
    Board,
    decode_position,
    encode_position,
    initialize_board,
)

__all__ = [
    "Board",
    "Piece",
    "PieceColor",
    "GameResult",
    "MoveRecord",
    "Position",
    "BOARD_SIZE",
    "DIRECTIONS",
    "NUM_CELLS",
    "STARTING_PIECES",
    "decode_position",
    "encode_position",
    "initialize_board",
    "ReversiError",
    "OutOfBoundsError",
    "IllegalMoveError",
    "InvalidColorError",
]
