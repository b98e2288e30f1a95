from __future__ import annotations

import logging
import numbers
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import IllegalMoveError, OutOfBoundsError
from .state import ColorLike, GameResult, MoveRecord, Piece, PieceColor, Position

logger = logging.getLogger(__name__)

BoardArray = NDArray[np.int8]

BOARD_SIZE = 8
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
EMPTY = 0
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 1), (1, 0),
    (1, -1), (0, -1), (-1, -1),
    (-1, 0), (-1, 1),
)
STARTING_PIECES: Tuple[Tuple[Position, PieceColor], ...] = (
    ((3, 4), PieceColor.BLACK),
    ((4, 3), PieceColor.BLACK),
    ((3, 3), PieceColor.WHITE),
    ((4, 4), PieceColor.WHITE),
)


def encode_position(pos: Sequence[int]) -> int:
    if not _is_position(pos):
        raise OutOfBoundsError(pos)
    return int(pos[0]) * BOARD_SIZE + int(pos[1])


def decode_position(index: int) -> Position:
    if not 0 <= index < NUM_CELLS:
        raise ValueError(f"Position index {index} out of range.")
    return divmod(int(index), BOARD_SIZE)


def initialize_board() -> BoardArray:
    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for (x, y), color in STARTING_PIECES:
        grid[x, y] = color.code
    return grid


class Board:
    """8x8 reversi board holding the pieces and every rule that moves them.

    ``grid`` is indexed ``grid[x, y]``; each cell holds 0 when empty or the
    ``PieceColor.code`` of the piece that owns it. The cell value is the
    piece; :meth:`get_piece` builds a fresh ``Piece`` snapshot on every call,
    so two reads of one cell are never the same object and a held snapshot
    does not follow later flips. Flipping a snapshot leaves the board alone;
    the board only changes through :meth:`place_piece`.
    """

    def __init__(self, grid: Optional[BoardArray] = None) -> None:
        if grid is None:
            grid = initialize_board()
        grid = np.array(grid, dtype=np.int8)
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board grid must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}.")
        if not np.isin(grid, (EMPTY, PieceColor.BLACK.code, PieceColor.WHITE.code)).all():
            raise ValueError("Board grid contains values other than empty, black or white.")
        self.grid: BoardArray = grid

    def copy(self) -> "Board":
        return Board(self.grid.copy())

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------
    def get_piece(self, pos: Sequence[int]) -> Optional[Piece]:
        """Return the piece at ``pos`` or ``None`` when the cell is empty."""
        if not self.is_valid_pos(pos):
            raise OutOfBoundsError(pos)
        value = int(self.grid[pos[0], pos[1]])
        if value == EMPTY:
            return None
        return Piece(PieceColor.from_code(value))

    def is_valid_pos(self, pos: Sequence[int]) -> bool:
        return _is_position(pos)

    def is_occupied(self, pos: Sequence[int]) -> bool:
        return self.get_piece(pos) is not None

    def is_mine(self, pos: Sequence[int], color: ColorLike) -> bool:
        color = PieceColor.parse(color)
        piece = self.get_piece(pos)
        if piece is None:
            return False
        return piece.color is color

    def is_full(self) -> bool:
        return all(slot is not None for slot in self.each_slot())

    def each_slot(self) -> Iterator[Optional[Piece]]:
        for pos in self.each_pos():
            yield self.get_piece(pos)

    def each_pos(self) -> Iterator[Position]:
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                yield (x, y)

    def count(self, color: ColorLike) -> int:
        color = PieceColor.parse(color)
        return int(np.count_nonzero(self.grid == color.code))

    def count_occupied(self) -> int:
        return int(np.count_nonzero(self.grid != EMPTY))

    # ------------------------------------------------------------------
    # Move legality
    # ------------------------------------------------------------------
    def positions_to_flip(
        self, pos: Sequence[int], color: ColorLike, direction: Tuple[int, int]
    ) -> Optional[List[Position]]:
        """Walk from ``pos`` along ``direction`` collecting opposing pieces.

        Returns the run of opposite-colour positions closed off by a piece of
        ``color``. Returns ``None`` if ``pos`` is off the board, if the walk hits
        an empty cell or the edge first, or if there is nothing to capture.
        """
        color = PieceColor.parse(color)
        if not self.is_valid_pos(pos):
            return None
        x, y = pos
        dx, dy = direction
        run: List[Position] = []
        for _ in range(BOARD_SIZE):
            x += dx
            y += dy
            if not _in_bounds(x, y):
                return None
            value = self.grid[x, y]
            if value == EMPTY:
                return None
            if value == color.code:
                return run or None
            run.append((int(x), int(y)))
        return None

    def valid_move(self, pos: Sequence[int], color: ColorLike) -> bool:
        color = PieceColor.parse(color)
        if not self.is_valid_pos(pos) or self.is_occupied(pos):
            return False
        return bool(self._captures(pos, color))

    def valid_moves(self, color: ColorLike) -> List[Position]:
        color = PieceColor.parse(color)
        return [pos for pos in self.each_pos() if self.valid_move(pos, color)]

    def has_move(self, color: ColorLike) -> bool:
        color = PieceColor.parse(color)
        return any(self.valid_move(pos, color) for pos in self.each_pos())

    def is_over(self) -> bool:
        return not (self.has_move(PieceColor.WHITE) or self.has_move(PieceColor.BLACK))

    def result(self) -> GameResult:
        if not self.is_over():
            return GameResult.ONGOING
        black = self.count(PieceColor.BLACK)
        white = self.count(PieceColor.WHITE)
        if black > white:
            return GameResult.BLACK_WIN
        if white > black:
            return GameResult.WHITE_WIN
        return GameResult.DRAW

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_piece(self, pos: Sequence[int], color: ColorLike) -> MoveRecord:
        """Put a ``color`` piece on ``pos`` and flip every captured piece.

        Raises ``OutOfBoundsError`` or ``IllegalMoveError`` without touching
        the board when the move is not allowed.
        """
        color = PieceColor.parse(color)
        if not self.is_valid_pos(pos):
            raise OutOfBoundsError(pos)
        position: Position = (int(pos[0]), int(pos[1]))
        if self.is_occupied(position):
            logger.debug("Rejected %s move at %s: cell occupied", color.value, position)
            raise IllegalMoveError(position, color.value, "cell is occupied")
        captures = self._captures(position, color)
        if not captures:
            logger.debug("Rejected %s move at %s: nothing to flip", color.value, position)
            raise IllegalMoveError(position, color.value, "no pieces would be flipped")

        self.grid[position] = color.code
        flipped: List[Position] = []
        for run in captures.values():
            for target in run:
                self._flip(target)
                flipped.append(target)

        logger.debug("%s played %s flipping %d piece(s)", color.value, position, len(flipped))
        return MoveRecord(position=position, color=color, flipped=tuple(flipped))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        lines = ["  " + " ".join(str(y) for y in range(BOARD_SIZE))]
        for x in range(BOARD_SIZE):
            glyphs = []
            for y in range(BOARD_SIZE):
                piece = self.get_piece((x, y))
                glyphs.append(str(piece) if piece is not None else ".")
            lines.append(f"{x} " + " ".join(glyphs))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Board(black={self.count(PieceColor.BLACK)}, white={self.count(PieceColor.WHITE)})\n"
            f"{self.render()}"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _captures(self, pos: Position, color: PieceColor) -> Dict[Tuple[int, int], List[Position]]:
        captures: Dict[Tuple[int, int], List[Position]] = {}
        for direction in DIRECTIONS:
            run = self.positions_to_flip(pos, color, direction)
            if run is not None:
                captures[direction] = run
        return captures

    def _flip(self, pos: Position) -> None:
        piece = self.get_piece(pos)
        piece.flip()
        self.grid[pos] = piece.color.code


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def _is_position(pos: Sequence[int]) -> bool:
    try:
        if len(pos) != 2:
            return False
    except TypeError:
        return False
    x, y = pos
    if not isinstance(x, numbers.Integral) or not isinstance(y, numbers.Integral):
        return False
    return _in_bounds(x, y)
