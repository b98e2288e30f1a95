from __future__ import annotations

import numpy as np

from reversi.core import BOARD_SIZE, NUM_CELLS, Board, PieceColor, encode_position
from reversi.core.state import ColorLike

BOARD_CHANNELS = 3  # own pieces, opponent pieces, legal moves


def build_board_tensor(board: Board, to_play: ColorLike) -> np.ndarray:
    """Return board tensor with shape (3, 8, 8) channel-first, from ``to_play``'s side."""
    to_play = PieceColor.parse(to_play)
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = board.grid == to_play.code
    tensor[1] = board.grid == to_play.opposite.code
    for x, y in board.valid_moves(to_play):
        tensor[2, x, y] = 1.0
    return tensor


def build_legal_mask(board: Board, color: ColorLike) -> np.ndarray:
    mask = np.zeros(NUM_CELLS, dtype=np.int8)
    for pos in board.valid_moves(color):
        mask[encode_position(pos)] = 1
    return mask
