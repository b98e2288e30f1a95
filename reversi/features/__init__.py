"""Feature extraction helpers for the reversi environment."""

from .observation import BOARD_CHANNELS, build_board_tensor, build_legal_mask

__all__ = [
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_legal_mask",
]
