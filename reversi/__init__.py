"""Reversi rules engine package."""

from . import core, env, features
from .config import EnvConfig, load_env_config, load_yaml_config
from .core import (
    BOARD_SIZE,
    DIRECTIONS,
    Board,
    GameResult,
    IllegalMoveError,
    InvalidColorError,
    MoveRecord,
    OutOfBoundsError,
    Piece,
    PieceColor,
    ReversiError,
)
from .env import ReversiEnv
from .features import BOARD_CHANNELS, build_board_tensor, build_legal_mask

__all__ = [
    "core",
    "env",
    "features",
    "Board",
    "Piece",
    "PieceColor",
    "GameResult",
    "MoveRecord",
    "BOARD_SIZE",
    "DIRECTIONS",
    "ReversiError",
    "OutOfBoundsError",
    "IllegalMoveError",
    "InvalidColorError",
    "ReversiEnv",
    "EnvConfig",
    "load_env_config",
    "load_yaml_config",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_legal_mask",
]
