from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from reversi.config import EnvConfig
from reversi.core import (
    BOARD_SIZE,
    NUM_CELLS,
    Board,
    GameResult,
    PieceColor,
    decode_position,
)
from reversi.features import BOARD_CHANNELS, build_board_tensor, build_legal_mask

logger = logging.getLogger(__name__)

_PLAYER_INDEX = {PieceColor.BLACK: 0, PieceColor.WHITE: 1}


class ReversiEnv(gym.Env):
    """Two-player reversi as a single gymnasium environment.

    Both sides act through the same ``step``; ``info["to_play"]`` names the
    colour whose move is expected next. When that player has no legal move
    but the opponent does, the turn passes back automatically.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        starting_color: str = "black",
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
        illegal_move_penalty: float = -1.0,
    ) -> None:
        super().__init__()
        self._starting_color = PieceColor.parse(starting_color)
        self._enforce_legal = enforce_legal_actions
        self._illegal_move_penalty = illegal_move_penalty
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=0.0, high=1.0, shape=(BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32
                ),
                "to_play": spaces.Discrete(2),
            }
        )
        self.action_space = spaces.Discrete(NUM_CELLS)

        self._board = Board()
        self._to_play = self._starting_color
        self._done = False

    @classmethod
    def from_config(cls, config: EnvConfig) -> "ReversiEnv":
        return cls(
            starting_color=config.starting_color,
            enforce_legal_actions=config.enforce_legal_actions,
            render_mode=config.render_mode,
            illegal_move_penalty=config.illegal_move_penalty,
        )

    @property
    def board(self) -> Board:
        return self._board

    @property
    def to_play(self) -> PieceColor:
        return self._to_play

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        starting = options.get("starting_color", self._starting_color) if options else self._starting_color
        self._board = Board()
        self._to_play = PieceColor.parse(starting)
        self._done = False
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._done:
            raise ValueError("Game is over; call reset() before stepping again.")

        mover = self._to_play
        pos = decode_position(int(action_index))
        if not self._board.valid_move(pos, mover):
            if self._enforce_legal:
                raise ValueError(f"Illegal action {action_index} for {mover.value}.")
            logger.info("%s chose illegal action %s; ending episode", mover.value, action_index)
            self._done = True
            info = self._build_info()
            info["illegal_action"] = True
            return self._build_observation(), float(self._illegal_move_penalty), True, False, info

        record = self._board.place_piece(pos, mover)

        opponent = mover.opposite
        passed = False
        if self._board.has_move(opponent):
            self._to_play = opponent
        elif self._board.has_move(mover):
            logger.info("%s has no legal move; turn passes back to %s", opponent.value, mover.value)
            passed = True
        terminated = self._board.is_over()
        if terminated:
            self._done = True
            logger.info(
                "Game over: %s (black=%d, white=%d)",
                self._board.result().value,
                self._board.count(PieceColor.BLACK),
                self._board.count(PieceColor.WHITE),
            )

        info = self._build_info()
        info["passed"] = passed
        info["flipped"] = record.flipped
        reward = self._compute_reward(self._board.result(), mover)
        return self._build_observation(), reward, terminated, False, info

    def legal_action_mask(self) -> np.ndarray:
        if self._done:
            return np.zeros(self.action_space.n, dtype=np.int8)
        return build_legal_mask(self._board, self._to_play)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._board.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, Any]:
        return {
            "board": build_board_tensor(self._board, self._to_play),
            "to_play": _PLAYER_INDEX[self._to_play],
        }

    def _build_info(self) -> Dict[str, Any]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "to_play": self._to_play.value,
        }

    def _compute_reward(self, result: GameResult, mover: PieceColor) -> float:
        if result in (GameResult.ONGOING, GameResult.DRAW):
            return 0.0
        winner = PieceColor.BLACK if result == GameResult.BLACK_WIN else PieceColor.WHITE
        return 1.0 if winner is mover else -1.0
