import numpy as np
import pytest

from reversi import EnvConfig, ReversiEnv
from reversi.core import Board, PieceColor, encode_position

B = PieceColor.BLACK.code
W = PieceColor.WHITE.code


def test_reset_returns_valid_observation():
    env = ReversiEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (3, 8, 8)
    assert obs["to_play"] == 0
    assert info["to_play"] == "black"
    assert info["legal_action_mask"].shape == (64,)
    assert np.count_nonzero(info["legal_action_mask"]) == 4


def test_step_advances_state_and_switches_player():
    env = ReversiEnv()
    obs, info = env.reset()

    next_obs, reward, terminated, truncated, next_info = env.step(encode_position((2, 3)))

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert not next_info["passed"]
    assert next_info["flipped"] == ((3, 3),)
    assert next_info["to_play"] == "white"
    assert next_obs["to_play"] == 1
    assert env.board.count("black") == 4


def test_step_rejects_out_of_range_and_illegal_actions():
    env = ReversiEnv()
    env.reset()

    with pytest.raises(ValueError):
        env.step(64)
    with pytest.raises(ValueError):
        env.step(0)


def test_illegal_action_ends_episode_when_not_enforced():
    env = ReversiEnv(enforce_legal_actions=False, illegal_move_penalty=-5.0)
    env.reset()

    _, reward, terminated, _, info = env.step(0)

    assert reward == -5.0
    assert terminated
    assert info["illegal_action"]
    assert not info["legal_action_mask"].any()
    with pytest.raises(ValueError):
        env.step(encode_position((2, 3)))


def test_turn_passes_back_when_opponent_cannot_move():
    env = ReversiEnv()
    env.reset()
    grid = np.zeros((8, 8), dtype=np.int8)
    grid[0, 0] = B
    grid[0, 1] = W
    grid[7, 0] = B
    grid[7, 1] = W
    env._board = Board(grid)

    _, reward, terminated, _, info = env.step(encode_position((0, 2)))

    assert info["passed"]
    assert info["to_play"] == "black"
    assert not terminated
    assert reward == 0.0

    _, reward, terminated, _, info = env.step(encode_position((7, 2)))

    assert terminated
    assert reward == 1.0
    assert env.board.count("white") == 0


def test_full_game_terminates():
    env = ReversiEnv()
    _, info = env.reset()
    terminated = False
    moves = 0
    while not terminated:
        action = int(np.flatnonzero(info["legal_action_mask"])[0])
        _, _, terminated, _, info = env.step(action)
        moves += 1
        assert moves <= 60

    assert env.board.is_over()


def test_render_and_config():
    env = ReversiEnv.from_config(EnvConfig(starting_color="white", render_mode="ansi"))
    _, info = env.reset()

    assert info["to_play"] == "white"
    assert env.render().splitlines()[0] == "  0 1 2 3 4 5 6 7"
    with pytest.raises(NotImplementedError):
        ReversiEnv().render()


def test_reset_option_overrides_starting_colour():
    env = ReversiEnv()
    _, info = env.reset(options={"starting_color": "white"})
    assert env.to_play is PieceColor.WHITE
    assert info["to_play"] == "white"
