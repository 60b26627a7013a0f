from __future__ import annotations

import gymnasium as gym
import numpy as np
import pytest

import tetrus.env  # noqa: F401  registers the environment
from tetrus.ai import TetrisBot
from tetrus.env.tetris_env import NOOP, TetrisEnv
from tetrus.env.wrappers import BotActionWrapper
from tetrus.game import Move


def test_reset_and_observation():
    env = gym.make("Tetrus-20x10-v0")
    obs, info = env.reset(seed=0)
    assert obs.shape == (20, 10)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert np.sum(obs != -1) == 4
    env.close()


def test_noop_applies_gravity():
    env = TetrisEnv()
    env.reset(seed=1)
    top_before = env.game.current_shape.row
    obs, reward, terminated, truncated, info = env.step(NOOP)
    assert env.game.current_shape.row == top_before + 1
    assert reward == 0.0
    assert not terminated and not truncated


def test_hard_drop_places_a_piece():
    env = TetrisEnv()
    env.reset(seed=2)
    _, _, _, _, info = env.step(int(Move.HARD_DROP))
    assert info["pieces_placed"] == 1


def test_invalid_action():
    env = TetrisEnv()
    env.reset(seed=3)
    with pytest.raises(ValueError):
        env.step(42)


def test_rgb_render():
    env = TetrisEnv(render_mode="rgb_array")
    env.reset(seed=4)
    img = env.render()
    assert img.shape == (20 * 12, 10 * 12, 3)


def test_bot_wrapper_plays_pieces():
    env = BotActionWrapper(TetrisEnv(bot=TetrisBot()))
    env.reset(seed=5)
    for _ in range(200):
        _, _, terminated, _, info = env.step(env.action_space.sample())
        if terminated:
            break
    assert info["pieces_placed"] > 0


def test_bot_wrapper_requires_a_bot():
    with pytest.raises(ValueError):
        BotActionWrapper(TetrisEnv())
