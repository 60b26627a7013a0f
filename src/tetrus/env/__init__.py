"""Gymnasium environments for Tetrus."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Tetrus-20x10-v0",
    entry_point="tetrus.env.tetris_env:TetrisEnv",
)

__all__ = ["Tetrus-20x10-v0"]
