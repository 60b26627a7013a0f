from __future__ import annotations

import gymnasium as gym

from .tetris_env import NOOP


class BotActionWrapper(gym.ActionWrapper):
    """Ignores the agent's action and plays the built-in bot's next move.

    The wrapped env's game must have been created with a bot. Once the bot
    has no moves left the piece is left to gravity.
    """

    def __init__(self, env: gym.Env):
        super().__init__(env)
        if env.unwrapped.game.bot is None:
            raise ValueError("BotActionWrapper needs an env created with a bot")

    def action(self, action):  # type: ignore[override]
        move = self.env.unwrapped.game.next_move()
        return NOOP if move is None else int(move)
