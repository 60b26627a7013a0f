from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from .grid import GameGrid
from .moves import Move
from .rules import Score, ScoringRules
from .shapes import ShapePosition

if TYPE_CHECKING:
    from tetrus.ai.bot import TetrisBot


logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    # Stop headless games after this many pieces (None: play until game over)
    max_pieces: Optional[int] = None


class TetrisGame:
    """Game state and rules, free of any clock.

    The falling piece lives both in ``current_shape`` and as colored cells in
    ``grid``; every move erases the old cells before writing the new ones.
    Callers decide when to call ``drop_one`` (gravity) and ``apply_move``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
        bot: Optional[TetrisBot] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.bot = bot
        self.score = Score(self.rules)
        self.pieces_placed = 0
        self.game_over = False
        self.current_shape: ShapePosition
        self.reset()

    def reset(self) -> None:
        self.grid.reset()
        self.score = Score(self.rules)
        self.pieces_placed = 0
        self.game_over = False
        self._spawn_shape()

    def _spawn_shape(self) -> None:
        new_pos = ShapePosition.spawn(self.rng, self.grid.width)
        if not self.is_valid_add(new_pos):
            self.current_shape = new_pos
            self.game_over = True
            logger.info(
                "Game over after %d pieces: score %d, %d lines, level %d",
                self.pieces_placed,
                self.score.points,
                self.score.total_lines_cleared,
                self.score.level,
            )
            return
        self.current_shape = new_pos
        self._add_shape_to_grid()
        if self.bot is not None:
            self.bot.update_policy(self.grid, self.current_shape)

    def is_valid_move(self, new_pos: ShapePosition) -> bool:
        return self.grid.can_place(new_pos.cells(), self.current_shape.cells())

    def is_valid_add(self, new_pos: ShapePosition) -> bool:
        return self.grid.can_place(new_pos.cells())

    def _clear_shape_from_grid(self) -> None:
        self.grid.clear(self.current_shape.cells())

    def _add_shape_to_grid(self) -> None:
        self.grid.place(self.current_shape.cells(), self.current_shape.color)

    def move_shape_to(self, new_pos: ShapePosition) -> None:
        self._clear_shape_from_grid()
        self.current_shape = new_pos
        self._add_shape_to_grid()

    def _settle(self) -> None:
        n_cleared = self.grid.clear_completed_rows()
        self.pieces_placed += 1
        if n_cleared:
            logger.debug("Cleared %d rows", n_cleared)
        if self.score.update(n_cleared):
            logger.info("Reached level %d", self.score.level)
        self._spawn_shape()

    def drop_one(self) -> bool:
        """Gravity tick. Returns True when the piece settled."""
        if self.game_over:
            return True
        new_pos = self.current_shape.moved(Move.SOFT_DROP)
        if self.is_valid_move(new_pos):
            self.move_shape_to(new_pos)
            return False
        self._settle()
        return True

    def apply_move(self, move: Move) -> bool:
        """Apply a player or bot move. Returns True when the piece settled."""
        if self.game_over:
            return False
        if move.is_simple:
            new_pos = self.current_shape.moved(move)
            if self.is_valid_move(new_pos):
                self.move_shape_to(new_pos)
            return False
        elif move == Move.HARD_DROP:
            while not self.drop_one():
                pass
            return True
        raise ValueError(f"Unknown move {move!r}")

    def next_move(self) -> Optional[Move]:
        if self.bot is None or self.game_over:
            return None
        return self.bot.pop_next_move()

    def play_headless(self) -> Score:
        """Let the bot play without a clock until the game ends."""
        if self.bot is None:
            raise RuntimeError("headless play requires a bot")
        max_pieces = self.config.max_pieces
        while not self.game_over:
            if max_pieces is not None and self.pieces_placed >= max_pieces:
                break
            move = self.next_move()
            if move is None:
                self.drop_one()
            else:
                self.apply_move(move)
        return self.score

    def get_state(self) -> np.ndarray:
        # The falling piece is already written into the grid
        return self.grid.clone_state()
