from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from tetrus.game.grid import GameGrid
from tetrus.game.moves import Move, format_moves
from tetrus.game.shapes import ShapePosition

from .analysis import GridAnalysis


logger = logging.getLogger(__name__)

Option = Tuple[ShapePosition, List[Move]]


class TetrisBot:
    """Greedy one-piece lookahead player.

    For every reachable resting position of the falling piece the bot scores
    the resulting grid and keeps the moves leading to the best one. Moves are
    stored last-first so that ``pop_next_move`` yields them in play order.

    Rotations that only succeed after a wall kick are not considered.
    """

    # Rows to drop before rotating so pieces have room to turn near the top
    DROP_BIAS = 4
    # Color used for hypothetical placements while scoring
    PLACEHOLDER_COLOR = 1

    def __init__(self) -> None:
        self.moves: List[Move] = []

    def update_policy(self, grid: GameGrid, current_shape: ShapePosition) -> None:
        self.moves = self.decide_moves(grid, current_shape)
        logger.debug("Chosen moves: %s", format_moves(self.moves))

    def pop_next_move(self) -> Optional[Move]:
        if not self.moves:
            return None
        return self.moves.pop()

    @staticmethod
    def as_moves_sequence(is_left: bool, n_horizontal_moves: int, n_rotations: int, n_drops: int) -> List[Move]:
        # Rotate before shifting: a shift can leave the piece somewhere it can
        # no longer rotate.
        shift = Move.LEFT if is_left else Move.RIGHT
        moves = (
            [Move.SOFT_DROP] * n_drops
            + [Move.ROTATE] * n_rotations
            + [shift] * n_horizontal_moves
            + [Move.HARD_DROP]
        )
        moves.reverse()
        return moves

    @staticmethod
    def position_after_fall(shape: ShapePosition, grid: GameGrid) -> ShapePosition:
        while True:
            lower = shape.moved(Move.SOFT_DROP)
            if not grid.can_place(lower.cells()):
                return shape
            shape = lower

    @classmethod
    def enumerate_options(cls, grid: GameGrid, original_shape: ShapePosition) -> List[Option]:
        """List (resting position, moves) for every reachable placement.

        ``grid`` must not contain the falling piece. Different move sequences
        may land on the same position; duplicates are kept.
        """
        result: List[Option] = []
        original_cells = original_shape.cells()
        for direction in (Move.LEFT, Move.RIGHT):
            sign = -1 if direction == Move.LEFT else 1
            for n_rotations in range(original_shape.n_rotations()):
                for n_shifts in range(grid.width // 2 + 1):
                    shape = original_shape.compound_moved(sign * n_shifts, n_rotations, cls.DROP_BIAS)
                    if not grid.can_place(shape.cells(), original_cells):
                        continue
                    resting = cls.position_after_fall(shape, grid)
                    moves = cls.as_moves_sequence(direction == Move.LEFT, n_shifts, n_rotations, cls.DROP_BIAS)
                    result.append((resting, moves))
        return result

    @classmethod
    def decide_moves(cls, original_grid: GameGrid, current_shape: ShapePosition) -> List[Move]:
        """Pick the moves leading to the best scoring placement.

        Works on a copy of ``original_grid`` with the falling piece erased.
        Returns an empty list when the piece has nowhere to go.
        """
        grid = original_grid.copy()
        grid.clear(current_shape.cells())

        best_score: Optional[int] = None
        best_moves: List[Move] = []
        for resting, moves in cls.enumerate_options(grid, current_shape):
            cells = resting.cells()
            grid.place(cells, cls.PLACEHOLDER_COLOR)
            score = GridAnalysis.grid_score(grid)
            grid.clear(cells)
            logger.debug("%s scores %d", format_moves(moves), score)
            if best_score is None or score > best_score:
                best_score, best_moves = score, moves
        return list(best_moves)
