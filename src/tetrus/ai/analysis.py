from __future__ import annotations

import numpy as np

from tetrus.game.grid import EMPTY_CELL, GameGrid


class GridAnalysis:
    """Board features used by the placement heuristic."""

    @staticmethod
    def first_nonempty_row_index(grid: GameGrid) -> int:
        non_empty_rows = np.flatnonzero(np.any(grid.grid != EMPTY_CELL, axis=1))
        if non_empty_rows.size == 0:
            return grid.height
        return int(non_empty_rows[0])

    @staticmethod
    def count_filled_rows(grid: GameGrid) -> int:
        return int(np.sum(np.all(grid.grid != EMPTY_CELL, axis=1)))

    @staticmethod
    def count_gaps(grid: GameGrid) -> int:
        # A gap is an empty cell with a filled cell somewhere above it in the
        # same column, i.e. any empty cell below the column's topmost block.
        occ = grid.grid != EMPTY_CELL
        rows = grid.height
        any_col = occ.any(axis=0)
        first_occ = np.where(any_col, np.argmax(occ, axis=0), rows)
        r_idx = np.arange(rows)[:, None]
        gaps_mask = (r_idx > first_occ[None, :]) & (~occ)
        return int(np.sum(gaps_mask))

    @staticmethod
    def grid_score(grid: GameGrid) -> int:
        # Reward full rows heavily, prefer a low stack, penalize buried holes
        return (
            GridAnalysis.count_filled_rows(grid) * 10
            + GridAnalysis.first_nonempty_row_index(grid)
            - GridAnalysis.count_gaps(grid)
        )
