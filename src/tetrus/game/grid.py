from __future__ import annotations

from typing import Collection, Iterable

import numpy as np

from .shapes import Coordinate


EMPTY_CELL = -1


class PlacementError(RuntimeError):
    """Raised when cells are written outside the grid or over another piece."""


class GameGrid:
    """Discrete 2D playfield.

    Cells hold ``EMPTY_CELL`` or the color tag of the piece occupying them.
    Coordinates are ``(row, col)`` with row 0 at the top.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.full((self.height, self.width), EMPTY_CELL, dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY_CELL)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def can_place(self, cells: Iterable[Coordinate], ignore: Collection[Coordinate] = ()) -> bool:
        """Check whether every cell is inside the grid and free.

        Cells listed in ``ignore`` count as free, so a piece can be tested at
        a new position while its current cells are still on the grid.
        """
        for row, col in cells:
            if not self.is_inside(row, col):
                return False
            if (row, col) in ignore:
                continue
            if self.grid[row, col] != EMPTY_CELL:
                return False
        return True

    def place(self, cells: Iterable[Coordinate], value: int) -> None:
        cells = list(cells)
        for row, col in cells:
            if not self.is_inside(row, col):
                raise PlacementError(f"cell {(row, col)} is outside the {self.height}x{self.width} grid")
            if value != EMPTY_CELL and self.grid[row, col] != EMPTY_CELL:
                raise PlacementError(f"cell {(row, col)} is already occupied")
        for row, col in cells:
            self.grid[row, col] = value

    def clear(self, cells: Iterable[Coordinate]) -> None:
        self.place(cells, EMPTY_CELL)

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != EMPTY_CELL))

    def clear_completed_rows(self) -> int:
        # Naive gravity with split line clears: rows are handled top to
        # bottom and each clear only moves the rows above it.
        n_cleared = 0
        for row in range(self.height):
            if self.is_row_full(row):
                self._shift_rows_down(row)
                n_cleared += 1
        return n_cleared

    def _shift_rows_down(self, start_row: int) -> None:
        self.grid[1 : start_row + 1] = self.grid[:start_row].copy()
        self.grid[0] = EMPTY_CELL

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.grid = self.grid.copy()
        return new_grid

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
