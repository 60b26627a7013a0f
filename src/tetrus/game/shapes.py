from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, List, Tuple

from .moves import Move


Coordinate = Tuple[int, int]  # (row, col)
RotationState = Tuple[Coordinate, ...]


class ShapeKind(IntEnum):
    O = 0
    I = 1
    T = 2
    Z = 3
    S = 4
    L = 5
    J = 6


# Rotation states as (row, col) offsets from the anchor, in clockwise order.
SHAPES: Dict[ShapeKind, Tuple[RotationState, ...]] = {
    ShapeKind.O: (
        ((0, 0), (0, 1), (1, 1), (1, 0)),
    ),
    ShapeKind.I: (
        ((0, 0), (0, 1), (0, 2), (0, 3)),
        ((-1, 1), (0, 1), (1, 1), (2, 1)),
    ),
    ShapeKind.T: (
        ((0, 0), (0, 1), (0, 2), (1, 1)),
        ((0, 0), (0, 1), (-1, 1), (1, 1)),
        ((0, 0), (0, 1), (0, 2), (-1, 1)),
        ((0, 1), (-1, 1), (1, 1), (0, 2)),
    ),
    ShapeKind.Z: (
        ((0, 0), (0, 1), (1, 1), (1, 2)),
        ((0, 1), (0, 2), (-1, 2), (1, 1)),
    ),
    ShapeKind.S: (
        ((0, 1), (0, 2), (1, 1), (1, 0)),
        ((0, 1), (-1, 1), (0, 2), (1, 2)),
    ),
    ShapeKind.L: (
        ((0, 0), (0, 1), (0, 2), (1, 0)),
        ((-1, 0), (-1, 1), (0, 1), (1, 1)),
        ((0, 0), (0, 1), (0, 2), (-1, 2)),
        ((-1, 1), (0, 1), (1, 1), (1, 2)),
    ),
    # Mirror image of L
    ShapeKind.J: (
        ((0, 0), (0, 1), (0, 2), (1, 2)),
        ((-1, 1), (0, 1), (1, 1), (1, 0)),
        ((0, 0), (0, 1), (0, 2), (-1, 0)),
        ((-1, 1), (-1, 2), (0, 1), (1, 1)),
    ),
}


# Indexed by the color tag stored in grid cells
SHAPE_COLORS: Tuple[Tuple[int, int, int], ...] = (
    (253, 249, 0),    # yellow
    (255, 161, 0),    # orange
    (0, 121, 241),    # blue
    (200, 122, 255),  # purple
    (0, 228, 48),     # green
    (230, 41, 55),    # red
    (255, 255, 255),  # white
)


def rotation_states(kind: ShapeKind) -> Tuple[RotationState, ...]:
    return SHAPES[kind]


def rotation_count(kind: ShapeKind) -> int:
    return len(SHAPES[kind])


@dataclass(frozen=True)
class ShapePosition:
    """A tetromino kind placed on the grid.

    ``row``/``col`` is the anchor that the rotation offsets are relative to.
    Positions are values: every transform returns a new instance and none of
    them check legality, which is the grid's job.
    """

    kind: ShapeKind
    rotation: int = 0
    row: int = 0
    col: int = 0
    color: int = 0

    @classmethod
    def spawn(cls, rng: random.Random, width: int) -> "ShapePosition":
        kind = rng.choice(list(ShapeKind))
        color = rng.randrange(len(SHAPE_COLORS))
        return cls(kind=kind, rotation=0, row=0, col=width // 2, color=color)

    def n_rotations(self) -> int:
        return rotation_count(self.kind)

    def cells(self) -> List[Coordinate]:
        offsets = SHAPES[self.kind][self.rotation % self.n_rotations()]
        return [(self.row + dr, self.col + dc) for dr, dc in offsets]

    def moved(self, move: Move) -> "ShapePosition":
        if move == Move.LEFT:
            return replace(self, col=self.col - 1)
        elif move == Move.RIGHT:
            return replace(self, col=self.col + 1)
        elif move == Move.SOFT_DROP:
            return replace(self, row=self.row + 1)
        elif move == Move.ROTATE:
            return replace(self, rotation=(self.rotation + 1) % self.n_rotations())
        raise ValueError(f"{move!r} depends on the grid and cannot be applied to a position alone")

    def compound_moved(self, horizontal_shift: int, n_rotations: int, vertical_shift: int) -> "ShapePosition":
        """Project a position several moves ahead.

        The deltas are applied as rotation, then vertical, then horizontal,
        which is the order the resulting moves will be played in.
        """
        rotated = replace(self, rotation=(self.rotation + n_rotations) % self.n_rotations())
        dropped = replace(rotated, row=rotated.row + vertical_shift)
        return replace(dropped, col=dropped.col + horizontal_shift)
