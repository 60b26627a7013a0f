from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterable, Optional


class Move(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    # Drops the piece as low as it can go. Kept apart from the simple moves
    # because it is the only move whose effect depends on the grid.
    HARD_DROP = 4

    @property
    def is_simple(self) -> bool:
        return self is not Move.HARD_DROP

    @classmethod
    def from_key(cls, key_name: str) -> Optional["Move"]:
        return KEY_TO_MOVE.get(key_name)


# Key names as reported by pygame.key.name()
KEY_TO_MOVE: Dict[str, Move] = {
    "left": Move.LEFT,
    "right": Move.RIGHT,
    "up": Move.ROTATE,
    "down": Move.SOFT_DROP,
    "space": Move.HARD_DROP,
}


_MOVE_SYMBOLS = {
    Move.LEFT: "L",
    Move.RIGHT: "R",
    Move.ROTATE: "S",
    Move.SOFT_DROP: "",
    Move.HARD_DROP: "",
}


def format_moves(moves: Iterable[Move]) -> str:
    """Render a stored move sequence, e.g. ``<SSLL>``.

    Sequences are stored last-move-first, so they are reversed here to read in
    execution order.
    """
    return "<" + "".join(_MOVE_SYMBOLS[m] for m in reversed(list(moves))) + ">"
