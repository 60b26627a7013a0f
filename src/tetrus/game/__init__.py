"""Game module for Tetrus.

Exports the core game engine and supporting classes:
- GameGrid: Playfield, placement checks and row clearing
- ShapePosition: Tetromino kind, rotation and anchor on the grid
- ShapeKind: Enum of available tetromino kinds
- Move: The moves a player or the bot can make
- ScoringRules / Score: Line clear points and levels
- TetrisGame: Clock-free game loop and state management
"""

from .grid import EMPTY_CELL, GameGrid, PlacementError
from .moves import Move, format_moves
from .shapes import SHAPE_COLORS, ShapeKind, ShapePosition, rotation_count, rotation_states
from .rules import Score, ScoringRules
from .events import Event, EventLog
from .core import GameConfig, TetrisGame

__all__ = [
    "EMPTY_CELL",
    "GameGrid",
    "PlacementError",
    "Move",
    "format_moves",
    "SHAPE_COLORS",
    "ShapeKind",
    "ShapePosition",
    "rotation_count",
    "rotation_states",
    "Score",
    "ScoringRules",
    "Event",
    "EventLog",
    "GameConfig",
    "TetrisGame",
]
