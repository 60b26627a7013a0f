"""Automated player: placement search over the falling piece."""

from .analysis import GridAnalysis
from .bot import TetrisBot

__all__ = ["GridAnalysis", "TetrisBot"]
