# -*- coding: utf-8 -*-
"""
Sliding-tile puzzle (the 15 puzzle on any N×N grid).

This package provides the board and its move engine, a dataclass configuration and a text front-end.
"""

from .config import PuzzleConfig
from .core import Direction, PuzzleBoard

__all__ = ["Direction", "PuzzleBoard", "PuzzleConfig"]
