# -*- coding: utf-8 -*-
"""
Core of the sliding-tile puzzle.

It includes the grid geometry (zones, legal directions, neighbour lookup), the board with its move engine,
solved-state detection and shuffling, and the exceptions raised by both.
"""

from .exceptions import InvalidCommandError, InvalidSizeError, OutOfBoundsError, PuzzleError
from .gameboard import DEFAULT_SIZE, PuzzleBoard, compute_displacement, solved_board
from .geometry import (
    Direction,
    Zone,
    classify,
    legal_directions,
    manhattan,
    neighbor_in_direction,
    opposite,
    solved_location,
)

__all__ = [
    "DEFAULT_SIZE",
    "Direction",
    "InvalidCommandError",
    "InvalidSizeError",
    "OutOfBoundsError",
    "PuzzleBoard",
    "PuzzleError",
    "Zone",
    "classify",
    "compute_displacement",
    "legal_directions",
    "manhattan",
    "neighbor_in_direction",
    "opposite",
    "solved_board",
    "solved_location",
]
