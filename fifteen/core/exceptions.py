"""
Exceptions raised by the sliding-tile puzzle.
"""


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle."""


class InvalidSizeError(PuzzleError, ValueError):
    """The requested grid size cannot hold a playable puzzle."""

    def __init__(self, size):
        super().__init__(f'Grid size must be an integer >= 2, got {size!r}')
        self.size = size


class OutOfBoundsError(PuzzleError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(f'Cell ({row}, {col}) is outside a {size}x{size} grid')
        self.row = row
        self.col = col
        self.size = size


class InvalidCommandError(PuzzleError, ValueError):
    """The player typed something that is not a direction."""

    def __init__(self, command: str):
        super().__init__(f'Invalid command: {command!r}')
        self.command = command
