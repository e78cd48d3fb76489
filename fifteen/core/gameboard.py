"""
Board state and move engine for the sliding-tile puzzle.

The board keeps the grid as a 2D NumPy array together with the free cell and a running displacement measure
(sum of Manhattan distances of every tile to its solved cell), which makes the solved check O(1).
"""

import logging
from numbers import Integral

from numpy import abs as abs_array
from numpy import arange, int64, ndarray
from numpy import divmod as divmod_array
from numpy.random import PCG64DXSM, default_rng

from fifteen.core.exceptions import InvalidSizeError, OutOfBoundsError
from fifteen.core.geometry import (
    Direction,
    Location,
    classify,
    legal_directions,
    manhattan,
    neighbor_in_direction,
    solved_location,
)

# ##>: Side of the classic 15 puzzle.
DEFAULT_SIZE = 4

# ##>: Module-level generator, used when no seed is given.
_GENERATOR = default_rng(PCG64DXSM())

_logger = logging.getLogger(__name__)


def solved_board(size: int) -> ndarray:
    """
    Build the solved configuration of a grid.

    Parameters
    ----------
    size : int
        Side of the square grid.

    Returns
    -------
    ndarray
        A ``(size, size)`` array holding 1..size²-1 in row-major order and 0 in the last cell.
    """
    cells = size * size
    return (arange(1, cells + 1, dtype=int64) % cells).reshape(size, size)


def compute_displacement(board: ndarray) -> int:
    """
    Compute the displacement measure of a grid from scratch.

    Parameters
    ----------
    board : ndarray
        A square grid of tile values.

    Returns
    -------
    int
        Sum over non-empty tiles of the Manhattan distance to their solved cell. Zero iff solved.
    """
    size = board.shape[0]
    tiles = board.ravel()
    rows, cols = divmod_array(arange(size * size), size)
    goal_rows, goal_cols = divmod_array(tiles - 1, size)
    distances = abs_array(rows - goal_rows) + abs_array(cols - goal_cols)
    return int(distances[tiles != 0].sum())


class PuzzleBoard:
    """
    An N×N sliding-tile puzzle.

    The board starts solved, with the free cell in the bottom-right corner, and is mutated in place by
    :meth:`move` and :meth:`shuffle`.
    """

    def __init__(self, size: int = DEFAULT_SIZE, check_invariants: bool = False):
        """
        Initialize a solved board.

        Parameters
        ----------
        size : int, optional
            Side of the square grid (default is 4).
        check_invariants : bool, optional
            Recompute the displacement measure after every swap and assert it matches the running total
            (default is False).

        Raises
        ------
        InvalidSizeError
            If ``size`` is not an integer greater than or equal to 2.
        """
        if isinstance(size, bool) or not isinstance(size, Integral) or size < 2:
            raise InvalidSizeError(size)

        self._size = int(size)
        self._check_invariants = check_invariants
        self.reset()
        _logger.debug('Created %dx%d board', self._size, self._size)

    @property
    def size(self) -> int:
        """Side of the grid."""
        return self._size

    @property
    def free_cell(self) -> Location:
        """Coordinates of the empty cell."""
        return self._free_row, self._free_col

    @property
    def displacement(self) -> int:
        """Running displacement measure."""
        return self._displacement

    @property
    def board(self) -> ndarray:
        """
        Read-only copy of the grid.

        Returns
        -------
        ndarray
            A ``(size, size)`` array of tile values, 0 marking the free cell.
        """
        grid = self._board.copy()
        grid.flags.writeable = False
        return grid

    def reset(self) -> None:
        """Restore the solved configuration."""
        self._board = solved_board(self._size)
        self._free_row = self._free_col = self._size - 1
        self._displacement = 0

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def _check_cell(self, row: int, col: int) -> None:
        if not self._in_bounds(row, col):
            raise OutOfBoundsError(row, col, self._size)

    def _contribution(self, row: int, col: int) -> int:
        tile = int(self._board[row, col])
        if tile == 0:
            return 0
        return manhattan((row, col), solved_location(tile, self._size))

    def get(self, row: int, col: int) -> int:
        """
        Tile value at a cell.

        Raises
        ------
        OutOfBoundsError
            If either coordinate is outside ``[0, size)``.
        """
        self._check_cell(row, col)
        return int(self._board[row, col])

    def is_empty_at(self, row: int, col: int) -> bool:
        """
        Whether a cell is the free cell.

        Raises
        ------
        OutOfBoundsError
            If either coordinate is outside ``[0, size)``.
        """
        self._check_cell(row, col)
        return (row, col) == (self._free_row, self._free_col)

    def valid_moves(self) -> frozenset[Direction]:
        """Directions the free cell can take from where it stands."""
        return legal_directions(classify(self._free_row, self._free_col, self._size))

    def is_solved(self) -> bool:
        """Whether every tile is in its solved cell."""
        return self._displacement == 0

    def move(self, direction: Direction) -> bool:
        """
        Slide the neighbouring tile into the free cell.

        Parameters
        ----------
        direction : Direction
            Direction in which the free cell travels. Plain integers are accepted (0: left, 1: up,
            2: right, 3: down).

        Returns
        -------
        bool
            True if the tile moved, False if the move would leave the grid. A rejected move leaves the board
            untouched.
        """
        direction = Direction(direction)
        row, col = neighbor_in_direction(self._free_row, self._free_col, direction)
        if not self._in_bounds(row, col):
            _logger.debug(
                'Rejected move %s from free cell (%d, %d)', direction.name, self._free_row, self._free_col
            )
            return False

        # ##: Swap, keeping the displacement measure in step with the two cells involved.
        free_row, free_col = self._free_row, self._free_col
        before = self._contribution(row, col) + self._contribution(free_row, free_col)
        self._board[free_row, free_col] = self._board[row, col]
        self._board[row, col] = 0
        after = self._contribution(row, col) + self._contribution(free_row, free_col)
        self._displacement += after - before
        self._free_row, self._free_col = row, col

        if self._check_invariants:
            assert compute_displacement(self._board) == self._displacement, 'displacement measure out of sync'
        return True

    def shuffle(self, moves: int, seed: int | None = None) -> list[Direction]:
        """
        Apply random legal moves.

        Parameters
        ----------
        moves : int
            Number of moves to perform.
        seed : int, optional
            Random number generator seed for reproducibility.

        Returns
        -------
        list[Direction]
            The directions performed, in order. Replaying their opposites in reverse order restores the
            previous state.

        Raises
        ------
        ValueError
            If ``moves`` is negative.

        Notes
        -----
        - Each direction is drawn uniformly among the legal ones at that step.
        - A move may immediately undo the previous one.
        """
        if moves < 0:
            raise ValueError(f'moves must be >= 0, got {moves}')

        # ##>: Use module-level generator unless seed is specified.
        rng = default_rng(seed) if seed is not None else _GENERATOR

        performed: list[Direction] = []
        for _ in range(moves):
            candidates = sorted(self.valid_moves())
            direction = candidates[int(rng.integers(len(candidates)))]
            self.move(direction)
            performed.append(direction)

        _logger.debug(
            'Shuffled %dx%d board with %d moves (displacement=%d)',
            self._size,
            self._size,
            moves,
            self._displacement,
        )
        return performed
