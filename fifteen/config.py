"""
Configuration for a sliding-tile puzzle session.
"""

from dataclasses import dataclass
from numbers import Integral

from fifteen.core.exceptions import InvalidSizeError
from fifteen.core.gameboard import DEFAULT_SIZE, PuzzleBoard


@dataclass
class PuzzleConfig:
    """
    Settings used to set up a game.

    Attributes are grouped by concern; ``make_board`` turns them into a ready-to-play board.
    """

    # ##>: Board parameters.
    size: int = DEFAULT_SIZE  # Side of the square grid
    check_invariants: bool = False  # Recompute the displacement measure after every move

    # ##>: Shuffle parameters.
    shuffle_moves: int = 200  # Random legal moves applied before play
    seed: int | None = None  # Seed for the shuffle, None for a fresh random game

    def validate(self) -> None:
        """
        Check that the settings describe a playable game.

        Raises
        ------
        InvalidSizeError
            If the grid size is not an integer greater than or equal to 2.
        ValueError
            If the number of shuffle moves is negative.
        """
        if isinstance(self.size, bool) or not isinstance(self.size, Integral) or self.size < 2:
            raise InvalidSizeError(self.size)
        if self.shuffle_moves < 0:
            raise ValueError(f'shuffle_moves must be >= 0, got {self.shuffle_moves}')

    def make_board(self) -> PuzzleBoard:
        """
        Build a board and shuffle it.

        Returns
        -------
        PuzzleBoard
            A board of ``size`` shuffled with ``shuffle_moves`` random moves.
        """
        self.validate()
        board = PuzzleBoard(self.size, check_invariants=self.check_invariants)
        board.shuffle(self.shuffle_moves, seed=self.seed)
        return board
