"""
Randomized checks of the board invariants over long move sequences.
"""

from unittest import TestCase, main

import numpy as np

from fifteen.core.gameboard import PuzzleBoard, compute_displacement, solved_board
from fifteen.core.geometry import Direction, opposite

SIZES = (3, 4, 5)


def walk_free_cell_to(board: PuzzleBoard, row: int, col: int) -> None:
    """Move the free cell of a fresh board to (row, col)."""
    size = board.size
    for _ in range(size - 1 - row):
        assert board.move(Direction.UP)
    for _ in range(size - 1 - col):
        assert board.move(Direction.LEFT)


class TestFreshBoard(TestCase):
    def test_fresh_board_is_solved(self):
        for size in range(2, 10):
            board = PuzzleBoard(size)
            self.assertTrue(board.is_solved())
            self.assertEqual(board.free_cell, (size - 1, size - 1))


class TestMoveSequences(TestCase):
    def setUp(self):
        self.rng = np.random.default_rng(2024)

    def test_permutation_is_preserved(self):
        """Test that tiles are only ever swapped, never duplicated or lost."""
        for size in SIZES:
            board = PuzzleBoard(size)
            expected = list(range(size * size))
            for _ in range(50):
                for _ in range(40):
                    board.move(Direction(int(self.rng.integers(4))))
                self.assertEqual(sorted(board.board.ravel().tolist()), expected)
                row, col = board.free_cell
                self.assertEqual(board.get(row, col), 0)

    def test_move_then_opposite_restores_state(self):
        for size in SIZES:
            board = PuzzleBoard(size)
            board.shuffle(100, seed=size)
            for _ in range(200):
                direction = Direction(int(self.rng.integers(4)))
                before, free_cell = board.board, board.free_cell
                if board.move(direction):
                    self.assertTrue(board.move(opposite(direction)))
                    np.testing.assert_array_equal(board.board, before)
                    self.assertEqual(board.free_cell, free_cell)
                board.shuffle(1, seed=int(self.rng.integers(1 << 31)))

    def test_incremental_solved_check_matches_full_comparison(self):
        """Test 1000 random sequences of up to 500 moves on 3x3, 4x4 and 5x5 boards."""
        solved = {size: solved_board(size) for size in SIZES}
        mismatches = 0
        solved_hits = 0
        for sequence in range(1000):
            size = SIZES[sequence % len(SIZES)]
            board = PuzzleBoard(size)
            length = int(self.rng.integers(1, 501))
            for direction in self.rng.integers(4, size=length):
                board.move(Direction(int(direction)))
                full = bool(np.array_equal(board.board, solved[size]))
                mismatches += board.is_solved() != full
                solved_hits += full
            mismatches += board.displacement != compute_displacement(board.board)
        self.assertEqual(mismatches, 0)
        self.assertGreater(solved_hits, 0)


class TestValidMoves(TestCase):
    def test_counts_by_zone(self):
        """Test 2 moves in corners, 3 on edges and 4 inside, for every cell."""
        for size in range(3, 7):
            for row in range(size):
                for col in range(size):
                    board = PuzzleBoard(size)
                    walk_free_cell_to(board, row, col)
                    on_row_border = row in (0, size - 1)
                    on_col_border = col in (0, size - 1)
                    expected = 4 - on_row_border - on_col_border
                    self.assertEqual(len(board.valid_moves()), expected, (size, row, col))

    def test_invalid_moves_leave_board_untouched(self):
        for size in range(2, 6):
            for row in range(size):
                for col in range(size):
                    board = PuzzleBoard(size)
                    walk_free_cell_to(board, row, col)
                    for direction in set(Direction) - board.valid_moves():
                        snapshot = board.board.tobytes()
                        displacement = board.displacement
                        self.assertFalse(board.move(direction))
                        self.assertEqual(board.board.tobytes(), snapshot)
                        self.assertEqual(board.free_cell, (row, col))
                        self.assertEqual(board.displacement, displacement)

    def test_valid_moves_always_succeed(self):
        board = PuzzleBoard(4)
        board.shuffle(30, seed=11)
        for direction in board.valid_moves():
            self.assertTrue(board.move(direction))
            self.assertTrue(board.move(opposite(direction)))


class TestShuffleReversal(TestCase):
    def test_undoing_shuffle_solves_board(self):
        """Test that replaying the opposite moves backwards returns to the solved state."""
        for size in SIZES:
            for moves in (0, 1, 17, 500, 10_000):
                board = PuzzleBoard(size)
                performed = board.shuffle(moves, seed=moves + size)
                for direction in reversed(performed):
                    self.assertTrue(board.move(opposite(direction)))
                self.assertTrue(board.is_solved())
                np.testing.assert_array_equal(board.board, solved_board(size))


if __name__ == '__main__':
    main()
