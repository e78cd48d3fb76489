from contextlib import redirect_stdout
from io import StringIO
from unittest import TestCase, main
from unittest.mock import patch

import numpy as np

from fifteen.cli import build_parser
from fifteen.cli import main as cli_main
from fifteen.config import PuzzleConfig
from fifteen.core.exceptions import InvalidSizeError


class TestPuzzleConfig(TestCase):
    def test_defaults(self):
        config = PuzzleConfig()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.shuffle_moves, 200)
        self.assertIsNone(config.seed)
        self.assertFalse(config.check_invariants)

    def test_make_board_is_reproducible(self):
        """
        Test that the same seed produces the same shuffled board.
        """
        first = PuzzleConfig(size=5, shuffle_moves=80, seed=9).make_board()
        second = PuzzleConfig(size=5, shuffle_moves=80, seed=9).make_board()
        self.assertEqual(first.size, 5)
        np.testing.assert_array_equal(first.board, second.board)

    def test_make_board_without_shuffle(self):
        board = PuzzleConfig(size=3, shuffle_moves=0).make_board()
        self.assertTrue(board.is_solved())

    def test_validate(self):
        with self.assertRaises(InvalidSizeError):
            PuzzleConfig(size=1).validate()
        with self.assertRaises(ValueError):
            PuzzleConfig(shuffle_moves=-5).validate()


class TestCli(TestCase):
    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.size, 4)
        self.assertEqual(args.shuffle, 200)
        self.assertIsNone(args.seed)
        self.assertEqual(args.log_level, 'WARNING')

    def test_main_runs_until_end_of_input(self):
        out = StringIO()
        with patch('builtins.input', side_effect=EOFError), redirect_stdout(out):
            code = cli_main(['--size', '3', '--shuffle', '10', '--seed', '1'])
        self.assertEqual(code, 0)
        self.assertIn('+----+----+----+', out.getvalue())

    def test_main_plays_moves(self):
        out = StringIO()
        with patch('builtins.input', side_effect=['u', 'd']), redirect_stdout(out):
            code = cli_main(['--size', '2', '--shuffle', '0', '--check-invariants'])
        self.assertEqual(code, 0)
        self.assertIn('Puzzle solved in 2 moves!', out.getvalue())

    def test_main_rejects_bad_size(self):
        with patch('sys.stderr', new=StringIO()), self.assertRaises(SystemExit) as raised:
            cli_main(['--size', '1'])
        self.assertEqual(raised.exception.code, 2)


if __name__ == '__main__':
    main()
