"""
Command-line entry point: play the sliding-tile puzzle in the terminal.
"""

import logging
from argparse import ArgumentParser

from fifteen.config import PuzzleConfig
from fifteen.console import ConsoleGame
from fifteen.core.gameboard import DEFAULT_SIZE


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='fifteen', description='Play the sliding-tile puzzle')
    parser.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Side of the square grid')
    parser.add_argument('--shuffle', type=int, default=200, help='Random moves applied before play')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the shuffle')
    parser.add_argument('--check-invariants', action='store_true', help='Verify the board after every move')
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    config = PuzzleConfig(
        size=args.size,
        check_invariants=args.check_invariants,
        shuffle_moves=args.shuffle,
        seed=args.seed,
    )
    try:
        board = config.make_board()
    except ValueError as error:
        parser.error(str(error))

    game = ConsoleGame(board)
    try:
        game.run()
    except KeyboardInterrupt:
        print()
    return 0
