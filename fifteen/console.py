"""
Text front-end for the sliding-tile puzzle.

Reads one-letter commands, renders the grid as a bordered table and drives a :class:`PuzzleBoard` until the
puzzle is solved or the input runs out.
"""

import logging
from typing import Callable

from fifteen.core.exceptions import InvalidCommandError
from fifteen.core.gameboard import PuzzleBoard
from fifteen.core.geometry import Direction

# ##: Command letters (case-insensitive).
COMMANDS = {'u': Direction.UP, 'd': Direction.DOWN, 'l': Direction.LEFT, 'r': Direction.RIGHT}

PROMPT = 'Enter your move (u, d, l, r):  '
ILLEGAL_MOVE = '\n\nERROR: Illegal move!\n\n'
ILLEGAL_COMMAND = '\n\nERROR: Illegal command!\n\n'

_logger = logging.getLogger(__name__)


def parse_command(text: str) -> Direction:
    """
    Map a typed command to a direction.

    Parameters
    ----------
    text : str
        Raw line typed by the player; only its first character is read.

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    InvalidCommandError
        If the line is empty or does not start with u, d, l or r.
    """
    key = text[:1].lower()
    if key not in COMMANDS:
        raise InvalidCommandError(text)
    return COMMANDS[key]


def render(board: PuzzleBoard) -> str:
    """
    Draw the grid as a bordered table.

    Parameters
    ----------
    board : PuzzleBoard
        Board to draw.

    Returns
    -------
    str
        The table, one line per separator or row. Tiles are right-aligned and the free cell is blank.
    """
    size = board.size
    width = max(2, len(str(size * size - 1)))
    separator = f'+{"-" * (width + 2)}' * size + '+'

    lines = [separator]
    for row in range(size):
        cells = []
        for col in range(size):
            if board.is_empty_at(row, col):
                cells.append(f'+ {" " * width} ')
            else:
                cells.append(f'+ {board.get(row, col):>{width}} ')
        lines.append(''.join(cells) + '+')
        lines.append(separator)
    return '\n'.join(lines)


class ConsoleGame:
    """
    Interactive loop around a board.

    Input and output go through injectable callables so the loop can be driven without a terminal.
    """

    def __init__(
        self,
        board: PuzzleBoard,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ):
        self.board = board
        self.moves = 0
        self._input = input_fn or input
        self._output = output_fn or print

    def show(self) -> None:
        """Print the current grid."""
        self._output(render(self.board))

    def do_action(self, command: str) -> bool:
        """
        Apply one typed command.

        Parameters
        ----------
        command : str
            Raw line typed by the player.

        Returns
        -------
        bool
            True if a tile moved. Unknown commands and illegal moves are reported and return False.
        """
        try:
            direction = parse_command(command)
        except InvalidCommandError:
            self._output(ILLEGAL_COMMAND)
            return False

        if not self.board.move(direction):
            self._output(ILLEGAL_MOVE)
            return False

        self.moves += 1
        return True

    def run(self, max_turns: int | None = None) -> int:
        """
        Play until the puzzle is solved, the input ends or ``max_turns`` commands have been read.

        Parameters
        ----------
        max_turns : int, optional
            Upper bound on the number of commands to read (default is no bound).

        Returns
        -------
        int
            Number of successful moves.
        """
        turns = 0
        while max_turns is None or turns < max_turns:
            self.show()
            try:
                command = self._input(PROMPT)
            except EOFError:
                break
            turns += 1

            if self.do_action(command) and self.board.is_solved():
                self.show()
                self._output(f'Puzzle solved in {self.moves} moves!')
                _logger.info('Solved %dx%d puzzle in %d moves', self.board.size, self.board.size, self.moves)
                break
        return self.moves
