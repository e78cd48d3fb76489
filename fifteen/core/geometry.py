"""
Grid geometry for the sliding-tile puzzle: zone classification, legal directions and neighbour lookup.

Every function here is pure. Coordinates and sizes are expected to be validated by the caller.
"""

from enum import Enum, IntEnum

Location = tuple[int, int]


class Direction(IntEnum):
    """
    Direction in which the free cell travels.

    The neighbouring tile on that side slides the opposite way into the free cell. Values follow the
    usual tile-game action numbering (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


class Zone(Enum):
    """Position class of a cell: one of the four corners, the four edges, or the interior."""

    NORTH_WEST = 'north_west'
    NORTH = 'north'
    NORTH_EAST = 'north_east'
    WEST = 'west'
    CENTER = 'center'
    EAST = 'east'
    SOUTH_WEST = 'south_west'
    SOUTH = 'south'
    SOUTH_EAST = 'south_east'


# ##>: Zone lookup indexed by (row band, column band); band 0 is the first line, 1 the inside, 2 the last line.
_ZONES: dict[tuple[int, int], Zone] = {
    (0, 0): Zone.NORTH_WEST,
    (0, 1): Zone.NORTH,
    (0, 2): Zone.NORTH_EAST,
    (1, 0): Zone.WEST,
    (1, 1): Zone.CENTER,
    (1, 2): Zone.EAST,
    (2, 0): Zone.SOUTH_WEST,
    (2, 1): Zone.SOUTH,
    (2, 2): Zone.SOUTH_EAST,
}

# ##>: Directions that keep the free cell on the grid, per zone.
_LEGAL_DIRECTIONS: dict[Zone, frozenset[Direction]] = {
    Zone.NORTH_WEST: frozenset({Direction.DOWN, Direction.RIGHT}),
    Zone.NORTH: frozenset({Direction.DOWN, Direction.LEFT, Direction.RIGHT}),
    Zone.NORTH_EAST: frozenset({Direction.DOWN, Direction.LEFT}),
    Zone.WEST: frozenset({Direction.UP, Direction.DOWN, Direction.RIGHT}),
    Zone.CENTER: frozenset(Direction),
    Zone.EAST: frozenset({Direction.UP, Direction.DOWN, Direction.LEFT}),
    Zone.SOUTH_WEST: frozenset({Direction.UP, Direction.RIGHT}),
    Zone.SOUTH: frozenset({Direction.UP, Direction.LEFT, Direction.RIGHT}),
    Zone.SOUTH_EAST: frozenset({Direction.UP, Direction.LEFT}),
}

# ##>: Row and column offsets of the cell that swaps with the free cell.
_OFFSETS: dict[Direction, Location] = {
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
}


def _band(index: int, size: int) -> int:
    if index == 0:
        return 0
    if index == size - 1:
        return 2
    return 1


def classify(row: int, col: int, size: int) -> Zone:
    """
    Classify a cell into one of the nine zones of a square grid.

    Parameters
    ----------
    row : int
        Row of the cell.
    col : int
        Column of the cell.
    size : int
        Side of the grid.

    Returns
    -------
    Zone
        The zone the cell belongs to.

    Notes
    -----
    On a 2x2 grid every cell is a corner, since there is no inside band.
    """
    return _ZONES[(_band(row, size), _band(col, size))]


def legal_directions(zone: Zone) -> frozenset[Direction]:
    """
    Directions the free cell may take from a zone.

    Parameters
    ----------
    zone : Zone
        Zone of the free cell.

    Returns
    -------
    frozenset[Direction]
        Two directions for a corner, three for an edge, four for the interior.
    """
    return _LEGAL_DIRECTIONS[zone]


def neighbor_in_direction(row: int, col: int, direction: Direction) -> Location:
    """
    Coordinates of the cell whose tile slides into the free cell.

    Parameters
    ----------
    row : int
        Row of the free cell.
    col : int
        Column of the free cell.
    direction : Direction
        Direction in which the free cell travels.

    Returns
    -------
    tuple[int, int]
        The neighbour's (row, col). It may lie outside the grid; bounds are checked by the board.
    """
    d_row, d_col = _OFFSETS[direction]
    return row + d_row, col + d_col


def opposite(direction: Direction) -> Direction:
    """Return the direction that undoes ``direction``."""
    return _OPPOSITES[direction]


def manhattan(first: Location, second: Location) -> int:
    """Sum of absolute row and column differences between two cells."""
    return abs(first[0] - second[0]) + abs(first[1] - second[1])


def solved_location(tile: int, size: int) -> Location:
    """Cell that holds ``tile`` in the solved configuration (the blank goes last)."""
    if tile == 0:
        return size - 1, size - 1
    return divmod(tile - 1, size)
