"""
Move engine for the 2048 game: sliding, merging and move-availability detection on boards with obstacles.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from game2048.core.converters import Coords
from game2048.core.gameboard import (
    Board,
    Tile,
    create_tile,
    get_cell,
    has_empty,
    has_obstacle,
    is_board_equal,
    is_empty,
    is_inside,
    is_tile,
    set_cell,
)


class Direction(str, Enum):
    """Direction of a board move."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


# ##>: Unit step (dx, dy) for each direction.
_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class NextTile(NamedTuple):
    """The tile that stopped a walk, and where it sits."""

    tile: Tile
    coords: Coords


class FarthestPosition(NamedTuple):
    """Result of ``find_farthest_position``."""

    farthest: Coords
    next: Optional[NextTile]


def _step(coords: Coords, direction: Direction) -> Coords:
    dx, dy = _VECTORS[direction]
    return Coords(coords.x + dx, coords.y + dy)


def _traversal(size: int, direction: Direction) -> list[Coords]:
    """
    Order in which cells are visited during a move.

    Cells nearer the destination edge come first, so they are resolved before farther tiles try to
    move into the space they vacate.

    Examples
    --------
    For a 3x3 board moved right, rows are visited top to bottom and each row from x=2 down to x=0.
    Moved down, rows are visited from y=2 up to y=0.
    """
    xs = range(size - 1, -1, -1) if direction == Direction.RIGHT else range(size)
    ys = range(size - 1, -1, -1) if direction == Direction.DOWN else range(size)
    return [Coords(x, y) for y in ys for x in xs]


def find_farthest_position(board: Board, coords: Coords, direction: Direction) -> FarthestPosition:
    """
    Walk from ``coords`` in ``direction`` across empty cells.

    Parameters
    ----------
    board : Board
        The board to walk on.
    coords : Coords
        The starting cell.
    direction : Direction
        The direction of the walk.

    Returns
    -------
    FarthestPosition
        ``farthest`` is the last empty cell reached (or the origin). ``next`` is the tile that stopped
        the walk, or None when the walk stopped on the board edge or on an obstacle.
    """
    direction = Direction(direction)
    coords = Coords(*coords)

    previous = coords
    following = _step(previous, direction)
    while is_inside(board, following) and is_empty(get_cell(board, following)):
        previous = following
        following = _step(previous, direction)

    if is_inside(board, following):
        cell = get_cell(board, following)
        if is_tile(cell):
            return FarthestPosition(farthest=previous, next=NextTile(tile=cell, coords=following))
    return FarthestPosition(farthest=previous, next=None)


def _move_tile_to(board: Board, origin: Coords, destination: Coords) -> Board:
    if origin == destination:
        return board
    tile = get_cell(board, origin)
    board = set_cell(board, origin, None)
    return set_cell(board, destination, tile)


def _merge_tile_to(board: Board, origin: Coords, farthest: Coords, target: NextTile) -> Board:
    board = set_cell(board, origin, None)
    board = set_cell(board, farthest, None)
    return set_cell(board, target.coords, create_tile(target.tile.value * 2))


def move(board: Board, direction: Direction) -> Board:
    """
    Move every tile of the board in a given direction.

    Parameters
    ----------
    board : Board
        The board to move. It is left untouched.
    direction : Direction
        The direction of the move.

    Returns
    -------
    Board
        The moved board.

    Notes
    -----
    - Tiles slide until they hit the edge, an obstacle or another tile.
    - A tile stopped by a tile of the same value merges with it into a tile of double value.
    - A tile merges at most once per move: in a row ``[2, 2, 2, _]`` moved left only the two leftmost
      tiles merge, giving ``[4, 2, _, _]``; a tile created by a merge never merges again in the same move.
    - Obstacles never move.
    """
    direction = Direction(direction)
    merged: set[Coords] = set()

    for coords in _traversal(board.size, direction):
        cell = get_cell(board, coords)
        if not is_tile(cell):
            continue

        farthest, following = find_farthest_position(board, coords, direction)
        if following is not None and following.tile == cell and following.coords not in merged:
            board = _merge_tile_to(board, coords, farthest, following)
            merged.add(following.coords)
        else:
            board = _move_tile_to(board, coords, farthest)
    return board


def legal_directions(board: Board) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    list[Direction]
        Directions, in ``Direction`` order, whose move produces a different board.
    """
    return [direction for direction in Direction if not is_board_equal(move(board, direction), board)]


def can_move(board: Board) -> bool:
    """
    Check if the board can move in any direction.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    bool
        True if the player still has a move, False otherwise.

    Notes
    -----
    - Without obstacles, the board can move if it has an empty cell or if a merge is available.
    - With obstacles, empty cells may be walled off. The four moves are simulated and the board can
      move only if one of them changes it.
    """
    if has_obstacle(board):
        return bool(legal_directions(board))

    if has_empty(board):
        return True
    return any(has_empty(move(board, direction)) for direction in Direction)
