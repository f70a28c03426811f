"""
Board model for the 2048 game: an immutable square grid of cells.

The grid is a flat tuple indexed from left to right, top to bottom, the origin (x=0, y=0) being the
top left corner::

        x --->

    y   +-----+-----+-----+
    |   | 0,0 | 1,0 | 2,0 |
    |   +-----+-----+-----+
    v   | 0,1 | 1,1 | 2,1 |
        +-----+-----+-----+
        | 0,2 | 1,2 | 2,2 |
        +-----+-----+-----+

Each cell holds a ``Tile``, an ``Obstacle`` or ``None`` (empty). Every operation returns a new board,
boards are never modified in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Union

from game2048.core.converters import Coords, coords_to_index
from game2048.core.errors import InvalidSizeError, OutOfBoundsError


@dataclass(frozen=True)
class Tile:
    """A movable, mergeable cell holding a power of two."""

    value: int


@dataclass(frozen=True)
class Obstacle:
    """An immovable, unmergeable cell."""


Cell = Optional[Union[Tile, Obstacle]]
Position = Union[int, Coords]


@dataclass(frozen=True)
class Board:
    """
    A square grid of cells.

    Attributes
    ----------
    size : int
        Number of cells in a row or column.
    grid : tuple
        Flat tuple of ``size * size`` cells.
    """

    size: int
    grid: tuple[Cell, ...]

    def __post_init__(self):
        _check_size(self.size)
        if not isinstance(self.grid, tuple):
            object.__setattr__(self, 'grid', tuple(self.grid))
        if len(self.grid) != self.size * self.size:
            raise InvalidSizeError(f'Grid length {len(self.grid)} does not match size={self.size}')


def _check_size(size) -> None:
    if isinstance(size, bool) or not isinstance(size, Integral) or size <= 0:
        raise InvalidSizeError(f'Invalid size (size={size})')


def create_empty_board(size: int) -> Board:
    """
    Create an empty board of the given size.

    Parameters
    ----------
    size : int
        The size of the board.

    Returns
    -------
    Board
        A board with ``size * size`` empty cells.

    Raises
    ------
    InvalidSizeError
        If the size is not a positive integer.
    """
    _check_size(size)
    return Board(size=int(size), grid=(None,) * (int(size) ** 2))


def create_tile(value: int) -> Tile:
    """Create a tile with the given value."""
    return Tile(value=value)


def create_obstacle() -> Obstacle:
    """Create an obstacle."""
    return Obstacle()


def is_tile(cell: Cell) -> bool:
    """Check if a cell is a tile."""
    return isinstance(cell, Tile)


def is_empty(cell: Cell) -> bool:
    """Check if a cell is empty."""
    return cell is None


def is_obstacle(cell: Cell) -> bool:
    """Check if a cell is an obstacle."""
    return isinstance(cell, Obstacle)


def is_inside(board: Board, coords: Coords) -> bool:
    """Check if coordinates lie on the board."""
    return 0 <= coords.x < board.size and 0 <= coords.y < board.size


def _resolve_index(board: Board, position: Position) -> int:
    if isinstance(position, tuple):
        position = Coords(*position)
        if not is_inside(board, position):
            raise OutOfBoundsError(f'Out of bound (size={board.size} coords={tuple(position)})')
        return coords_to_index(board.size, position)

    index = int(position)
    if index < 0 or index >= len(board.grid):
        raise OutOfBoundsError(f'Out of bound (size={board.size} index={index})')
    return index


def get_cell(board: Board, position: Position) -> Cell:
    """
    Get the cell at a given position.

    Parameters
    ----------
    board : Board
        The board to look up.
    position : int or Coords
        Either a linear index or coordinates.

    Returns
    -------
    Cell
        The cell at the given position.

    Raises
    ------
    OutOfBoundsError
        If the position is outside the grid.
    """
    return board.grid[_resolve_index(board, position)]


def set_cell(board: Board, position: Position, cell: Cell) -> Board:
    """
    Set the cell at a given position.

    Parameters
    ----------
    board : Board
        The board to update. It is left untouched.
    position : int or Coords
        Either a linear index or coordinates.
    cell : Cell
        The new cell content.

    Returns
    -------
    Board
        A new board with exactly one cell replaced.

    Raises
    ------
    OutOfBoundsError
        If the position is outside the grid.
    """
    index = _resolve_index(board, position)
    grid = board.grid[:index] + (cell,) + board.grid[index + 1 :]
    return Board(size=board.size, grid=grid)


def has_tile(board: Board, tile: Tile) -> bool:
    """Check if the board holds a tile with the same value as ``tile``."""
    return any(is_tile(cell) and cell.value == tile.value for cell in board.grid)


def has_empty(board: Board) -> bool:
    """Check if the board has at least one empty cell."""
    return any(is_empty(cell) for cell in board.grid)


def has_obstacle(board: Board) -> bool:
    """Check if the board has at least one obstacle."""
    return any(is_obstacle(cell) for cell in board.grid)


def empty_indexes(board: Board) -> list[int]:
    """Indexes of the empty cells, in grid order."""
    return [index for index, cell in enumerate(board.grid) if is_empty(cell)]


def is_board_equal(board1: Board, board2: Board) -> bool:
    """
    Check if two boards are equal.

    Boards are equal when they have the same size and every pair of cells holds the same variant (and
    the same value for tiles).
    """
    if board1.size != board2.size or len(board1.grid) != len(board2.grid):
        return False
    return all(cell1 == cell2 for cell1, cell2 in zip(board1.grid, board2.grid))
