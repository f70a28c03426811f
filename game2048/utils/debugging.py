"""
Helpers to inspect boards: flat lists, matrices, strings and numpy arrays.

Empty cells are rendered as ``None`` and obstacles as ``"X"``.
"""

from __future__ import annotations

from typing import Union

from numpy import int64, ndarray, zeros

from game2048.core.converters import index_to_coords
from game2048.core.gameboard import Board, Cell, create_obstacle, create_tile, is_obstacle, is_tile

OBSTACLE_MARK = 'X'

CellValue = Union[int, str, None]


def _cell_value(cell: Cell) -> CellValue:
    if is_tile(cell):
        return cell.value
    if is_obstacle(cell):
        return OBSTACLE_MARK
    return None


def _value_cell(value: CellValue) -> Cell:
    if value is None:
        return None
    if value == OBSTACLE_MARK:
        return create_obstacle()
    return create_tile(int(value))


def board_to_array(board: Board) -> list[CellValue]:
    """Convert a board to a flat list of tile values, ``"X"`` or None."""
    return [_cell_value(cell) for cell in board.grid]


def board_to_matrix(board: Board) -> list[list[CellValue]]:
    """
    Convert a board to a matrix of tile values, ``"X"`` or None.

    Parameters
    ----------
    board : Board
        The board to convert.

    Returns
    -------
    list[list]
        One list per row, ``matrix[y][x]`` being the cell at (x, y).
    """
    matrix: list[list[CellValue]] = [[None] * board.size for _ in range(board.size)]
    for index, cell in enumerate(board.grid):
        x, y = index_to_coords(board.size, index)
        matrix[y][x] = _cell_value(cell)
    return matrix


def board_from_matrix(matrix: list[list[CellValue]]) -> Board:
    """
    Build a board from a matrix as produced by ``board_to_matrix``.

    Example
    -------
    >>> board_from_matrix([[None, 2], ['X', None]]).grid
    (None, Tile(value=2), Obstacle(), None)
    """
    return Board(size=len(matrix), grid=tuple(_value_cell(value) for row in matrix for value in row))


def board_to_string(board: Board) -> str:
    """
    Convert a board to a string, one line per row.

    Example
    -------
    >>> print(board_to_string(board_from_matrix([[None, 2], ['X', None]])))
    None,2
    X   ,None
    """
    return '\n'.join(','.join(str(value).ljust(4) for value in row).rstrip() for row in board_to_matrix(board))


def board_to_ndarray(board: Board) -> ndarray:
    """
    Convert a board to a 2D numpy array.

    Returns
    -------
    ndarray
        Array of shape (size, size): tile values, 0 for empty cells and -1 for obstacles.
    """
    array = zeros((board.size, board.size), dtype=int64)
    for index, cell in enumerate(board.grid):
        x, y = index_to_coords(board.size, index)
        if is_tile(cell):
            array[y, x] = cell.value
        elif is_obstacle(cell):
            array[y, x] = -1
    return array
