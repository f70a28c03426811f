"""
Conversions between linear cell indexes and (x, y) coordinates on a square grid.
"""

from typing import NamedTuple


class Coords(NamedTuple):
    """Zero-based cell coordinates, origin top-left, ``y`` growing downward."""

    x: int
    y: int


def index_to_coords(size: int, index: int) -> Coords:
    """
    Convert a linear index to coordinates on a board of a given size.

    Parameters
    ----------
    size : int
        The size of the board.
    index : int
        The index to convert.

    Returns
    -------
    Coords
        The calculated coordinates.
    """
    return Coords(x=index % size, y=index // size)


def coords_to_index(size: int, coords: Coords) -> int:
    """
    Convert coordinates to a linear index on a board of a given size.

    Parameters
    ----------
    size : int
        The size of the board.
    coords : Coords
        The coordinates to convert.

    Returns
    -------
    int
        The calculated index.
    """
    x, y = coords
    return x + y * size
