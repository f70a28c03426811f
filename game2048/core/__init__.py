# -*- coding: utf-8 -*-
"""
Core board model and move engine for the 2048 game.

It includes coordinate conversions, the immutable board with its cell accessors and predicates, the
directional slide/merge algorithm and move-availability detection.
"""

from .converters import Coords, coords_to_index, index_to_coords
from .errors import Game2048Error, InvalidObstaclesError, InvalidSizeError, OutOfBoundsError
from .gameboard import (
    Board,
    Cell,
    Obstacle,
    Tile,
    create_empty_board,
    create_obstacle,
    create_tile,
    empty_indexes,
    get_cell,
    has_empty,
    has_obstacle,
    has_tile,
    is_board_equal,
    is_empty,
    is_obstacle,
    is_tile,
    set_cell,
)
from .gamemove import Direction, FarthestPosition, NextTile, can_move, find_farthest_position, legal_directions, move

__all__ = [
    "Coords",
    "coords_to_index",
    "index_to_coords",
    "Game2048Error",
    "InvalidObstaclesError",
    "InvalidSizeError",
    "OutOfBoundsError",
    "Board",
    "Cell",
    "Obstacle",
    "Tile",
    "create_empty_board",
    "create_obstacle",
    "create_tile",
    "empty_indexes",
    "get_cell",
    "has_empty",
    "has_obstacle",
    "has_tile",
    "is_board_equal",
    "is_empty",
    "is_obstacle",
    "is_tile",
    "set_cell",
    "Direction",
    "FarthestPosition",
    "NextTile",
    "can_move",
    "find_farthest_position",
    "legal_directions",
    "move",
]
