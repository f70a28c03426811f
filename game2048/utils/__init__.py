# -*- coding: utf-8 -*-
"""
This module provides utilities for inspecting game boards as lists, matrices, strings and numpy arrays.
"""

from .debugging import board_from_matrix, board_to_array, board_to_matrix, board_to_ndarray, board_to_string

__all__ = ["board_from_matrix", "board_to_array", "board_to_matrix", "board_to_ndarray", "board_to_string"]
