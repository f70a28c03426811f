"""
Game manager: starts games and transitions a game state given a player action.

Game states are immutable, every transition returns a new state (or the very same one when nothing
happened). This makes the game history trivial to keep.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from numpy.random import PCG64DXSM, Generator, default_rng

from game2048.core.gameboard import (
    Board,
    Cell,
    create_empty_board,
    create_obstacle,
    create_tile,
    empty_indexes,
    has_tile,
    is_board_equal,
    set_cell,
)
from game2048.core.gamemove import Direction, can_move
from game2048.core.gamemove import move as move_board
from game2048.envs.config import check_obstacles

logger = logging.getLogger(__name__)

START_TILE_VALUE = 2
SPAWN_TILE_VALUE = 1
WINNING_TILE_VALUE = 2048

# ##>: Module-level generator, used when no generator or seed is injected.
_GENERATOR = default_rng(PCG64DXSM())

RandomSource = Union[Generator, int, None]


class Status(str, Enum):
    """Status of a game. ``won`` and ``lost`` are terminal."""

    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


@dataclass(frozen=True)
class GameState:
    """
    State of a game.

    Attributes
    ----------
    status : Status
        Whether the game is still going on.
    board : Board
        The current board.
    """

    status: Status
    board: Board

    @property
    def is_finished(self) -> bool:
        """True once the game is won or lost."""
        return self.status != Status.PLAYING


@dataclass(frozen=True)
class MoveAction:
    """Player action moving the board in a direction."""

    direction: Direction


Action = MoveAction


def _generator(rng: RandomSource) -> Generator:
    if rng is None:
        return _GENERATOR
    if isinstance(rng, Generator):
        return rng
    return default_rng(rng)


def set_random_cell(board: Board, cell: Cell, rng: RandomSource = None) -> Optional[Board]:
    """
    Place a cell in a uniformly chosen empty cell of the board.

    Parameters
    ----------
    board : Board
        The board to update. It is left untouched.
    cell : Cell
        The cell to place.
    rng : Generator or int, optional
        Random generator, or seed for a fresh one. Defaults to a module-level generator.

    Returns
    -------
    Board or None
        The new board, or None if the board has no empty cell.
    """
    indexes = empty_indexes(board)
    if not indexes:
        return None

    chosen = indexes[int(_generator(rng).integers(len(indexes)))]
    return set_cell(board, chosen, cell)


def start_game(size: int, obstacles: int = 0, rng: RandomSource = None) -> GameState:
    """
    Start a new game.

    Parameters
    ----------
    size : int
        The size of the board.
    obstacles : int, optional
        Number of obstacles to place (default is 0).
    rng : Generator or int, optional
        Random generator, or seed for a fresh one.

    Returns
    -------
    GameState
        A playing game with one tile of value 2 and ``obstacles`` obstacles, each at a random empty cell.

    Raises
    ------
    InvalidSizeError
        If the size is not a positive integer.
    InvalidObstaclesError
        If the obstacle count is negative or leaves no room to play.
    """
    board = create_empty_board(size)
    check_obstacles(board.size, obstacles)
    generator = _generator(rng)

    board = set_random_cell(board, create_tile(START_TILE_VALUE), generator)
    for _ in range(obstacles):
        board = set_random_cell(board, create_obstacle(), generator)

    logger.debug('Game started (size=%d, obstacles=%d)', size, obstacles)
    return GameState(status=Status.PLAYING, board=board)


def _move(state: GameState, direction: Direction, rng: RandomSource) -> GameState:
    # ##: The player lost if no move is possible.
    if not can_move(state.board):
        logger.info('Game lost')
        return GameState(status=Status.LOST, board=state.board)

    new_board = move_board(state.board, direction)

    # ##: Nothing moved, keep the very same state and spawn nothing.
    if is_board_equal(new_board, state.board):
        logger.debug('No-op move %s', direction.value)
        return state

    if has_tile(new_board, create_tile(WINNING_TILE_VALUE)):
        logger.info('Game won')
        return GameState(status=Status.WON, board=new_board)

    spawned = set_random_cell(new_board, create_tile(SPAWN_TILE_VALUE), rng)
    # ##!: Unreachable after can_move, kept as a guard.
    if spawned is None:
        logger.info('Game lost, no room left for a new tile')
        return GameState(status=Status.LOST, board=new_board)

    return GameState(status=Status.PLAYING, board=spawned)


def transition(state: GameState, action: Action, rng: RandomSource = None) -> GameState:
    """
    Transition the game state given a player action.

    Parameters
    ----------
    state : GameState
        The current game state.
    action : MoveAction
        The player action.
    rng : Generator or int, optional
        Random generator, or seed for a fresh one, used to place the new tile.

    Returns
    -------
    GameState
        The next game state.

    Notes
    -----
    - Won and lost games absorb every action and are returned unchanged.
    - A move that changes nothing returns ``state`` itself, no tile is spawned.
    - A move creating a 2048 tile wins the game, no tile is spawned.
    - Otherwise a tile of value 1 is spawned at a random empty cell.
    """
    if state.status != Status.PLAYING:
        return state

    if isinstance(action, MoveAction):
        return _move(state, Direction(action.direction), rng)
    return state
