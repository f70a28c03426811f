"""2048 game session keeping the current state and the history of a game."""

import logging

from numpy.random import Generator, default_rng

from game2048.core.gameboard import Board
from game2048.core.gamemove import Direction
from game2048.envs.config import GameConfig
from game2048.envs.gamemanager import GameState, MoveAction, start_game, transition
from game2048.utils.debugging import board_to_string

logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game session.

    This class drives the pure game manager for a caller processing one player action at a time: it
    starts games, applies moves and remembers every state reached since the last reset.
    """

    # ##: All Actions.
    ACTIONS = {'left': Direction.LEFT, 'up': Direction.UP, 'right': Direction.RIGHT, 'down': Direction.DOWN}

    def __init__(self, config: GameConfig = GameConfig(), seed: int | None = None):
        """
        Initialize the game session and start a game.

        Parameters
        ----------
        config : GameConfig, optional
            Board size, obstacle count and theme (default is a 4x4 board without obstacles).
        seed : int, optional
            Seed of the random generator used for every tile and obstacle placement.
        """
        self.config = config.validate()
        self._generator: Generator = default_rng(seed)
        self._history: list[GameState] = []

        self.reset()

    @property
    def state(self) -> GameState:
        """The current game state."""
        return self._history[-1]

    @property
    def board(self) -> Board:
        """The current board."""
        return self.state.board

    @property
    def history(self) -> tuple[GameState, ...]:
        """Every state reached since the last reset, oldest first."""
        return tuple(self._history)

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is won or lost, False otherwise.
        """
        return self.state.is_finished

    def reset(self, seed: int | None = None) -> GameState:
        """
        Start a new game with the session settings.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator before starting.

        Returns
        -------
        GameState
            The initial game state.
        """
        if seed is not None:
            self._generator = default_rng(seed)

        state = start_game(self.config.size, self.config.obstacles, rng=self._generator)
        self._history = [state]
        return state

    def step(self, direction: Direction | str) -> tuple[GameState, bool]:
        """
        Move the board in a direction.

        Parameters
        ----------
        direction : Direction or str
            The direction of the move, either a ``Direction`` or one of the ``ACTIONS`` keys.

        Returns
        -------
        tuple[GameState, bool]
            The new game state and whether the game is finished.

        Notes
        -----
        A move that changes nothing is not recorded in the history.
        """
        direction = self.ACTIONS.get(direction, direction)
        state = transition(self.state, MoveAction(direction=Direction(direction)), rng=self._generator)
        if state is not self.state:
            self._history.append(state)
            if state.is_finished:
                logger.info('Game finished after %d moves (%s)', len(self._history) - 1, state.status.value)
        return state, state.is_finished

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(board_to_string(self.board))
