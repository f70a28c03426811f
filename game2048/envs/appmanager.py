"""
App state machine sequencing the screens around a game.

Transitions::

    welcome --game-started--> in-game
    in-game --moved---------> in-game
    in-game --restarted-----> welcome

Any other (state, action) pair leaves the state unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from game2048.core.gamemove import Direction
from game2048.envs.config import Theme
from game2048.envs.gamemanager import GameState, MoveAction, RandomSource, start_game, transition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WelcomeState:
    """The welcome screen, where the player picks the game settings."""


@dataclass(frozen=True)
class InGameState:
    """A game being played."""

    theme: Theme
    game: GameState


AppState = Union[WelcomeState, InGameState]


@dataclass(frozen=True)
class GameStarted:
    """The player started a game from the welcome screen."""

    theme: Theme
    size: int
    obstacles: int = 0


@dataclass(frozen=True)
class Restarted:
    """The player went back to the welcome screen."""


@dataclass(frozen=True)
class Moved:
    """The player moved the board."""

    direction: Direction


AppAction = Union[GameStarted, Restarted, Moved]


def get_initial_state() -> AppState:
    """Initial state of the app: the welcome screen."""
    return WelcomeState()


def app_reducer(current: AppState, action: AppAction, rng: RandomSource = None) -> AppState:
    """
    Compute the next app state given the current one and an action.

    Parameters
    ----------
    current : AppState
        The current state.
    action : AppAction
        The action to apply.
    rng : Generator or int, optional
        Random generator, or seed for a fresh one, forwarded to the game manager.

    Returns
    -------
    AppState
        The new state, or ``current`` if the action doesn't apply.
    """
    if isinstance(current, WelcomeState):
        if isinstance(action, GameStarted):
            logger.debug('Starting game (size=%d, obstacles=%d, theme=%s)', action.size, action.obstacles, action.theme)
            return InGameState(
                theme=Theme(action.theme),
                game=start_game(action.size, action.obstacles, rng=rng),
            )
        return current

    if isinstance(current, InGameState):
        if isinstance(action, Moved):
            game = transition(current.game, MoveAction(direction=Direction(action.direction)), rng=rng)
            return InGameState(theme=current.theme, game=game)
        if isinstance(action, Restarted):
            logger.debug('Game restarted')
            return get_initial_state()
        return current

    return current
