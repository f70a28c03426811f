# -*- coding: utf-8 -*-
"""
Game flow on top of the core engine.

This module provides the game manager (`start_game`, `transition`), the app state machine sequencing the
welcome and in-game screens, the game configuration and the `TwentyFortyEight` session class.
"""

from .appmanager import (
    AppState,
    GameStarted,
    InGameState,
    Moved,
    Restarted,
    WelcomeState,
    app_reducer,
    get_initial_state,
)
from .config import GameConfig, Theme
from .gamemanager import GameState, MoveAction, Status, set_random_cell, start_game, transition
from .twentyfortyeight import TwentyFortyEight

__all__ = [
    "AppState",
    "GameStarted",
    "InGameState",
    "Moved",
    "Restarted",
    "WelcomeState",
    "app_reducer",
    "get_initial_state",
    "GameConfig",
    "Theme",
    "GameState",
    "MoveAction",
    "Status",
    "set_random_cell",
    "start_game",
    "transition",
    "TwentyFortyEight",
]
