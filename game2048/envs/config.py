"""
Configuration of a game: board size, obstacle count and display theme.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral

from game2048.core.errors import InvalidObstaclesError, InvalidSizeError

# ##>: Presets offered to the player; any size in [1, MAX_SIZE] is accepted.
SIZE_CHOICES: tuple[int, ...] = (4, 6, 8)
OBSTACLE_CHOICES: tuple[int, ...] = (0, 2, 4, 8)
MAX_SIZE = 50


class Theme(str, Enum):
    """Display theme. Carried along with the game, never interpreted by the engine."""

    CLASSIC = 'classic'
    BLIND = 'blind'
    PLANTS = 'plants'


def max_obstacles(size: int) -> int:
    """
    Largest obstacle count allowed on a board of the given size.

    One cell is kept for the starting tile and one more for the first spawned tile, except on a single
    cell board which takes no obstacle at all.
    """
    return max(size * size - 2, 0)


def check_obstacles(size: int, obstacles: int) -> None:
    """
    Validate an obstacle count for a board of the given size.

    Raises
    ------
    InvalidObstaclesError
        If the count isn't an integer in ``[0, max_obstacles(size)]``.
    """
    if isinstance(obstacles, bool) or not isinstance(obstacles, Integral):
        raise InvalidObstaclesError(f'Invalid obstacles (obstacles={obstacles})')
    if not 0 <= obstacles <= max_obstacles(size):
        raise InvalidObstaclesError(
            f'Invalid obstacles (obstacles={obstacles}, size={size}, max={max_obstacles(size)})'
        )


@dataclass(frozen=True)
class GameConfig:
    """
    Settings chosen on the welcome screen.

    Attributes
    ----------
    size : int
        The size of the square grid.
    obstacles : int
        Number of obstacles placed at the start of the game.
    theme : Theme
        Display theme.
    """

    size: int = 4
    obstacles: int = 0
    theme: Theme = Theme.CLASSIC

    def validate(self) -> 'GameConfig':
        """
        Check the settings and return them unchanged.

        Raises
        ------
        InvalidSizeError
            If the size isn't an integer in ``[1, MAX_SIZE]``.
        InvalidObstaclesError
            If the obstacle count doesn't fit the board.
        """
        if isinstance(self.size, bool) or not isinstance(self.size, Integral) or not 1 <= self.size <= MAX_SIZE:
            raise InvalidSizeError(f'Invalid size (size={self.size}, max={MAX_SIZE})')
        check_obstacles(self.size, self.obstacles)
        Theme(self.theme)
        return self
