"""
Tests for the game manager: starting games, move transitions, win and lose detection.
"""

from unittest import TestCase, main

from numpy.random import default_rng

from game2048.core.errors import InvalidObstaclesError, InvalidSizeError
from game2048.core.gameboard import Tile, create_empty_board, is_board_equal, set_cell
from game2048.core.gamemove import Direction
from game2048.envs.gamemanager import GameState, MoveAction, Status, set_random_cell, start_game, transition
from game2048.utils.debugging import board_from_matrix, board_to_array, board_to_matrix


def playing(matrix: list) -> GameState:
    """Playing game state on the given board."""
    return GameState(status=Status.PLAYING, board=board_from_matrix(matrix))


class TestStartGame(TestCase):
    def test_start_game(self):
        """A game starts with a single tile of value 2."""
        game = start_game(4)
        board = board_to_array(game.board)

        self.assertEqual(len(board), 16)
        self.assertEqual(board.count(2), 1)
        self.assertEqual(board.count(None), 15)
        self.assertEqual(game.status, Status.PLAYING)

    def test_start_game_size_one(self):
        """Edge case, the single cell holds the starting tile."""
        game = start_game(1)

        self.assertEqual(board_to_array(game.board), [2])
        self.assertEqual(game.status, Status.PLAYING)

    def test_start_game_with_obstacles(self):
        """Obstacles are placed on distinct empty cells."""
        game = start_game(4, obstacles=8, rng=7)
        board = board_to_array(game.board)

        self.assertEqual(board.count('X'), 8)
        self.assertEqual(board.count(2), 1)
        self.assertEqual(board.count(None), 7)

    def test_start_game_max_obstacles(self):
        """The largest obstacle count still leaves one empty cell."""
        board = board_to_array(start_game(2, obstacles=2, rng=0).board)

        self.assertEqual(sorted(board, key=str), sorted([2, 'X', 'X', None], key=str))

    def test_start_game_invalid_obstacles(self):
        """Obstacle counts that are negative or fill the board are rejected."""
        for size, obstacles in ((2, 3), (2, 4), (4, 15), (4, -1), (1, 1), (4, 1.5)):
            with self.subTest(size=size, obstacles=obstacles):
                with self.assertRaises(InvalidObstaclesError):
                    start_game(size, obstacles=obstacles)

    def test_start_game_invalid_size(self):
        """Invalid sizes are reported before anything else."""
        for size in (0, -3, 2.5):
            with self.subTest(size=size):
                with self.assertRaises(InvalidSizeError):
                    start_game(size, obstacles=-1)

    def test_seed_reproducibility(self):
        """The same seed places tiles and obstacles on the same cells."""
        self.assertEqual(start_game(6, obstacles=8, rng=42), start_game(6, obstacles=8, rng=42))
        self.assertEqual(start_game(6, obstacles=8, rng=default_rng(3)), start_game(6, obstacles=8, rng=default_rng(3)))


class TestSetRandomCell(TestCase):
    def test_fills_an_empty_cell(self):
        """The cell lands on one of the empty cells."""
        board = board_from_matrix([[2, None], ['X', None]])

        for seed in range(10):
            new_board = set_random_cell(board, Tile(1), rng=seed)
            self.assertIn(board_to_array(new_board), ([2, 1, 'X', None], [2, None, 'X', 1]))

    def test_full_board(self):
        """Nothing can be placed on a full board."""
        self.assertIsNone(set_random_cell(board_from_matrix([[2, 4], ['X', 8]]), Tile(1)))


class TestTransition(TestCase):
    def test_move_spawns_tile(self):
        """After a move, a tile of value 1 is placed in a random position."""
        game = playing([[None, 2], [None, None]])

        game = transition(game, MoveAction(direction=Direction.LEFT))
        board = board_to_array(game.board)

        self.assertEqual(board.count(2), 1)
        self.assertEqual(board.count(1), 1)
        self.assertEqual(board.count(None), 2)
        self.assertEqual(board[0], 2)
        self.assertEqual(game.status, Status.PLAYING)

    def test_no_op_move(self):
        """A move that changes nothing returns the very same state."""
        game = playing([[None, 2], [None, None]])

        new_game = transition(game, MoveAction(direction=Direction.RIGHT))

        self.assertIs(new_game, game)
        self.assertEqual(board_to_array(new_game.board), [None, 2, None, None])

    def test_win(self):
        """Reaching 2048 wins the game without spawning a tile."""
        game = playing([[1024, None], [1024, None]])

        won = transition(game, MoveAction(direction=Direction.UP))

        self.assertEqual(won.status, Status.WON)
        self.assertEqual(board_to_matrix(won.board), [[2048, None], [None, None]])

    def test_lose(self):
        """A full board without merges loses the game, the board is kept."""
        game = playing([[1, 2], [2, 1]])

        lost = transition(game, MoveAction(direction=Direction.UP))

        self.assertEqual(lost.status, Status.LOST)
        self.assertTrue(is_board_equal(lost.board, game.board))

    def test_lose_with_walled_off_cell(self):
        """An empty cell that no move can reach doesn't save the game."""
        game = playing([['X', 2, 1], ['X', 'X', 2], [None, 'X', 1]])

        self.assertEqual(transition(game, MoveAction(direction=Direction.LEFT)).status, Status.LOST)

    def test_terminal_states_absorb_actions(self):
        """Won and lost games are returned unchanged."""
        for status in (Status.WON, Status.LOST):
            game = GameState(status=status, board=board_from_matrix([[None, 2], [None, None]]))
            for direction in Direction:
                self.assertIs(transition(game, MoveAction(direction=direction)), game)

    def test_unknown_action(self):
        """Actions the manager doesn't know are ignored."""
        game = playing([[None, 2], [None, None]])

        self.assertIs(transition(game, object()), game)

    def test_transition_does_not_mutate(self):
        """The previous state is left untouched."""
        game = playing([[None, 2], [None, None]])
        board = game.board

        transition(game, MoveAction(direction=Direction.DOWN))

        self.assertIs(game.board, board)
        self.assertEqual(game.status, Status.PLAYING)
        self.assertEqual(board_to_array(game.board), [None, 2, None, None])

    def test_seeded_transition(self):
        """The same seed spawns the new tile on the same cell."""
        game = GameState(status=Status.PLAYING, board=set_cell(create_empty_board(4), 5, Tile(2)))

        first = transition(game, MoveAction(direction=Direction.LEFT), rng=11)
        second = transition(game, MoveAction(direction=Direction.LEFT), rng=11)

        self.assertEqual(first, second)
        self.assertEqual(first.board.grid.count(Tile(1)), 1)

    def test_accepts_direction_names(self):
        """Move actions may carry the direction name."""
        game = playing([[None, 2], [None, None]])

        self.assertEqual(transition(game, MoveAction(direction='left'), rng=1).board.grid[0], Tile(2))


if __name__ == '__main__':
    main()
