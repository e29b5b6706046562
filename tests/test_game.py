# tests/test_game.py

import threading
import unittest

import numpy as np

from backend.errors import InvalidMove, OutOfBounds
from backend.game import OBS_COVERED, OBS_FLAGGED, GameSession


def session_with_mines(width, height, mines):
    game = GameSession(width=width, height=height, num_mines=len(mines))
    game.board.place_mines_at(mines)
    return game


class TestGameSession(unittest.TestCase):

    def test_initial_state(self):
        game = GameSession(width=5, height=4, num_mines=3, seed=7)
        state = game.get_state()
        self.assertEqual(state["dimensions"], (4, 5))
        self.assertEqual(state["num_mines"], 3)
        self.assertEqual(state["mines_left"], 3)
        self.assertFalse(state["game_over"])
        self.assertTrue(all(cell is None for row in state["board"] for cell in row))

    def test_reveal_mine_ends_game(self):
        game = session_with_mines(3, 3, [(1, 1)])
        state = game.step("reveal", 1, 1)
        self.assertTrue(state["game_over"])
        self.assertFalse(state["won"])
        self.assertEqual(state["board"][1][1], "*")

    def test_win_after_revealing_and_flagging(self):
        game = session_with_mines(2, 2, [(0, 0)])
        game.step("reveal", 0, 1)
        game.step("reveal", 1, 0)
        state = game.step("reveal", 1, 1)
        self.assertFalse(state["game_over"])
        state = game.step("flag", 0, 0)
        self.assertTrue(state["game_over"])
        self.assertTrue(state["won"])
        self.assertEqual(state["moves_made"], 4)
        self.assertEqual(state["mines_left"], 0)

    def test_moves_after_game_over_are_ignored(self):
        game = session_with_mines(3, 1, [(0, 0)])
        game.step("reveal", 0, 0)
        state = game.step("reveal", 0, 2)
        self.assertEqual(state["moves_made"], 1)
        self.assertIsNone(state["board"][0][2])

    def test_status_queries_wait_for_the_lock(self):
        game = session_with_mines(3, 1, [(0, 0)])
        game.step("reveal", 0, 0)
        results = []

        game._lock.acquire()
        worker = threading.Thread(target=lambda: results.append((game.is_game_over(), game.is_win())))
        worker.start()
        worker.join(timeout=0.2)
        self.assertTrue(worker.is_alive())
        self.assertEqual(results, [])

        game._lock.release()
        worker.join(timeout=5)
        self.assertEqual(results, [(True, False)])

    def test_invalid_action(self):
        game = GameSession(width=3, height=3, num_mines=1)
        with self.assertRaises(InvalidMove):
            game.step("dig", 0, 0)

    def test_out_of_bounds_does_not_count_as_move(self):
        game = GameSession(width=3, height=3, num_mines=1)
        with self.assertRaises(OutOfBounds):
            game.step("reveal", 3, 0)
        self.assertEqual(game.get_state()["moves_made"], 0)

    def test_reset_with_seed_replays_layout(self):
        game = GameSession(width=6, height=6, num_mines=6, seed=11)
        layout = [row[:] for row in game.board.board]
        game.step("flag", 0, 0)
        game.reset()
        self.assertEqual(game.board.board, layout)
        self.assertEqual(game.moves_made, 0)
        self.assertEqual(game.board.flag_count, 0)

    def test_score_and_observation(self):
        game = session_with_mines(4, 1, [(0, 3)])
        game.step("reveal", 0, 2)
        game.step("flag", 0, 3)
        self.assertAlmostEqual(game.get_score(), 0.25)

        obs = game.observation()
        self.assertEqual(obs.shape, (1, 4))
        np.testing.assert_array_equal(obs, [[OBS_COVERED, OBS_COVERED, 1, OBS_FLAGGED]])


if __name__ == "__main__":
    unittest.main()
