# tests/test_play.py

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr

from backend.board import MinesweeperBoard
from console.play import main, play


class TestConsolePlay(unittest.TestCase):

    def run_game(self, board, moves):
        out = io.StringIO()
        result = play(board, board.num_mines, input_stream=io.StringIO(moves), out=out)
        return result, out.getvalue()

    def test_win(self):
        board = MinesweeperBoard(2, 1)
        board.place_mines_at([(0, 1)])
        result, output = self.run_game(board, "a0\nb0*\n")
        self.assertTrue(result)
        self.assertIn("You won!", output)

    def test_loss(self):
        board = MinesweeperBoard(2, 1)
        board.place_mines_at([(0, 1)])
        result, output = self.run_game(board, "b0\n")
        self.assertFalse(result)
        self.assertIn("Bum! You lose.", output)

    def test_bad_moves_are_reported_and_reprompted(self):
        board = MinesweeperBoard(2, 1)
        board.place_mines_at([(0, 1)])
        result, output = self.run_game(board, "a7\nz0\nhello\n")
        self.assertIsNone(result)
        self.assertEqual(output.count("Invalid move"), 3)
        self.assertEqual(output.count("Check which field?"), 4)
        self.assertEqual(board.revealed_count, 0)

    def test_main_rejects_too_many_mines(self):
        err = io.StringIO()
        with redirect_stderr(err):
            status = main(["3", "3", "10", "--config", ""])
        self.assertEqual(status, 2)
        self.assertIn("Cannot place 10 mines", err.getvalue())

    def test_main_reports_bad_config_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "game.yaml")
            for content in ["game:\n  width: ten\n", "game: [unclosed\n"]:
                with open(path, "w") as f:
                    f.write(content)
                err = io.StringIO()
                with redirect_stderr(err):
                    status = main(["--config", path])
                self.assertEqual(status, 2, content)
                self.assertIn("Error:", err.getvalue())

    def test_main_rejects_invalid_dimensions(self):
        err = io.StringIO()
        with redirect_stderr(err):
            status = main(["0", "--config", ""])
        self.assertEqual(status, 2)


if __name__ == "__main__":
    unittest.main()
