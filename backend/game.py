# backend/game.py

import threading

import numpy as np

from .board import COVERED, FLAGGED, MINE, MinesweeperBoard
from .errors import InvalidMove

# observation encoding
OBS_COVERED = -3
OBS_FLAGGED = -2
OBS_MINE = MINE


class GameSession:
    """
    A wrapper around MinesweeperBoard that manages game state and turn flow.
    Every public operation holds the session lock, so one session may be
    shared between request threads.
    """

    ACTIONS = ("reveal", "flag")

    def __init__(self, width: int, height: int, num_mines: int, seed: int = None):
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.seed = seed
        self._lock = threading.Lock()

        self.reset()

    def step(self, action: str, row: int, col: int) -> dict:
        """
        Apply an action ("reveal" or "flag") at position (row, col).
        Returns a dict describing the game state after the action.
        """
        if action not in self.ACTIONS:
            raise InvalidMove(f"Unknown action '{action}', expected one of {self.ACTIONS}.")

        with self._lock:
            if not self.game_over:
                if action == "reveal":
                    self.board.reveal(row, col)
                else:
                    self.board.toggle_flag(row, col)

                self.moves_made += 1
                if self.board.has_lost():
                    self.game_over = True
                    self.won = False
                elif self.board.has_won():
                    self.game_over = True
                    self.won = True

            return self._state()

    def get_state(self) -> dict:
        """
        Return the current visible board and game status.
        """
        with self._lock:
            return self._state()

    def _state(self) -> dict:
        return {
            "board": self.board.get_visible_state(show_mines=self.game_over),
            "game_over": self.game_over,
            "won": self.won,
            "moves_made": self.moves_made,
            "dimensions": (self.height, self.width),
            "num_mines": self.num_mines,
            "flags": self.board.flag_count,
            "mines_left": self.num_mines - self.board.flag_count,
        }

    def reset(self):
        """
        Reset the game session to a fresh state with the same parameters.
        A seeded session replays the same mine layout.
        """
        board = MinesweeperBoard(self.width, self.height, seed=self.seed)
        board.place_mines(self.num_mines)
        with self._lock:
            self.board = board
            self.game_over = False
            self.won = False
            self.moves_made = 0

    def is_game_over(self) -> bool:
        with self._lock:
            return self.game_over

    def is_win(self) -> bool:
        with self._lock:
            return self.won

    def get_score(self) -> float:
        """
        Share of the board revealed so far.
        """
        with self._lock:
            return self.board.revealed_count / (self.height * self.width)

    def observation(self) -> np.ndarray:
        """
        Numeric view of the visible board:
            -3 for covered cells
            -2 for flagged cells
            -1 for revealed mines
            0-8 for revealed adjacency counts
        """
        with self._lock:
            obs = np.array(self.board.board, dtype=np.int8)
            visibility = np.array(self.board.visibility, dtype=np.int8)
        obs[visibility == COVERED] = OBS_COVERED
        obs[visibility == FLAGGED] = OBS_FLAGGED
        return obs
