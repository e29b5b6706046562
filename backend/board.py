import random
from collections import deque

from .errors import InvalidDimensions, OutOfBounds, TooManyMines
from .utils import get_neighbors

MINE = -1

# visibility
COVERED = 0
REVEALED = 1
FLAGGED = 2

# cascade bookkeeping
UNVISITED = 0
PENDING = 1
PROCESSED = 2


class MinesweeperBoard:
    """
    The grid engine: mine placement, adjacency counts, cascading reveal,
    flag bookkeeping and win/loss evaluation.

    board:       -1 = mine, 0–8 = adjacent mine counts
    visibility:  COVERED / REVEALED / FLAGGED per cell
    """

    def __init__(self, width, height, seed=None, rng=None):
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)

        self.width = width
        self.height = height
        self.seed = seed
        # One random source per game, reused for every draw.
        self.rng = rng if rng is not None else random.Random(seed)

        self.num_mines = 0
        self.flag_count = 0
        self.revealed_count = 0
        self.mine_triggered = False

        self.board = [[0 for _ in range(width)] for _ in range(height)]
        self.visibility = [[COVERED for _ in range(width)] for _ in range(height)]
        self.cascade_state = [[UNVISITED for _ in range(width)] for _ in range(height)]

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def place_mines(self, count):
        """
        Place `count` mines on distinct cells chosen uniformly at random,
        then compute the adjacency counts. Calling it again re-randomizes.
        """
        capacity = self.width * self.height
        if count < 0 or count > capacity:
            raise TooManyMines(count, capacity)

        all_coords = [(r, c) for r in range(self.height) for c in range(self.width)]
        self._lay_mines(self.rng.sample(all_coords, count))

    def place_mines_at(self, coords):
        """Place mines on exactly the given (row, col) cells."""
        mine_coords = set()
        for row, col in coords:
            self._check_bounds(row, col)
            mine_coords.add((row, col))
        self._lay_mines(mine_coords)

    def _lay_mines(self, mine_coords):
        self.board = [[0 for _ in range(self.width)] for _ in range(self.height)]
        for r, c in mine_coords:
            self.board[r][c] = MINE
        self.num_mines = len(mine_coords)
        self._compute_adjacent_counts()

    def _compute_adjacent_counts(self):
        for r in range(self.height):
            for c in range(self.width):
                if self.board[r][c] == MINE:
                    continue
                self.board[r][c] = sum(
                    1 for nr, nc in self.neighbors(r, c) if self.board[nr][nc] == MINE
                )

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def is_valid_coord(self, row, col):
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_bounds(self, row, col):
        if not self.is_valid_coord(row, col):
            raise OutOfBounds(row, col, self.width, self.height)

    def neighbors(self, row, col):
        return get_neighbors(row, col, self.width, self.height)

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------
    def reveal(self, row: int, col: int) -> None:
        """
        Reveal a cell.
        - flagged cells are protected and left untouched
        - a mine ends the game (no cascade)
        - a 0 starts the flood fill over its zero-connected region
        """
        self._check_bounds(row, col)
        if self.visibility[row][col] == FLAGGED:
            return

        self._set_revealed(row, col)

        if self.board[row][col] == MINE:
            self.mine_triggered = True
            return

        if self.board[row][col] == 0:
            self._cascade(row, col)

    def _cascade(self, row, col):
        # Scratch state, reset for every cascade.
        self.cascade_state = [[UNVISITED for _ in range(self.width)] for _ in range(self.height)]
        self.cascade_state[row][col] = PENDING
        worklist = deque([(row, col)])

        while worklist:
            r, c = worklist.popleft()
            self.cascade_state[r][c] = PROCESSED

            for nr, nc in self.neighbors(r, c):
                if self.visibility[nr][nc] == FLAGGED:
                    continue
                if self.board[nr][nc] == MINE:
                    self.cascade_state[nr][nc] = PROCESSED
                    continue
                if self.cascade_state[nr][nc] != UNVISITED:
                    continue

                self._set_revealed(nr, nc)
                if self.board[nr][nc] == 0:
                    self.cascade_state[nr][nc] = PENDING
                    worklist.append((nr, nc))
                else:
                    self.cascade_state[nr][nc] = PROCESSED

    def _set_revealed(self, row, col):
        if self.visibility[row][col] != REVEALED:
            self.visibility[row][col] = REVEALED
            self.revealed_count += 1

    def toggle_flag(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        state = self.visibility[row][col]
        if state == REVEALED:
            return
        if state == FLAGGED:
            self.visibility[row][col] = COVERED
            self.flag_count -= 1
        else:
            self.visibility[row][col] = FLAGGED
            self.flag_count += 1

    # ------------------------------------------------------------------
    # Game status
    # ------------------------------------------------------------------
    def has_lost(self) -> bool:
        return self.mine_triggered

    def has_won(self) -> bool:
        # Counts only: flags on non-mine cells still count towards the total.
        if self.mine_triggered:
            return False
        return (
            self.revealed_count == self.width * self.height - self.num_mines
            and self.flag_count == self.num_mines
        )

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    def is_mine(self, row, col):
        return self.is_valid_coord(row, col) and self.board[row][col] == MINE

    def is_revealed(self, row, col):
        return self.is_valid_coord(row, col) and self.visibility[row][col] == REVEALED

    def is_flagged(self, row, col):
        return self.is_valid_coord(row, col) and self.visibility[row][col] == FLAGGED

    def get_visible_state(self, show_mines=False):
        """
        Player-visible board: None for covered cells, "F" for flags,
        "*" for a revealed mine, the adjacency count otherwise.
        With show_mines (end of game), hidden mines are shown as "M"
        and flags on safe cells as "X".
        """
        state = []
        for r in range(self.height):
            row_cells = []
            for c in range(self.width):
                is_mine_cell = self.board[r][c] == MINE
                visibility = self.visibility[r][c]

                if visibility == REVEALED:
                    row_cells.append("*" if is_mine_cell else self.board[r][c])
                elif visibility == FLAGGED:
                    row_cells.append("X" if show_mines and not is_mine_cell else "F")
                elif show_mines and is_mine_cell:
                    row_cells.append("M")
                else:
                    row_cells.append(None)
            state.append(row_cells)
        return state


def create_grid(width, height, seed=None):
    return MinesweeperBoard(width, height, seed=seed)
