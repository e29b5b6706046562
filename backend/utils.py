# backend/utils.py

from typing import List, NamedTuple, Optional, Tuple

from .errors import InvalidMove

LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

GLYPH_COVERED = "."
GLYPH_FLAG = "X"
GLYPH_MINE = "*"


class Move(NamedTuple):
    row: int
    col: int
    flag: bool = False


def get_neighbors(row: int, col: int, width: int, height: int) -> List[Tuple[int, int]]:
    """
    Return a list of valid neighboring coordinates (8-way) for (row, col).
    """
    neighbors = []
    for dr in [-1, 0, 1]:
        for dc in [-1, 0, 1]:
            nr, nc = row + dr, col + dc
            if (dr != 0 or dc != 0) and 0 <= nr < height and 0 <= nc < width:
                neighbors.append((nr, nc))
    return neighbors


def parse_move(text: str, width: Optional[int] = None) -> Move:
    """
    Decode a move such as "c4" (reveal column c, row 4) or "c4*" (flag it).
    The row is not bounds-checked here; the board does that.
    """
    text = text.strip()
    flag = "*" in text
    text = text.replace("*", "").strip()
    if not text:
        raise InvalidMove("Empty move.")

    col = LETTERS.find(text[0])
    if col < 0 or (width is not None and col >= width):
        raise InvalidMove(f"Unknown column '{text[0]}'.")

    try:
        row = int(text[1:])
    except ValueError:
        raise InvalidMove(f"Row must be a number, got '{text[1:]}'.") from None
    if row < 0:
        raise InvalidMove(f"Row must not be negative, got {row}.")

    return Move(row=row, col=col, flag=flag)


def format_cell(cell) -> str:
    if cell is None:
        return GLYPH_COVERED
    if cell == "F":
        return GLYPH_FLAG
    if cell == "*":
        return GLYPH_MINE
    if cell == 0:
        return " "
    return str(cell)


def render_board(board) -> str:
    """
    Render a MinesweeperBoard as text: column letters on top, row numbers
    on the left.
    """
    state = board.get_visible_state()
    lines = [" " * 4 + " ".join(LETTERS[: board.width]), ""]
    for r, row_cells in enumerate(state):
        cells = "".join(" " + format_cell(cell) for cell in row_cells)
        lines.append(f"{r:<3}{cells}")
    return "\n".join(lines)
