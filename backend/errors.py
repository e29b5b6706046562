# backend/errors.py


class MinesweeperError(ValueError):
    """Base class for every constraint violation raised by the engine."""


class InvalidDimensions(MinesweeperError):
    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(f"Grid dimensions must be positive, got {width}x{height}.")


class TooManyMines(MinesweeperError):
    def __init__(self, count, capacity):
        self.count = count
        self.capacity = capacity
        super().__init__(f"Cannot place {count} mines on a grid with {capacity} cells.")


class OutOfBounds(MinesweeperError):
    def __init__(self, row, col, width, height):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) is outside the {width}x{height} grid.")


class InvalidMove(MinesweeperError):
    """Raised when a move cannot be decoded or applied."""
