# console/play.py

import argparse
import logging
import sys

import yaml

from backend.board import MinesweeperBoard
from backend.config import DEFAULT_CONFIG_PATH, load_config
from backend.errors import InvalidMove, OutOfBounds
from backend.utils import parse_move, render_board

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal.")
    parser.add_argument("width", type=int, nargs="?", default=None, help="Number of columns")
    parser.add_argument("height", type=int, nargs="?", default=None, help="Number of rows (defaults to width)")
    parser.add_argument("mines", type=int, nargs="?", default=None, help="Number of mines (defaults to cells / 8)")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH, help="Path to game config yaml")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible mine layout")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return parser


def play(board, num_mines, input_stream=sys.stdin, out=sys.stdout):
    """
    Read moves until the game is won or lost. Returns True on a win,
    False on a loss and None when the input runs out.
    """
    print(render_board(board), file=out)
    while True:
        print(f"{num_mines} mines placed. Check which field? (Press Ctrl-C to terminate.)", file=out)
        line = input_stream.readline()
        if not line:
            return None

        try:
            move = parse_move(line, width=board.width)
            if move.flag:
                board.toggle_flag(move.row, move.col)
            else:
                board.reveal(move.row, move.col)
        except (InvalidMove, OutOfBounds) as e:
            logger.debug("Rejected move %r: %s", line.strip(), e)
            print(f"Invalid move: {e}", file=out)
            continue

        print(render_board(board), file=out)
        if board.has_lost():
            print("Bum! You lose.", file=out)
            return False
        if board.has_won():
            print("You won!", file=out)
            return True


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config, width=args.width, height=args.height, num_mines=args.mines, seed=args.seed)
        config.check_text_playable()
        board = MinesweeperBoard(config.width, config.height, seed=config.seed)
        board.place_mines(config.num_mines)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info("New game %dx%d with %d mines", config.width, config.height, config.num_mines)
    try:
        play(board, config.num_mines)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
