# frontend/api.py

import logging

from flask import Blueprint, jsonify, request

from backend.errors import MinesweeperError
from backend.game import GameSession

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

# Global session (single player, one game at a time)
game = None


@api_blueprint.errorhandler(MinesweeperError)
def handle_engine_error(error):
    logger.info("Rejected request: %s", error)
    return jsonify({"error": str(error)}), 400


def _is_int(value):
    # JSON true/false decode to bool, which is an int subclass.
    return isinstance(value, int) and not isinstance(value, bool)


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    global game
    data = request.get_json(silent=True) or {}
    width = data.get("width", 6)
    height = data.get("height", width)
    num_mines = data.get("num_mines")
    seed = data.get("seed")

    if not _is_int(width) or not _is_int(height):
        return jsonify({"error": "width and height must be integers"}), 400
    if num_mines is None:
        num_mines = width * height // 8
    elif not _is_int(num_mines):
        return jsonify({"error": "num_mines must be an integer"}), 400
    if seed is not None and not _is_int(seed):
        return jsonify({"error": "seed must be an integer"}), 400

    game = GameSession(width=width, height=height, num_mines=num_mines, seed=seed)
    logger.info("New game %dx%d with %d mines", width, height, num_mines)
    return jsonify(game.get_state())


@api_blueprint.route("/step", methods=["POST"])
def step():
    if game is None:
        return jsonify({"error": "No game in progress"}), 404

    data = request.get_json(silent=True) or {}
    action = data.get("action")
    row = data.get("row")
    col = data.get("col")

    if not _is_int(row) or not _is_int(col):
        return jsonify({"error": "Invalid input"}), 400

    result = game.step(action, row, col)
    return jsonify(result)


@api_blueprint.route("/state", methods=["GET"])
def get_state():
    if game is None:
        return jsonify({"error": "No game in progress"}), 404
    return jsonify(game.get_state())
