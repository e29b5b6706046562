# backend/config.py

import os
from dataclasses import dataclass
from typing import Optional

import yaml

from .utils import LETTERS

DEFAULT_CONFIG_PATH = os.path.join("config", "game_config.yaml")
DEFAULT_WIDTH = 10


@dataclass
class GameConfig:
    """
    Parameters of a new game. Missing values are derived from the present
    ones: height defaults to width, mines to one cell in eight.
    """
    width: int = DEFAULT_WIDTH
    height: Optional[int] = None
    num_mines: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("width", "height", "num_mines", "seed"):
            value = getattr(self, name)
            if value is None and name != "width":
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Config value '{name}' must be an integer, got {value!r}.")

        if self.height is None:
            self.height = self.width
        if self.num_mines is None:
            self.num_mines = self.width * self.height // 8

    def check_text_playable(self):
        if self.width > len(LETTERS):
            raise ValueError(
                f"Text play supports at most {len(LETTERS)} columns, got {self.width}."
            )


def load_config(path: str = DEFAULT_CONFIG_PATH, **overrides) -> GameConfig:
    """
    Load the `game:` section of a YAML config file. Keyword overrides that
    are not None win over the file; a missing file yields the defaults.
    """
    cfg = {}
    if path and os.path.exists(path):
        with open(path, "r") as f:
            cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must hold a mapping.")
    game_section = cfg.get("game") or {}
    if not isinstance(game_section, dict):
        raise ValueError(f"The 'game' section of {path} must be a mapping.")
    game_section = dict(game_section)
    for key, value in overrides.items():
        if value is not None:
            game_section[key] = value

    known = {"width", "height", "num_mines", "seed"}
    return GameConfig(**{k: v for k, v in game_section.items() if k in known})
