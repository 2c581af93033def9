"""Runtime configuration from environment variables (and .env at the repo root).

  RPG_LOG_LEVEL       logging level name             (default WARNING)
  RPG_ADVENTURE_FILE  JSON adventure to play         (default: built-in dungeon)
  RPG_START_NODE      node id the adventure starts at (default 1)
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

ENV_FILE = Path(__file__).parent.parent / ".env"

_CONFIG_DEFAULTS: dict[str, Any] = {
    "log_level": "WARNING",
    "adventure_file": None,
    "start_node": 1,
}


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with environment values."""
    load_dotenv(ENV_FILE)
    config = dict(_CONFIG_DEFAULTS)

    log_level = os.getenv("RPG_LOG_LEVEL", "")
    if log_level:
        if log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"RPG_LOG_LEVEL is not a logging level, got {log_level!r}")
        config["log_level"] = log_level.upper()

    adventure_file = os.getenv("RPG_ADVENTURE_FILE", "")
    if adventure_file:
        config["adventure_file"] = Path(adventure_file)

    start_node = os.getenv("RPG_START_NODE", "")
    if start_node:
        try:
            config["start_node"] = int(start_node)
        except ValueError as e:
            raise ValueError(f"RPG_START_NODE must be an integer, got {start_node!r}") from e

    return config
