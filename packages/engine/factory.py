"""
Wire a ready-to-play GameEngine from configuration.

Kept out of the package __init__ so importing the engine never touches the
statistics package or the filesystem.
"""

from __future__ import annotations

from packages.config import Config
from packages.stats import JsonFileStore, StatisticsStore
from packages.utils.game_logger import game_logger
from packages.wordbank import load_catalog
from .game import GameEngine
from .validation import DictionaryLookup, Validator


def create_game(config_class=Config, *, seed: int | None = None,
                offline: bool = False) -> GameEngine:
    """
    Build catalog, validator, statistics store and engine.

    Args:
      config_class : a Config subclass (see packages.config.config)
      seed         : RNG seed for reproducible secrets
      offline      : skip the external dictionary lookup (closed-world)
    """
    game_logger.configure(log_dir=config_class.LOG_DIR, level=config_class.LOG_LEVEL)

    catalog = load_catalog()
    lookup = None
    if not offline:
        lookup = DictionaryLookup(config_class.DICTIONARY_API_URL,
                                  timeout=config_class.LOOKUP_TIMEOUT)
    validator = Validator(catalog, lookup)

    stats = StatisticsStore(JsonFileStore(config_class.STATS_PATH), key=config_class.STATS_KEY)
    stats.load()

    return GameEngine(catalog, validator, stats=stats,
                      difficulty=config_class.DEFAULT_DIFFICULTY, seed=seed)
