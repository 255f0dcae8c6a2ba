"""
Configuration package.

- app_config.py:    environment-driven settings (paths, lookup, logging)
- game_settings.py: fixed game rules (word length, guess budget)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import WORD_LENGTH, MAX_GUESSES

__all__ = [
    "Config", "DevelopmentConfig", "ProductionConfig", "TestingConfig", "config",
    "WORD_LENGTH", "MAX_GUESSES",
]
