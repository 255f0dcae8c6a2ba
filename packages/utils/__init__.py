"""
Utilities package: shared helpers used across the engine.
"""

from .game_logger import GameLogger, game_logger

__all__ = ["GameLogger", "game_logger"]
