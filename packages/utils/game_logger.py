"""
Game logger.

Structured (JSON per line) logging of round events, validation decisions
and absorbed failures. Console output is limited to warnings and above;
a dated log file is added when a log directory is configured.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


class GameLogger:
    """
    Centralised logging for the word game.

    Event types:
    - GAME_EVENT:  round started / won / lost, guesses accepted or rejected
    - VALIDATION:  which validator tier decided a word
    - ERROR:       failures that were absorbed (lookup down, store unwritable)
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        logger = logging.getLogger("wordle_game")
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers when reconfigured
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            logger.addHandler(file_handler)

        return logger

    def configure(self, log_dir: Optional[str] = None, level: str = "INFO") -> None:
        """Re-point the shared logger (called once by the game factory)."""
        self.log_dir = Path(log_dir) if log_dir else None
        self.logger = self._setup_logger(level)

    def _create_log_entry(self, event_type: str, action: str, details: Dict[str, Any]) -> str:
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "action": action,
            "details": details,
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_game_event(self, event: str, **kwargs) -> None:
        """
        Log round events.

        Args:
            event: e.g. 'round_started', 'guess_accepted', 'round_won'
            **kwargs: event details (difficulty, attempts, pattern, ...)
        """
        self.logger.info(self._create_log_entry("GAME_EVENT", event, kwargs))

    def log_validation(self, word: str, tier: str, accepted: bool) -> None:
        """Log which validator tier decided `word`."""
        details = {"word": word, "tier": tier, "accepted": accepted}
        self.logger.debug(self._create_log_entry("VALIDATION", "check_word", details))

    def log_error(self, error: Exception, action: str, **kwargs) -> None:
        """
        Log an absorbed failure at WARNING level.

        The game keeps running after these; the entry is the only trace.
        """
        details = {
            "error_type": type(error).__name__,
            "error_message": str(error),
            **kwargs,
        }
        self.logger.warning(self._create_log_entry("ERROR", action, details))


# Global logger instance
game_logger = GameLogger()
