"""
Statistics model and store.

The store wraps one key of a durable key-value backend. Reads and writes
are best-effort: a broken or missing record loads as all zeros and a failed
write is logged and ignored, so the in-memory value stays authoritative for
the rest of the process.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Optional

from packages.utils.game_logger import game_logger
from packages.engine.errors import PersistenceFailure
from .storage import KeyValueStore

STATS_KEY = "wordle-stats-v3"

# On-disk field names (kept compatible with existing saved records)
_FIELDS = {
    "played": "played",
    "won": "won",
    "current_streak": "currentStreak",
    "max_streak": "maxStreak",
}


@dataclass(frozen=True)
class Statistics:
    played: int = 0
    won: int = 0
    current_streak: int = 0
    max_streak: int = 0

    @property
    def win_percentage(self) -> int:
        """Rounded percentage of rounds won; 0 before the first round."""
        if self.played == 0:
            return 0
        return int(self.won * 100 / self.played + 0.5)

    def after(self, won: bool) -> "Statistics":
        """The record that results from one more finished round."""
        if won:
            streak = self.current_streak + 1
            return Statistics(
                played=self.played + 1,
                won=self.won + 1,
                current_streak=streak,
                max_streak=max(self.max_streak, streak),
            )
        return replace(self, played=self.played + 1, current_streak=0)

    def to_json(self) -> str:
        return json.dumps({stored: getattr(self, attr) for attr, stored in _FIELDS.items()})

    @classmethod
    def from_json(cls, text: str) -> "Statistics":
        """
        Parse a stored record. Raises ValueError if it is not a JSON object
        of non-negative integers with won <= played.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("statistics record must be a JSON object")
        values = {}
        for attr, stored in _FIELDS.items():
            v = data.get(stored, 0)
            # bool is an int subclass; reject it explicitly
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise ValueError(f"field {stored!r} must be a non-negative integer")
            values[attr] = v
        if values["won"] > values["played"]:
            raise ValueError("won exceeds played")
        return cls(**values)


class StatisticsStore:
    """Loads, updates and persists the player's Statistics under one key."""

    def __init__(self, storage: KeyValueStore, key: str = STATS_KEY):
        self.storage = storage
        self.key = key
        self._stats: Optional[Statistics] = None

    @property
    def stats(self) -> Statistics:
        """Current record; loaded from storage on first access."""
        if self._stats is None:
            self._stats = self.load()
        return self._stats

    def load(self) -> Statistics:
        """Read the durable record. Never raises; defaults to all zeros."""
        try:
            text = self.storage.get(self.key)
        except (PersistenceFailure, OSError) as e:
            game_logger.log_error(e, "stats_load", key=self.key)
            text = None

        stats = Statistics()
        if text is not None:
            try:
                stats = Statistics.from_json(text)
            except ValueError as e:
                # json.JSONDecodeError is a ValueError too
                game_logger.log_error(e, "stats_malformed", key=self.key)

        self._stats = stats
        return stats

    def save(self) -> bool:
        """Persist the current record; False (and a log entry) on failure."""
        try:
            ok = self.storage.set(self.key, self.stats.to_json())
        except (PersistenceFailure, OSError) as e:
            game_logger.log_error(e, "stats_save", key=self.key)
            return False
        if not ok:
            game_logger.log_error(PersistenceFailure("write rejected"), "stats_save", key=self.key)
        return ok

    def record_outcome(self, won: bool) -> Statistics:
        """
        Apply one finished round and persist before returning.

        Callers must invoke this exactly once per round; the game engine
        guarantees that.
        """
        self._stats = self.stats.after(won)
        self.save()
        return self._stats
