from .store import Statistics, StatisticsStore, STATS_KEY
from .storage import KeyValueStore, MemoryStore, JsonFileStore

__all__ = [
    "Statistics", "StatisticsStore", "STATS_KEY",
    "KeyValueStore", "MemoryStore", "JsonFileStore",
]
