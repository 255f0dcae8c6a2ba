import pytest

from packages.engine import GameEngine, Validator
from packages.stats import MemoryStore, StatisticsStore
from packages.wordbank import WordCatalog

# One word per tier so the secret is known in advance
TIERS = {"easy": ["crane"], "medium": ["allot"], "hard": ["speed"]}
DICTIONARY = ["erase", "lolly", "bread", "eerie", "slate", "trace", "raise", "stare",
              "react", "caret", "nacre"]


class FakeLookup:
    """Word lookup double: answers from a set, or raises when `error` is set."""

    def __init__(self, known=(), error=None):
        self.known = {w.lower() for w in known}
        self.error = error
        self.calls = []

    async def exists(self, word):
        self.calls.append(word)
        if self.error is not None:
            raise self.error
        return word in self.known


@pytest.fixture
def catalog():
    return WordCatalog.from_lists(TIERS, DICTIONARY)


@pytest.fixture
def stats():
    return StatisticsStore(MemoryStore())


@pytest.fixture
def make_engine(catalog, stats):
    def _make(lookup=None, difficulty="easy"):
        return GameEngine(catalog, Validator(catalog, lookup), stats=stats,
                          difficulty=difficulty, seed=1)
    return _make


@pytest.fixture
def fake_lookup():
    return FakeLookup
