import json

import pytest

from packages.engine import PersistenceFailure
from packages.stats import Statistics, StatisticsStore, MemoryStore, JsonFileStore, STATS_KEY


def test_defaults_when_nothing_stored():
    store = StatisticsStore(MemoryStore())
    assert store.load() == Statistics()
    assert store.stats.win_percentage == 0


def test_streaks_across_wins_and_losses():
    store = StatisticsStore(MemoryStore())
    for won in [True, True, True, False, True]:
        store.record_outcome(won)
    s = store.stats
    assert (s.played, s.won, s.current_streak, s.max_streak) == (5, 4, 1, 3)
    assert s.win_percentage == 80


def test_max_streak_never_decreases():
    store = StatisticsStore(MemoryStore())
    best = 0
    for won in [True, False, True, True, False, False, True]:
        s = store.record_outcome(won)
        assert s.max_streak >= best
        best = s.max_streak
    assert best == 2


def test_record_outcome_persists_immediately():
    backend = MemoryStore()
    StatisticsStore(backend).record_outcome(True)
    saved = json.loads(backend.data[STATS_KEY])
    assert saved == {"played": 1, "won": 1, "currentStreak": 1, "maxStreak": 1}
    assert StatisticsStore(backend).load().won == 1


@pytest.mark.parametrize("text", [
    "not json",
    "[1, 2, 3]",
    '{"played": -1}',
    '{"played": "3"}',
    '{"played": 1, "won": 2}',
    '{"played": true}',
])
def test_malformed_record_loads_as_zeros(text):
    store = StatisticsStore(MemoryStore({STATS_KEY: text}))
    assert store.load() == Statistics()


def test_partial_record_fills_missing_fields():
    store = StatisticsStore(MemoryStore({STATS_KEY: '{"played": 3, "won": 2}'}))
    assert store.load() == Statistics(played=3, won=2)


class _BrokenStore:
    def get(self, key):
        raise PersistenceFailure("disk gone")

    def set(self, key, text):
        return False


def test_persistence_failures_are_absorbed():
    store = StatisticsStore(_BrokenStore())
    assert store.load() == Statistics()
    s = store.record_outcome(True)
    assert s.played == 1
    # in-memory value stays authoritative
    assert store.record_outcome(False).played == 2
    assert store.save() is False


class _RaisingStore:
    def __init__(self, error):
        self.error = error

    def get(self, key):
        raise self.error

    def set(self, key, text):
        raise self.error


@pytest.mark.parametrize("error", [PersistenceFailure("disk gone"), OSError(5, "I/O error")])
def test_raising_backend_is_absorbed(error):
    store = StatisticsStore(_RaisingStore(error))
    assert store.load() == Statistics()
    s = store.record_outcome(True)
    assert s == Statistics(played=1, won=1, current_streak=1, max_streak=1)
    assert store.stats is s
    assert store.save() is False


def test_json_file_store_unusable_path(tmp_path):
    # a path component longer than the filesystem allows
    path = tmp_path / ("a" * 300) / "stats.json"
    backend = JsonFileStore(path)
    with pytest.raises(PersistenceFailure):
        backend.get(STATS_KEY)
    assert backend.set(STATS_KEY, "{}") is False

    store = StatisticsStore(backend)
    assert store.load() == Statistics()
    assert store.record_outcome(False).played == 1


def test_json_file_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "stats.json"
    store = StatisticsStore(JsonFileStore(path))
    store.record_outcome(True)
    store.record_outcome(False)

    reloaded = StatisticsStore(JsonFileStore(path)).load()
    assert reloaded == Statistics(played=2, won=1, current_streak=0, max_streak=1)


def test_json_file_store_keeps_other_keys(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text(json.dumps({"other": "x"}), encoding="utf-8")
    backend = JsonFileStore(path)
    assert backend.set(STATS_KEY, "{}") is True
    assert json.loads(path.read_text(encoding="utf-8"))["other"] == "x"


def test_json_file_store_corrupt_file(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text("{oops", encoding="utf-8")
    backend = JsonFileStore(path)
    with pytest.raises(PersistenceFailure):
        backend.get(STATS_KEY)
    # the store absorbs it and a later write repairs the file
    store = StatisticsStore(backend)
    assert store.load() == Statistics()
    store.record_outcome(True)
    assert StatisticsStore(JsonFileStore(path)).load().played == 1


def test_json_file_store_missing_file_is_empty(tmp_path):
    assert JsonFileStore(tmp_path / "absent.json").get(STATS_KEY) is None
