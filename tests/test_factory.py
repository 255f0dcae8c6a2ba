import asyncio
import json

from packages.config import TestingConfig, config
from packages.engine import Outcome
from packages.engine.factory import create_game
from packages.engine.game import press_keys
from packages.utils.game_logger import GameLogger


def _config_for(tmp_path):
    class TmpConfig(TestingConfig):
        STATS_PATH = str(tmp_path / "stats.json")
        DEFAULT_DIFFICULTY = "hard"
    return TmpConfig


def test_config_profiles():
    assert set(config) == {"development", "production", "testing", "default"}
    assert config["default"].STATS_KEY == "wordle-stats-v3"
    assert TestingConfig.LOOKUP_TIMEOUT == 1.0


def test_create_game_offline_round_trip(tmp_path):
    cfg = _config_for(tmp_path)
    engine = create_game(cfg, seed=3, offline=True)
    assert engine.validator.lookup is None
    assert engine.difficulty.value == "hard"

    press_keys(engine, engine.round.secret)
    result = asyncio.run(engine.submit_guess())
    assert result.outcome is Outcome.WON

    saved = json.loads((tmp_path / "stats.json").read_text(encoding="utf-8"))
    record = json.loads(saved[cfg.STATS_KEY])
    assert record["played"] == 1 and record["currentStreak"] == 1


def test_create_game_online_uses_configured_lookup(tmp_path):
    engine = create_game(_config_for(tmp_path), seed=3)
    assert engine.validator.lookup.url_template == TestingConfig.DICTIONARY_API_URL
    assert engine.validator.lookup.timeout == 1.0


def test_game_logger_writes_json_lines(tmp_path):
    gl = GameLogger(log_dir=str(tmp_path / "logs"), level="INFO")
    gl.log_game_event("round_won", attempts=3)
    for h in gl.logger.handlers:
        h.flush()
    files = list((tmp_path / "logs").glob("game_log_*.log"))
    assert len(files) == 1
    line = files[0].read_text(encoding="utf-8").strip().splitlines()[-1]
    entry = json.loads(line.split(" | ", 2)[2])
    assert entry["event_type"] == "GAME_EVENT"
    assert entry["details"] == {"attempts": 3}
    gl.configure()  # detach the file handler again
