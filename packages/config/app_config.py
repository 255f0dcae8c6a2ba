"""
Environment configuration.

Every setting is read from the environment (or a local .env file) with a
default that works offline on a single machine.
"""

import os
from dotenv import load_dotenv

# Load variables from a .env file in the working directory, if any
load_dotenv()


def _optional_float(name: str):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Config:
    """Base configuration class with all settings."""

    # Game
    DEFAULT_DIFFICULTY = os.getenv("DEFAULT_DIFFICULTY", "easy")

    # External dictionary lookup (last validation tier)
    DICTIONARY_API_URL = os.getenv(
        "DICTIONARY_API_URL", "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
    )
    # Seconds; unset means requests wait indefinitely
    LOOKUP_TIMEOUT = _optional_float("LOOKUP_TIMEOUT")

    # Statistics persistence
    STATS_PATH = os.getenv("STATS_PATH", os.path.join(os.path.expanduser("~"), ".wordle", "stats.json"))
    STATS_KEY = os.getenv("STATS_KEY", "wordle-stats-v3")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR") or None


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""
    LOG_LEVEL = "WARNING"


class TestingConfig(Config):
    """Testing configuration: nothing touches the network or the home directory."""
    TESTING = True
    DICTIONARY_API_URL = "http://localhost.invalid/{word}"
    LOOKUP_TIMEOUT = 1.0
    STATS_PATH = os.path.join("build", "test-stats.json")
    LOG_DIR = None


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": Config,
}
