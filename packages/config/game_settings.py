"""
Game rule constants.

Single source of truth for the word length and the guess budget; the
engine, the summary header and the word-list checks all read them here.
"""

from typing import Final

WORD_LENGTH: Final[int] = 5

MAX_GUESSES: Final[int] = 6
"""Maximum number of guesses per round (Wordle rule)."""
