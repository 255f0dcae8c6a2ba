from .scoring import score, pattern, LetterFeedback
from .validation import Validator, DictionaryLookup
from .game import GameEngine, Round, Outcome, GuessResult, feedback_rows
from .keyboard import keyboard_status
from .summary import format_summary
from .errors import (GuessRejected, IncompleteGuess, InvalidWord,
                     ValidationUnavailable, PersistenceFailure)

__all__ = [
    "score", "pattern", "LetterFeedback",
    "Validator", "DictionaryLookup",
    "GameEngine", "Round", "Outcome", "GuessResult", "feedback_rows",
    "keyboard_status", "format_summary",
    "GuessRejected", "IncompleteGuess", "InvalidWord",
    "ValidationUnavailable", "PersistenceFailure",
]
