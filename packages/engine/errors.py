"""
Error taxonomy for the engine.

Only the two guess rejections ever reach a caller. The other two are
raised by pluggable backends and absorbed where they are caught:
  - ValidationUnavailable -> the validator fails open
  - PersistenceFailure    -> the statistics store keeps its in-memory copy
"""


class GuessRejected(Exception):
    """A submitted guess was refused; the current input is kept for editing."""

    def __init__(self, word: str, message: str):
        super().__init__(message)
        self.word = word


class IncompleteGuess(GuessRejected):
    def __init__(self, word: str):
        super().__init__(word, "Not enough letters")


class InvalidWord(GuessRejected):
    def __init__(self, word: str):
        super().__init__(word, "Not in word list")


class ValidationUnavailable(Exception):
    """The external word lookup could not give a definitive answer."""


class PersistenceFailure(Exception):
    """A durable storage read or write failed."""
