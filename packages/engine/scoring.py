"""
Wordle-style scoring (feedback) for a single (secret, guess) pair.

Feedback per position is one of:
  - CORRECT : right letter, right position
  - PRESENT : letter is in the secret, elsewhere
  - ABSENT  : letter not in the secret (or already fully credited)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and counts the secret's letters
     that were NOT matched exactly (the per-letter "budget").
  2) Second pass scans the guess left to right; a non-exact position is
     PRESENT only while its letter still has budget, consuming one.

So with one E in the secret and two in the guess, only the leftmost
non-exact E is PRESENT.
"""

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple


class LetterFeedback(Enum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def symbol(self) -> str:
        """Compact pattern character: 'G', 'Y' or '-'."""
        return _SYMBOLS[self]


_SYMBOLS = {
    LetterFeedback.CORRECT: "G",
    LetterFeedback.PRESENT: "Y",
    LetterFeedback.ABSENT: "-",
}

Feedback = Tuple[LetterFeedback, ...]


def score(secret: str, guess: str) -> Feedback:
    """
    Compute feedback for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret)

    Examples:
      pattern(score("ALLOT", "LOLLY")) -> "YYG--"
      pattern(score("SPEED", "ERASE")) -> "Y--YY"
    """
    secret = secret.strip().upper()
    guess = guess.strip().upper()
    if len(secret) != len(guess):
        raise ValueError("secret and guess must be the same length")

    result = [LetterFeedback.ABSENT] * len(guess)

    # Pass 1: exact matches; everything else in the secret goes to the budget
    budget: Counter = Counter()
    for i, (s, g) in enumerate(zip(secret, guess)):
        if s == g:
            result[i] = LetterFeedback.CORRECT
        else:
            budget[s] += 1

    # Pass 2: left-to-right, spend budget on misplaced letters
    for i, g in enumerate(guess):
        if result[i] is LetterFeedback.CORRECT:
            continue
        if budget[g] > 0:
            result[i] = LetterFeedback.PRESENT
            budget[g] -= 1

    return tuple(result)


def pattern(feedback: Iterable[LetterFeedback]) -> str:
    """Render feedback as a 'G'/'Y'/'-' string, e.g. 'YYG--'."""
    return "".join(f.symbol for f in feedback)
