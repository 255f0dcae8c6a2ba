"""
Keyboard aggregate: the most informative feedback seen for each letter.

CORRECT outranks PRESENT outranks ABSENT. Display-only; the game logic
never reads it. `revealed` lets a renderer that reveals rows gradually
aggregate only the rows already shown.
"""

from typing import Dict, Iterable, Optional

from .scoring import LetterFeedback, score


def keyboard_status(secret: str, guesses: Iterable[str],
                    revealed: Optional[int] = None) -> Dict[str, LetterFeedback]:
    """
    Map each guessed letter to its best feedback so far.

    Letters never guessed are absent from the result.
    """
    status: Dict[str, LetterFeedback] = {}
    for row, guess in enumerate(guesses):
        if revealed is not None and row >= revealed:
            break
        for letter, fb in zip(guess.upper(), score(secret, guess)):
            best = status.get(letter)
            if best is None or fb.value > best.value:
                status[letter] = fb
    return status
