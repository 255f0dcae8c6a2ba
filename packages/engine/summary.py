"""
Shareable round summary.

    Wordle (Easy) 3/6

    ⬛🟨⬛⬛⬛
    ⬛🟩🟨⬛⬛
    🟩🟩🟩🟩🟩

Header: difficulty label, then attempts/6 on a win or X/6 on a loss.
One glyph row per guess. Letters are never included.
"""

from typing import Dict, Optional

from packages.config.game_settings import MAX_GUESSES
from .game import Outcome, Round, feedback_rows
from .scoring import LetterFeedback

GLYPHS: Dict[LetterFeedback, str] = {
    LetterFeedback.CORRECT: "\U0001F7E9",  # green square
    LetterFeedback.PRESENT: "\U0001F7E8",  # yellow square
    LetterFeedback.ABSENT: "\u2B1B",      # black square
}


def format_summary(rnd: Round, glyphs: Optional[Dict[LetterFeedback, str]] = None,
                   title: str = "Wordle") -> str:
    """
    Build the share text for a finished round.

    Raises ValueError while the round is still in progress.
    """
    if rnd.outcome is Outcome.IN_PROGRESS:
        raise ValueError("summary is only available for a finished round")

    glyphs = glyphs or GLYPHS
    result = f"{rnd.attempts}/{MAX_GUESSES}" if rnd.outcome is Outcome.WON else f"X/{MAX_GUESSES}"
    grid = "\n".join("".join(glyphs[f] for f in row) for row in feedback_rows(rnd))
    return f"{title} ({rnd.difficulty.label}) {result}\n\n{grid}"
