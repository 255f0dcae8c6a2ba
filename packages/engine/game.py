"""
Round state machine.

One GameEngine owns the active Round and serialises every event on it:
  append_letter / delete_letter  edit the pending input
  submit_guess (async)           validate, score, advance the outcome
  reset / set_difficulty         replace the round with a fresh one

Outcomes: IN_PROGRESS -> WON | LOST. Nothing leaves a terminal outcome
except reset, which builds a new Round instead of mutating the old one.

While a submitted word is being validated (the lookup may suspend), every
other input event is ignored, so the input being checked cannot change
under the check.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from packages.config.game_settings import MAX_GUESSES, WORD_LENGTH
from packages.utils.game_logger import game_logger
from packages.wordbank.catalog import Difficulty, WordCatalog
from .errors import IncompleteGuess, InvalidWord
from .scoring import Feedback, pattern, score
from .validation import Validator


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class Round:
    """The mutable unit of play. Feedback is derived, never stored here."""
    secret: str
    difficulty: Difficulty
    guesses: List[str] = field(default_factory=list)
    current_input: str = ""
    outcome: Outcome = Outcome.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def attempts(self) -> int:
        return len(self.guesses)


@dataclass(frozen=True)
class GuessResult:
    """What an accepted guess produced; handed to the presentation layer."""
    guess: str
    feedback: Feedback
    outcome: Outcome


def feedback_rows(rnd: Round) -> List[Feedback]:
    """Feedback for every guess of `rnd`, in order."""
    return [score(rnd.secret, g) for g in rnd.guesses]


class GameEngine:
    """
    Drives rounds for one player.

    Args:
      catalog    : word lists (secrets are drawn from the active tier)
      validator  : decides acceptable guesses
      stats      : optional object with record_outcome(won); called exactly
                   once per finished round
      difficulty : tier of the first round
      seed / rng : make secret draws reproducible
    """

    def __init__(self, catalog: WordCatalog, validator: Validator, *, stats=None,
                 difficulty: Difficulty | str = Difficulty.EASY,
                 seed: int | None = None, rng: random.Random | None = None):
        self.catalog = catalog
        self.validator = validator
        self.stats = stats
        self.rng = rng or random.Random(seed)
        # Round whose guess is being validated, if any
        self._pending: Optional[Round] = None
        self.round = self._new_round(Difficulty.parse(difficulty))

    # ---- Read side ----

    @property
    def validating(self) -> bool:
        """True while a submitted word awaits validation."""
        return self._pending is not None

    @property
    def difficulty(self) -> Difficulty:
        return self.round.difficulty

    def snapshot(self) -> Round:
        """Copy of the current round, safe to hand to a renderer."""
        return replace(self.round, guesses=list(self.round.guesses))

    # ---- Round lifecycle ----

    def _new_round(self, difficulty: Difficulty) -> Round:
        words = self.catalog.words_for(difficulty)
        rnd = Round(secret=self.rng.choice(words), difficulty=difficulty)
        game_logger.log_game_event("round_started", difficulty=difficulty.value)
        return rnd

    def reset(self, difficulty: Difficulty | str | None = None) -> Round:
        """Start a new round; always accepted, even mid-validation."""
        d = self.round.difficulty if difficulty is None else Difficulty.parse(difficulty)
        self._pending = None
        self.round = self._new_round(d)
        return self.round

    def set_difficulty(self, difficulty: Difficulty | str) -> Round:
        """Changing difficulty always starts a new round."""
        return self.reset(difficulty)

    # ---- Input events ----

    def _accepts_input(self) -> bool:
        return not self.round.is_over and self._pending is None

    def append_letter(self, ch: str) -> bool:
        """Append one letter to the pending input. Returns False if ignored."""
        if not self._accepts_input():
            return False
        if len(ch) != 1 or not (ch.isascii() and ch.isalpha()):
            return False
        if len(self.round.current_input) >= WORD_LENGTH:
            return False
        self.round.current_input += ch.upper()
        return True

    def delete_letter(self) -> bool:
        """Drop the last pending letter. Returns False if ignored or empty."""
        if not self._accepts_input() or not self.round.current_input:
            return False
        self.round.current_input = self.round.current_input[:-1]
        return True

    async def submit_guess(self) -> Optional[GuessResult]:
        """
        Submit the pending input.

        Returns None when the event is ignored (round over, or a check is
        already outstanding). Raises IncompleteGuess / InvalidWord when the
        guess is refused; the pending input is left untouched for editing.
        """
        if not self._accepts_input():
            return None

        rnd = self.round
        word = rnd.current_input
        if len(word) != WORD_LENGTH:
            game_logger.log_game_event("guess_rejected", reason="incomplete", length=len(word))
            raise IncompleteGuess(word)

        self._pending = rnd
        try:
            accepted = await self.validator.is_acceptable(word)
        finally:
            if self._pending is rnd:
                self._pending = None

        if self.round is not rnd:
            # Round was replaced while validating; drop the stale result
            return None
        if not accepted:
            game_logger.log_game_event("guess_rejected", reason="invalid", word=word)
            raise InvalidWord(word)

        rnd.guesses.append(word)
        rnd.current_input = ""
        feedback = score(rnd.secret, word)
        game_logger.log_game_event("guess_accepted", attempt=rnd.attempts, pattern=pattern(feedback))

        if word == rnd.secret:
            self._finish(rnd, Outcome.WON)
        elif rnd.attempts >= MAX_GUESSES:
            self._finish(rnd, Outcome.LOST)

        return GuessResult(guess=word, feedback=feedback, outcome=rnd.outcome)

    def _finish(self, rnd: Round, outcome: Outcome) -> None:
        # Single call site for terminal transitions: stats update exactly once
        rnd.outcome = outcome
        game_logger.log_game_event(
            "round_" + outcome.value,
            difficulty=rnd.difficulty.value,
            attempts=rnd.attempts,
            secret=rnd.secret,
        )
        if self.stats is not None:
            self.stats.record_outcome(outcome is Outcome.WON)


def press_keys(engine: GameEngine, keys: str) -> Tuple[int, int]:
    """
    Feed a string of letters to the engine; '<' deletes one letter.
    Returns (accepted, ignored) counts. Handy for terminal consumers.
    """
    accepted = ignored = 0
    for k in keys:
        ok = engine.delete_letter() if k == "<" else engine.append_letter(k)
        if ok:
            accepted += 1
        else:
            ignored += 1
    return accepted, ignored
