"""
Word catalog: the immutable vocabulary the game draws from.

Two roles:
  - secret candidates, partitioned into difficulty tiers (easy/medium/hard)
  - a larger permissive dictionary of acceptable guesses

Words are stored lowercase on disk (one per line) and uppercased on load.
A malformed bundled list is a packaging defect, so loading raises
ValueError instead of silently skipping lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Tuple

from packages.config.game_settings import WORD_LENGTH
from .io import read_lines, word_file


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        """Display label, e.g. 'Easy'."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Unknown difficulty: {value!r}. Available: {[d.value for d in cls]}") from e


def is_word(text: str, N: int = WORD_LENGTH) -> bool:
    """True iff `text` is exactly N ASCII letters (any case)."""
    return len(text) == N and text.isascii() and text.isalpha()


def normalize_words(words: Iterable[str], source: str = "<memory>") -> Tuple[str, ...]:
    """
    Uppercase and check a word list, dropping blank lines.

    Raises ValueError naming the first offending entry.
    """
    out = []
    for index, raw in enumerate(words):
        w = raw.strip()
        if not w:
            continue
        if not is_word(w):
            raise ValueError(f"{source}: entry {index} {w!r} is not a {WORD_LENGTH}-letter word")
        out.append(w.upper())
    return tuple(out)


@dataclass(frozen=True)
class WordCatalog:
    """Difficulty tiers plus the permissive dictionary. Read-only."""
    tiers: Dict[Difficulty, Tuple[str, ...]]
    dictionary: FrozenSet[str]

    def __post_init__(self):
        for d in Difficulty:
            if not self.tiers.get(d):
                raise ValueError(f"word list for difficulty '{d.value}' is empty")

    def words_for(self, difficulty: Difficulty | str) -> Tuple[str, ...]:
        """Ordered secret candidates for one tier."""
        return self.tiers[Difficulty.parse(difficulty)]

    @property
    def secret_candidates(self) -> FrozenSet[str]:
        """Union of every tier; these are always acceptable guesses."""
        return frozenset(w for words in self.tiers.values() for w in words)

    @property
    def acceptable_offline(self) -> FrozenSet[str]:
        """Everything accepted without an external lookup."""
        return self.secret_candidates | self.dictionary

    @classmethod
    def from_lists(cls, tiers: Dict[Difficulty | str, Iterable[str]],
                   dictionary: Iterable[str] = ()) -> "WordCatalog":
        return cls(
            tiers={Difficulty.parse(k): normalize_words(v, str(k)) for k, v in tiers.items()},
            dictionary=frozenset(normalize_words(dictionary, "dictionary")),
        )


def load_catalog(data_dir: Path | str | None = None) -> WordCatalog:
    """
    Load the bundled lists (easy_5.txt, medium_5.txt, hard_5.txt and
    allowed_5.txt) from `data_dir` (defaults to the package data folder).
    """
    tiers = {}
    for d in Difficulty:
        path = word_file(d.value, WORD_LENGTH, data_dir)
        tiers[d] = normalize_words(read_lines(path), str(path))

    allowed_path = word_file("allowed", WORD_LENGTH, data_dir)
    dictionary = frozenset(normalize_words(read_lines(allowed_path), str(allowed_path)))
    return WordCatalog(tiers=tiers, dictionary=dictionary)
