import random
from collections import Counter

import pytest
from packages.engine import score, pattern, LetterFeedback
from packages.wordbank import load_catalog

# --- golden tests (duplicates + placements); score(secret, guess) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("LEVEL", "BELLE", "-GYYY"),
    ("LEVEL", "LEVEL", "GGGGG"),
    ("LEVEL", "LEMON", "GG---"),
    ("SCOOP", "COOLS", "YYG-Y"),
    ("CRANE", "RAISE", "YY--G"),
    ("CRANE", "STARE", "--GYG"),
    ("ALLOT", "LOLLY", "YYG--"),
    ("SPEED", "ERASE", "Y--YY"),
    ("BREAD", "EERIE", "Y-Y--"),
    ("THOSE", "GEESE", "---GG"),
])
def test_score_golden(secret, guess, expected):
    assert pattern(score(secret, guess)) == expected

def test_score_is_case_insensitive():
    assert score("crane", "Trace") == score("CRANE", "TRACE")

def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("CRANE", "CRANES")

def test_only_earliest_extra_letter_is_present():
    # one E in the secret, two in the guess
    fb = score("BREAD", "EERIE")
    assert fb[0] is LetterFeedback.PRESENT
    assert fb[1] is LetterFeedback.ABSENT
    assert fb[4] is LetterFeedback.ABSENT

def test_score_credits_letters_up_to_their_count():
    words = sorted(load_catalog().acceptable_offline)
    rng = random.Random(2024)
    for _ in range(500):
        secret, guess = rng.choice(words), rng.choice(words)
        fb = score(secret, guess)
        assert len(fb) == 5
        credited = Counter(g for g, f in zip(guess, fb) if f is not LetterFeedback.ABSENT)
        have, asked = Counter(secret), Counter(guess)
        for letter in asked:
            assert credited[letter] == min(have[letter], asked[letter])
