"""
Integrity report for the bundled word lists.

What this module does:
- Check each list (easy/medium/hard tiers and the allowed dictionary)
  against the on-disk format: lowercase a–z only, exact length N, one per line.
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that no secret word appears in two difficulty tiers.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.wordbank import validate_wordbank, pretty_summary
    rep = validate_wordbank(5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .catalog import Difficulty
from .io import word_file


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    name: str            # list name (easy, medium, hard, allowed)
    path: str            # file path (as resolved)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class WordbankReport:
    """Top-level result for the whole set of lists."""
    N: int
    files: List[FileReport]
    tiers_disjoint: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordbank(N: int = 5, data_dir: str | Path | None = None) -> Dict:
    """
    Validate the tier lists and the allowed dictionary for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordbankReport schema). `passed`
        is strict: every file present and non-empty, no invalid lines, no
        duplicates, and tiers pairwise disjoint.
    """
    issues: List[str] = []
    files: List[FileReport] = []
    tier_words: Dict[str, set] = {}

    names = [d.value for d in Difficulty] + ["allowed"]
    for name in names:
        p = word_file(name, N, data_dir)
        if not p.exists():
            issues.append(f"{name} file not found: {p}")
            files.append(FileReport(name, str(p), False, 0, "", 0, 0))
            continue

        words, invalid = _load_and_check(p, N)
        rep = FileReport(
            name=name,
            path=str(p),
            exists=True,
            count=len(words),
            sha256=_sha256_file(p),
            unique_count=len(set(words)),
            invalid_lines=invalid,
        )
        files.append(rep)

        if rep.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if invalid:
            issues.append(f"{name} has {invalid} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{name} contains duplicate lines")
        if name != "allowed":
            tier_words[name] = set(words)

    # A secret word belongs to exactly one tier
    disjoint = True
    tiers = list(tier_words.items())
    for i, (a, wa) in enumerate(tiers):
        for b, wb in tiers[i + 1:]:
            shared = sorted(wa & wb)
            if shared:
                disjoint = False
                issues.append(f"{a} and {b} share words (e.g., {shared[:5]})")

    report = WordbankReport(
        N=N,
        files=files,
        tiers_disjoint=disjoint,
        passed=not issues,
        issues=issues,
    )
    return asdict(report)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | easy=60 (sha=abc123...) | medium=60 (...) | hard=59 (...) | allowed=677 (...) | disjoint=True | OK
    """
    parts = [f"N={report['N']}"]
    for f in report["files"]:
        # abbreviate sha to 12 chars for readability
        parts.append(f"{f['name']}={f['count']} (uniq={f['unique_count']}, sha={(f.get('sha256') or '')[:12]})")
    parts.append(f"disjoint={report['tiers_disjoint']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
