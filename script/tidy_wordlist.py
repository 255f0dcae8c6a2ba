"""
Normalise a word list file in place (or to --out).

Features:
- Lowercases every entry and drops blank lines.
- Drops entries that are not exactly N letters a–z (reported on stderr).
- Removes duplicates, preserving first occurrence (stable dedupe).
- Optional --exclude lists: drop words already present there (e.g. keep
  allowed_5.txt free of the tier words).
- Optional sorting AFTER dedupe; otherwise keep input order.

Usage:
    python -m script.tidy_wordlist --in packages/wordbank/data/allowed_5.txt --sort
    python -m script.tidy_wordlist --in packages/wordbank/data/hard_5.txt \
        --exclude packages/wordbank/data/easy_5.txt packages/wordbank/data/medium_5.txt
"""

import argparse
import sys
from pathlib import Path

from packages.wordbank.io import read_lines, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def main():
    ap = argparse.ArgumentParser(description="Normalise and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=5, help="required word length")
    ap.add_argument("--exclude", nargs="*", default=[], help="lists whose words are removed")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    raw = read_lines(inp)
    words, dropped = [], []
    for s in raw:
        w = s.strip().lower()
        if not w:
            continue
        if len(w) == args.N and w.isascii() and w.isalpha():
            words.append(w)
        else:
            dropped.append(s)

    excluded = set()
    for p in args.exclude:
        excluded.update(w.strip().lower() for w in read_lines(p))

    out = [w for w in unique_preserve_order(words) if w not in excluded]
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    for s in dropped:
        print(f"dropped: {s!r}", file=sys.stderr)
    print(f"Input: {inp} ({len(raw)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
