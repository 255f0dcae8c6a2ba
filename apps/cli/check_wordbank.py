# apps/cli/check_wordbank.py
"""
Validate the bundled word lists and print a one-line summary.

Exits non-zero when the lists fail the integrity checks, so it can run in CI.

Usage:
    python -m apps.cli.check_wordbank
    python -m apps.cli.check_wordbank --data-dir path/to/lists --json
"""

from __future__ import annotations

import argparse
import json
import sys

from packages.wordbank import validate_wordbank, pretty_summary


def main():
    ap = argparse.ArgumentParser(description="Check word list integrity")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--data-dir", help="directory holding <name>_<N>.txt lists")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    args = ap.parse_args()

    rep = validate_wordbank(args.N, args.data_dir)
    print(pretty_summary(rep))
    if args.json:
        print(json.dumps(rep, indent=2))
    for issue in rep["issues"]:
        print(f"  - {issue}", file=sys.stderr)
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
