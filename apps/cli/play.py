# apps/cli/play.py
"""
Terminal front-end for the word game.

A thin consumer of packages.engine: it reads a line, feeds its letters to
the engine, submits, and prints the feedback row. After a round ends it
prints the share summary and the player's statistics.

Usage:
    python -m apps.cli.play --difficulty medium
    python -m apps.cli.play --offline --seed 7
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from packages.config import config
from packages.engine import GuessRejected, Outcome, format_summary, keyboard_status, pattern
from packages.engine.factory import create_game
from packages.engine.game import press_keys
from packages.wordbank import Difficulty


def _print_stats(stats) -> None:
    print(f"Played {stats.played} | Win % {stats.win_percentage} | "
          f"Streak {stats.current_streak} | Best {stats.max_streak}")


def _print_keyboard(engine) -> None:
    rnd = engine.round
    status = keyboard_status(rnd.secret, rnd.guesses)
    line = " ".join(f"{k}:{v.symbol}" for k, v in sorted(status.items()))
    print(f"  keys  {line}")


async def _play_round(engine) -> None:
    rnd = engine.round
    print(f"New {rnd.difficulty.label} round. Type a five-letter word, or :q to quit.")
    while not engine.round.is_over:
        try:
            line = input("> ").strip()
        except EOFError:
            raise SystemExit(0)
        if line in (":q", ":quit"):
            raise SystemExit(0)

        # Replace any half-typed input with this line
        while engine.delete_letter():
            pass
        press_keys(engine, line)

        try:
            result = await engine.submit_guess()
        except GuessRejected as e:
            print(f"  {e}")
            continue
        if result is None:
            continue
        print(f"  {result.guess}  {pattern(result.feedback)}")
        _print_keyboard(engine)

    if engine.round.outcome is Outcome.LOST:
        print(f"The word was {engine.round.secret}.")
    print()
    print(format_summary(engine.round))
    print()


def main():
    """
    Parse CLI args, build the engine from configuration, and loop rounds.
    """
    ap = argparse.ArgumentParser(description="Play the five-letter word game in a terminal")
    ap.add_argument("--difficulty", choices=[d.value for d in Difficulty],
                    help="difficulty tier (default: DEFAULT_DIFFICULTY from the environment)")
    ap.add_argument("--config", choices=sorted(config.keys()), default="default",
                    help="configuration profile")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible secrets")
    ap.add_argument("--offline", action="store_true",
                    help="never call the dictionary API (bundled lists only)")
    args = ap.parse_args()

    engine = create_game(config[args.config], seed=args.seed, offline=args.offline)
    if args.difficulty:
        engine.set_difficulty(args.difficulty)

    while True:
        asyncio.run(_play_round(engine))
        _print_stats(engine.stats.stats)
        try:
            again = input("Play again? [Y/n] ").strip().lower()
        except EOFError:
            break
        if again.startswith("n"):
            break
        engine.reset()

    return 0


if __name__ == "__main__":
    sys.exit(main())
