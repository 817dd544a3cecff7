# apps/cli/daily.py
"""
Solve today's Wordle and announce it on the configured webhooks.

This script:
  1) Loads the fixed-width `words` file and builds the index.
  2) Fetches today's manifest from the NYT (or takes --goal / --date).
  3) Solves it and posts the glyph trace, with a random robot greeting,
     to every URL in the `webhook` file (or prints it with --dry-run).
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import random
import sys
from pathlib import Path

import requests

from wordlebot.daily import (
    choose_robot_line, fetch_daily_manifest, format_message, post_to_webhooks,
)
from wordlebot.datasets import load_dictionary, read_lines
from wordlebot.engine import NotFound, WORD_LENGTH, build_index, solve
from wordlebot.pickers import DEFAULT_PICKER, create_picker, get_picker_ids


def _read_nonblank(path: str) -> list[str]:
    return [ln for ln in read_lines(path) if ln.strip()]


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordlebot — solve and announce the daily Wordle")
    ap.add_argument("--words", default="words", help="fixed-width dictionary file")
    ap.add_argument("--robot", default="robot", help="greeting lines, one is picked per webhook")
    ap.add_argument("--webhooks", default="webhook", help="webhook URLs, one per line")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--picker", default=DEFAULT_PICKER, choices=get_picker_ids(),
                    help="guess-selection policy")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducibility)")
    ap.add_argument("--goal", help="solve this word instead of fetching the daily manifest")
    ap.add_argument("--days", type=int, default=0,
                    help="puzzle number shown in the message when --goal is used")
    ap.add_argument("--date", type=dt.date.fromisoformat, help="puzzle date (YYYY-MM-DD)")
    ap.add_argument("--dry-run", action="store_true", help="print the message instead of posting")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        index = build_index(load_dictionary(args.words, args.N))
    except (FileNotFoundError, ValueError) as e:
        print(f"could not load words: {e}", file=sys.stderr)
        return 1
    rng = random.Random(args.seed)

    if args.goal:
        goal, days = args.goal.strip().lower(), args.days
    else:
        try:
            manifest = fetch_daily_manifest(args.date)
        except (requests.RequestException, ValueError) as e:
            print(f"could not get daily manifest: {e}", file=sys.stderr)
            return 1
        goal, days = manifest.solution, manifest.days_since_launch

    try:
        trace = solve(index, goal, rng=rng, picker=create_picker(args.picker))
    except (NotFound, ValueError) as e:
        print(f"could not guess today's wordle: {e}", file=sys.stderr)
        return 1

    robot_lines = _read_nonblank(args.robot) if Path(args.robot).exists() else []

    def message() -> str:
        return format_message(choose_robot_line(robot_lines, rng), days, trace)

    if args.dry_run:
        print(message())
        return 0

    sent = post_to_webhooks(_read_nonblank(args.webhooks), message)
    print(f"attempt sent to {sent} webhook URLs")
    return 0


if __name__ == "__main__":
    sys.exit(main())
