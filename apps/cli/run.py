# apps/cli/run.py
"""
CLI entry point for running wordlebot solve experiments.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the dictionary, builds the index once and instantiates the picker.
  3) Solves a batch of goals with a live progress indicator and writes:
       - CSV:  per-case results + guess/pattern/pool history columns
       - JSON: manifest with config, word-list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

# Optional rich progress bar
try:
    from tqdm import tqdm  # pip install tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from wordlebot.datasets import (
    is_valid_word, load_dictionary, pretty_summary, read_lines, validate_wordlist,
)
from wordlebot.engine import WORD_LENGTH, build_index
from wordlebot.harness import run_case
from wordlebot.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlebot.pickers import DEFAULT_PICKER, get_picker_ids


def main(argv=None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordlebot — run solve experiments")
    ap.add_argument("--picker", default=DEFAULT_PICKER, choices=get_picker_ids(),
                    help="guess-selection policy")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--words", default="words", help="fixed-width dictionary file")
    ap.add_argument("--goals", help="goal words, one per line (default: every dictionary word)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of goals (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["words"]["exists"]:
        return 1

    # 2) Load once, index once
    t0 = time.perf_counter()
    try:
        index = build_index(load_dictionary(args.words, args.N))
    except ValueError as e:
        print(f"could not load words: {e}", file=sys.stderr)
        return 1
    print(f"Indexed {index.size} words in {(time.perf_counter() - t0) * 1000.0:.1f} ms")

    goals = ([g.strip().lower() for g in read_lines(args.goals) if g.strip()]
             if args.goals else list(index.dictionary))
    bad = [g for g in goals if not is_valid_word(g, args.N)]
    if bad:
        logging.getLogger(__name__).warning("skipping %d goal(s) that are not %d letters a-z", len(bad), args.N)
        goals = [g for g in goals if is_valid_word(g, args.N)]

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(goals):
        pool = list(goals)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = goals

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        mode = "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Solving", unit="goal") if mode == "bar" else cases

    # 5) Run batch with live progress
    for idx, goal in enumerate(iterator, 1):
        # Derive a per-goal seed so runs are reproducible and independent
        r = run_case(index, goal, picker_id=args.picker, seed=args.seed + idx)
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    solved = [r for r in results if r["success"]]
    if solved:
        mean = sum(r["guesses"] for r in solved) / len(solved)
        print(f"Solved {len(solved)}/{total} | mean guesses {mean:.3f}")
    else:
        print(f"Solved 0/{total}")

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "num_solved": len(solved),
        "picker_id": args.picker,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
