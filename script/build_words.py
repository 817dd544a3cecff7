"""
Build the fixed-width `words` file the solver indexes.

Features:
- Lowercases and strips every line.
- Keeps only words of exactly N letters a–z (everything else is counted).
- Removes duplicates, preserving original order by default.
- Optional sorting AFTER dedupe (alphabetical).

The output has one word per line with a single '\\n' separator, so every
record is exactly N+1 bytes.

Usage:
    python -m script.build_words --in wordlist.txt --out words --N 5 --sort
"""

import argparse
from pathlib import Path

from wordlebot.datasets import is_valid_word, read_lines, unique_preserve_order, write_lines


def main():
    ap = argparse.ArgumentParser(description="Normalise a word list into fixed-width records.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file, one word per line")
    ap.add_argument("--out", dest="out", default="words", help="output file")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    lines = [s.strip().lower() for s in read_lines(inp)]
    kept = [s for s in lines if is_valid_word(s, args.N)]
    out = unique_preserve_order(kept)
    if args.sort:
        out.sort()

    write_lines(out, args.out)
    print(f"Input: {inp} ({len(lines)} lines, {len(lines) - len(kept)} rejected) -> Output: {args.out} ({len(out)} words)")


if __name__ == "__main__":
    main()
