"""
Word-list validator for wordlebot.

What this module does:
- Validate the dictionary file the solver indexes (one word per line, which
  is also the fixed-width record layout when every word has length N).
- Enforce formatting rules (lowercase, a–z only, exact length N).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordlebot.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for one word list."""
    N: int
    words: FileReport
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


def is_valid_word(w: str, N: int) -> bool:
    """Exactly N lowercase ASCII letters."""
    return len(w) == N and w.isascii() and w.isalpha() and w.islower()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line, no surrounding whitespace
      - must be lowercase a–z
      - must have exact length N
      - empty lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8", newline="") as f:
        for raw in f:
            w = raw.rstrip("\n")
            # a stray CR or space would shift every fixed-width record after it
            if is_valid_word(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _record_issues(path: Path, N: int) -> List[str]:
    """
    Check the fixed-width layout the loader splits on: every record is N
    letters plus one '\n', including the last one.
    """
    size = path.stat().st_size
    issues: List[str] = []
    if size % (N + 1):
        issues.append(f"words size {size} is not a multiple of the record width {N + 1}")
    if size:
        with path.open("rb") as f:
            f.seek(-1, 2)
            if f.read(1) != b"\n":
                issues.append("last record has no trailing newline")
    return issues


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate the dictionary word list for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, duplicate/invalid flags, a strict `passed` boolean
        (non-empty, no invalid lines, no duplicates, whole N+1-byte records) and `issues`.
    """
    p = Path(path)

    if not p.exists():
        rep = ValidationReport(
            N=N,
            words=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=[f"words file not found: {path}"],
        )
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    issues: List[str] = []
    if report.count == 0:
        issues.append("words file contains 0 valid words")
    if invalid:
        issues.append(f"words has {invalid} invalid line(s)")
    issues.extend(_record_issues(p, N))
    if report.count != report.unique_count:
        issues.append("words contains duplicate lines")

    rep = ValidationReport(N=N, words=report, passed=not issues, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=14855 (uniq=14855, invalid=0, sha=abc123...) | OK
    """
    w = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={w['count']} (uniq={w['unique_count']}, "
        f"invalid={w['invalid_lines']}, sha={sha}) | {status}"
    )
