from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from wordlebot.engine.index import Dictionary

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def split_records(buffer: bytes, N: int) -> List[str]:
    """
    Split a flat buffer of fixed-width records into words.

    Each record is N letter bytes followed by exactly one separator byte
    (normally a newline). The separator itself is never inspected.
    """
    width = N + 1
    if len(buffer) % width:
        raise ValueError(
            f"buffer length {len(buffer)} is not a multiple of the record width {width}")
    return [buffer[i:i + N].decode("ascii") for i in range(0, len(buffer), width)]


def load_dictionary(p: Path | str, N: int) -> Dictionary:
    """
    Load a fixed-width word file into a Dictionary.

    Duplicate words are dropped (first occurrence wins) since the solver
    could never tell two identical candidates apart.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)

    words = split_records(p.read_bytes(), N)
    unique = unique_preserve_order(words)
    if len(unique) != len(words):
        log.warning("%s: dropped %d duplicate word(s)", p, len(words) - len(unique))

    log.info("loaded %d words of length %d from %s", len(unique), N, p)
    return Dictionary(unique)
