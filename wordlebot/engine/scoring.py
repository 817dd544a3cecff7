"""
Wordle-style feedback for a single (guess, goal) pair.

Conventions (pattern characters):
  - 'G'  : Correct   = right letter in the right slot         (glyph 🟩)
  - 'Y'  : Partial   = letter present, but in another slot     (glyph 🟨)
  - '-'  : Incorrect = letter absent, or present fewer times   (glyph ⬛)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all Correct slots and counts the goal letters that
     were not matched in place.
  2) Second pass walks the guess left to right and hands out Partial marks
     only while the letter still has unmatched occurrences in the goal.

So each goal occurrence satisfies at most one guess occurrence, Correct
matches take priority, and ties are broken by guess order.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Letter(str, Enum):
    CORRECT = "G"
    PARTIAL = "Y"
    INCORRECT = "-"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Letter.CORRECT: "🟩",
    Letter.PARTIAL: "🟨",
    Letter.INCORRECT: "⬛",
}


@dataclass(frozen=True)
class Feedback:
    """Per-slot classification of one guess. Immutable once computed."""
    letters: Tuple[Letter, ...]

    @classmethod
    def correct(cls, n: int) -> "Feedback":
        return cls((Letter.CORRECT,) * n)

    @classmethod
    def from_pattern(cls, pattern: str) -> "Feedback":
        """Parse a pattern string such as "--GYG"."""
        return cls(tuple(Letter(ch) for ch in pattern))

    @property
    def pattern(self) -> str:
        return "".join(l.value for l in self.letters)

    @property
    def glyphs(self) -> str:
        return "".join(l.glyph for l in self.letters)

    @property
    def solved(self) -> bool:
        return all(l is Letter.CORRECT for l in self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __getitem__(self, slot: int) -> Letter:
        return self.letters[slot]

    def __str__(self) -> str:
        return self.glyphs


def evaluate(guess: str, goal: str) -> Feedback:
    """
    Compute the feedback for `guess` against `goal`.

    Preconditions:
      - len(guess) == len(goal), both lowercase a–z

    Examples:
      evaluate("slate", "crane").pattern -> "--G-G"
      evaluate("belle", "level").pattern -> "-GYYY"
    """
    assert len(guess) == len(goal), "Guess and goal must be the same length"

    n = len(guess)
    out = [Letter.INCORRECT] * n

    # Pass 1: Correct slots, plus counts of the goal letters left unmatched.
    remaining: Counter[str] = Counter()
    for i, (g, a) in enumerate(zip(guess, goal)):
        if g == a:
            out[i] = Letter.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: Partial only while the letter still has unmatched occurrences.
    for i, g in enumerate(guess):
        if out[i] is Letter.CORRECT:
            continue
        if remaining[g] > 0:
            out[i] = Letter.PARTIAL
            remaining[g] -= 1

    return Feedback(tuple(out))
