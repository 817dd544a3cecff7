"""
Letter-Frequency picker (distinct-letter coverage).

Idea:
  - For every letter, count how many CURRENT candidates contain it. The
    counts come straight from the frequency index: |candidates & at_least[0, l]|.
  - Score each candidate as the sum of its DISTINCT letters' counts.
  - Pick the max; break ties with the run RNG.

Why it works:
  - Early turns: favors words built from common letters, so any feedback
    splits the pool well.
  - Later turns: counts reflect the constraints; top word tends to fit.
"""

from __future__ import annotations

import random

import numpy as np

from wordlebot.engine.index import CandidateSet, WordIndex
from .base import BasePicker, register


@register
class LetterFreqPicker(BasePicker):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def pick(self, index: WordIndex, candidates: CandidateSet,
             rng: random.Random) -> int:
        members = np.flatnonzero(candidates)
        if len(members) == 0:
            raise ValueError("cannot pick from an empty candidate set")

        # counts[l] = candidates containing letter l at least once
        present = index.at_least[0][:, members]  # (26, |members|)
        counts = present.sum(axis=1)

        # Each letter counts once per word, so duplicates earn nothing extra.
        scores = counts @ present
        best = members[scores == scores.max()]
        return self._tie_break(best, rng)
