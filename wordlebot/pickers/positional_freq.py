"""
Positional Letter Frequency (PLF) picker.

Idea:
  Per-slot histograms over the CURRENT candidate set, read from the
  position index: counts[s, l] = |candidates & pos[s, l]|.
  Score each candidate by sum(counts[s][word[s]]) across slots, minus a
  small penalty per repeated letter to keep coverage early.
"""

from __future__ import annotations

import random

import numpy as np

from wordlebot.engine.index import CandidateSet, WordIndex
from .base import BasePicker, register


@register
class PositionalFreqPicker(BasePicker):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "1.0.0"

    DUPLICATE_PENALTY = 0.25  # subtract this per repeated letter instance beyond the first

    def pick(self, index: WordIndex, candidates: CandidateSet,
             rng: random.Random) -> int:
        members = np.flatnonzero(candidates)
        if len(members) == 0:
            raise ValueError("cannot pick from an empty candidate set")

        at_slot = index.pos[:, :, members].astype(np.int64)  # (N, 26, |members|)
        counts = at_slot.sum(axis=2)                          # (N, 26)

        # sum over slots of counts[s, word[s]]
        scores = np.einsum("sl,slw->w", counts, at_slot).astype(float)

        # repeated letters: total letters minus distinct letters
        distinct = index.at_least[0][:, members].sum(axis=0)
        scores -= self.DUPLICATE_PENALTY * (index.N - distinct)

        best = members[scores == scores.max()]
        return self._tie_break(best, rng)
