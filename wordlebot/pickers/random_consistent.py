"""
Random Consistent picker.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (the RNG is run-scoped).
  - This is the default policy of the solve loop; it does not try to
    maximize information gain or positional coverage.
"""

from __future__ import annotations

import random

import numpy as np

from wordlebot.engine.index import CandidateSet, WordIndex
from .base import BasePicker, register


@register
class RandomConsistentPicker(BasePicker):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def pick(self, index: WordIndex, candidates: CandidateSet,
             rng: random.Random) -> int:
        members = np.flatnonzero(candidates)
        if len(members) == 0:
            raise ValueError("cannot pick from an empty candidate set")

        # select-nth over the set bits
        return int(members[rng.randrange(len(members))])
