from __future__ import annotations
import random
from typing import Dict, Type

import numpy as np

from wordlebot.engine.index import CandidateSet, WordIndex

# ---- Global picker registry ----
REGISTRY: Dict[str, Type["BasePicker"]] = {}


def register(cls: Type["BasePicker"]) -> Type["BasePicker"]:
    """
    Decorator: @register on a picker class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate picker id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that pickers inherit ----
class BasePicker:
    """
    A picker chooses the next guess from the current candidate set.

    It must return a dictionary index whose flag is set in `candidates`;
    guessing a non-candidate would break the solve loop's convergence.
    Pickers hold no per-run state: the run-scoped RNG is passed in.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def pick(self, index: WordIndex, candidates: CandidateSet,
             rng: random.Random) -> int:
        raise NotImplementedError("Override in subclass")

    @staticmethod
    def _tie_break(best: np.ndarray, rng: random.Random) -> int:
        """Uniform choice among equally scored dictionary indices."""
        return int(best[rng.randrange(len(best))])
