"""
Solve loop: guess, score, narrow, repeat.

Starting from every dictionary word as a candidate, ask a picker for a
guess, evaluate it against the goal, record (guess, feedback, pool size
before the guess) and narrow the candidate mask. Stops when:

  - one candidate is left and it is the goal -> return the trace
  - one candidate is left and it is not      -> SingletonMismatch
  - nothing is left                          -> CandidatesExhausted

Each guess is a member of the candidate set and every non-goal guess
eliminates itself, so the loop runs at most W times for W words.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .constraints import apply_feedback
from .errors import CandidatesExhausted, SingletonMismatch
from .index import WordIndex
from .scoring import Feedback, evaluate

log = logging.getLogger(__name__)


def _pick_uniform(index: WordIndex, candidates: np.ndarray, rng: random.Random) -> int:
    members = np.flatnonzero(candidates)
    return int(members[rng.randrange(len(members))])


@dataclass(frozen=True)
class GuessRecord:
    """One step of a solve run."""
    word: str
    feedback: Feedback
    pool: int  # candidates remaining before this guess


def solve(index: WordIndex, goal: str, *, rng: Optional[random.Random] = None,
          picker=None) -> List[GuessRecord]:
    """
    Run the elimination loop for `goal` and return the guess trace.

    Args:
      index  : prebuilt WordIndex (shared, never mutated)
      goal   : hidden word, same length as the dictionary words
      rng    : run-scoped random source; a fresh unseeded one if omitted
      picker : object with pick(index, candidates, rng) -> int;
               defaults to a uniform pick among the candidates

    Raises:
      CandidatesExhausted / SingletonMismatch (both NotFound) when the goal
      cannot be reached with this dictionary.
    """
    if len(goal) != index.N:
        raise ValueError(f"goal must have length {index.N}; got {goal!r}")

    if rng is None:
        rng = random.Random()
    pick = picker.pick if picker is not None else _pick_uniform

    candidates = index.full()
    trace: List[GuessRecord] = []

    while True:
        pool = int(np.count_nonzero(candidates))

        if pool == 0:
            log.debug("goal %r: candidates exhausted after %d guesses", goal, len(trace))
            raise CandidatesExhausted(goal)

        if pool == 1:
            word = index.dictionary[int(np.flatnonzero(candidates)[0])]
            if word != goal:
                log.debug("goal %r: single candidate %r left", goal, word)
                raise SingletonMismatch(goal, word)
            # don't repeat the goal if it was the last guess already
            if not trace or trace[-1].word != goal:
                trace.append(GuessRecord(word, Feedback.correct(index.N), pool))
            return trace

        word = index.dictionary[pick(index, candidates, rng)]
        feedback = evaluate(word, goal)
        trace.append(GuessRecord(word, feedback, pool))
        log.debug("guess %s %s pool=%d", word, feedback.pattern, pool)

        apply_feedback(index, candidates, word, feedback)
