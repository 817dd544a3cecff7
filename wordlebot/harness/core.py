"""
Experiment harness core primitives.

- run_case:  solve a single goal with a given picker.
- run_batch: solve many goals in sequence (optionally a sample prefix).

A goal that cannot be reached is reported as a failed row instead of an
exception, so one bad goal never aborts a batch.
"""

from __future__ import annotations
import random
import time
from typing import Dict, Iterable, List

from wordlebot.engine import WordIndex, NotFound, SingletonMismatch, solve
from wordlebot.pickers import DEFAULT_PICKER, create_picker


def run_case(
        index: WordIndex,
        goal: str,
        *,
        picker_id: str = DEFAULT_PICKER,
        seed: int | None = None,
) -> Dict:
    """
    Solve one goal and summarise the run.

    Args:
        index:      prebuilt WordIndex (shared across cases)
        goal:       the hidden word for this case
        picker_id:  registered picker id
        seed:       RNG seed to make picks reproducible

    Returns:
        dict with keys:
            answer (str), picker_id (str), success (bool), guesses (int),
            time_ms (float), history (list[(word, pattern, pool)]),
            error (None | "exhausted" | "singleton_mismatch")
    """
    picker = create_picker(picker_id)
    rng = random.Random(seed)

    history: List[tuple] = []
    error = None

    t0 = time.perf_counter()
    try:
        trace = solve(index, goal, rng=rng, picker=picker)
        history = [(r.word, r.feedback.pattern, r.pool) for r in trace]
    except SingletonMismatch:
        error = "singleton_mismatch"
    except NotFound:
        error = "exhausted"
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": goal,
        "picker_id": picker_id,
        "success": error is None,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "error": error,
    }


def run_batch(
        index: WordIndex,
        goals: Iterable[str],
        *,
        picker_id: str = DEFAULT_PICKER,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K goals
    are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = list(goals)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, goal in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(index, goal, picker_id=picker_id, seed=case_seed))
    return out
