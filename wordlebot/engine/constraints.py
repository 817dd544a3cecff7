"""
Candidate narrowing given one (guess, feedback) pair.

Given:
  - a WordIndex (read-only position / frequency masks)
  - a candidate mask owned by the current solve run
  - the guess and the feedback it produced

Narrow the candidate mask in place so that only words consistent with the
feedback survive. Each slot is handled with one or two mask operations:

  Correct   : keep words with the letter at this slot
  Partial   : keep words containing the letter, drop those with it here
  Incorrect : the letter occurs exactly m times in the goal, where m is the
              number of Correct/Partial marks the same letter earned
              elsewhere in this guess. m == 0 drops every word containing
              it; m > 0 drops words with more than m copies, and words
              with the letter at this slot.

The Incorrect case needs the whole feedback row, not just the slot, which is
why m is counted across the guess before any mask is touched.
"""

from __future__ import annotations

from .index import CandidateSet, WordIndex
from .scoring import Feedback, Letter


def _confirmed_count(guess: str, feedback: Feedback, ch: str) -> int:
    """Number of slots where `ch` was marked Correct or Partial."""
    return sum(
        1 for g, state in zip(guess, feedback)
        if g == ch and state is not Letter.INCORRECT
    )


def apply_feedback(index: WordIndex, candidates: CandidateSet, guess: str,
                   feedback: Feedback) -> None:
    """
    Mutate `candidates` so it only holds words consistent with `feedback`.

    The result is always a subset of the input mask, and a goal that
    produced `feedback` is never removed.
    """
    if len(guess) != index.N or len(feedback) != index.N:
        raise ValueError(
            f"guess/feedback length must be {index.N}; got {len(guess)}/{len(feedback)}")

    pos, at_least = index.pos, index.at_least

    for slot, (state, ch) in enumerate(zip(feedback, guess)):
        letter = ord(ch) - ord("a")

        if state is Letter.CORRECT:
            candidates &= pos[slot, letter]
        elif state is Letter.PARTIAL:
            candidates &= at_least[0, letter]
            candidates &= ~pos[slot, letter]
        else:
            m = _confirmed_count(guess, feedback, ch)
            if m > 0:
                # at_least[m] holds words with m+1 or more copies
                candidates &= ~at_least[m, letter]
                candidates &= ~pos[slot, letter]
            else:
                candidates &= ~at_least[0, letter]
