"""Domain errors raised by the solve loop."""

from __future__ import annotations


class NotFound(LookupError):
    """The goal could not be reached with the loaded dictionary."""

    def __init__(self, goal: str, message: str):
        super().__init__(message)
        self.goal = goal


class CandidatesExhausted(NotFound):
    """Every candidate was eliminated; the goal is not in the dictionary."""

    def __init__(self, goal: str):
        super().__init__(goal, f"no candidates left for goal {goal!r}")


class SingletonMismatch(NotFound):
    """
    One candidate is left but it is not the goal.

    Normally this means the goal is absent from the dictionary; it is kept
    apart from CandidatesExhausted so an index inconsistency stays visible.
    """

    def __init__(self, goal: str, leftover: str):
        super().__init__(goal, f"single candidate {leftover!r} left, expected {goal!r}")
        self.leftover = leftover
