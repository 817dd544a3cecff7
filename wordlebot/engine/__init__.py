from .scoring import Letter, Feedback, evaluate
from .index import Dictionary, WordIndex, build_index, WORD_LENGTH
from .constraints import apply_feedback
from .errors import NotFound, CandidatesExhausted, SingletonMismatch
from .solve import GuessRecord, solve

__all__ = [
    "Letter", "Feedback", "evaluate",
    "Dictionary", "WordIndex", "build_index", "WORD_LENGTH",
    "apply_feedback",
    "NotFound", "CandidatesExhausted", "SingletonMismatch",
    "GuessRecord", "solve",
]
