"""
Dictionary and precomputed membership index.

Given a dictionary of W words of length N, build two families of boolean
masks (numpy arrays of length W, one flag per dictionary index):

  - pos[s, l]      : words with letter l at slot s
  - at_least[k, l] : words containing letter l at least k+1 times

Both arrays have shape (N, 26, W) and are marked read-only after the build,
so one index can back any number of solve runs. A candidate set is just
another boolean mask of length W, owned by the run that created it.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

ALPHABET_SIZE = 26
WORD_LENGTH = 5

# Candidate sets are plain boolean masks over dictionary indices.
CandidateSet = np.ndarray


class Dictionary:
    """Ordered, immutable word list; a word's index is its position."""

    def __init__(self, words: Iterable[str]):
        words = tuple(words)
        if not words:
            raise ValueError("dictionary must contain at least one word")

        n = len(words[0])
        seen = set()
        for w in words:
            if len(w) != n:
                raise ValueError(f"word {w!r} has length {len(w)}, expected {n}")
            if not (w.isascii() and w.isalpha() and w.islower()):
                raise ValueError(f"word {w!r} must be lowercase a-z only")
            if w in seen:
                raise ValueError(f"duplicate word {w!r}")
            seen.add(w)

        self._words: Tuple[str, ...] = words
        self._lookup = {w: i for i, w in enumerate(words)}
        self.N = n

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def index_of(self, word: str) -> int:
        """Position of `word`; raises KeyError if it is not in the dictionary."""
        return self._lookup[word]

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def codes(self) -> np.ndarray:
        """(W, N) array of letter codes, 0 for 'a' through 25 for 'z'."""
        raw = np.frombuffer("".join(self._words).encode("ascii"), dtype=np.uint8)
        return (raw.reshape(len(self._words), self.N) - ord("a")).astype(np.intp)


class WordIndex:
    """Position and frequency masks for one Dictionary."""

    def __init__(self, dictionary: Dictionary, pos: np.ndarray, at_least: np.ndarray):
        self.dictionary = dictionary
        self.pos = pos
        self.at_least = at_least

    @property
    def N(self) -> int:
        return self.dictionary.N

    @property
    def size(self) -> int:
        return len(self.dictionary)

    def full(self) -> CandidateSet:
        """Fresh candidate set holding every dictionary index."""
        return np.ones(self.size, dtype=bool)

    def words_of(self, candidates: CandidateSet) -> List[str]:
        return [self.dictionary[i] for i in np.flatnonzero(candidates)]


def _frozen(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a


def build_index(dictionary: Dictionary | Sequence[str]) -> WordIndex:
    """
    Precompute the position and frequency masks for `dictionary`.

    This is O(N * 26 * W) work done once per process, vectorised over the
    word axis so the cost is dominated by numpy comparisons.
    """
    if not isinstance(dictionary, Dictionary):
        dictionary = Dictionary(dictionary)

    N = dictionary.N
    codes = dictionary.codes()  # (W, N)
    letters = np.arange(ALPHABET_SIZE)

    # pos[s, l, w] = codes[w, s] == l
    pos = codes.T[:, None, :] == letters[None, :, None]

    # counts[l, w] = occurrences of letter l in word w
    counts = pos.sum(axis=0)

    # at_least[k, l, w] = counts[l, w] >= k + 1
    thresholds = np.arange(1, N + 1)
    at_least = counts[None, :, :] >= thresholds[:, None, None]

    return WordIndex(dictionary, _frozen(np.ascontiguousarray(pos)), _frozen(at_least))
