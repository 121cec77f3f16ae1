"""
Per-position letter frequency model.

For each position 0..N-1, count how often every letter a-z occurs at that
position across a word collection. `total` is the number of letter slots
examined (len(words) * N), so probabilities are taken over ALL slots, not
per position.

The count table is a numpy array of shape (N, 26) frozen after construction;
a model is shared read-only by whoever selects guesses with it.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Model rebuild policies (see ExpectedInfoSolver)
MODEL_SCOPES = ("batch", "trial", "round", "pool")


def letter_index(ch: str) -> int:
    return ord(ch) - 97


class FrequencyModel:
    def __init__(self, counts: np.ndarray, total: int):
        counts = np.array(counts, dtype=np.int64)
        counts.setflags(write=False)
        self._counts = counts
        self._total = int(total)

    @classmethod
    def build(cls, words: Iterable[str], N: int = 5) -> "FrequencyModel":
        """
        Count letters per position. O(len(words) * N).

        Words of the wrong length are a caller bug; they are skipped rather than
        partially counted so `total` stays consistent with the table.
        """
        counts = np.zeros((N, 26), dtype=np.int64)
        total = 0
        for w in words:
            if len(w) != N:
                continue
            for i, ch in enumerate(w):
                counts[i, letter_index(ch)] += 1
            total += N
        return cls(counts, total)

    @property
    def N(self) -> int:
        return self._counts.shape[0]

    @property
    def total(self) -> int:
        return self._total

    @property
    def counts(self) -> np.ndarray:
        """Read-only (N, 26) count table."""
        return self._counts

    def count(self, letter: str, pos: int) -> int:
        return int(self._counts[pos, letter_index(letter)])

    def elsewhere(self, letter: str, pos: int) -> int:
        """Occurrences of `letter` at every position other than `pos`."""
        col = self._counts[:, letter_index(letter)]
        return int(col.sum() - col[pos])

    def p_exact(self, letter: str, pos: int) -> float:
        if not self._total:
            return 0.0
        return self.count(letter, pos) / self._total

    def p_present_elsewhere(self, letter: str, pos: int) -> float:
        if not self._total:
            return 0.0
        return self.elsewhere(letter, pos) / self._total

    def p_absent(self, letter: str, pos: int) -> float:
        return 1.0 - self.p_exact(letter, pos) - self.p_present_elsewhere(letter, pos)

    def probability_tables(self):
        """
        Vectorised (26, N) arrays (p_exact, p_present_elsewhere, p_absent),
        indexed [letter, pos].
        """
        c = self._counts.T.astype(float)  # (26, N)
        if not self._total:
            zeros = np.zeros_like(c)
            return zeros, zeros.copy(), np.ones_like(c)
        p_exact = c / self._total
        p_present = (c.sum(axis=1, keepdims=True) - c) / self._total
        p_absent = 1.0 - p_exact - p_present
        return p_exact, p_present, p_absent

    def __reduce__(self):
        # re-run __init__ on unpickle so worker copies stay read-only
        return (FrequencyModel, (np.array(self._counts), self._total))

    def __eq__(self, other) -> bool:
        if not isinstance(other, FrequencyModel):
            return NotImplemented
        return self._total == other._total and np.array_equal(self._counts, other._counts)

    def __repr__(self) -> str:
        return f"FrequencyModel(N={self.N}, total={self._total})"
