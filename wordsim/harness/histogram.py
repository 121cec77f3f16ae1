"""
Attempts histogram: attempt count -> number of games.

Bucket 0 holds failures (round limit reached or pool exhausted); buckets
1..max_tries hold games solved on that attempt. Merging is counter addition,
so partial histograms from independent workers combine in any order.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List


class AttemptsHistogram:
    def __init__(self, max_tries: int, counts: Dict[int, int] | None = None):
        self.max_tries = int(max_tries)
        self._counts: Counter = Counter()
        for attempts, n in (counts or {}).items():
            self.record(attempts, n)

    def record(self, attempts: int, n: int = 1) -> None:
        if not 0 <= attempts <= self.max_tries:
            raise ValueError(f"attempts must be in 0..{self.max_tries}; got {attempts}")
        self._counts[attempts] += n

    def update(self, attempts: Iterable[int]) -> None:
        for a in attempts:
            self.record(a)

    def merge(self, other: "AttemptsHistogram") -> "AttemptsHistogram":
        if other.max_tries != self.max_tries:
            raise ValueError("cannot merge histograms with different max_tries")
        self._counts.update(other._counts)
        return self

    def __getitem__(self, attempts: int) -> int:
        return self._counts.get(attempts, 0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AttemptsHistogram):
            return NotImplemented
        return self.max_tries == other.max_tries and self.counts() == other.counts()

    def counts(self) -> Dict[int, int]:
        """Dense {attempts: count} for 0..max_tries."""
        return {a: self._counts.get(a, 0) for a in range(self.max_tries + 1)}

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    @property
    def failures(self) -> int:
        return self._counts.get(0, 0)

    def average(self, include_failures: bool = True) -> float:
        """
        Weighted average attempts. Failures (bucket 0) never add to the
        numerator; they count in the denominator only if include_failures.
        """
        weighted = sum(a * n for a, n in self._counts.items())
        denom = self.total if include_failures else self.total - self.failures
        return weighted / denom if denom else 0.0

    def header(self) -> List[int]:
        return list(range(self.max_tries + 1))

    def row(self) -> List[int]:
        return [self[a] for a in self.header()]

    def __repr__(self) -> str:
        return f"AttemptsHistogram(max_tries={self.max_tries}, counts={self.counts()})"
