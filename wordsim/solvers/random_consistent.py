"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Baseline for comparing the expected-information selector; it makes no
    attempt to shrink the pool faster.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, ExhaustedPool, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any pool word uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "pool":       current consistent candidates (List[str])
                - "dictionary": full word list
                - "round":      1-based round number

        Raises:
            ExhaustedPool if the pool is empty.
        """
        pool: List[str] = state["pool"]
        if not pool:
            raise ExhaustedPool(f"candidate pool is empty at round {state.get('round')}")
        return pool[self.rng.randrange(len(pool))]
