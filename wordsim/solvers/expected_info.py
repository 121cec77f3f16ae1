"""
Expected-information guess selector.

Idea:
  For every (letter, pos) pair estimate the size of the pool left over if
  that letter were guessed at that position:

      score(l, p) = P(exact) * |pool if l fixed at p|
                  + P(present elsewhere) * |pool if l required|
                  + P(absent) * |pool if l excluded|

  with probabilities read from a FrequencyModel and the pool sizes probed on
  the CURRENT pool, one isolated fact at a time (the real pool is untouched).

  The 26 x N score table is computed once per round. A pool word's rank is
  the sum of its letters' scores at their positions; the lowest rank wins,
  first-encountered on ties. Greedy one-step lookahead, deterministic for a
  fixed (pool, model).

Model scope (how fresh the letter statistics are):
  - "batch": one model shared by every game of the run (passed to reset)
  - "trial": built from the dictionary at reset, reused every round
  - "round": rebuilt from the dictionary before every guess
  - "pool" : rebuilt from the current pool before every guess
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from wordsim.engine import FrequencyModel
from wordsim.engine.frequency import MODEL_SCOPES
from .base import BaseSolver, ExhaustedPool, register

logger = logging.getLogger(__name__)


def _encode(pool: Sequence[str], N: int) -> np.ndarray:
    """(len(pool), N) array of letter indices 0..25."""
    raw = np.frombuffer("".join(pool).encode("ascii"), dtype=np.uint8)
    return (raw.astype(np.int64) - 97).reshape(len(pool), N)


def probe_counts(pool: Sequence[str], N: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Pool sizes after an isolated EXACT / PRESENT / ABSENT observation for
    every (letter, pos). Each array has shape (26, N), indexed [letter, pos].
    """
    P = len(pool)
    exact = np.zeros((26, N), dtype=np.int64)
    if P == 0:
        return exact, exact.copy(), exact.copy()

    codes = _encode(pool, N)
    for pos in range(N):
        exact[:, pos] = np.bincount(codes[:, pos], minlength=26)

    contains = np.zeros((P, 26), dtype=bool)
    contains[np.arange(P)[:, None], codes] = True
    n_with = contains.sum(axis=0)  # (26,)

    present = np.repeat(n_with[:, None], N, axis=1)
    absent = P - present
    return exact, present, absent


def score_table(pool: Sequence[str], model: FrequencyModel) -> np.ndarray:
    """Expected remaining pool size per (letter, pos); shape (26, N)."""
    N = model.N
    impact_exact, impact_present, impact_absent = probe_counts(pool, N)
    p_exact, p_present, p_absent = model.probability_tables()
    return p_exact * impact_exact + p_present * impact_present + p_absent * impact_absent


def select_guess(pool: Sequence[str], model: FrequencyModel) -> Tuple[str, float]:
    """
    Pick the pool word with the lowest summed score.

    Raises:
      ExhaustedPool if `pool` is empty.
    """
    if not pool:
        raise ExhaustedPool("candidate pool is empty")
    N = model.N
    table = score_table(pool, model)
    codes = _encode(pool, N)
    ranks = table[codes, np.arange(N)].sum(axis=1)
    best = int(np.argmin(ranks))  # argmin returns the first minimum
    return pool[best], float(ranks[best])


@register
class ExpectedInfoSolver(BaseSolver):
    id = "expected_info"
    name = "Expected Remaining Pool (per-letter)"
    version = "1.0.0"

    def __init__(self, model_scope: str = "trial", **options):
        super().__init__(**options)
        if model_scope not in MODEL_SCOPES:
            raise ValueError(f"Unknown model scope: {model_scope}. Available: {list(MODEL_SCOPES)}")
        self.model_scope = model_scope
        self.model: FrequencyModel | None = None

    def reset(self, *, dictionary: List[str], N: int, seed: int | None = None,
              model: FrequencyModel | None = None) -> None:
        super().reset(dictionary=dictionary, N=N, seed=seed, model=model)
        if self.model_scope == "batch" and model is not None:
            self.model = model
        elif self.model_scope in ("batch", "trial"):
            self.model = FrequencyModel.build(dictionary, N)
        else:
            self.model = None  # built per round

    def _model_for(self, state: dict) -> FrequencyModel:
        if self.model_scope == "round":
            return FrequencyModel.build(state["dictionary"], self.N)
        if self.model_scope == "pool":
            return FrequencyModel.build(state["pool"], self.N)
        if self.model is None:
            raise RuntimeError("reset() must be called before next_guess()")
        return self.model

    def next_guess(self, state: dict) -> str:
        pool: List[str] = state["pool"]
        if not pool:
            raise ExhaustedPool(f"candidate pool is empty at round {state.get('round')}")
        guess, score = select_guess(pool, self._model_for(state))
        self.last_score = score
        logger.debug("round %s: %s (expected pool %.3f) from %d candidates",
                     state.get("round"), guess, score, len(pool))
        return guess
