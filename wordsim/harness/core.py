"""
Experiment harness core primitives.

- run_case:  play one game (one hidden solution) with a given solver until it
             is solved or the round limit is reached.
- run_batch: choose many solutions, play each one, aggregate an attempts
             histogram. Optionally fans trials out over worker processes.

Game loop per case:

    AwaitingGuess -> GuessSubmitted -> Solved
                                    -> PoolUpdated -> AwaitingGuess ...
    ... -> RoundLimitReached

An empty pool while choosing a guess ends the case as EXHAUSTED. It is an
explicit result, recorded as a failure (attempt 0), never converted into a
round-limit loss. LengthMismatch from the oracle is a caller bug and
propagates.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import math
import multiprocessing as mp
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from wordsim.engine import Constraints, FrequencyModel, Oracle, apply
from wordsim.solvers import BaseSolver, ExhaustedPool, create_solver
from .config import SimulationConfig
from .histogram import AttemptsHistogram

logger = logging.getLogger(__name__)


class Status(Enum):
    SOLVED = "solved"
    ROUND_LIMIT = "round_limit"
    EXHAUSTED = "exhausted"


@dataclass
class CaseResult:
    solution: str
    status: Status
    attempts: int                      # 1..max_tries when solved, else 0
    history: List[Tuple[str, str]] = field(default_factory=list)  # (guess, pattern)
    time_ms: float = 0.0
    solver_id: str = "?"

    @property
    def success(self) -> bool:
        return self.status is Status.SOLVED


@dataclass
class BatchResult:
    histogram: AttemptsHistogram
    results: List[CaseResult]


def run_case(
        solver: BaseSolver,
        solution: str,
        *,
        dictionary: Sequence[str],
        N: int = 5,
        max_tries: int = 6,
        start_word: str | None = None,
        seed: int | None = None,
        policy: str = "membership",
        model: FrequencyModel | None = None,
) -> CaseResult:
    """
    Execute one game until the solver wins or the round budget is spent.

    Args:
        solver:      a BaseSolver implementing next_guess(state)
        solution:    the hidden word for this case
        dictionary:  full word list; the pool starts as a copy of it
        N:           word length
        max_tries:   round limit
        start_word:  forced first guess (skips the solver on round 1)
        seed:        RNG seed for solvers with random tie-breaks
        policy:      oracle letter-accounting policy
        model:       shared frequency model (for "batch" model scope)
    """
    solver.reset(dictionary=list(dictionary), N=N, seed=seed, model=model)
    oracle = Oracle(solution, policy=policy)
    constraints = Constraints(N=N)
    pool = [w for w in dictionary if len(w) == N]
    history: List[Tuple[str, str]] = []

    t0 = time.perf_counter()

    def _done(status: Status, attempts: int) -> CaseResult:
        return CaseResult(
            solution=solution, status=status, attempts=attempts, history=history,
            time_ms=(time.perf_counter() - t0) * 1000.0, solver_id=solver.id,
        )

    for rnd in range(1, max_tries + 1):
        # AwaitingGuess
        if rnd == 1 and start_word:
            guess = start_word
        else:
            state = {
                "round": rnd,
                "N": N,
                "pool": pool,
                "dictionary": dictionary,
                "history": list(history),
            }
            try:
                guess = solver.next_guess(state)
            except ExhaustedPool as e:
                logger.warning("solution %r: %s", solution, e)
                return _done(Status.EXHAUSTED, 0)

        # GuessSubmitted
        result = oracle.evaluate(guess)
        history.append((guess, result.pattern))
        if result.is_correct:
            logger.debug("solution %r solved in %d", solution, rnd)
            return _done(Status.SOLVED, rnd)

        # PoolUpdated
        pool = apply(pool, result, constraints)
        logger.debug("round %d: %s %s -> %d candidates", rnd, guess, result.pattern, len(pool))

    logger.debug("solution %r not found after %d tries", solution, max_tries)
    return _done(Status.ROUND_LIMIT, 0)


def choose_solutions(dictionary: Sequence[str], config: SimulationConfig,
                     rng: random.Random | None = None) -> List[str]:
    """
    Draw config.trial_count solutions up front.

    "random": uniform with replacement from `rng` (seeded from config.seed
              when not injected).
    "sweep":  index (offset + k * stride) mod len(dictionary), k = 0, 1, ...
              Only len(dictionary) / gcd(len(dictionary), stride) distinct words
              are visited; a stride sharing a factor with the dictionary size
              repeats a subset, which is logged as a warning.
    """
    if not dictionary:
        raise ValueError("dictionary is empty")
    n = len(dictionary)
    if config.selection == "sweep":
        reach = n // math.gcd(n, config.stride)
        if reach < n and config.trial_count > reach:
            logger.warning("sweep stride %d shares a factor with %d words: only %d distinct "
                           "solutions are visited", config.stride, n, reach)
        return [dictionary[(config.offset + k * config.stride) % n]
                for k in range(config.trial_count)]
    rng = rng or random.Random(config.seed)
    return [dictionary[rng.randrange(n)] for _ in range(config.trial_count)]


def _case_seed(config: SimulationConfig, idx: int) -> int | None:
    # Derived per case so runs are reproducible but not identical across cases
    return None if config.seed is None else config.seed + idx


def _run_chunk(payload) -> List[Tuple[int, CaseResult]]:
    """Worker entry point: play a slice of (index, solution) pairs."""
    chunk, dictionary, config, model = payload
    solver = create_solver(config.solver, model_scope=config.model_scope)
    out = []
    for idx, solution in chunk:
        r = run_case(
            solver, solution, dictionary=dictionary, N=config.N,
            max_tries=config.max_tries, start_word=config.start_word,
            seed=_case_seed(config, idx), policy=config.policy, model=model,
        )
        out.append((idx, r))
    return out


def _chunks(items: List, size: int) -> List[List]:
    return [items[i:i + size] for i in range(0, len(items), size)]


def run_batch(
        dictionary: Sequence[str],
        config: SimulationConfig,
        *,
        rng: random.Random | None = None,
        progress: Optional[Callable[[int], None]] = None,
        chunk_size: int = 64,
) -> BatchResult:
    """
    Play config.trial_count games and aggregate their attempt counts.

    Solutions are drawn before any game starts, and each game owns its own
    oracle, pool and constraints, so the histogram depends only on the
    dictionary, the config and `rng`, not on worker scheduling.

    Args:
        dictionary: well-formed word list (all length config.N)
        config:     validated SimulationConfig
        rng:        injectable randomness for solution selection
        progress:   optional callback receiving the number of games finished
        chunk_size: games per task when config.workers > 1
    """
    config.validate()
    dictionary = list(dictionary)
    solutions = choose_solutions(dictionary, config, rng)
    indexed = list(enumerate(solutions, start=1))

    model = None
    if config.model_scope == "batch":
        model = FrequencyModel.build(dictionary, config.N)

    logger.info("running %d games with %s (workers=%d, model_scope=%s, policy=%s)",
                len(indexed), config.solver, config.workers, config.model_scope, config.policy)

    payloads = [(c, dictionary, config, model) for c in _chunks(indexed, max(1, chunk_size))]
    collected: List[Tuple[int, CaseResult]] = []

    if config.workers > 1:
        with mp.Pool(processes=config.workers) as pool:
            for part in pool.imap_unordered(_run_chunk, payloads):
                collected.extend(part)
                if progress:
                    progress(len(part))
    else:
        for payload in payloads:
            part = _run_chunk(payload)
            collected.extend(part)
            if progress:
                progress(len(part))

    collected.sort(key=lambda t: t[0])
    results = [r for _, r in collected]

    hist = AttemptsHistogram(config.max_tries)
    hist.update(r.attempts for r in results)

    exhausted = sum(1 for r in results if r.status is Status.EXHAUSTED)
    if exhausted:
        logger.warning("%d game(s) ended with an exhausted pool", exhausted)
    return BatchResult(histogram=hist, results=results)
