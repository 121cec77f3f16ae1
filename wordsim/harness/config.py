"""
Simulation configuration.

One dataclass holds every knob a batch run understands; the CLI builds it
from argparse, tests build it directly.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Optional

from wordsim.engine.frequency import MODEL_SCOPES
from wordsim.engine.oracle import POLICIES
from wordsim.engine.validation import is_word

DEFAULT_MAX_TRIES = 6
DEFAULT_TRIAL_COUNT = 100_000

SELECTIONS = ("random", "sweep")


@dataclass
class SimulationConfig:
    # Game rules
    max_tries: int = DEFAULT_MAX_TRIES
    N: int = 5

    # Batch size and solution selection
    trial_count: int = DEFAULT_TRIAL_COUNT
    selection: str = "random"   # "random" (uniform, seeded) or "sweep"
    stride: int = 1             # sweep: index = (offset + k * stride) % len(dictionary)
    offset: int = 0
    seed: Optional[int] = None

    # Strategy
    solver: str = "expected_info"
    start_word: Optional[str] = None
    model_scope: str = "trial"
    policy: str = "membership"

    # Execution / output
    workers: int = 1
    average_includes_failures: bool = True
    persist_output: bool = False
    outdir: str = "reports"
    details: bool = False

    def validate(self) -> "SimulationConfig":
        """Raise ValueError on an unusable configuration; returns self."""
        if self.max_tries < 1:
            raise ValueError(f"max_tries must be >= 1; got {self.max_tries}")
        if self.trial_count < 1:
            raise ValueError(f"trial_count must be >= 1; got {self.trial_count}")
        if self.N < 1:
            raise ValueError(f"N must be >= 1; got {self.N}")
        if self.stride < 1:
            raise ValueError(f"stride must be >= 1; got {self.stride}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1; got {self.workers}")
        if self.selection not in SELECTIONS:
            raise ValueError(f"Unknown selection: {self.selection}. Available: {list(SELECTIONS)}")
        if self.model_scope not in MODEL_SCOPES:
            raise ValueError(f"Unknown model scope: {self.model_scope}. Available: {list(MODEL_SCOPES)}")
        if self.policy not in POLICIES:
            raise ValueError(f"Unknown oracle policy: {self.policy}. Available: {list(POLICIES)}")
        if self.start_word is not None and not is_word(self.start_word, self.N):
            raise ValueError(f"start_word must be {self.N} lowercase letters; got {self.start_word!r}")
        return self

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_args(cls, args) -> "SimulationConfig":
        """Build from an argparse namespace (attribute names match fields)."""
        start = getattr(args, "start_word", None)
        return cls(
            max_tries=args.max_tries,
            N=args.N,
            trial_count=args.trials,
            selection=args.selection,
            stride=args.stride,
            offset=args.offset,
            seed=args.seed,
            solver=args.solver,
            start_word=start.strip().lower() if start else None,
            model_scope=args.model_scope,
            policy=args.policy,
            workers=args.workers,
            average_includes_failures=not args.exclude_failures,
            persist_output=args.persist,
            outdir=args.outdir,
            details=args.details,
        )
