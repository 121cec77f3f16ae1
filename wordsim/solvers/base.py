from __future__ import annotations
import random
from typing import Dict, List, Optional, Type

from wordsim.engine import FrequencyModel

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


class ExhaustedPool(RuntimeError):
    """The candidate pool is empty; no consistent guess remains."""


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, **options):
        self.N: int = 5
        self.dictionary: List[str] = []
        self.rng = random.Random()
        self.last_score: Optional[float] = None

    def reset(self, *, dictionary: List[str], N: int, seed: int | None = None,
              model: FrequencyModel | None = None) -> None:
        """
        Prepare for a new game. `model` is a shared, read-only frequency model
        for solvers that use one; others ignore it.
        """
        self.dictionary = dictionary
        self.N = int(N)
        self.last_score = None
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        """
        Return the next guess. Raises ExhaustedPool when state["pool"] is empty.
        """
        raise NotImplementedError("Override in subclass")
