from __future__ import annotations
from typing import List
from .base import BaseSolver, ExhaustedPool, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import expected_info  # noqa: F401
from .expected_info import select_guess, score_table, probe_counts


def create_solver(solver_id: str, **options) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id. Options the solver
    does not use are ignored.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "ExhaustedPool", "REGISTRY", "register",
    "create_solver", "get_solver_ids",
    "select_guess", "score_table", "probe_counts",
]
