"""
Candidate filtering given accumulated feedback.

Facts accumulated across the rounds of one game:
  - fixed[i] : confirmed letter at position i (or None)
  - required : letters known to occur somewhere in the solution (a set)
  - excluded : letters known NOT to occur anywhere in the solution
  - tried    : guesses that were not the solution

A candidate word survives iff it contains no excluded letter, agrees with
every fixed position, contains every required letter, and is not a word
already guessed without success.

Filtering is always applied to the CURRENT pool, never the full dictionary,
so the pool can only shrink over a game. As long as the feedback came from
the true solution, the solution itself is never filtered out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from .oracle import GuessResult, Outcome


@dataclass
class Constraints:
    N: int = 5
    fixed: List[Optional[str]] = field(default_factory=list)
    required: Set[str] = field(default_factory=set)
    excluded: Set[str] = field(default_factory=set)
    tried: Set[str] = field(default_factory=set)   # wrong guesses

    def __post_init__(self):
        if not self.fixed:
            self.fixed = [None] * self.N

    def absorb(self, result: GuessResult) -> None:
        """
        Fold one round's outcomes into the fact sets.

        Required letters are collected for the whole round first: a repeated
        letter that is EXACT/PRESENT in one slot and ABSENT in another (strict
        oracle) is still in the solution and must not be excluded.
        """
        guess = result.guess
        if not result.is_correct:
            self.tried.add(guess)

        for i, (ch, o) in enumerate(zip(guess, result.outcomes)):
            if o is Outcome.EXACT:
                self.fixed[i] = ch
                self.required.add(ch)
            elif o is Outcome.PRESENT:
                self.required.add(ch)

        for ch, o in zip(guess, result.outcomes):
            if o is Outcome.ABSENT and ch not in self.required:
                self.excluded.add(ch)

    def admits(self, word: str) -> bool:
        if word in self.tried:
            return False
        letters = set(word)
        if letters & self.excluded:
            return False
        for i, ch in enumerate(self.fixed):
            if ch is not None and word[i] != ch:
                return False
        # every required letter must appear somewhere
        return len(self.required & letters) >= len(self.required)


def apply(pool: Iterable[str], result: GuessResult,
          constraints: Optional[Constraints] = None) -> List[str]:
    """
    Absorb `result` into `constraints` and return the surviving pool words,
    order preserved.

    Args:
      pool        : current candidate pool
      result      : feedback for the latest guess
      constraints : accumulated facts for this game; mutated in place.
                    Fresh constraints are used when omitted.
    """
    if constraints is None:
        constraints = Constraints(N=len(result.guess))
    constraints.absorb(result)
    return [w for w in pool if constraints.admits(w)]


def filter_candidates(words: Iterable[str], history: Iterable[GuessResult], N: int) -> List[str]:
    """
    Keep only length-N words consistent with every result in `history`.
    """
    c = Constraints(N=N)
    for r in history:
        c.absorb(r)
    return [w for w in words if len(w) == N and c.admits(w)]
