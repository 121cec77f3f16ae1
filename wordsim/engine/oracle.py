"""
Feedback oracle: scores a guess against one fixed hidden solution.

Outcome per position:
  - EXACT   : letter matches the solution at that index     ('G')
  - PRESENT : letter occurs in the solution, not confirmed here ('Y')
  - ABSENT  : letter does not occur in the solution          ('-')

Two letter-accounting policies are available and must be chosen explicitly:

  "membership" (default)
      PRESENT iff the letter is a member of the solution's letter SET.
      No duplicate accounting: guessing "eerie" against "crane" marks every
      non-exact 'e' as PRESENT.

  "strict"
      Two-pass rule common in this game family. Pass 1 marks exact matches and
      counts the solution letters left unmatched; pass 2 marks PRESENT only
      while that letter still has remaining count.

The oracle is pure: evaluate() depends only on (solution, guess).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

POLICIES = ("membership", "strict")


class LengthMismatch(ValueError):
    """Guess and solution lengths differ."""


class Outcome(Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"


@dataclass(frozen=True)
class GuessResult:
    guess: str
    is_correct: bool
    outcomes: Tuple[Outcome, ...]

    @property
    def pattern(self) -> str:
        """Compact 'G'/'Y'/'-' rendering, e.g. '-YYYG'."""
        return "".join(o.value for o in self.outcomes)


def _membership(guess: str, solution: str) -> List[Outcome]:
    letters = set(solution)
    out: List[Outcome] = []
    for g, s in zip(guess, solution):
        if g == s:
            out.append(Outcome.EXACT)
        elif g in letters:
            out.append(Outcome.PRESENT)
        else:
            out.append(Outcome.ABSENT)
    return out


def _strict(guess: str, solution: str) -> List[Outcome]:
    out = [Outcome.ABSENT] * len(guess)

    # Pass 1: exact matches, and leftover solution letters
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, solution)):
        if g == s:
            out[i] = Outcome.EXACT
        else:
            remaining[s] += 1

    # Pass 2: PRESENT only while the letter still has availability
    for i, g in enumerate(guess):
        if out[i] is Outcome.EXACT:
            continue
        if remaining[g] > 0:
            out[i] = Outcome.PRESENT
            remaining[g] -= 1

    return out


class Oracle:
    """Holds one secret solution and answers guesses about it."""

    def __init__(self, solution: str, policy: str = "membership"):
        if policy not in POLICIES:
            raise ValueError(f"Unknown oracle policy: {policy}. Available: {list(POLICIES)}")
        self._solution = solution
        self._policy = policy

    @property
    def length(self) -> int:
        return len(self._solution)

    @property
    def policy(self) -> str:
        return self._policy

    def evaluate(self, guess: str) -> GuessResult:
        """
        Score `guess` against the solution.

        Raises:
          LengthMismatch if len(guess) != len(solution).
        """
        if len(guess) != len(self._solution):
            raise LengthMismatch(
                f"length does not match, expected {len(self._solution)} letters, got {len(guess)} ({guess!r})"
            )
        if self._policy == "strict":
            outcomes = _strict(guess, self._solution)
        else:
            outcomes = _membership(guess, self._solution)
        return GuessResult(guess=guess, is_correct=guess == self._solution, outcomes=tuple(outcomes))


def evaluate(guess: str, solution: str, policy: str = "membership") -> GuessResult:
    """One-shot helper: Oracle(solution, policy).evaluate(guess)."""
    return Oracle(solution, policy=policy).evaluate(guess)
