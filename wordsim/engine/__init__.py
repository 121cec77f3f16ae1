from .oracle import Oracle, Outcome, GuessResult, LengthMismatch, evaluate
from .frequency import FrequencyModel, ALPHABET
from .constraints import Constraints, apply, filter_candidates
from .validation import is_word, normalize

__all__ = [
    "Oracle", "Outcome", "GuessResult", "LengthMismatch", "evaluate",
    "FrequencyModel", "ALPHABET",
    "Constraints", "apply", "filter_candidates",
    "is_word", "normalize",
]
