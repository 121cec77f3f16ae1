"""
Word-shape validation.

A well-formed word is a lowercase a-z string of exact length N. The core
assumes every dictionary word is well-formed; these checks run at the load
boundary (datasets) and on user-supplied words such as a forced start word.
"""

import re

_WORD_RE = re.compile(r"[a-z]+")


def is_word(word, N: int) -> bool:
    """Return True if `word` is a lowercase a-z string of length N."""
    if not isinstance(word, str):
        return False
    return len(word) == N and _WORD_RE.fullmatch(word) is not None


def normalize(word: str) -> str:
    return word.strip().lower()
