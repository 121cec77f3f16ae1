from __future__ import annotations
import json
from pathlib import Path
from typing import List

from wordsim.engine.validation import is_word, normalize


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_raw_words(p: Path | str) -> List[str]:
    """
    Raw entries of a word list: a JSON array of strings for *.json files,
    otherwise one entry per line.
    """
    p = Path(p)
    if p.suffix.lower() == ".json":
        if not p.exists():
            raise FileNotFoundError(p)
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{p}: expected a JSON array of words")
        return [str(x) for x in data]
    return read_lines(p)


def load_dictionary(p: Path | str, N: int = 5) -> List[str]:
    """
    Load a dictionary: lowercase, drop blanks and malformed entries (wrong
    length or non a-z), de-duplicate keeping first occurrence order.

    Raises:
      FileNotFoundError if the file is missing
      ValueError if no valid word remains
    """
    seen = set()
    words: List[str] = []
    for raw in read_raw_words(p):
        w = normalize(raw)
        if not is_word(w, N) or w in seen:
            continue
        seen.add(w)
        words.append(w)
    if not words:
        raise ValueError(f"{p}: no valid {N}-letter words")
    return words
