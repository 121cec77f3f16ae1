"""
Dictionary validator for wordsim.

What this module does:
- Validate a dictionary file (one word per line, or a JSON array).
- Enforce formatting rules (a–z only after lowercasing, exact length N).
- Detect duplicates and invalid entries; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordsim.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "data/dictionary.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .io import read_raw_words
from wordsim.engine.validation import is_word, normalize


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid entries encountered


@dataclass
class ValidationReport:
    """Top-level validation result for one dictionary."""
    N: int
    dictionary: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load entries and validate them.

    Rules:
      - a–z only after normalising (whitespace stripped, lowercased),
        the same rule load_dictionary applies
      - must have exact length N
      - empty/whitespace-only entries are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    for raw in read_raw_words(path):
        w = normalize(raw)
        if is_word(w, N):
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate a dictionary for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - `passed` boolean (strict: requires non-empty and no invalids)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = ValidationReport(
            N=N,
            dictionary=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if report.count != report.unique_count:
        issues.append("dictionary contains duplicate words")

    rep = ValidationReport(
        N=N,
        dictionary=report,
        passed=report.count > 0 and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | dictionary=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (d.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | dictionary={d['count']} (uniq={d['unique_count']}, "
        f"invalid={d['invalid_lines']}, sha={sha}) | {status}"
    )
