"""
I/O utilities for simulation runs.

Responsibilities:
- write_histogram_csv: attempts histogram as a header row of attempt counts
                       and one row of occurrences (0 = failure).
- format_histogram:    the same table for the console, plus average attempts.
- write_csv:           optional per-game detail (one row per game).
- write_manifest:      JSON manifest with config and metadata.
- timestamp_id:        stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from .core import CaseResult
from .histogram import AttemptsHistogram


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_histogram_csv(hist: AttemptsHistogram, path: str) -> str:
    """
    Write the histogram as two CSV rows:

        0,1,2,3,4,5,6
        12,0,3,180,510,240,55
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(hist.header())
        w.writerow(hist.row())
    return str(p)


def format_histogram(hist: AttemptsHistogram, include_failures: bool = True) -> str:
    """Console rendering: aligned header/count rows and the average."""
    header = hist.header()
    row = hist.row()
    width = max(len(str(x)) for x in header + row)
    lines = [
        "attempts | " + " ".join(str(a).rjust(width) for a in header),
        "games    | " + " ".join(str(n).rjust(width) for n in row),
        f"average attempts: {hist.average(include_failures):.4f} "
        f"(games={hist.total}, failures={hist.failures})",
    ]
    return "\n".join(lines)


def write_csv(results: List[CaseResult], path: str, max_tries: int, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, N, solution, status, attempts, time_ms,
      guess_1, patt_1, guess_2, patt_2, ..., guess_max_tries, patt_max_tries
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "N", "solution", "status", "attempts", "time_ms"]
    for i in range(1, max_tries + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.solver_id,
                "N": N,
                "solution": r.solution,
                "status": r.status.value,
                "attempts": r.attempts,
                "time_ms": round(float(r.time_ms), 3),
            }

            # Expand history into fixed columns (Excel-safe patterns)
            for i in range(1, max_tries + 1):
                if i <= len(r.history):
                    g, patt = r.history[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary summary.

    Typical keys:
      - run_id, git_commit
      - config: SimulationConfig.to_dict()
      - dictionary: output of datasets.validate_dictionary(...)
      - histogram, average_attempts
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
