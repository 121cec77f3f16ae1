# apps/cli/run.py
"""
CLI entry point for wordsim simulations.

This script:
  1) Validates the dictionary (prints counts + SHA, flags malformed entries).
  2) Loads the dictionary and builds a SimulationConfig from the flags.
  3) Runs the batch with a live progress indicator, then either prints the
     attempts histogram or (--persist) writes:
       - CSV:  histogram (header of attempt counts + one row of occurrences)
       - CSV:  per-game detail, with --details
       - JSON: manifest with config, dictionary hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

import wordsim.datasets
from wordsim.datasets import load_dictionary, validate_dictionary, pretty_summary
from wordsim.engine.frequency import MODEL_SCOPES
from wordsim.engine.oracle import POLICIES
from wordsim.harness import SimulationConfig, run_batch
from wordsim.harness.config import DEFAULT_MAX_TRIES, DEFAULT_TRIAL_COUNT, SELECTIONS
from wordsim.harness.io import (
    format_histogram, write_csv, write_histogram_csv, write_manifest,
    timestamp_id, git_commit_or_unknown,
)
from wordsim.solvers import get_solver_ids

DEFAULT_DICTIONARY = str(Path(wordsim.datasets.__file__).resolve().parent / "data" / "dictionary_5.txt")


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordsim: simulate a guessing strategy over many games")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="word list (.txt one per line, or .json array)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--solver", default="expected_info",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--max-tries", type=int, default=DEFAULT_MAX_TRIES, help="round limit per game")
    ap.add_argument("--trials", type=int, default=DEFAULT_TRIAL_COUNT, help="number of games")
    ap.add_argument("--start-word", help="forced first guess")
    ap.add_argument("--selection", choices=SELECTIONS, default="random",
                    help="random: uniform draw per game; sweep: walk the dictionary by --stride")
    ap.add_argument("--stride", type=int, default=1, help="sweep step")
    ap.add_argument("--offset", type=int, default=0, help="sweep start index")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducibility)")
    ap.add_argument("--model-scope", choices=MODEL_SCOPES, default="trial",
                    help="when the letter-frequency model is (re)built")
    ap.add_argument("--policy", choices=POLICIES, default="membership",
                    help="oracle letter accounting for PRESENT")
    ap.add_argument("--workers", type=int, default=1, help="worker processes")
    ap.add_argument("--exclude-failures", action="store_true",
                    help="leave failed games out of the average's denominator")
    ap.add_argument("--persist", action="store_true", help="write results to --outdir instead of printing")
    ap.add_argument("--details", action="store_true", help="with --persist, also write per-game CSV")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show run progress (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run the batch, emit results.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate dictionary, print a one-liner summary, load and configure
    try:
        rep = validate_dictionary(args.N, args.dictionary)
        print(pretty_summary(rep))
        dictionary = load_dictionary(args.dictionary, args.N)
        config = SimulationConfig.from_args(args).validate()
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(f"error: {e}")

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    # 2) Run
    rng = random.Random(config.seed)
    start = time.time()
    if mode == "bar":
        with tqdm(total=config.trial_count, ncols=80, desc="Running", unit="game") as bar:
            batch = run_batch(dictionary, config, rng=rng, progress=bar.update)
    else:
        batch = run_batch(dictionary, config, rng=rng)
    elapsed = time.time() - start

    hist = batch.histogram
    include = config.average_includes_failures

    # 3) Emit
    if not config.persist_output:
        print(format_histogram(hist, include_failures=include))
        print(f"elapsed: {elapsed:.1f}s")
        return

    run_id = timestamp_id()
    outdir = Path(config.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    hist_path = write_histogram_csv(hist, str(outdir / f"run_{run_id}.csv"))
    print(f"Wrote: {hist_path}")
    if config.details:
        details_path = write_csv(batch.results, str(outdir / f"run_{run_id}_games.csv"),
                                 max_tries=config.max_tries, N=config.N)
        print(f"Wrote: {details_path}")

    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": config.to_dict(),
        "dictionary": rep,
        "num_cases": hist.total,
        "histogram": {str(k): v for k, v in hist.counts().items()},
        "average_attempts": hist.average(include),
        "elapsed_s": round(elapsed, 3),
    }
    manifest_path = write_manifest(manifest, str(outdir / f"run_{run_id}_manifest.json"))
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
