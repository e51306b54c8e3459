# apps/cli/run.py
"""
CLI entry point for simulation runs.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it, builds the exclusion set, and instantiates the requested solver.
  3) Plays every hidden answer with simulated feedback, with a live progress
     indicator, and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary report, summary, git commit
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from advisor.config import AdvisorConfig
from advisor.datasets import load_dictionary, load_used_words, pretty_summary, read_words, validate_dictionary
from advisor.harness import run_case, summarize
from advisor.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from advisor.log import setup_logger
from advisor.solvers import create_solver, get_solver_ids


def format_summary(solver_id: str, summary: dict) -> str:
    """One-line batch result; '-' stands in for guess stats when nothing was won."""
    mean = summary["mean_guesses"]
    mean_text = "-" if mean is None else f"{mean:.3f}"
    return (
        f"{solver_id}: {summary['wins']}/{summary['games']} solved "
        f"(win rate {summary['win_rate']:.3f}, mean guesses {mean_text})"
    )


def main():
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-advisor: simulate games against hidden answers")
    ap.add_argument("--solver", default="advisor", help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--dictionary", required=True, help="ranked dictionary file")
    ap.add_argument("--answers", help="hidden answers to play (default: every possible answer)")
    ap.add_argument("--used-words", dest="used_words", help="cached used-words file to exclude")
    ap.add_argument("--sample", type=int, help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--large-set-threshold", type=int, default=25)
    ap.add_argument("--entropy-rank-threshold", type=float, default=0.50)
    ap.add_argument("--workers", type=int, default=1, help="processes for the entropy pass")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "plain", "off"], default="bar",
                    help="Show run progress.")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    setup_logger(verbose=args.verbose)

    # 1) Validate and load
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    dictionary = load_dictionary(args.dictionary)
    excluded = load_used_words(args.used_words) if args.used_words else []

    config = AdvisorConfig(
        large_set_threshold=args.large_set_threshold,
        entropy_rank_threshold=args.entropy_rank_threshold,
        workers=args.workers,
    )
    solver = create_solver(args.solver, config)

    # 2) Choose cases (deterministic sample by seed)
    if args.answers:
        answers = read_words(args.answers)
    else:
        used = set(excluded)
        answers = [w for w in dictionary if w not in used]
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)
    total = len(cases)

    # 3) Run batch with live progress
    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if args.progress == "bar" else cases

    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(solver, ans, dictionary=dictionary, excluded=excluded, config=config))

        if args.progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if args.progress == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(format_summary(solver.id, summary))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
