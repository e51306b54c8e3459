# apps/cli/advise.py
"""
Interactive Wordle advisor.

This script:
  1) Validates and loads the ranked dictionary (prints counts + SHA).
  2) Builds the exclusion set of past answers (downloaded, or read from a cache file).
  3) Prints the opening recommendation, then for each turn reads your guess and
     the B/G/Y feedback, narrows the candidates, and prints the rank/entropy
     table plus the final pick.

Usage:
    python -m apps.cli.advise --dictionary data/AllWords.txt --used-words data/used_words.txt
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from advisor.config import AdvisorConfig, USED_WORDS_URL, WORDLE_MAX_TURNS
from advisor.datasets import (
    UsedWordsFetchError, get_used_words, load_dictionary, load_used_words,
    pretty_summary, validate_dictionary,
)
from advisor.engine import validate_feedback, validate_guess
from advisor.harness import GameSession
from advisor.log import setup_logger
from advisor.ranking import format_final_pick, format_recommendation_table, format_state


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-advisor: rank/entropy guess recommendations")
    ap.add_argument("--dictionary", required=True,
                    help="ranked dictionary file (lines like ABETS070NS)")
    ap.add_argument("--used-words", dest="used_words",
                    help="cached used-words file; fetched from --url and written here if missing")
    ap.add_argument("--url", default=USED_WORDS_URL, help="page listing past Wordle answers")
    ap.add_argument("--no-fetch", action="store_true",
                    help="never download the used-words page (no exclusions unless cached)")
    ap.add_argument("--replay", nargs="*", default=[],
                    help="past answers to keep as possible answers anyway")
    ap.add_argument("--large-set-threshold", type=int, default=25,
                    help="above this many candidates the entropy pick leads")
    ap.add_argument("--entropy-rank-threshold", type=float, default=0.50,
                    help="entropy gap (bits) at or below which the rank pick wins")
    ap.add_argument("--top", type=int, default=40, help="rows in the recommendation table")
    ap.add_argument("--workers", type=int, default=1, help="processes for the entropy pass")
    ap.add_argument("--skip-opening", action="store_true",
                    help="don't compute the turn-1 recommendation (slow on a full dictionary)")
    ap.add_argument("--progress", action="store_true", help="progress bar for the entropy pass")
    ap.add_argument("--verbose", action="store_true", help="INFO logging")
    ap.add_argument("--debug", action="store_true", help="DEBUG logging")
    ap.add_argument("--debug-from-turn", type=int, default=0,
                    help="only emit per-turn debug output from this turn on")
    return ap


def _load_exclusions(args) -> list[str]:
    """Cache file if present, else download (and cache). Failures mean no exclusions."""
    if args.used_words:
        try:
            words = load_used_words(args.used_words, replay=args.replay)
            logger.info(f"Loaded {len(words)} used words from {args.used_words}")
            return words
        except FileNotFoundError:
            if args.no_fetch:
                logger.warning(f"used-words file not found: {args.used_words}")
                return []
    if args.no_fetch:
        return []
    try:
        return get_used_words(args.url, replay=args.replay, cache=args.used_words)
    except UsedWordsFetchError as e:
        logger.warning(f"{e}; continuing without exclusions")
        return []


def _print_recommendation(rec, top: int) -> None:
    print(format_recommendation_table(rec, top=top))
    print(format_final_pick(rec))


def _prompt(text: str) -> str | None:
    try:
        return input(text).strip()
    except EOFError:
        return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(verbose=args.verbose, debug=args.debug, debug_from_turn=args.debug_from_turn)

    # 1) Validate and load the dictionary
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"Fatal: dictionary not found: {args.dictionary}", file=sys.stderr)
        return 1
    dictionary = load_dictionary(args.dictionary)

    # 2) Exclusion set and session
    config = AdvisorConfig(
        large_set_threshold=args.large_set_threshold,
        entropy_rank_threshold=args.entropy_rank_threshold,
        top_picks=args.top,
        workers=args.workers,
        progress=args.progress,
    )
    session = GameSession(dictionary, excluded=_load_exclusions(args), config=config)
    if not session.candidates:
        print("Fatal: no possible answers (dictionary empty or fully excluded).", file=sys.stderr)
        return 1

    # 3) Opening recommendation
    if not args.skip_opening:
        _print_recommendation(session.recommend(1), config.top_picks)
        print("It is recommended you enter one of these words first.")

    # 4) Turn loop
    turn = 1
    while turn <= WORDLE_MAX_TURNS:
        print(f"\n--- Turn {turn} of {WORDLE_MAX_TURNS} ---")
        guess = _prompt("Enter your 5-letter word guess (q to quit): ")
        if guess is None or guess.lower() == "q":
            break
        if not validate_guess(guess):
            print("You must enter 5 letters. Try again!")
            continue

        while True:
            pattern = _prompt("Enter the 5-character result (B=Black/Gray, G=Green, Y=Yellow) e.g. 'BGYBB': ")
            if pattern is None:
                return 0
            if validate_feedback(pattern):
                break
            print("Invalid result. Use exactly 5 of B, G, or Y.")

        result = session.play_turn(guess, pattern, turn)
        print()
        print(format_state(result.state))

        if result.solved:
            print(f"\n*** SOLVED! The word is {result.state.solved_word} ***")
            break

        print(f"\nFiltered. {len(result.candidates)} possible answers remain.")
        if result.exhausted:
            print("\n*** ERROR: No possible words remain. Check your input! ***")
            return 2

        _print_recommendation(result.recommendation, config.top_picks)
        if result.identified:
            print(f"\n*** SOLUTION IDENTIFIED: {result.identified} ***")
            break
        turn += 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
