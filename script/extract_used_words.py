"""
Scrape past Wordle answers and write the used-words cache file.

What it does:
- Downloads the page listing every past answer.
- Reads the "All Wordle answers" list, keeping 5-letter entries.
- Uppercases, drops --replay words, de-duplicates while preserving page order.

Usage:
    python -m script.extract_used_words --out data/used_words.txt
    # keep a few past answers in play:
    python -m script.extract_used_words --replay ABHOR LATHE --out data/used_words.txt
"""

import argparse

from advisor.config import USED_WORDS_URL
from advisor.datasets import get_used_words, write_words


def main():
    ap = argparse.ArgumentParser(description="Extract previously used Wordle answers")
    ap.add_argument("--url", default=USED_WORDS_URL)
    ap.add_argument("--out", default="data/used_words.txt")
    ap.add_argument("--replay", nargs="*", default=[], help="past answers to leave out of the list")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = get_used_words(args.url, replay=args.replay)
    if args.sort:
        words = sorted(words)

    write_words(words, args.out)
    print(f"Wrote {len(words)} used words -> {args.out}")


if __name__ == "__main__":
    main()
