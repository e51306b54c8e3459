"""
Previously used Wordle answers (the exclusion set).

What it does:
- Downloads the page listing every past answer.
- Finds the "All Wordle answers" heading and reads the <li> items of the list
  that follows it.
- Keeps items that start with a 5-letter word, uppercases them, drops any
  "replay" words the caller wants to keep in play, and de-duplicates while
  preserving page order.
- Optionally caches the result to a plain text file (one word per line).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup
from loguru import logger

from advisor.config import USED_WORDS_URL, WORD_SIZE
from .io import read_words, write_words

SECTION_HEADING = "All Wordle answers"
USER_AGENT = "Chrome"
WORD_RE = re.compile(rf"^([A-Za-z]{{{WORD_SIZE}}})(?![A-Za-z])")


class UsedWordsFetchError(RuntimeError):
    """The used-words page could not be downloaded."""


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_used_words_page(url: str = USED_WORDS_URL, *, timeout: float = 30) -> str:
    """Return the raw HTML of the used-words page."""
    try:
        r = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        r.raise_for_status()
    except requests.RequestException as e:
        raise UsedWordsFetchError(f"failed to download {url}: {e}") from e
    logger.info(f"Downloaded used-words page ({len(r.text)} chars)")
    return r.text


def parse_used_words(html: str, replay: Iterable[str] = ()) -> List[str]:
    """
    Extract past answers from the page HTML.

    Returns an empty list when the answers section is missing.
    """
    soup = BeautifulSoup(html, "html.parser")
    heading = soup.find(
        lambda tag: tag.name == "h2" and SECTION_HEADING.lower() in tag.get_text(" ", strip=True).lower()
    )
    if heading is None:
        logger.warning(f"'{SECTION_HEADING}' section not found on page")
        return []

    listing = heading.find_next("ul")
    if listing is None:
        return []

    skip = {w.strip().upper() for w in replay}
    words: List[str] = []
    for li in listing.find_all("li"):
        m = WORD_RE.match(li.get_text(" ", strip=True))
        if not m:
            continue
        w = m.group(1).upper()
        if w not in skip:
            words.append(w)

    words = unique_preserve_order(words)
    logger.info(f"Found {len(words)} total used words (excluding replay words)")
    return words


def load_used_words(path: Path | str, replay: Iterable[str] = ()) -> List[str]:
    """Read a cached used-words file (blank lines ignored)."""
    skip = {w.strip().upper() for w in replay}
    return unique_preserve_order(w for w in read_words(path) if w not in skip)


def save_used_words(words: Iterable[str], path: Path | str) -> str:
    return write_words(words, path)


def get_used_words(
        url: str = USED_WORDS_URL,
        *,
        replay: Iterable[str] = (),
        cache: Path | str | None = None,
        timeout: float = 30,
) -> List[str]:
    """
    Fetch and parse the used-words list; if `cache` is given, write it there.
    """
    words = parse_used_words(fetch_used_words_page(url, timeout=timeout), replay=replay)
    if cache is not None:
        save_used_words(words, cache)
    return words
