"""
Dataset validator for the ranked dictionary.

What this module does:
- Validate a dictionary file in the fixed-width `WORDRRRNV` format.
- Count malformed lines (bad shape, non-letters, rank outside 000-100,
  unknown noun/verb codes) and duplicate words; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from advisor.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("data/AllWords.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from .dictionary import DictionaryFormatError, NounType, VerbType, parse_entry


@dataclass
class DictionaryReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID entries
    unique_count: int    # unique words among valid entries
    invalid_lines: int   # malformed non-blank lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    plural_nouns: int    # entries tagged as plural nouns
    inflected_verbs: int  # preterite or third-person singular entries
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(path: str) -> Dict:
    """
    Validate a ranked dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema). `passed`
        is strict: the file must exist, be non-empty, and contain no
        malformed or duplicate lines.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(str(path), False, 0, 0, 0, "", 0, 0, False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    words: Counter = Counter()
    invalid = 0
    plurals = 0
    inflected = 0
    examples: List[str] = []

    with p.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, 1):
            if not raw.strip():
                continue
            try:
                e = parse_entry(raw)
            except DictionaryFormatError:
                invalid += 1
                if len(examples) < 5:
                    examples.append(f"line {lineno}: {raw.strip()!r}")
                continue
            words[e.word] += 1
            if e.noun_type is NounType.PLURAL:
                plurals += 1
            if e.verb_type in (VerbType.PRETERITE, VerbType.THIRD_PERSON_SINGULAR):
                inflected += 1

    count = sum(words.values())
    issues: List[str] = []
    if count == 0:
        issues.append("dictionary contains 0 valid entries")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s) (e.g., {examples})")
    dupes = [w for w, n in words.items() if n > 1]
    if dupes:
        issues.append(f"dictionary contains duplicate words (e.g., {dupes[:5]})")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=count,
        unique_count=len(words),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        plural_nouns=plurals,
        inflected_verbs=inflected,
        passed=count > 0 and invalid == 0 and not dupes,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=12972 (uniq=12972, invalid=0, sha=abc123...) | plural=3120 inflected=2470 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"dictionary={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| plural={report['plural_nouns']} inflected={report['inflected_verbs']} | {status}"
    )
