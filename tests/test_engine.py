import itertools
from collections import Counter
from math import log2

import pytest
from advisor.engine import (
    ConstraintState, apply_feedback, entropy_score, filter_candidates, is_risky,
    score, validate_feedback, validate_guess,
)

WORDS = ["CRANE", "SLATE", "TRACE", "ABBEY", "BOBBY", "SPEED", "ABIDE", "LLAMA", "ALOFT", "LEVEL"]


# --- golden scoring tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("ABBEY", "BOBBY", "BYGBG"),
    ("CRANE", "TRACE", "YGGBG"),
    ("BELLE", "LEVEL", "BGYYY"),
    ("LEMON", "LEVEL", "GGBBB"),
    ("COOLS", "SCOOP", "YYGBY"),
    ("RAISE", "CRANE", "YYBBG"),
    ("STARE", "CRANE", "BBGYG"),
    ("SPEED", "ABIDE", "BBYBY"),
    ("LLAMA", "ALOFT", "BGYBB"),
    ("crane", "crane", "GGGGG"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_self_is_all_green():
    for w in WORDS:
        assert score(w, w) == "GGGGG"


def test_score_never_overcounts_letters():
    for g, a in itertools.product(WORDS, repeat=2):
        patt = score(g, a)
        hits = Counter(ch for ch, p in zip(g, patt) if p in "GY")
        answer_counts = Counter(a)
        assert all(hits[ch] <= answer_counts[ch] for ch in hits)


def test_score_length_mismatch():
    with pytest.raises(ValueError):
        score("CRANE", "CRANES")


# --- entropy ---
def test_entropy_trivial_sets():
    assert entropy_score("CRANE", []) == 0.0
    assert entropy_score("CRANE", ["TRACE"]) == 0.0


def test_entropy_three_distinct_patterns():
    # GGGGG / YGGBG / BBGBG
    assert entropy_score("CRANE", ["CRANE", "TRACE", "SLATE"]) == pytest.approx(log2(3))


def test_entropy_uneven_buckets():
    # SLATE and PLATE share BBGBG; CRATE and CRANE are singletons
    H = entropy_score("CRANE", ["SLATE", "PLATE", "CRATE", "CRANE"])
    assert H == pytest.approx(1.5)


def test_entropy_single_bucket_is_zero():
    assert entropy_score("QQQQQ", ["CRANE", "SLATE"]) == 0.0


def test_entropy_bounds():
    for g in WORDS:
        H = entropy_score(g, WORDS)
        assert 0.0 <= H <= log2(len(WORDS)) + 1e-12


def test_entropy_is_reproducible():
    assert entropy_score("SLATE", WORDS) == entropy_score("SLATE", list(WORDS))


# --- constraint updater ---
def test_apply_feedback_crane_vs_trace():
    s = apply_feedback(ConstraintState(), "CRANE", "YGGBG", 1)
    assert s.green_mask == [None, "R", "A", None, "E"]
    assert s.required_counts == {"C": 1, "R": 1, "A": 1, "E": 1}
    assert s.excluded_letters == {"N"}
    assert s.positional_exclusions[0] == ["C", None, None, "N", None]
    assert s.mask_string() == "*RA*E"


def test_black_duplicate_stays_required():
    s = apply_feedback(ConstraintState(), "SPEED", "BBYBY", 1)
    assert s.required("E") == 1
    assert "E" not in s.excluded_letters
    assert s.excluded_letters == {"S", "P"}


def test_black_before_green_of_same_letter():
    s = apply_feedback(ConstraintState(), "LLAMA", "BGYBB", 1)
    assert s.required("L") == 1 and s.required("A") == 1
    assert s.excluded_letters == {"M"}
    for ch in s.excluded_letters:
        assert s.required(ch) == 0
    assert filter_candidates(["ALOFT", "LLAMA"], s) == ["ALOFT"]


def test_apply_feedback_is_monotonic():
    s = ConstraintState()
    apply_feedback(s, "CRANE", "YGGBG", 1)
    before_counts = dict(s.required_counts)
    before_mask = list(s.green_mask)

    # A later guess with fewer confirmed letters never lowers anything.
    apply_feedback(s, "TRYST", "GGBBB", 2)
    for ch, n in before_counts.items():
        assert s.required(ch) >= n
    for old, new in zip(before_mask, s.green_mask):
        assert old is None or old == new

    apply_feedback(s, "TRACE", "GGGGG", 3)
    assert s.is_solved and s.solved_word == "TRACE"


def test_apply_feedback_turn_range():
    with pytest.raises(ValueError):
        apply_feedback(ConstraintState(), "CRANE", "BBBBB", 0)
    with pytest.raises(ValueError):
        apply_feedback(ConstraintState(), "CRANE", "BBBBB", 7)


def test_copy_is_independent():
    s = apply_feedback(ConstraintState(), "CRANE", "YGGBG", 1)
    c = s.copy()
    apply_feedback(c, "TRACE", "GGGGG", 2)
    assert s.green_mask[0] is None and c.green_mask[0] == "T"


# --- candidate filter ---
def test_filter_scenario():
    s = apply_feedback(ConstraintState(), "CRANE", "YGGBG", 1)
    assert filter_candidates(["CRANE", "SLATE", "TRACE"], s) == ["TRACE"]


def test_filter_uses_positional_exclusions_from_earlier_turns():
    s = ConstraintState()
    apply_feedback(s, "STARE", "YBBBB", 1)      # S somewhere, not first
    apply_feedback(s, "POLKA", "BBBBB", 2)
    assert filter_candidates(["SUSHI", "MUSIC", "BUSHY"], s) == ["MUSIC", "BUSHY"]


def test_filter_is_idempotent():
    s = apply_feedback(ConstraintState(), "RAISE", "BYBBG", 1)
    words = ["CRANE", "SLATE", "TRACE", "ABIDE", "GLACE", "LANCE", "DANCE"]
    once = filter_candidates(words, s)
    assert filter_candidates(once, s) == once


def test_empty_state_keeps_everything():
    assert filter_candidates(WORDS, ConstraintState()) == WORDS


# --- risk ---
@pytest.mark.parametrize("word,required,expected", [
    ("DADDY", {}, True),
    ("DADDY", {"D": 3}, False),
    ("SLATE", {}, False),
    ("ABBEY", {"B": 1}, True),
    ("ABBEY", {"B": 2}, False),
])
def test_is_risky(word, required, expected):
    assert is_risky(word, required) is expected


# --- boundary validation ---
def test_validate_guess():
    assert validate_guess("crane") is True
    assert validate_guess(" CRANE ") is True
    assert validate_guess("cranes") is False
    assert validate_guess("cr4ne") is False
    assert validate_guess("CRANE", allowed=["crane", "slate"]) is True
    assert validate_guess("TRACE", allowed=["crane", "slate"]) is False


def test_validate_feedback():
    assert validate_feedback("bgyBG") is True
    assert validate_feedback("BGYB") is False
    assert validate_feedback("BGYBX") is False
    assert validate_feedback("B-YBG") is False
