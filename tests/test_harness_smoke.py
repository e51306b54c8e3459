import csv
from pathlib import Path

import pytest
from advisor.datasets import Dictionary, DictionaryEntry, NounType, VerbType
from advisor.harness import run_batch, run_case, summarize, write_csv
from advisor.solvers import create_solver, get_solver_ids
from apps.cli.run import format_summary

WORDS = [("CRANE", 50), ("SLATE", 80), ("TRACE", 60), ("GRACE", 70), ("BRACE", 40), ("PLATE", 65)]


@pytest.fixture
def dictionary():
    return Dictionary(
        DictionaryEntry(w, r, NounType.SINGULAR, VerbType.BASE_PRESENT) for w, r in WORDS
    )


def test_solver_registry():
    assert get_solver_ids() == ["advisor", "entropy_axis", "rank_axis"]
    with pytest.raises(ValueError):
        create_solver("nope")


@pytest.mark.parametrize("solver_id", ["advisor", "rank_axis", "entropy_axis"])
def test_run_case_smoke(dictionary, solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, "grace", dictionary=dictionary)
    assert r["success"] is True
    assert r["answer"] == "GRACE" and r["solver_id"] == solver_id
    assert r["history"][-1] == ("GRACE", "GGGGG")
    assert 1 <= r["guesses"] <= 6


def test_first_guess_is_top_ranked(dictionary):
    r = run_case(create_solver("advisor"), "CRANE", dictionary=dictionary)
    assert r["history"][0][0] == "SLATE"


def test_excluded_answer_cannot_be_found(dictionary):
    r = run_case(create_solver("advisor"), "SLATE", dictionary=dictionary, excluded=["SLATE"])
    assert r["success"] is False


def test_run_case_enforces_turn_budget(dictionary):
    with pytest.raises(ValueError):
        run_case(create_solver("advisor"), "CRANE", dictionary=dictionary, max_turns=7)


def test_run_batch_and_summary(dictionary, tmp_path: Path):
    solver = create_solver("advisor")
    results = run_batch(solver, [w for w, _ in WORDS], dictionary=dictionary, sample=4)
    assert len(results) == 4 and all(r["success"] for r in results)

    s = summarize(results)
    assert s["games"] == 4 and s["wins"] == 4 and s["win_rate"] == 1.0
    assert sum(s["histogram"]) == 4 and len(s["histogram"]) == 7
    assert s["histogram"][1] == 1         # SLATE is solved on the opening guess

    out = write_csv(results, str(tmp_path / "run.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["answer"] for row in rows] == [w for w, _ in WORDS[:4]]
    assert rows[0]["guess_1"] == "SLATE"


def test_summarize_empty():
    s = summarize([])
    assert s["games"] == 0 and s["mean_guesses"] is None


def test_summary_line(dictionary):
    results = [run_case(create_solver("advisor"), "SLATE", dictionary=dictionary)]
    assert format_summary("advisor", summarize(results)) == (
        "advisor: 1/1 solved (win rate 1.000, mean guesses 1.000)"
    )


def test_summary_line_without_wins(dictionary):
    results = [run_case(create_solver("advisor"), "SLATE", dictionary=dictionary, excluded=["SLATE"])]
    line = format_summary("advisor", summarize(results))
    assert line == "advisor: 0/1 solved (win rate 0.000, mean guesses -)"
    assert "None" not in line
