import sys
from pathlib import Path

import pytest
import requests
from loguru import logger

from advisor.datasets import used_words as used_words_mod
from apps.cli import advise


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    p = tmp_path / "AllWords.txt"
    p.write_text("CRANE050SP\nSLATE080SP\nTRACE060SP\n", encoding="utf-8")
    return p


def _feed(monkeypatch, *lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def _offline(monkeypatch):
    def boom(url, timeout, headers):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(used_words_mod.requests, "get", boom)


def test_missing_dictionary_exits_1(tmp_path: Path, capsys):
    assert advise.main(["--dictionary", str(tmp_path / "nope.txt"), "--no-fetch"]) == 1
    assert "dictionary not found" in capsys.readouterr().err


def test_fetch_failure_continues_without_exclusions(dictionary_file, tmp_path: Path, monkeypatch, capsys):
    _offline(monkeypatch)
    _feed(monkeypatch, "crane", "GGGGB")
    cache = tmp_path / "used_words.txt"

    rc = advise.main(["--dictionary", str(dictionary_file), "--used-words", str(cache)])

    out = capsys.readouterr().out
    assert rc == 2
    assert "Possible Answers: 3" in out
    assert "No possible words remain" in out
    assert not cache.exists()


def test_cached_used_words_skip_download(dictionary_file, tmp_path: Path, monkeypatch, capsys):
    def no_network(url, timeout, headers):
        raise AssertionError("cache should be used")

    monkeypatch.setattr(used_words_mod.requests, "get", no_network)
    _feed(monkeypatch, "q")
    cache = tmp_path / "used_words.txt"
    cache.write_text("SLATE\n", encoding="utf-8")

    rc = advise.main(["--dictionary", str(dictionary_file), "--used-words", str(cache)])

    out = capsys.readouterr().out
    assert rc == 0
    assert "Possible Answers: 2" in out
    assert "Top Pick  : TRACE" in out


def test_reprompts_then_solves(dictionary_file, monkeypatch, capsys):
    _feed(monkeypatch, "abc", "slate", "GGGGX", "ggggg")

    rc = advise.main(["--dictionary", str(dictionary_file), "--no-fetch", "--skip-opening"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "You must enter 5 letters" in out
    assert "Invalid result" in out
    assert "SOLVED! The word is SLATE" in out


def test_end_of_input_quits_cleanly(dictionary_file, monkeypatch):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert advise.main(["--dictionary", str(dictionary_file), "--no-fetch", "--skip-opening"]) == 0
