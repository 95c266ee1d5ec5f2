import hashlib
import logging
import threading
from pathlib import Path

import pytest
import requests

from letterleap.datasets import Dictionary, DictionaryLoader, load_dictionary, parse_words
from letterleap.datasets import dictionary as dictionary_mod
from letterleap.datasets import validate_wordlist, pretty_summary
from letterleap.settings import DEFAULT_WORDLIST, WORDLIST_ENV, wordlist_source


class FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_parse_words_filters_and_lowercases():
    words = parse_words(["STATE", "Leash", "cat", "letter", "  stare  ", "", "", "leash"])
    assert words == frozenset({"state", "leash", "stare"})


def test_dictionary_contains_is_case_normalized():
    d = Dictionary.from_words(["Leash", "state"])
    assert d.contains("leash") and d.contains("LEASH") and d.contains("State")
    assert not d.contains("zzzzz")
    assert not d.contains(" leash ")  # membership is exact apart from case
    assert "leash" in d and 42 not in d
    assert len(d) == 2


def test_load_bundled_list():
    d = load_dictionary(DEFAULT_WORDLIST)
    for w in ["state", "stare", "least", "leash", "lease"]:
        assert d.contains(w)
    assert not d.contains("cat")
    assert all(len(w) == 5 for w in d.words)


def test_load_from_file_tolerates_blank_lines(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Stare\r\nLEASH\nladder\n\n\n", encoding="utf-8")
    d = load_dictionary(p)
    assert d.words == frozenset({"stare", "leash"})


def test_missing_file_degrades_to_empty(tmp_path: Path, caplog):
    with caplog.at_level(logging.ERROR, logger="letterleap"):
        d = load_dictionary(tmp_path / "nope.txt")
    assert len(d) == 0
    assert not d.contains("leash")
    assert any("Error loading word list" in r.message for r in caplog.records)


def test_bad_encoding_degrades_to_empty(tmp_path: Path, caplog):
    p = tmp_path / "words.txt"
    p.write_bytes(b"\xff\xfeleash\n")
    with caplog.at_level(logging.ERROR, logger="letterleap"):
        d = load_dictionary(p)
    assert len(d) == 0
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_load_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse("STATE\nleash\ncat\n")

    monkeypatch.setattr(requests, "get", fake_get)
    d = load_dictionary("https://example.test/sowpods.txt", timeout=5)
    assert d.words == frozenset({"state", "leash"})
    assert calls == [("https://example.test/sowpods.txt", 5)]


def _not_found(url, timeout):
    return FakeResponse("", status=404)


def _offline(url, timeout):
    raise requests.ConnectionError("offline")


@pytest.mark.parametrize("failure", [_not_found, _offline])
def test_url_failure_degrades_to_empty(monkeypatch, failure):
    monkeypatch.setattr(requests, "get", failure)
    d = load_dictionary("https://example.test/sowpods.txt")
    assert len(d) == 0


def test_loader_answers_false_until_loaded(monkeypatch):
    release = threading.Event()

    def slow_read(source, timeout):
        release.wait(5)
        return "leash\nstare\n"

    monkeypatch.setattr(dictionary_mod, "read_text", slow_read)
    loader = DictionaryLoader("whatever.txt").start()
    assert not loader.ready
    assert not loader.contains("leash")
    assert len(loader.dictionary) == 0

    release.set()
    assert loader.wait(5) is True
    assert loader.ready
    assert loader.contains("leash")


def test_loader_failure_is_terminal_empty(tmp_path: Path):
    loader = DictionaryLoader(tmp_path / "missing.txt").start()
    assert loader.wait(5)
    assert not loader.contains("leash")
    assert len(loader.dictionary) == 0


def test_loader_from_env(tmp_path: Path, monkeypatch):
    p = tmp_path / "custom.txt"
    p.write_text("plate\npleat\n", encoding="utf-8")
    monkeypatch.setenv(WORDLIST_ENV, str(p))
    loader = DictionaryLoader.from_env()
    assert loader.source == str(p)
    assert loader.start().wait(5)
    assert loader.contains("plate") and not loader.contains("leash")


def test_loader_from_env_defaults_to_bundled(monkeypatch):
    monkeypatch.delenv(WORDLIST_ENV, raising=False)
    assert DictionaryLoader.from_env().source == DEFAULT_WORDLIST


def test_wordlist_source_env_override(monkeypatch):
    monkeypatch.delenv(WORDLIST_ENV, raising=False)
    assert wordlist_source() == DEFAULT_WORDLIST
    monkeypatch.setenv(WORDLIST_ENV, "https://example.test/list.txt")
    assert wordlist_source() == "https://example.test/list.txt"


# --- word-list diagnostics ---

def test_validate_bundled_wordlist():
    rep = validate_wordlist(DEFAULT_WORDLIST, 5, "state", "leash")
    assert rep["passed"] is True
    assert rep["start_present"] and rep["target_present"]
    assert rep["skipped_lines"] > 0  # bundled list carries other lengths
    s = pretty_summary(rep)
    assert "N=5" in s and "leash=True" in s and s.endswith("OK")


def test_validate_wordlist_missing_target(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("state\nstare\nstare\n", encoding="utf-8")
    rep = validate_wordlist(str(p), 5, "state", "leash")
    assert rep["passed"] is False
    assert rep["target_present"] is False
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert any("missing" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_unreadable(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"), 5, "state", "leash")
    assert rep["exists"] is False and rep["passed"] is False
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_hashes_raw_bytes(tmp_path: Path):
    raw = b"state\r\nleash\r\n"
    p = tmp_path / "words.txt"
    p.write_bytes(raw)
    rep = validate_wordlist(str(p), 5, "state", "leash")
    assert rep["passed"] is True and rep["count"] == 2
    assert rep["sha256"] == hashlib.sha256(raw).hexdigest()


def test_validate_wordlist_bad_encoding(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"\xff\xfeleash\n")
    rep = validate_wordlist(str(p), 5, "state", "leash")
    assert rep["exists"] is False and rep["passed"] is False
