"""
The puzzle dictionary: an immutable set of N-letter words.

Loading is forgiving by contract. If the word list cannot be read (missing
file, network error, bad encoding) the error is logged and an EMPTY
dictionary is returned; every guess is then rejected as not-a-word instead
of taking the game down.

DictionaryLoader runs that load on a background thread so a host can start
a session immediately. Until the load finishes it answers contains() with
False, which the session reports as NOT_IN_DICTIONARY.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

import requests

from letterleap.settings import REQUEST_TIMEOUT, WORD_LENGTH, wordlist_source
from .io import read_text

logger = logging.getLogger(__name__)


def parse_words(lines: Iterable[str], length: int = WORD_LENGTH) -> FrozenSet[str]:
    """Lowercased words of exactly `length` letters; blank lines are skipped."""
    out = set()
    for raw in lines:
        w = raw.strip().lower()
        if w and len(w) == length:
            out.add(w)
    return frozenset(out)


@dataclass(frozen=True)
class Dictionary:
    words: FrozenSet[str]
    length: int = WORD_LENGTH

    @classmethod
    def from_words(cls, words: Iterable[str], length: int = WORD_LENGTH) -> "Dictionary":
        return cls(words=parse_words(words, length), length=length)

    @classmethod
    def empty(cls, length: int = WORD_LENGTH) -> "Dictionary":
        return cls(words=frozenset(), length=length)

    def contains(self, word: str) -> bool:
        return word.lower() in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)


def load_dictionary(source: Path | str, length: int = WORD_LENGTH,
                    timeout: float = REQUEST_TIMEOUT) -> Dictionary:
    """
    Load a one-word-per-line list from a path or http(s) URL.

    Never raises for an unreadable source; returns Dictionary.empty() instead.
    """
    try:
        text = read_text(source, timeout=timeout)
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.error("Error loading word list from %s: %s", source, e)
        return Dictionary.empty(length)

    d = Dictionary(words=parse_words(text.splitlines(), length), length=length)
    logger.info("Loaded %s words from %s", len(d), source)
    return d


class DictionaryLoader:
    """
    One-shot background load of a Dictionary.

    Usage:
        loader = DictionaryLoader(source).start()   # or DictionaryLoader.from_env()
        session = GameSession(loader)   # usable right away
        loader.wait()                   # optional: block until loaded
    """

    def __init__(self, source: Path | str, length: int = WORD_LENGTH,
                 timeout: float = REQUEST_TIMEOUT):
        self.source = source
        self.length = length
        self.timeout = timeout
        self._dictionary: Optional[Dictionary] = None
        self._done = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def from_env(cls, length: int = WORD_LENGTH) -> "DictionaryLoader":
        """Loader for LETTERLEAP_WORDLIST, or the bundled list when unset."""
        return cls(wordlist_source(), length=length)

    def start(self) -> "DictionaryLoader":
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._run, name="letterleap-dictionary", daemon=True)
            self._thread.start()
        return self

    def _run(self) -> None:
        try:
            self._dictionary = load_dictionary(self.source, self.length, self.timeout)
        finally:
            self._done.set()

    @property
    def ready(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the load finishes; False if `timeout` expired first."""
        return self._done.wait(timeout)

    @property
    def dictionary(self) -> Dictionary:
        """The loaded dictionary, or an empty one while loading."""
        if self._dictionary is None:
            return Dictionary.empty(self.length)
        return self._dictionary

    def contains(self, word: str) -> bool:
        return self.ready and self.dictionary.contains(word)
