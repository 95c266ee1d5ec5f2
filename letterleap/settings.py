"""
Puzzle configuration.

Single source of truth for the fixed puzzle: word length, the start/target
pair, where the word list comes from and the win-message tiers.

GameConfig bundles the per-session values so tests (or a host app) can run a
different pair without touching module globals. It refuses words that could
never be played; that is a programming error, not a rejected guess.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

WORD_LENGTH = 5
START_WORD = "state"
TARGET_WORD = "leash"

# Bundled list; override with LETTERLEAP_WORDLIST (path or http(s) URL).
DEFAULT_WORDLIST = str(Path(__file__).parent / "datasets" / "data" / "words.txt")
WORDLIST_ENV = "LETTERLEAP_WORDLIST"

# Seconds to wait for a remote word list.
REQUEST_TIMEOUT = 30

# (max steps inclusive, message); anything above the last bound gets the fallback.
WIN_TIERS: List[Tuple[int, str]] = [
    (5, "You're a genius!"),
    (10, "Great job!"),
    (15, "Nice work!"),
]
WIN_FALLBACK = "You did it!"


def wordlist_source() -> str:
    """Word list path/URL from the environment, else the bundled list."""
    return os.environ.get(WORDLIST_ENV) or DEFAULT_WORDLIST


@dataclass(frozen=True)
class GameConfig:
    start_word: str = START_WORD
    target_word: str = TARGET_WORD
    word_length: int = WORD_LENGTH

    def __post_init__(self) -> None:
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        for field_name in ("start_word", "target_word"):
            w = getattr(self, field_name)
            if len(w) != self.word_length or not w.isalpha():
                raise ValueError(
                    f"{field_name} must be a {self.word_length}-letter word; got {w!r}")
            # frozen: go through object.__setattr__ to canonicalize case
            object.__setattr__(self, field_name, w.lower())
