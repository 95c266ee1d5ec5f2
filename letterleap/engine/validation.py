"""
Guess validation.

This module answers the question: "May this word be the next rung right now?"
A guess passes iff, checked in this order:
  - it has exact length N                          (else INVALID_LENGTH)
  - it exists in the loaded dictionary             (else NOT_IN_DICTIONARY)
  - it is one multiset step from the previous word (else INVALID_TRANSFORMATION)

The first failing check wins. Failures are ordinary outcomes returned to the
caller, never raised.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from letterleap.settings import WORD_LENGTH
from .transform import is_valid_transformation


class WordSet(Protocol):
    def contains(self, word: str) -> bool: ...


class RejectReason(Enum):
    INVALID_LENGTH = "invalid_length"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    INVALID_TRANSFORMATION = "invalid_transformation"

    def message(self, N: int = WORD_LENGTH) -> str:
        """User-facing text for this rejection."""
        if self is RejectReason.INVALID_LENGTH:
            return f"Please enter a {N}-letter word."
        if self is RejectReason.NOT_IN_DICTIONARY:
            return "Not a valid word."
        return "Invalid transformation."


def normalize(raw: str) -> str:
    """Canonical form of user input: lowercase, otherwise untouched."""
    return raw.lower()


def validate_guess(word: str, *, dictionary: WordSet, previous: str,
                   N: int) -> Optional[RejectReason]:
    """
    Return the first RejectReason `word` trips, or None if it is playable.

    Args:
      word       : normalized guess
      dictionary : anything with contains(word) -> bool
      previous   : the last accepted word (the start word before any step)
      N          : required word length
    """
    if len(word) != N:
        return RejectReason.INVALID_LENGTH
    if not dictionary.contains(word):
        return RejectReason.NOT_IN_DICTIONARY
    if not is_valid_transformation(word, previous):
        return RejectReason.INVALID_TRANSFORMATION
    return None
