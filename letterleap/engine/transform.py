"""
One-step ladder rule.

Given:
  - the previous accepted word (or the start word)
  - a candidate next word

A step is legal iff the two words have the same length and share all but one
letter instance, counting duplicates:

    len(candidate) - common_letter_count(candidate, previous) == 1

This is a multiset rule, not a positional one. "state" -> "least" is legal
even though most positions change, because only one 't' is swapped for an 'l'.
Rearranging letters alone (an anagram) is never a step.

is_single_substitution is the stricter positional reading (exactly one
differing position). The session does not use it.
"""

from __future__ import annotations

import logging
from collections import Counter

logger = logging.getLogger(__name__)


def letter_multiset(word: str) -> Counter[str]:
    """Letter -> occurrence count."""
    return Counter(word)


def common_letter_count(a: str, b: str) -> int:
    """
    Sum over letters present in both words of the smaller occurrence count.

    common_letter_count("state", "stare") -> 4   (s, t, a, e; one 't' unmatched)
    """
    ca, cb = letter_multiset(a), letter_multiset(b)
    return sum(min(n, cb[ch]) for ch, n in ca.items() if ch in cb)


def is_valid_transformation(candidate: str, previous: str) -> bool:
    """True if `candidate` is a legal next step from `previous`."""
    if len(candidate) != len(previous):
        return False

    common = common_letter_count(candidate, previous)
    logger.debug("common letters %s -> %s: %d", previous, candidate, common)
    return len(candidate) - common == 1


def is_single_substitution(candidate: str, previous: str) -> bool:
    """True if the words differ in exactly one position."""
    if len(candidate) != len(previous):
        return False
    return sum(1 for a, b in zip(candidate, previous) if a != b) == 1
