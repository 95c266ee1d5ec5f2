"""
Per-letter feedback for a (guess, target) pair.

Conventions (pattern codes):
  - 'G'  : CORRECT = letter in the right position
  - 'Y'  : PRESENT = letter in the target, elsewhere
  - '-'  : ABSENT  = letter not in the target, or already used up

Algorithm (two-pass, duplicate-aware):
  1) Mark every exact position match CORRECT.
  2) Walk the remaining positions left to right. For a letter that occurs in
     the target, let
        T = occurrences in the target,
        G = occurrences in guess[:i+1],
        U = marked positions (CORRECT anywhere, PRESENT so far) with that letter.
     Mark PRESENT iff G <= T and U < T, otherwise ABSENT.

All counters live in one call; nothing is shared between calls. CORRECT plus
PRESENT for a letter never exceeds its count in the target.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import List, Sequence


class FeedbackStatus(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def code(self) -> str:
        return self.value


def compute_feedback(guess: str, target: str) -> List[FeedbackStatus]:
    """
    Feedback for `guess` against `target`, one status per position.

    Raises ValueError when the words differ in length; the session only
    scores words that already passed the length gate.

    Examples:
      pattern_of(compute_feedback("stare", "leash")) -> "Y-G-Y"
      pattern_of(compute_feedback("aabbb", "ababx")) -> "GYYG-"
    """
    guess = guess.lower()
    target = target.lower()
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target must be the same length; got {guess!r} vs {target!r}")

    n = len(guess)
    statuses = [FeedbackStatus.ABSENT] * n
    in_target = Counter(target)

    # Pass 1: exact positions. `used` counts marked positions per letter.
    used: Counter[str] = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            statuses[i] = FeedbackStatus.CORRECT
            used[g] += 1

    # Pass 2: letters elsewhere in the target.
    seen: Counter[str] = Counter()
    for i, g in enumerate(guess):
        seen[g] += 1
        if statuses[i] is FeedbackStatus.CORRECT or g not in in_target:
            continue
        available = in_target[g]
        if seen[g] <= available and used[g] < available:
            statuses[i] = FeedbackStatus.PRESENT
            used[g] += 1

    return statuses


def pattern_of(statuses: Sequence[FeedbackStatus]) -> str:
    """Render statuses as a 'G'/'Y'/'-' string."""
    return "".join(s.code for s in statuses)


def score(guess: str, target: str) -> str:
    """Pattern string for `guess` against `target`, e.g. score("least", "leash") -> "GGGG-"."""
    return pattern_of(compute_feedback(guess, target))
