"""
Session state and submission results.

GameState is owned by exactly one GameSession and changes only through
GameSession.submit_guess. Results are small frozen dataclasses; callers tell
them apart with isinstance or the `accepted` flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from letterleap.engine import FeedbackStatus, RejectReason, pattern_of


@dataclass(frozen=True)
class GuessRecord:
    """One accepted rung of the ladder and its feedback against the target."""
    word: str
    feedback: Tuple[FeedbackStatus, ...]

    @property
    def pattern(self) -> str:
        return pattern_of(self.feedback)


@dataclass
class GameState:
    start_word: str
    target_word: str
    previous_word: str
    history: List[GuessRecord] = field(default_factory=list)
    step_count: int = 0
    has_won: bool = False
    just_won: bool = False
    last_rejection: Optional[RejectReason] = None

    @classmethod
    def new(cls, start_word: str, target_word: str) -> "GameState":
        return cls(start_word=start_word, target_word=target_word,
                   previous_word=start_word)


@dataclass(frozen=True)
class Rejected:
    raw: str
    reason: RejectReason
    message: str
    accepted: bool = False


@dataclass(frozen=True)
class Accepted:
    word: str
    feedback: Tuple[FeedbackStatus, ...]
    step_count: int
    has_won: bool
    just_won: bool
    accepted: bool = True

    @property
    def is_winning_move(self) -> bool:
        return self.just_won

    @property
    def pattern(self) -> str:
        return pattern_of(self.feedback)


SubmitResult = Union[Accepted, Rejected]
