"""
One LetterLeap game: the state machine behind "submit a word".

submit_guess runs three gates in order (length, dictionary, one-step rule).
The first failure returns Rejected and leaves the ladder untouched. A passing
word becomes the new rung: the step counter advances, the word is appended
to the history, feedback against the target is computed and, if the word is
the target, the game is won.

Per-call observers (`just_won`, `last_rejection`) describe only the most
recent submission and are reset at the start of every call.

Sessions are independent objects; there is no module-level game.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from letterleap.engine import RejectReason, compute_feedback, normalize, validate_guess
from letterleap.engine.validation import WordSet
from letterleap.settings import GameConfig
from .messages import win_message
from .state import Accepted, GameState, GuessRecord, Rejected, SubmitResult

logger = logging.getLogger(__name__)


class GameSession:
    """
    A single puzzle session.

    Args:
      dictionary : a Dictionary, a DictionaryLoader, or anything with
                   contains(word) -> bool
      config     : start/target/length; defaults to the fixed puzzle
    """

    def __init__(self, dictionary: WordSet, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self.dictionary = dictionary
        self._state = GameState.new(self.config.start_word, self.config.target_word)

    # ---- the operation ----

    def submit_guess(self, raw: str) -> SubmitResult:
        st = self._state
        st.just_won = False
        N = self.config.word_length

        word = normalize(raw)
        logger.debug("submitted guess %r", word)

        reason = validate_guess(word, dictionary=self.dictionary,
                                previous=st.previous_word, N=N)
        if reason is not None:
            st.last_rejection = reason
            logger.debug("rejected %r: %s", word, reason.value)
            return Rejected(raw=raw, reason=reason, message=reason.message(N))

        st.last_rejection = None
        st.step_count += 1
        feedback = tuple(compute_feedback(word, st.target_word))
        st.history.append(GuessRecord(word=word, feedback=feedback))
        st.previous_word = word
        logger.info("step %d: %s", st.step_count, word)

        if word == st.target_word and not st.has_won:
            st.has_won = True
            st.just_won = True
            logger.info("solved %s -> %s in %d steps",
                        st.start_word, st.target_word, st.step_count)

        return Accepted(word=word, feedback=feedback, step_count=st.step_count,
                        has_won=st.has_won, just_won=st.just_won)

    # ---- read-only observers ----

    @property
    def start_word(self) -> str:
        return self._state.start_word

    @property
    def target_word(self) -> str:
        return self._state.target_word

    @property
    def previous_word(self) -> str:
        return self._state.previous_word

    @property
    def step_count(self) -> int:
        return self._state.step_count

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._state.history)

    @property
    def has_won(self) -> bool:
        return self._state.has_won

    @property
    def just_won(self) -> bool:
        return self._state.just_won

    @property
    def last_rejection(self) -> Optional[RejectReason]:
        return self._state.last_rejection

    @property
    def error_message(self) -> str:
        r = self._state.last_rejection
        return r.message(self.config.word_length) if r else ""

    @property
    def win_message(self) -> Optional[str]:
        return win_message(self._state.step_count) if self._state.has_won else None

    def snapshot(self) -> Dict:
        """Plain-dict view of the session for a presentation layer."""
        st = self._state
        return {
            "start_word": st.start_word,
            "target_word": st.target_word,
            "previous_word": st.previous_word,
            "step_count": st.step_count,
            "history": [(g.word, g.pattern) for g in st.history],
            "has_won": st.has_won,
            "just_won": st.just_won,
            "error": self.error_message,
            "win_message": self.win_message,
        }
