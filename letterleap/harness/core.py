"""
Replay harness.

- play_ladder: feed a scripted list of raw guesses through a fresh session.

Useful for tests, demos and any front end that wants a non-interactive run.
Replay stops at the winning guess; later guesses are ignored.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Tuple

from letterleap.engine.validation import WordSet
from letterleap.session import GameSession, Rejected
from letterleap.settings import GameConfig


def play_ladder(
        guesses: Iterable[str],
        *,
        dictionary: WordSet,
        config: GameConfig | None = None,
) -> Dict:
    """
    Play `guesses` in order and summarize the game.

    Returns:
        dict with keys:
            success (bool), steps (int), submitted (int), time_ms (float),
            history (list[(word, pattern)]), rejections (list[(raw, reason)]),
            message (str | None), start_word, target_word
    """
    session = GameSession(dictionary, config)
    rejections: List[Tuple[str, str]] = []
    submitted = 0

    t0 = time.perf_counter()
    for raw in guesses:
        submitted += 1
        result = session.submit_guess(raw)
        if isinstance(result, Rejected):
            rejections.append((raw, result.reason.value))
        elif result.just_won:
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "start_word": session.start_word,
        "target_word": session.target_word,
        "success": session.has_won,
        "steps": session.step_count,
        "submitted": submitted,
        "time_ms": dt,
        "history": [(g.word, g.pattern) for g in session.history],
        "rejections": rejections,
        "message": session.win_message,
    }
