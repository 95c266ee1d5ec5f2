from __future__ import annotations

from letterleap.settings import WIN_FALLBACK, WIN_TIERS


def win_message(steps: int) -> str:
    """Congratulation for finishing in `steps` steps; tier bounds are inclusive."""
    for bound, msg in WIN_TIERS:
        if steps <= bound:
            return msg
    return WIN_FALLBACK
