from .machine import GameSession
from .messages import win_message
from .state import Accepted, GameState, GuessRecord, Rejected, SubmitResult

__all__ = [
    "GameSession", "win_message",
    "Accepted", "GameState", "GuessRecord", "Rejected", "SubmitResult",
]
