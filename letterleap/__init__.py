"""LetterLeap: word-ladder validation and feedback engine."""

from letterleap.datasets import Dictionary, DictionaryLoader, load_dictionary
from letterleap.session import Accepted, GameSession, Rejected
from letterleap.settings import GameConfig

__version__ = "0.1.0"

__all__ = [
    "Dictionary", "DictionaryLoader", "load_dictionary",
    "Accepted", "GameSession", "Rejected", "GameConfig",
]
