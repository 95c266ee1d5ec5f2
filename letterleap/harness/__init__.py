from .core import play_ladder

__all__ = ["play_ladder"]
