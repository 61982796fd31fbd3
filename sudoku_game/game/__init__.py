"""Game session state and its configuration."""

from .config import GameConfig
from .state import GameState

__all__ = ["GameConfig", "GameState"]
