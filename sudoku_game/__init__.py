"""State and persistence engine for single-player grid puzzles."""

from .core import (
    Cell,
    Grid,
    ConfigurationError,
    InvalidOperationError,
    SaveFileError,
    SudokuGameError,
)
from .game import GameConfig, GameState

__version__ = "1.0.0"

__all__ = [
    "Cell", "Grid", "GameConfig", "GameState",
    "SudokuGameError", "ConfigurationError", "SaveFileError", "InvalidOperationError",
]
