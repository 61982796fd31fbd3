"""Core module for grid representation and undo bookkeeping."""

from .errors import SudokuGameError, ConfigurationError, SaveFileError, InvalidOperationError
from .grid import Cell, Grid, EMPTY, EMPTY_SYMBOL, MAX_SIZE, parse_symbol, format_symbol
from .history import MoveRecord, Checkpoint, CHECKPOINT, UndoLog

__all__ = [
    "SudokuGameError", "ConfigurationError", "SaveFileError", "InvalidOperationError",
    "Cell", "Grid", "EMPTY", "EMPTY_SYMBOL", "MAX_SIZE", "parse_symbol", "format_symbol",
    "MoveRecord", "Checkpoint", "CHECKPOINT", "UndoLog",
]
