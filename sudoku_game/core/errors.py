"""Exception hierarchy for the puzzle state engine."""


class SudokuGameError(Exception):
    """Base class for every error raised by sudoku_game."""


class ConfigurationError(SudokuGameError):
    """A level or solution file is missing, malformed, or inconsistent."""


class SaveFileError(SudokuGameError, OSError):
    """A save file could not be written, read, or parsed."""


class InvalidOperationError(SudokuGameError, ValueError):
    """The caller broke the contract of a game operation."""
