"""Mutable state of one puzzle session: edits, undo, clear and win check."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ..core.errors import ConfigurationError
from ..core.grid import Grid, format_symbol
from ..core.history import Checkpoint, UndoLog
from ..persistence import files
from .config import GameConfig

logger = logging.getLogger(__name__)


class GameState:
    """
    Owns the working grid, the default grid used by clear, the solution
    grid used by the win check, and the undo log.

    The default and solution grids are never modified after construction.
    """

    def __init__(
        self,
        working: Grid,
        default: Grid,
        solution: Grid,
        config: Optional[GameConfig] = None,
    ):
        """
        Args:
            working: Grid the player edits. Owned by this state from now on.
            default: Grid restored by clear().
            solution: Target grid for has_won().
            config: File locations used by save(). Defaults to GameConfig().

        Raises:
            ConfigurationError: If the three grids differ in size.
        """
        if not (working.size == default.size == solution.size):
            raise ConfigurationError(
                f"Grid sizes differ: working={working.size}, "
                f"default={default.size}, solution={solution.size}"
            )

        self.config = config if config is not None else GameConfig()
        self._working = working
        self._default = default
        self._solution = solution
        self._log = UndoLog()

    @classmethod
    def from_config(cls, config: Optional[GameConfig] = None) -> GameState:
        """
        Start a fresh game from the configured level and solution files.

        Raises:
            ConfigurationError: If either file is missing or malformed.
        """
        config = config if config is not None else GameConfig()
        working, default = files.load_level(config.level_path)
        solution = files.load_solution(config.solution_path, working.size)
        return cls(working, default, solution, config)

    @classmethod
    def load(cls, config: Optional[GameConfig] = None) -> GameState:
        """
        Build a new state from the configured save file.

        The solution comes from the configured solution file and the save
        must have the same size as the configured level. All loaded cells
        are editable and the default grid equals the loaded grid. Any
        existing state is left untouched; the caller swaps in the result.

        Raises:
            SaveFileError: If the save file is missing or malformed.
            ConfigurationError: If level/solution are unusable or sizes differ.
        """
        config = config if config is not None else GameConfig()
        level, _ = files.load_level(config.level_path)
        working, default = files.load_game(config.save_path)
        if working.size != level.size:
            raise ConfigurationError(
                f"Save file {config.save_path} is {working.size}x{working.size} "
                f"but level {config.level_path} is {level.size}x{level.size}"
            )
        solution = files.load_solution(config.solution_path, working.size)
        return cls(working, default, solution, config)

    @property
    def grid_size(self) -> int:
        return self._working.size

    @property
    def undo_depth(self) -> int:
        """Number of entries currently in the undo log."""
        return len(self._log)

    def cells(self) -> Grid:
        """The working grid. Callers must treat it as read-only."""
        return self._working

    def cell_value(self, row: int, col: int) -> int:
        """
        Current value of a working cell (0 means empty).

        Raises:
            InvalidOperationError: If the position is out of range.
        """
        return self._working.get(row, col)

    def cell_symbol(self, row: int, col: int) -> str:
        """Current value of a working cell as its file token ("-" when empty)."""
        return format_symbol(self.cell_value(row, col))

    def is_editable(self, row: int, col: int) -> bool:
        return self._working.is_editable(row, col)

    def apply_move(self, row: int, col: int, value: int) -> bool:
        """
        Write value into a working cell.

        Args:
            row, col: Cell position.
            value: New value, 0 to empty the cell.

        Returns:
            True if the move was accepted, False if the position is out of
            range or the cell is not editable.

        Raises:
            InvalidOperationError: If value is outside 0..grid_size.
        """
        if not self._working.in_bounds(row, col):
            logger.debug("Rejected move at (%d, %d): out of range", row, col)
            return False
        if not self._working.is_editable(row, col):
            logger.debug("Rejected move at (%d, %d): cell is fixed", row, col)
            return False

        prior = self._working.get(row, col)
        self._working.set(row, col, value)
        self._log.record_move(row, col, prior)
        logger.debug("Move (%d, %d): %s -> %s", row, col,
                     format_symbol(prior), format_symbol(value))
        return True

    def undo(self) -> bool:
        """
        Pop one entry from the undo log.

        A move record restores the cell it names. A checkpoint is consumed
        without touching the grid; each move leaves one behind under its
        record, so the undo after reverting a move is a no-op.

        Returns:
            False if the log was empty, True otherwise.
        """
        if self._log.is_empty():
            return False

        entry = self._log.pop()
        if isinstance(entry, Checkpoint):
            logger.debug("Undo consumed a checkpoint")
            return True

        self._working.set(entry.row, entry.col, entry.prior_value)
        logger.debug("Undo restored (%d, %d) to %s", entry.row, entry.col,
                     format_symbol(entry.prior_value))
        return True

    def clear(self) -> None:
        """Reset every editable cell to its default value and restart the undo log."""
        self._log.clear()
        mask = self._working.editable
        self._working.values[mask] = self._default.values[mask]
        self._log.checkpoint()
        logger.debug("Cleared %d editable cells", int(mask.sum()))

    def has_won(self) -> bool:
        """
        True iff every working cell equals the corresponding solution cell.

        A solution that leaves any cell uncovered can never be won.
        """
        if self._solution.count_empty():
            return False
        return bool(np.array_equal(self._working.values, self._solution.values))

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Write the working grid to the save file.

        Args:
            path: Override for config.save_path.

        Raises:
            SaveFileError: If the file cannot be written.
        """
        target = path if path is not None else self.config.save_path
        return files.save_game(self._working, target)

    def __repr__(self) -> str:
        return (
            f"GameState(size={self.grid_size}, empty={self._working.count_empty()}, "
            f"undo_depth={self.undo_depth})"
        )
