"""Square puzzle grid with per-cell editability."""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import InvalidOperationError

EMPTY = 0
EMPTY_SYMBOL = "-"

# Largest N whose values 1..N all have a single-character symbol (9, then A..Z).
MAX_SIZE = 35

# Tokens accepted as "no value" when reading files. Only "-" is written.
_EMPTY_TOKENS = frozenset({EMPTY_SYMBOL, "0", "."})


def parse_symbol(token: str) -> int:
    """
    Convert a file token into a cell value.

    "-" (also "0" or ".") is empty, digits are read as integers and
    single letters map A=10, B=11, ... for grids larger than 9.

    Raises:
        ValueError: If the token is not a recognised symbol.
    """
    token = token.strip()
    if token in _EMPTY_TOKENS:
        return EMPTY
    if token.isdigit():
        return int(token)
    if len(token) == 1 and token.isalpha():
        return ord(token.upper()) - ord("A") + 10
    raise ValueError(f"Unrecognised cell symbol {token!r}")


def format_symbol(value: int) -> str:
    """Convert a cell value into its file token."""
    if value == EMPTY:
        return EMPTY_SYMBOL
    if value <= 9:
        return str(value)
    return chr(ord("A") + value - 10)


@dataclass(frozen=True)
class Cell:
    """Snapshot of one grid position: its value and whether it may be edited."""
    value: int = EMPTY
    editable: bool = True

    @property
    def symbol(self) -> str:
        return format_symbol(self.value)


class Grid:
    """
    An N x N grid of cells.

    Values live in an int32 matrix (0 means empty) and editability in a
    boolean mask of the same shape. Both are fixed in size at construction.
    """

    def __init__(
        self,
        size: int,
        values: Optional[np.ndarray] = None,
        editable: Optional[np.ndarray] = None,
    ):
        """
        Initialize a grid.

        Args:
            size: Number of rows (and columns), 1 to MAX_SIZE.
            values: Optional initial values. If None, every cell is empty.
            editable: Optional editability mask. If None, every cell is editable.
        """
        if not 0 < size <= MAX_SIZE:
            raise InvalidOperationError(f"Grid size must be 1-{MAX_SIZE}, got {size}")

        self.size = size

        if values is not None:
            if values.shape != (size, size):
                raise InvalidOperationError(f"Grid shape must be ({size}, {size})")
            self.values = values.copy().astype(np.int32)
        else:
            self.values = np.zeros((size, size), dtype=np.int32)

        if editable is not None:
            if editable.shape != (size, size):
                raise InvalidOperationError(f"Mask shape must be ({size}, {size})")
            self.editable = editable.copy().astype(bool)
        else:
            self.editable = np.ones((size, size), dtype=bool)

    @property
    def box_size(self) -> int:
        """Side of a box for rendering; the whole grid when N is not a square."""
        root = math.isqrt(self.size)
        return root if root * root == self.size else self.size

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_position(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise InvalidOperationError(
                f"Position ({row}, {col}) is outside a {self.size}x{self.size} grid"
            )

    def _check_value(self, value: int) -> None:
        if value < EMPTY or value > self.size:
            raise InvalidOperationError(f"Value must be 0-{self.size}, got {value}")

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        self._check_position(row, col)
        return int(self.values[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self._check_position(row, col)
        self._check_value(value)
        self.values[row, col] = value

    def is_editable(self, row: int, col: int) -> bool:
        self._check_position(row, col)
        return bool(self.editable[row, col])

    def place(self, row: int, col: int, value: int, editable: bool) -> None:
        """Set both value and editability of a cell (used while building grids)."""
        self.set(row, col, value)
        self.editable[row, col] = editable

    def cell(self, row: int, col: int) -> Cell:
        """Get a read-only snapshot of the cell at (row, col)."""
        self._check_position(row, col)
        return Cell(int(self.values[row, col]), bool(self.editable[row, col]))

    def iter_positions(self) -> Iterator[Tuple[int, int]]:
        """Yield every (row, col) in row-major order."""
        for i in range(self.size):
            for j in range(self.size):
                yield i, j

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.values == EMPTY))

    def copy(self) -> Grid:
        """Create a deep copy of the grid."""
        return Grid(self.size, self.values, self.editable)

    def to_rows(self) -> List[List[str]]:
        """Rows of file tokens, "-" for empty cells."""
        return [[format_symbol(int(v)) for v in row] for row in self.values]

    def __str__(self) -> str:
        """Pretty-print the grid with box separators."""
        box = self.box_size
        boxes = self.size // box
        lines = []
        horizontal_sep = "+" + (("-" * (box * 2 + 1)) + "+") * boxes

        for i in range(self.size):
            if i % box == 0:
                lines.append(horizontal_sep)

            row_str = "|"
            for j in range(self.size):
                val = int(self.values[i, j])
                row_str += " ." if val == EMPTY else f" {format_symbol(val)}"
                if (j + 1) % box == 0:
                    row_str += " |"

            lines.append(row_str)

        lines.append(horizontal_sep)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, empty={self.count_empty()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self.values, other.values)
            and np.array_equal(self.editable, other.editable)
        )

    __hash__ = None
