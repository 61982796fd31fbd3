"""Undo log: a LIFO stack of move records and checkpoint markers."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Union

from .errors import InvalidOperationError


@dataclass(frozen=True)
class MoveRecord:
    """A reversible edit: where it happened and what the cell held before."""
    row: int
    col: int
    prior_value: int


@dataclass(frozen=True)
class Checkpoint:
    """Marker entry with no position or value."""

    def __repr__(self) -> str:
        return "CHECKPOINT"


CHECKPOINT = Checkpoint()

LogEntry = Union[MoveRecord, Checkpoint]


class UndoLog:
    """
    Ordered stack of undo entries.

    Every accepted move is recorded as a checkpoint followed by its
    MoveRecord, so the record sits on top and is popped first. The
    checkpoint left behind is consumed by the next pop.
    """

    def __init__(self):
        self._entries: List[LogEntry] = []

    def push(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    def pop(self) -> LogEntry:
        """Remove and return the newest entry."""
        if not self._entries:
            raise InvalidOperationError("Cannot pop from an empty undo log")
        return self._entries.pop()

    def record_move(self, row: int, col: int, prior_value: int) -> MoveRecord:
        """Push a checkpoint, then the record for this move."""
        record = MoveRecord(row, col, prior_value)
        self.push(CHECKPOINT)
        self.push(record)
        return record

    def checkpoint(self) -> None:
        self.push(CHECKPOINT)

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        """Iterate newest entry first."""
        return reversed(self._entries)

    def __repr__(self) -> str:
        return f"UndoLog(depth={len(self._entries)})"
