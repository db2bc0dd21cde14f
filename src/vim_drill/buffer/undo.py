"""Undo/redo history of whole-buffer snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .state import Position


@dataclass(frozen=True, slots=True)
class UndoEntry:
    lines: tuple[str, ...]
    cursor: Position


class UndoHistory:
    """Two stacks of snapshots: ``past`` for undo and ``future`` for redo.

    ``save`` is the only operation that clears ``future``, so undo and redo
    can alternate freely until a new edit is recorded.
    """

    def __init__(self) -> None:
        self._past: List[UndoEntry] = []
        self._future: List[UndoEntry] = []

    def save(self, lines: Sequence[str], cursor: Position) -> None:
        """Record the state *before* an edit and invalidate redo."""

        self._past.append(_entry(lines, cursor))
        self._future.clear()

    def undo(self) -> Optional[UndoEntry]:
        if not self._past:
            return None
        return self._past.pop()

    def redo(self) -> Optional[UndoEntry]:
        if not self._future:
            return None
        return self._future.pop()

    def push_future(self, lines: Sequence[str], cursor: Position) -> None:
        self._future.append(_entry(lines, cursor))

    def push_past(self, lines: Sequence[str], cursor: Position) -> None:
        self._past.append(_entry(lines, cursor))

    def can_undo(self) -> bool:
        return bool(self._past)

    def can_redo(self) -> bool:
        return bool(self._future)

    def reset(self) -> None:
        self._past.clear()
        self._future.clear()

    @property
    def depth(self) -> tuple[int, int]:
        return len(self._past), len(self._future)


def _entry(lines: Sequence[str], cursor: Position) -> UndoEntry:
    return UndoEntry(lines=tuple(lines), cursor=Position(*cursor))
