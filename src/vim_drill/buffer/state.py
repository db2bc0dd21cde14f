"""Cursor position and desired-column tracking."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import NamedTuple

# Desired column after ``$``: every later vertical move lands on the line end.
LINE_END_COLUMN = sys.maxsize


class Position(NamedTuple):
    """Zero-indexed ``(row, col)`` pair."""

    row: int
    col: int


@dataclass(slots=True)
class CursorState:
    """Mutable cursor plus the column vertical motions try to return to."""

    cursor: Position = Position(0, 0)
    desired_col: int = 0

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = Position(row, col)

    def move_to(self, position: Position) -> None:
        """Adopt ``position`` and remember its column for ``j``/``k``."""

        self.cursor = Position(*position)
        self.desired_col = self.cursor.col

    def pin_to_line_end(self) -> None:
        self.desired_col = LINE_END_COLUMN

    def column_for(self, line: str) -> int:
        """Column a vertical move should land on for ``line``."""

        return min(self.desired_col, max(len(line) - 1, 0))
