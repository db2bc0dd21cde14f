"""Validation helpers used when installing exercise data."""

from __future__ import annotations

from typing import Sequence

from .state import Position
from .sync import BufferValidationError


def ensure_cursor(lines: Sequence[str], cursor: Position) -> Position:
    row, col = cursor
    if row < 0 or row >= len(lines):
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > len(lines[row]):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return Position(row, col)
