"""Line-oriented text buffer with the edit primitives the drill needs."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .state import Position


class Buffer:
    """Mutable list of lines that always holds at least one line.

    Every primitive mutates in place and returns the resulting cursor
    position. Out-of-range input leaves the buffer untouched and returns the
    input position unchanged.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[str] = list(lines) or [""]

    @classmethod
    def from_text(cls, text: str) -> "Buffer":
        return cls(text.split("\n"))

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        return self._lines[row]

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def replace_lines(self, lines: Iterable[str]) -> None:
        self._lines = list(lines) or [""]

    def matches(self, lines: Sequence[str]) -> bool:
        return self._lines == list(lines)

    def _has_row(self, row: int) -> bool:
        return 0 <= row < len(self._lines)

    def delete_char(self, row: int, col: int) -> Position:
        """Delete the character under the cursor (``x``)."""

        if not self._has_row(row):
            return Position(row, col)
        line = self._lines[row]
        if not line or col < 0 or col >= len(line):
            return Position(row, col)
        self._lines[row] = line[:col] + line[col + 1 :]
        max_col = max(len(self._lines[row]) - 1, 0)
        return Position(row, min(col, max_col))

    def replace_char(self, row: int, col: int, ch: str) -> Position:
        """Overwrite one character in place (``r``)."""

        if not self._has_row(row):
            return Position(row, col)
        line = self._lines[row]
        if col < 0 or col >= len(line):
            return Position(row, col)
        self._lines[row] = line[:col] + ch + line[col + 1 :]
        return Position(row, col)

    def insert_char(self, row: int, col: int, ch: str) -> Position:
        """Insert ``ch`` before ``col`` and return the column after it."""

        if not self._has_row(row):
            return Position(row, col)
        line = self._lines[row]
        col = max(0, min(col, len(line)))
        self._lines[row] = line[:col] + ch + line[col:]
        return Position(row, col + 1)

    def delete_char_before(self, row: int, col: int) -> Position:
        """Backspace: delete left of the cursor or join with the line above."""

        if not self._has_row(row):
            return Position(row, col)
        if col > 0:
            line = self._lines[row]
            col = min(col, len(line))
            self._lines[row] = line[: col - 1] + line[col:]
            return Position(row, col - 1)
        if row == 0:
            return Position(0, 0)
        join_col = len(self._lines[row - 1])
        self._lines[row - 1] += self._lines.pop(row)
        return Position(row - 1, join_col)

    def split_line(self, row: int, col: int) -> Position:
        """Break the line at ``col``; the cursor starts the second half."""

        if not self._has_row(row):
            return Position(row, col)
        line = self._lines[row]
        col = max(0, min(col, len(line)))
        self._lines[row : row + 1] = [line[:col], line[col:]]
        return Position(row + 1, 0)

    def insert_line(self, after_row: int) -> Position:
        """Open an empty line below ``after_row`` (``o``)."""

        after_row = max(0, min(after_row, len(self._lines) - 1))
        self._lines.insert(after_row + 1, "")
        return Position(after_row + 1, 0)

    def insert_line_above(self, before_row: int) -> Position:
        """Open an empty line above ``before_row`` (``O``)."""

        before_row = max(0, min(before_row, len(self._lines)))
        self._lines.insert(before_row, "")
        return Position(before_row, 0)

    def __repr__(self) -> str:
        return f"Buffer({self._lines!r})"
