"""Word motions (``w``, ``b``, ``e``).

Characters fall into three classes: word characters (letters, digits and
underscore), blanks (a literal space), and punctuation (everything else).
A "word" is a run of word characters or a run of punctuation.
"""

from __future__ import annotations

from typing import Sequence

from vim_drill.buffer.state import Position


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def is_punctuation(ch: str) -> bool:
    return not is_word_char(ch) and ch != " "


def _skip_blanks(line: str, col: int) -> int:
    while col < len(line) and line[col] == " ":
        col += 1
    return col


def next_word_start(lines: Sequence[str], pos: Position) -> Position:
    row, col = pos
    line = lines[row]

    if col >= len(line):
        if row + 1 < len(lines):
            row += 1
            line = lines[row]
            col = _skip_blanks(line, 0)
            if col < len(line):
                return Position(row, col)
        return pos

    if line[col] == " ":
        col = _skip_blanks(line, col)
        if col < len(line):
            return Position(row, col)
    elif is_word_char(line[col]):
        while col < len(line) and is_word_char(line[col]):
            col += 1
    else:
        while col < len(line) and is_punctuation(line[col]):
            col += 1

    col = _skip_blanks(line, col)
    if col < len(line):
        return Position(row, col)

    if row + 1 < len(lines):
        row += 1
        # May land on the line length when the next line is all blanks.
        return Position(row, _skip_blanks(lines[row], 0))

    return Position(row, max(len(line) - 1, 0))


def previous_word_start(lines: Sequence[str], pos: Position) -> Position:
    row, col = pos

    if col == 0:
        if row == 0:
            return Position(0, 0)
        row -= 1
        if not lines[row]:
            return Position(row, 0)
        col = len(lines[row]) - 1
    else:
        if not lines[row]:
            return Position(row, 0)
        col = min(col, len(lines[row])) - 1

    line = lines[row]
    while col > 0 and line[col] == " ":
        col -= 1
    if col == 0:
        return Position(row, 0)

    if is_word_char(line[col]):
        while col > 0 and is_word_char(line[col - 1]):
            col -= 1
    elif line[col] != " ":
        while col > 0 and is_punctuation(line[col - 1]):
            col -= 1

    return Position(row, col)


def word_end(lines: Sequence[str], pos: Position) -> Position:
    row, col = pos
    line = lines[row]

    col += 1
    if col >= len(line):
        if row + 1 >= len(lines):
            return Position(row, max(len(line) - 1, 0))
        row += 1
        col = 0
        line = lines[row]

    col = _skip_blanks(line, col)
    if col >= len(line):
        if row + 1 >= len(lines):
            return Position(row, max(len(line) - 1, 0))
        row += 1
        line = lines[row]
        col = _skip_blanks(line, 0)

    if col < len(line) and is_word_char(line[col]):
        while col + 1 < len(line) and is_word_char(line[col + 1]):
            col += 1
    elif col < len(line):
        while col + 1 < len(line) and is_punctuation(line[col + 1]):
            col += 1

    return Position(row, col)


__all__ = [
    "is_word_char",
    "is_punctuation",
    "next_word_start",
    "previous_word_start",
    "word_end",
]
