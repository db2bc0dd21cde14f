"""Pure cursor motions over a snapshot of buffer lines.

Nothing here mutates the buffer or touches history; the session layer is
responsible for counts and for the desired column of vertical moves.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from vim_drill.buffer.state import Position

from .kinds import MotionKind
from .words import next_word_start, previous_word_start, word_end

MotionFunc = Callable[[Sequence[str], Position, Optional[str]], Position]


def clamp(lines: Sequence[str], pos: Position) -> Position:
    """Pull ``pos`` onto an existing character (column 0 on empty lines)."""

    row = max(0, min(pos.row, len(lines) - 1))
    max_col = max(len(lines[row]) - 1, 0)
    return Position(row, max(0, min(pos.col, max_col)))


def _current_row(lines: Sequence[str], pos: Position) -> Position:
    return Position(max(0, min(pos.row, len(lines) - 1)), pos.col)


def _line_end(lines: Sequence[str], pos: Position, _char: Optional[str]) -> Position:
    row = _current_row(lines, pos).row
    return Position(row, max(len(lines[row]) - 1, 0))


def _first_non_blank(
    lines: Sequence[str], pos: Position, _char: Optional[str]
) -> Position:
    row = _current_row(lines, pos).row
    for col, ch in enumerate(lines[row]):
        if not ch.isspace():
            return Position(row, col)
    return Position(row, 0)


def _file_end(lines: Sequence[str], pos: Position, _char: Optional[str]) -> Position:
    return clamp(lines, Position(len(lines) - 1, 0))


def find_char_forward(
    lines: Sequence[str], pos: Position, char: Optional[str]
) -> Position:
    if not char or len(char) != 1:
        return pos
    line = lines[pos.row]
    index = line.find(char, max(pos.col + 1, 0))
    return pos if index < 0 else Position(pos.row, index)


def find_char_backward(
    lines: Sequence[str], pos: Position, char: Optional[str]
) -> Position:
    if not char or len(char) != 1 or pos.col <= 0:
        return pos
    line = lines[pos.row]
    index = line.rfind(char, 0, pos.col)
    return pos if index < 0 else Position(pos.row, index)


def _clamped(
    step: Callable[[Position], Position],
) -> MotionFunc:
    def motion(
        lines: Sequence[str], pos: Position, _char: Optional[str]
    ) -> Position:
        return clamp(lines, step(pos))

    return motion


def _word_motion(
    func: Callable[[Sequence[str], Position], Position],
) -> MotionFunc:
    def motion(
        lines: Sequence[str], pos: Position, _char: Optional[str]
    ) -> Position:
        return func(lines, _current_row(lines, pos))

    return motion


def _find_motion(func: MotionFunc) -> MotionFunc:
    def motion(lines: Sequence[str], pos: Position, char: Optional[str]) -> Position:
        return func(lines, _current_row(lines, pos), char)

    return motion


MOTIONS: Dict[MotionKind, MotionFunc] = {
    MotionKind.LEFT: _clamped(lambda p: Position(p.row, p.col - 1)),
    MotionKind.RIGHT: _clamped(lambda p: Position(p.row, p.col + 1)),
    MotionKind.DOWN: _clamped(lambda p: Position(p.row + 1, p.col)),
    MotionKind.UP: _clamped(lambda p: Position(p.row - 1, p.col)),
    MotionKind.LINE_START: _clamped(lambda p: Position(p.row, 0)),
    MotionKind.LINE_END: _line_end,
    MotionKind.FIRST_NON_BLANK: _first_non_blank,
    MotionKind.FILE_START: _clamped(lambda p: Position(0, 0)),
    MotionKind.FILE_END: _file_end,
    MotionKind.WORD_FORWARD: _word_motion(next_word_start),
    MotionKind.WORD_BACKWARD: _word_motion(previous_word_start),
    MotionKind.WORD_END: _word_motion(word_end),
    MotionKind.FIND_FORWARD: _find_motion(find_char_forward),
    MotionKind.FIND_BACKWARD: _find_motion(find_char_backward),
}


def apply_motion(
    lines: Sequence[str],
    pos: Position,
    motion: MotionKind | str,
    char: Optional[str] = None,
) -> Position:
    """Return where ``motion`` moves the cursor from ``pos``.

    ``char`` is the single target character of ``f``/``F``; anything else
    leaves the cursor where it is. Unknown motions only clamp the position;
    an empty line list returns ``pos`` untouched.
    """

    pos = Position(*pos)
    if not lines:
        return pos
    try:
        kind = MotionKind(motion)
    except ValueError:
        return clamp(lines, pos)
    if kind.needs_char and (char is None or len(char) != 1):
        return pos
    return MOTIONS[kind](lines, pos, char)


def go_to_line(lines: Sequence[str], line_number: int) -> Position:
    """Jump to 1-based ``line_number`` (``5G``/``5gg``), clamped to the buffer."""

    row = max(0, min(line_number - 1, len(lines) - 1))
    return Position(row, 0)


__all__ = [
    "MOTIONS",
    "MotionFunc",
    "apply_motion",
    "clamp",
    "find_char_backward",
    "find_char_forward",
    "go_to_line",
]
