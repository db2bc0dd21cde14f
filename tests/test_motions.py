from __future__ import annotations

from typing import List

import pytest

from vim_drill.buffer import Position
from vim_drill.motions import MotionKind, apply_motion, go_to_line

WORDS = ["foo  bar.baz"]


def walk(lines: List[str], start: Position, motion: MotionKind, steps: int) -> List[int]:
    columns = []
    position = start
    for _ in range(steps):
        position = apply_motion(lines, position, motion)
        columns.append(position.col)
    return columns


def test_word_forward_stops() -> None:
    assert walk(WORDS, Position(0, 0), MotionKind.WORD_FORWARD, 4) == [5, 8, 9, 11]


def test_word_backward_stops() -> None:
    assert walk(WORDS, Position(0, 11), MotionKind.WORD_BACKWARD, 4) == [9, 8, 5, 0]


def test_word_end_stops() -> None:
    assert walk(WORDS, Position(0, 0), MotionKind.WORD_END, 4) == [2, 7, 8, 11]


def test_word_forward_crosses_lines_and_skips_indent() -> None:
    lines = ["foo", "  bar"]
    assert apply_motion(lines, Position(0, 0), "w") == Position(1, 2)


def test_word_backward_crosses_lines() -> None:
    lines = ["foo bar", "x"]
    assert apply_motion(lines, Position(1, 0), "b") == Position(0, 4)
    assert apply_motion(lines, Position(0, 0), "b") == Position(0, 0)


def test_word_end_stays_on_last_char_of_buffer() -> None:
    assert apply_motion(WORDS, Position(0, 11), "e") == Position(0, 11)


def test_horizontal_motions_clamp_to_line() -> None:
    lines = ["abc"]
    assert apply_motion(lines, Position(0, 0), "h") == Position(0, 0)
    assert apply_motion(lines, Position(0, 2), "l") == Position(0, 2)
    assert apply_motion(lines, Position(0, 1), "l") == Position(0, 2)


def test_vertical_motions_clamp_to_buffer() -> None:
    lines = ["abcdef", "ab"]
    assert apply_motion(lines, Position(0, 5), "j") == Position(1, 1)
    assert apply_motion(lines, Position(1, 1), "j") == Position(1, 1)
    assert apply_motion(lines, Position(0, 0), "k") == Position(0, 0)


@pytest.mark.parametrize(
    ("motion", "expected"),
    [
        ("0", Position(0, 0)),
        ("$", Position(0, 8)),
        ("^", Position(0, 2)),
    ],
)
def test_line_motions(motion: str, expected: Position) -> None:
    lines = ["  foo bar"]
    assert apply_motion(lines, Position(0, 4), motion) == expected


def test_first_non_blank_on_blank_line() -> None:
    assert apply_motion(["    "], Position(0, 3), "^") == Position(0, 0)


def test_file_motions() -> None:
    lines = ["one", "  two", "three"]
    assert apply_motion(lines, Position(2, 3), "gg") == Position(0, 0)
    assert apply_motion(lines, Position(0, 2), "G") == Position(2, 0)


def test_find_char_forward_and_backward() -> None:
    lines = ["a.b.c"]
    assert apply_motion(lines, Position(0, 0), "f", ".") == Position(0, 1)
    assert apply_motion(lines, Position(0, 1), "f", ".") == Position(0, 3)
    assert apply_motion(lines, Position(0, 4), "F", ".") == Position(0, 3)


def test_find_char_without_match_keeps_cursor() -> None:
    lines = ["abc"]
    assert apply_motion(lines, Position(0, 0), "f", "z") == Position(0, 0)
    assert apply_motion(lines, Position(0, 2), "F", "z") == Position(0, 2)
    assert apply_motion(lines, Position(0, 0), "F", "a") == Position(0, 0)


def test_unknown_motion_only_clamps() -> None:
    assert apply_motion(["abc"], Position(0, 7), "q") == Position(0, 2)


def test_empty_line_list_returns_position() -> None:
    assert apply_motion([], Position(3, 3), "j") == Position(3, 3)


def test_go_to_line_is_one_based_and_clamped() -> None:
    lines = ["a", "b", "c"]
    assert go_to_line(lines, 2) == Position(1, 0)
    assert go_to_line(lines, 10) == Position(2, 0)
    assert go_to_line(lines, 0) == Position(0, 0)


def test_motion_labels() -> None:
    assert MotionKind.FIND_FORWARD.label == "f{char}"
    assert MotionKind.FILE_START.label == "gg"
    assert MotionKind.DOWN.is_vertical
    assert MotionKind.FILE_END.is_line_jump


@pytest.mark.parametrize("char", [None, "", "b."])
def test_find_needs_exactly_one_character(char: str | None) -> None:
    lines = ["a.b.c"]
    assert apply_motion(lines, Position(0, 0), "f", char) == Position(0, 0)
    assert apply_motion(lines, Position(0, 4), "F", char) == Position(0, 4)
    assert MotionKind.FIND_FORWARD.needs_char
    assert not MotionKind.WORD_END.needs_char
