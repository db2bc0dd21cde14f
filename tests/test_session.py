from __future__ import annotations

from typing import List

import pytest

from vim_drill.actions import DispatchResult
from vim_drill.buffer import BufferMirror, BufferValidationError, Position
from vim_drill.modes import EditorMode
from vim_drill.session import EditingSession


def make_session(*lines: str, cursor: tuple[int, int] = (0, 0)) -> EditingSession:
    return EditingSession(lines, cursor=cursor)


def test_counted_vertical_motion() -> None:
    session = make_session(*["line"] * 5)
    result = session.feed_keys("3j")[-1]
    assert result.status == "motion"
    assert result.keystroke is True
    assert session.cursor == Position(3, 0)


def test_count_with_g_jumps_to_line() -> None:
    session = make_session(*["line"] * 5)
    session.feed_keys("2G")
    assert session.cursor == Position(1, 0)
    session.feed_keys("10G")
    assert session.cursor == Position(4, 0)
    session.feed_keys("3gg")
    assert session.cursor == Position(2, 0)


def test_large_count_clamps_at_buffer_edge() -> None:
    session = make_session(*["line"] * 5, cursor=(4, 2))
    session.feed_keys("99k")
    assert session.cursor == Position(0, 2)


def test_g_then_x_consumes_keys_without_editing() -> None:
    session = make_session("abc", cursor=(0, 1))
    first, second = session.feed_keys("gx")
    assert first.status == "pending"
    assert second.status == "ignored"
    assert second.consumed is True
    assert second.keystroke is True
    assert session.lines == ("abc",)
    assert session.cursor == Position(0, 1)


def test_unknown_key_is_reported_unconsumed() -> None:
    session = make_session("abc")
    result = session.feed("Q")
    assert result.consumed is False
    assert result.keystroke is False


def test_find_without_match_keeps_cursor() -> None:
    session = make_session("abc")
    result = session.feed_keys("fz")[-1]
    assert result.status == "motion"
    assert session.cursor == Position(0, 0)


def test_vertical_motion_remembers_desired_column() -> None:
    session = make_session("hello world", "hi", "hello world")
    session.feed_keys("8l")
    assert session.cursor == Position(0, 8)
    session.feed("j")
    assert session.cursor == Position(1, 1)
    session.feed("j")
    assert session.cursor == Position(2, 8)


def test_dollar_pins_vertical_motion_to_line_end() -> None:
    session = make_session("abc", "abcdef", "ab")
    session.feed("$")
    assert session.cursor == Position(0, 2)
    session.feed("j")
    assert session.cursor == Position(1, 5)
    session.feed("j")
    assert session.cursor == Position(2, 1)


def test_horizontal_motion_resets_desired_column() -> None:
    session = make_session("abcdef", "abcdef")
    session.feed_keys("$h")
    session.feed("j")
    assert session.cursor == Position(1, 4)


def test_delete_char_with_count() -> None:
    session = make_session("abcdef", cursor=(0, 1))
    result = session.feed_keys("3x")[-1]
    assert result.changed is True
    assert result.keystroke is True
    assert session.lines == ("aef",)
    assert session.cursor == Position(0, 1)


def test_replace_char_ignores_count() -> None:
    session = make_session("abc")
    session.feed_keys("3rz")
    assert session.lines == ("zbc",)


@pytest.mark.parametrize(
    ("key", "cursor", "expected"),
    [
        ("i", (0, 1), Position(0, 1)),
        ("a", (0, 1), Position(0, 2)),
        ("a", (0, 2), Position(0, 3)),
        ("A", (0, 0), Position(0, 3)),
    ],
)
def test_insert_entry_positions(
    key: str, cursor: tuple[int, int], expected: Position
) -> None:
    session = make_session("abc", cursor=cursor)
    result = session.feed(key)
    assert result.status == "enter_insert"
    assert session.mode is EditorMode.INSERT
    assert session.cursor == expected


def test_append_on_empty_line_stays_at_column_zero() -> None:
    session = make_session("")
    session.feed("a")
    assert session.cursor == Position(0, 0)


def test_open_line_below_and_above() -> None:
    session = make_session("one", "two")
    session.feed("o")
    assert session.lines == ("one", "", "two")
    assert session.cursor == Position(1, 0)
    session.feed("esc")
    session.feed("O")
    assert session.lines == ("one", "", "", "two")
    assert session.cursor == Position(1, 0)


def test_typing_then_escape_steps_back() -> None:
    session = make_session("abc")
    results = session.feed_keys(["i", "X", "Y", "esc"])
    assert session.lines == ("XYabc",)
    assert session.mode is EditorMode.NORMAL
    assert session.cursor == Position(0, 1)
    assert [r.keystroke for r in results] == [True, False, False, False]


def test_escape_at_column_zero_stays() -> None:
    session = make_session("abc")
    session.feed_keys(["i", "esc"])
    assert session.cursor == Position(0, 0)


def test_enter_and_backspace_in_insert_mode() -> None:
    session = make_session("ab", "cd", cursor=(1, 0))
    session.feed("i")
    session.feed("backspace")
    assert session.lines == ("abcd",)
    assert session.cursor == Position(0, 2)
    session.feed("enter")
    assert session.lines == ("ab", "cd")
    assert session.cursor == Position(1, 0)


def test_undo_and_redo_are_symmetric() -> None:
    session = make_session("abc", cursor=(0, 1))
    session.feed("x")
    assert session.lines == ("ac",)

    undo = session.feed("u")
    assert undo.status == "undo"
    assert undo.keystroke is False
    assert session.lines == ("abc",)
    assert session.cursor == Position(0, 1)

    redo = session.feed("ctrl+r")
    assert redo.status == "redo"
    assert session.lines == ("ac",)

    session.feed("u")
    assert session.lines == ("abc",)


def test_whole_insert_session_is_one_undo_step() -> None:
    session = make_session("abc")
    session.feed_keys(["A", "d", "e", "esc"])
    assert session.lines == ("abcde",)
    session.feed("u")
    assert session.lines == ("abc",)
    assert session.cursor == Position(0, 0)


def test_undo_with_empty_history() -> None:
    session = make_session("abc")
    assert session.feed("u").status == "undo_empty"
    assert session.feed("ctrl+r").status == "redo_empty"


def test_new_edit_clears_redo() -> None:
    session = make_session("abc")
    session.feed_keys("xu")
    session.feed_keys("rq")
    assert session.feed("ctrl+r").status == "redo_empty"
    assert session.lines == ("qbc",)


def test_session_publishes_dispatch_and_reset_events() -> None:
    session = make_session("abc")
    dispatched: List[DispatchResult] = []
    resets: List[BufferMirror] = []
    session.bus.subscribe("session.dispatch", dispatched.append)  # type: ignore[arg-type]
    session.bus.subscribe("session.reset", resets.append)  # type: ignore[arg-type]

    session.feed_keys("lx")
    assert [r.status for r in dispatched] == ["motion", "delete_char"]

    session.restart()
    assert session.lines == ("abc",)
    assert session.cursor == Position(0, 0)
    assert resets[-1].lines == ("abc",)
    assert not session.history.can_undo()


def test_load_validates_cursor() -> None:
    session = make_session("abc")
    with pytest.raises(BufferValidationError):
        session.load(["abc"], (1, 0))
    with pytest.raises(BufferValidationError):
        EditingSession(["abc"], cursor=(0, 9))


def test_matches_compares_whole_buffer() -> None:
    session = make_session("abc", "def")
    assert session.matches(["abc", "def"])
    assert not session.matches(["abc"])


def test_mirror_exposes_pending_input() -> None:
    session = make_session("abc")
    session.feed_keys("12")
    mirror = session.mirror()
    assert mirror.attributes == {"pending": "ready", "count": "12"}
    session.feed("g")
    assert session.mirror().attributes["pending"] == "pending_g"


@pytest.mark.parametrize("prefix", ["r", "g", "2f"])
def test_ctrl_r_after_pending_prefix_does_not_redo(prefix: str) -> None:
    session = make_session("abc")
    session.feed_keys("xu")
    session.feed_keys(prefix)

    result = session.feed("ctrl+r")
    assert result.consumed is True
    assert result.status == "ignored"
    assert result.changed is False
    assert session.lines == ("abc",)

    assert session.feed("ctrl+r").status == "redo"
    assert session.lines == ("bc",)


def test_undo_all_then_redo_all_walks_every_state() -> None:
    session = make_session("abc def")
    steps = [
        ["x"],
        ["r", "Z"],
        ["a", "Q", "esc"],
        ["o", "n", "e", "w", "esc"],
        ["3", "x"],
    ]
    states = [(session.lines, session.cursor)]
    for keys in steps:
        session.feed_keys(keys)
        states.append((session.lines, session.cursor))

    assert states[1] == (("bc def",), Position(0, 0))
    assert states[2] == (("Zc def",), Position(0, 0))
    assert states[3] == (("ZQc def",), Position(0, 1))
    assert states[4] == (("ZQc def", "new"), Position(1, 2))
    assert states[5] == (("ZQc def", ""), Position(1, 0))

    for expected in reversed(states[:-1]):
        assert session.feed("u").status == "undo"
        assert (session.lines, session.cursor) == expected
    assert session.feed("u").status == "undo_empty"

    for expected in states[1:]:
        assert session.feed("ctrl+r").status == "redo"
        assert (session.lines, session.cursor) == expected
    assert session.feed("ctrl+r").status == "redo_empty"
