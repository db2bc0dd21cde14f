from __future__ import annotations

import random
from typing import List

from vim_drill.buffer import Position
from vim_drill.runtime.settings import DrillSettings
from vim_drill.session import EditingSession, Exercise, ExerciseTracker, generate_target


def make_tracker(
    exercise: Exercise, *, min_distance: int = 3, seed: int = 7
) -> ExerciseTracker:
    session = EditingSession(settings=DrillSettings(target_min_distance=min_distance))
    tracker = ExerciseTracker(session, exercise, rng=random.Random(seed))
    tracker.start()
    return tracker


def manhattan(a: Position, b: Position) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def test_generate_target_keeps_minimum_distance() -> None:
    lines = ["abc def", "  ghi", "jkl"]
    rng = random.Random(3)
    for _ in range(20):
        target = generate_target(lines, Position(0, 0), 3, rng)
        assert manhattan(target, Position(0, 0)) >= 3
        assert lines[target.row][target.col] != " "


def test_generate_target_falls_back_to_any_non_blank_cell() -> None:
    target = generate_target(["ab"], Position(0, 0), 10, random.Random(1))
    assert target in (Position(0, 0), Position(0, 1))


def test_generate_target_on_blank_buffer() -> None:
    assert generate_target(["   ", ""], Position(0, 1), 2) == Position(0, 0)


def test_motion_exercise_counts_keystrokes_per_target() -> None:
    tracker = make_tracker(Exercise(lines=("abcdef",), targets=2))
    session = tracker.session
    hits: List[object] = []
    session.bus.subscribe("exercise.target", hits.append)

    first = tracker.target
    assert first is not None
    assert manhattan(first, session.cursor) >= 3

    session.feed_keys(["f", session.lines[0][first.col]])
    assert tracker.target_keystrokes == [2]
    assert hits == [2]
    assert tracker.completed is False

    second = tracker.target
    assert second is not None
    session.feed("Q")
    session.feed("0")
    if second.col:
        session.feed_keys(["f", session.lines[0][second.col]])
    assert tracker.completed is True
    assert tracker.targets_hit == 2
    assert tracker.target is None


def test_undo_and_insert_typing_are_free() -> None:
    tracker = make_tracker(Exercise(lines=("abc",), goal=("Xabc",)))
    tracker.session.feed_keys(["i", "X"])
    assert tracker.completed is False

    tracker.session.feed("esc")
    assert tracker.completed is True
    assert tracker.keystrokes == 1


def test_edit_exercise_completes_on_goal_buffer() -> None:
    tracker = make_tracker(Exercise(lines=("abc",), goal=("bc",)))
    completions: List[object] = []
    tracker.session.bus.subscribe("exercise.complete", completions.append)

    tracker.session.feed("x")
    assert tracker.completed is True
    assert completions == [tracker.exercise]

    tracker.session.feed("u")
    assert tracker.completed is True
    assert tracker.keystrokes == 1


def test_restart_resets_counters_and_buffer() -> None:
    tracker = make_tracker(Exercise(lines=("abc",), goal=("bc",)))
    tracker.session.feed("x")
    tracker.restart()
    assert tracker.completed is False
    assert tracker.keystrokes == 0
    assert tracker.session.lines == ("abc",)


def test_detach_stops_tracking() -> None:
    tracker = make_tracker(Exercise(lines=("abc",), goal=("bc",)))
    tracker.detach()
    tracker.session.feed("x")
    assert tracker.completed is False
    assert tracker.keystrokes == 0


def test_exercise_carries_instruction_text() -> None:
    exercise = Exercise(lines=("abc",), goal=("bc",), instruction="Delete the a.")
    assert exercise.instruction == "Delete the a."
    assert Exercise(lines=("abc",)).instruction == ""

    tracker = make_tracker(exercise)
    assert tracker.exercise.instruction == "Delete the a."
