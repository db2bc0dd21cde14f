"""Exercise bookkeeping: keystroke counts, motion targets, and goal buffers.

Medal thresholds and lesson content live with the caller; the tracker only
reports how many keystrokes each target took and when the exercise is done.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from vim_drill.actions.base import DispatchResult
from vim_drill.buffer import Position
from vim_drill.modes import EditorMode
from vim_drill.runtime import telemetry

from .session import EditingSession


@dataclass(frozen=True, slots=True)
class Exercise:
    """A starting buffer plus either a goal buffer or a number of targets.

    ``instruction`` is the task text a host shows to the player.
    """

    lines: tuple[str, ...]
    cursor: Position = Position(0, 0)
    goal: Optional[tuple[str, ...]] = None
    targets: int = 0
    instruction: str = ""

    @property
    def is_edit(self) -> bool:
        return self.goal is not None


def _blank(ch: str) -> bool:
    return ch in (" ", "\t")


def generate_target(
    lines: Sequence[str],
    cursor: Position,
    min_distance: int,
    rng: Optional[random.Random] = None,
) -> Position:
    """Pick a random non-blank cell at least ``min_distance`` away (Manhattan)."""

    rng = rng or random.Random()
    cells = [
        Position(row, col)
        for row, line in enumerate(lines)
        for col, ch in enumerate(line)
        if not _blank(ch)
    ]
    far = [
        cell
        for cell in cells
        if abs(cell.row - cursor.row) + abs(cell.col - cursor.col) >= min_distance
    ]
    candidates = far or cells
    if not candidates:
        return Position(0, 0)
    return rng.choice(candidates)


class ExerciseTracker:
    """Follows a session's dispatch events and decides when an exercise ends.

    Events published on the session bus:

    ``exercise.target`` -- a target was reached; payload is its keystroke count
    ``exercise.complete`` -- payload is the ``Exercise``
    """

    def __init__(
        self,
        session: EditingSession,
        exercise: Exercise,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.session = session
        self.exercise = exercise
        self.rng = rng or random.Random()
        self.keystrokes = 0
        self.target_keystrokes: List[int] = []
        self.target: Optional[Position] = None
        self.completed = False
        session.bus.subscribe("session.dispatch", self._on_dispatch)

    @property
    def targets_hit(self) -> int:
        return len(self.target_keystrokes)

    def start(self) -> None:
        """Load the exercise into the session and reset all counters."""

        self.session.load(self.exercise.lines, self.exercise.cursor)
        self.keystrokes = 0
        self.target_keystrokes = []
        self.completed = False
        self.target = None
        if not self.exercise.is_edit and self.exercise.targets > 0:
            self.target = self._next_target()

    restart = start

    def detach(self) -> None:
        self.session.bus.unsubscribe("session.dispatch", self._on_dispatch)

    def _next_target(self) -> Position:
        return generate_target(
            self.session.lines,
            self.session.cursor,
            self.session.settings.target_min_distance,
            self.rng,
        )

    def _on_dispatch(self, payload: object | None) -> None:
        if self.completed or not isinstance(payload, DispatchResult):
            return
        if payload.keystroke:
            self.keystrokes += 1

        if self.exercise.is_edit:
            # Typed text only counts once the player is back in Normal mode.
            goal = self.exercise.goal or ()
            if payload.mode is EditorMode.NORMAL and self.session.matches(goal):
                self._complete()
            return

        if payload.status == "motion" and payload.cursor == self.target:
            self._hit_target()

    def _hit_target(self) -> None:
        self.target_keystrokes.append(self.keystrokes)
        self.session.bus.emit("exercise.target", self.keystrokes)
        telemetry.record_event(
            "exercise.target",
            level="debug",
            data={"keystrokes": self.keystrokes, "hit": self.targets_hit},
        )
        self.keystrokes = 0
        if self.targets_hit >= self.exercise.targets:
            self.target = None
            self._complete()
        else:
            self.target = self._next_target()

    def _complete(self) -> None:
        self.completed = True
        self.session.bus.emit("exercise.complete", self.exercise)
        telemetry.record_event(
            "exercise.complete", data={"targets": self.targets_hit}
        )


__all__ = ["Exercise", "ExerciseTracker", "generate_target"]
