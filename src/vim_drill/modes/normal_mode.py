"""Normal mode: counts, motions, and single-key edit commands."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from vim_drill.motions import SINGLE_KEY_MOTIONS, MotionKind
from vim_drill.runtime.settings import DEFAULT_MAX_COUNT

from .base_mode import (
    EditInput,
    EditKind,
    EditorMode,
    Ignored,
    InsertEntry,
    Mode,
    ModeChange,
    MotionInput,
    ParseResult,
    PartialInput,
)
from .keys import CTRL_R, is_printable, is_single_char


class PendingState(str, Enum):
    READY = "ready"
    PENDING_G = "pending_g"
    PENDING_F = "pending_f"
    PENDING_BIG_F = "pending_big_f"
    PENDING_R = "pending_r"


_INSERT_ENTRIES = {entry.value: entry for entry in InsertEntry}

_PENDING_PREFIXES = {
    "g": PendingState.PENDING_G,
    "f": PendingState.PENDING_F,
    "F": PendingState.PENDING_BIG_F,
    "r": PendingState.PENDING_R,
}


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def __init__(self, *, max_count: int = DEFAULT_MAX_COUNT) -> None:
        self.max_count = max_count
        self.state = PendingState.READY
        self.count = 0
        self.find_char: Optional[str] = None

    def reset(self) -> None:
        self.state = PendingState.READY
        self.count = 0
        self.find_char = None

    def _take_count(self) -> int:
        count, self.count = self.count, 0
        return count

    def handle_key(self, key: str) -> ParseResult:
        if key == CTRL_R:
            pending = self.state is not PendingState.READY
            self.state = PendingState.READY
            self.count = 0
            if pending:
                return Ignored(consumed=True)
            return EditInput(EditKind.REDO)

        if not is_single_char(key):
            self.state = PendingState.READY
            self.count = 0
            return Ignored(consumed=False)

        state, self.state = self.state, PendingState.READY
        if state is PendingState.PENDING_G:
            return self._after_g(key)
        if state in (PendingState.PENDING_F, PendingState.PENDING_BIG_F):
            return self._after_find(state, key)
        if state is PendingState.PENDING_R:
            return self._after_replace(key)
        return self._ready(key)

    def _after_g(self, key: str) -> ParseResult:
        count = self._take_count()
        if key == "g":
            return MotionInput(MotionKind.FILE_START, count=count)
        return Ignored(consumed=True)

    def _after_find(self, state: PendingState, key: str) -> ParseResult:
        count = self._take_count()
        if not is_printable(key):
            return Ignored(consumed=True)
        self.find_char = key
        motion = (
            MotionKind.FIND_FORWARD
            if state is PendingState.PENDING_F
            else MotionKind.FIND_BACKWARD
        )
        return MotionInput(motion, count=count, char=key)

    def _after_replace(self, key: str) -> ParseResult:
        count = self._take_count()
        if not is_printable(key):
            return Ignored(consumed=True)
        return EditInput(EditKind.REPLACE_CHAR, count=count, char=key)

    def _ready(self, key: str) -> ParseResult:
        if "0" <= key <= "9" and (self.count or key != "0"):
            self.count = min(self.count * 10 + int(key), self.max_count)
            return PartialInput()

        if key in _PENDING_PREFIXES:
            self.state = _PENDING_PREFIXES[key]
            return PartialInput()

        count = self._take_count()
        motion = SINGLE_KEY_MOTIONS.get(key)
        if motion is not None:
            return MotionInput(motion, count=count)
        if key == "x":
            return EditInput(EditKind.DELETE_CHAR, count=count)
        if key == "u":
            return EditInput(EditKind.UNDO)
        entry = _INSERT_ENTRIES.get(key)
        if entry is not None:
            return ModeChange(EditorMode.INSERT, entry=entry)
        return Ignored(consumed=False)


__all__ = ["NormalMode", "PendingState"]
