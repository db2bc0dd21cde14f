"""Motion identifiers understood by the engine."""

from __future__ import annotations

from enum import Enum


class MotionKind(str, Enum):
    """Cursor motions, valued by the key sequence that triggers them."""

    LEFT = "h"
    DOWN = "j"
    UP = "k"
    RIGHT = "l"
    WORD_FORWARD = "w"
    WORD_BACKWARD = "b"
    WORD_END = "e"
    LINE_START = "0"
    LINE_END = "$"
    FIRST_NON_BLANK = "^"
    FILE_START = "gg"
    FILE_END = "G"
    FIND_FORWARD = "f"
    FIND_BACKWARD = "F"

    @property
    def label(self) -> str:
        """Display name used in hints, e.g. ``"f{char}"``."""

        if self in _NEEDS_CHAR:
            return f"{self.value}{{char}}"
        return self.value

    @property
    def is_vertical(self) -> bool:
        return self in (MotionKind.DOWN, MotionKind.UP)

    @property
    def is_line_jump(self) -> bool:
        """Whether a count means "go to line N" rather than "repeat N times"."""

        return self in (MotionKind.FILE_START, MotionKind.FILE_END)

    @property
    def needs_char(self) -> bool:
        return self in _NEEDS_CHAR


_NEEDS_CHAR = frozenset({MotionKind.FIND_FORWARD, MotionKind.FIND_BACKWARD})

# Single keys that complete a motion on their own in Normal mode.
SINGLE_KEY_MOTIONS: dict[str, MotionKind] = {
    kind.value: kind
    for kind in MotionKind
    if len(kind.value) == 1 and kind not in _NEEDS_CHAR
}

__all__ = ["MotionKind", "SINGLE_KEY_MOTIONS"]
