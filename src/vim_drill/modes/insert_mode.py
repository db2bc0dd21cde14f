"""Insert mode: literal text entry until Escape."""

from __future__ import annotations

from .base_mode import (
    EditInput,
    EditKind,
    EditorMode,
    Ignored,
    Mode,
    ModeChange,
    ParseResult,
)
from .keys import BACKSPACE, CTRL_R, ENTER, ESC, is_printable, is_single_char


class InsertMode(Mode):
    name = EditorMode.INSERT

    def handle_key(self, key: str) -> ParseResult:
        if key == ESC:
            return ModeChange(EditorMode.NORMAL)
        if key == ENTER:
            return EditInput(EditKind.INSERT_NEWLINE)
        if key == BACKSPACE:
            return EditInput(EditKind.INSERT_BACKSPACE)
        if is_printable(key):
            return EditInput(EditKind.INSERT_CHAR, char=key)
        if is_single_char(key):
            return Ignored(consumed=True)
        return Ignored(consumed=key in _SWALLOWED)


# Named keys that mean something in Normal mode but nothing while typing.
_SWALLOWED = frozenset({CTRL_R})

__all__ = ["InsertMode"]
