"""Parse results and the base class shared by the mode key handlers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from vim_drill.motions import MotionKind


class EditorMode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"


class InsertEntry(str, Enum):
    """How a Normal-mode command enters Insert mode."""

    BEFORE = "i"
    AFTER = "a"
    LINE_END = "A"
    OPEN_BELOW = "o"
    OPEN_ABOVE = "O"


class EditKind(str, Enum):
    DELETE_CHAR = "delete_char"
    REPLACE_CHAR = "replace_char"
    UNDO = "undo"
    REDO = "redo"
    INSERT_CHAR = "insert_char"
    INSERT_NEWLINE = "insert_newline"
    INSERT_BACKSPACE = "insert_backspace"


@dataclass(frozen=True, slots=True)
class PartialInput:
    """Key consumed; the command needs more keys."""

    @property
    def consumed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class MotionInput:
    """A complete motion. ``count`` is 0 when no count was typed."""

    motion: MotionKind
    count: int = 0
    char: Optional[str] = None

    @property
    def consumed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class EditInput:
    edit: EditKind
    count: int = 0
    char: Optional[str] = None

    @property
    def consumed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ModeChange:
    """Switch to ``mode``; ``entry`` says how Insert mode was entered."""

    mode: EditorMode
    entry: Optional[InsertEntry] = None

    @property
    def consumed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Ignored:
    """No action. ``consumed=False`` means the key was not understood at all."""

    consumed: bool = False


ParseResult = Union[PartialInput, MotionInput, EditInput, ModeChange, Ignored]


class Mode:
    """Base class for the per-mode key handlers driven by ``InputParser``."""

    name: EditorMode

    def handle_key(self, key: str) -> ParseResult:  # pragma: no cover - abstract
        raise NotImplementedError

    def reset(self) -> None:  # pragma: no cover - default no-op
        return None


__all__ = [
    "EditKind",
    "EditInput",
    "EditorMode",
    "Ignored",
    "InsertEntry",
    "Mode",
    "ModeChange",
    "MotionInput",
    "ParseResult",
    "PartialInput",
]
