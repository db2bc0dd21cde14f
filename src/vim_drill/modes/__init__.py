"""Editor modes and the input parser."""

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
from .insert_mode import InsertMode
from .normal_mode import NormalMode, PendingState
from .parser import InputParser

__all__ = [
    "EditInput",
    "EditKind",
    "EditorMode",
    "Ignored",
    "InputParser",
    "InsertEntry",
    "InsertMode",
    "Mode",
    "ModeChange",
    "MotionInput",
    "NormalMode",
    "ParseResult",
    "PartialInput",
    "PendingState",
]
