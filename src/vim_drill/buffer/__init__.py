"""Buffer, cursor, and undo/redo data structures."""

from .buffer import Buffer
from .state import LINE_END_COLUMN, CursorState, Position
from .sync import BufferMirror, BufferValidationError
from .undo import UndoEntry, UndoHistory
from .validation import ensure_cursor

__all__ = [
    "Buffer",
    "BufferMirror",
    "BufferValidationError",
    "CursorState",
    "LINE_END_COLUMN",
    "Position",
    "UndoEntry",
    "UndoHistory",
    "ensure_cursor",
]
