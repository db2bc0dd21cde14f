"""Handlers that apply parsed input to the buffer, cursor, and history."""

from .base import DispatchResult, EditTransaction, EventBus, Handler, SessionContext
from .core import enter_insert_mode, exit_insert_mode
from .edit import (
    delete_char,
    insert_backspace,
    insert_char,
    insert_newline,
    replace_char,
)
from .history import redo, undo
from .motion import move_cursor

__all__ = [
    "DispatchResult",
    "EditTransaction",
    "EventBus",
    "Handler",
    "SessionContext",
    "enter_insert_mode",
    "exit_insert_mode",
    "delete_char",
    "replace_char",
    "insert_char",
    "insert_newline",
    "insert_backspace",
    "undo",
    "redo",
    "move_cursor",
]
