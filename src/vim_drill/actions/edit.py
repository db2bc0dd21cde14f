"""Character edits from Normal mode (``x``, ``r``) and Insert mode typing."""

from __future__ import annotations

from vim_drill.modes import EditInput

from .base import DispatchResult, EditTransaction, SessionContext


def delete_char(context: SessionContext, command: EditInput) -> DispatchResult:
    buffer = context.buffer
    position = context.cursor.cursor
    with EditTransaction(context, "delete_char"):
        for _ in range(max(command.count, 1)):
            position = buffer.delete_char(*position)
    context.cursor.move_to(position)
    return context.outcome("delete_char", keystroke=True)


def replace_char(context: SessionContext, command: EditInput) -> DispatchResult:
    if not command.char:
        return context.outcome("replace_char")
    position = context.cursor.cursor
    with EditTransaction(context, "replace_char"):
        position = context.buffer.replace_char(
            position.row, position.col, command.char
        )
    context.cursor.move_to(position)
    return context.outcome("replace_char", keystroke=True, message=command.char)


# Insert-mode typing is covered by the snapshot taken when Insert mode began.


def insert_char(context: SessionContext, command: EditInput) -> DispatchResult:
    if not command.char:
        return context.outcome("insert_char")
    row, col = context.cursor.cursor
    context.cursor.move_to(context.buffer.insert_char(row, col, command.char))
    return context.outcome("insert_char", message=command.char)


def insert_newline(context: SessionContext, command: EditInput) -> DispatchResult:
    del command
    context.cursor.move_to(context.buffer.split_line(*context.cursor.cursor))
    return context.outcome("insert_newline")


def insert_backspace(context: SessionContext, command: EditInput) -> DispatchResult:
    del command
    context.cursor.move_to(context.buffer.delete_char_before(*context.cursor.cursor))
    return context.outcome("insert_backspace")


__all__ = [
    "delete_char",
    "replace_char",
    "insert_char",
    "insert_newline",
    "insert_backspace",
]
