"""Mode transitions: the five ways into Insert mode and the way out."""

from __future__ import annotations

from vim_drill.buffer import Position
from vim_drill.modes import EditorMode, InsertEntry, ModeChange
from vim_drill.runtime import telemetry

from .base import DispatchResult, EditTransaction, SessionContext


def enter_insert_mode(context: SessionContext, change: ModeChange) -> DispatchResult:
    entry = change.entry or InsertEntry.BEFORE
    buffer = context.buffer
    row, col = context.cursor.cursor

    with EditTransaction(context, f"insert_{entry.name.lower()}"):
        line = buffer.line(row)
        if entry is InsertEntry.AFTER:
            target = Position(row, col + 1 if col < len(line) else col)
        elif entry is InsertEntry.LINE_END:
            target = Position(row, len(line))
        elif entry is InsertEntry.OPEN_BELOW:
            target = buffer.insert_line(row)
        elif entry is InsertEntry.OPEN_ABOVE:
            target = buffer.insert_line_above(row)
        else:
            target = Position(row, col)

    context.cursor.move_to(target)
    context.mode = EditorMode.INSERT
    telemetry.record_event(
        "mode.insert", level="debug", data={"entry": entry.value, "cursor": target}
    )
    return context.outcome("enter_insert", keystroke=True, message=entry.value)


def exit_insert_mode(context: SessionContext, change: ModeChange) -> DispatchResult:
    del change
    row, col = context.cursor.cursor
    # Leaving Insert mode steps back onto the last typed character.
    context.cursor.move_to(Position(row, max(col - 1, 0)))
    context.mode = EditorMode.NORMAL
    return context.outcome("exit_insert")


__all__ = ["enter_insert_mode", "exit_insert_mode"]
