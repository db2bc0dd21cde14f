"""Undo and redo over whole-buffer snapshots."""

from __future__ import annotations

from vim_drill.buffer import UndoEntry
from vim_drill.modes import EditInput
from vim_drill.runtime import telemetry

from .base import DispatchResult, SessionContext


def undo(context: SessionContext, command: EditInput) -> DispatchResult:
    del command
    entry = context.history.undo()
    if entry is None:
        return context.outcome("undo_empty")
    context.history.push_future(context.buffer.snapshot(), context.cursor.cursor)
    _adopt(context, entry)
    _record(context, "history.undo")
    return context.outcome("undo")


def redo(context: SessionContext, command: EditInput) -> DispatchResult:
    del command
    entry = context.history.redo()
    if entry is None:
        return context.outcome("redo_empty")
    context.history.push_past(context.buffer.snapshot(), context.cursor.cursor)
    _adopt(context, entry)
    _record(context, "history.redo")
    return context.outcome("redo")


def _adopt(context: SessionContext, entry: UndoEntry) -> None:
    context.buffer.replace_lines(entry.lines)
    context.cursor.move_to(entry.cursor)


def _record(context: SessionContext, event: str) -> None:
    past, future = context.history.depth
    telemetry.record_event(
        event, level="debug", data={"past": past, "future": future}
    )


__all__ = ["undo", "redo"]
