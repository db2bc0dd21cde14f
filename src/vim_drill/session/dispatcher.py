"""Routes each parse result to the action handler that applies it."""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Optional

from vim_drill.actions import core as core_actions
from vim_drill.actions import edit as edit_actions
from vim_drill.actions import history as history_actions
from vim_drill.actions import motion as motion_actions
from vim_drill.actions.base import DispatchResult, Handler, SessionContext
from vim_drill.modes import (
    EditInput,
    EditKind,
    EditorMode,
    ModeChange,
    MotionInput,
    ParseResult,
    PartialInput,
)

DEFAULT_EDIT_HANDLERS: Mapping[EditKind, Handler] = {
    EditKind.DELETE_CHAR: edit_actions.delete_char,
    EditKind.REPLACE_CHAR: edit_actions.replace_char,
    EditKind.INSERT_CHAR: edit_actions.insert_char,
    EditKind.INSERT_NEWLINE: edit_actions.insert_newline,
    EditKind.INSERT_BACKSPACE: edit_actions.insert_backspace,
    EditKind.UNDO: history_actions.undo,
    EditKind.REDO: history_actions.redo,
}


class ActionDispatcher:
    """Applies one ``ParseResult`` to a ``SessionContext``."""

    def __init__(
        self, *, edit_handlers: Optional[Mapping[EditKind, Handler]] = None
    ) -> None:
        self._edit_handlers = dict(DEFAULT_EDIT_HANDLERS)
        if edit_handlers:
            self._edit_handlers.update(edit_handlers)

    def dispatch(self, context: SessionContext, result: ParseResult) -> DispatchResult:
        if not result.consumed:
            return context.outcome("ignored", consumed=False)

        before = context.buffer.snapshot()
        if isinstance(result, PartialInput):
            outcome = context.outcome("pending", keystroke=True)
        elif isinstance(result, MotionInput):
            outcome = motion_actions.move_cursor(context, result)
        elif isinstance(result, EditInput):
            outcome = self._edit_handlers[result.edit](context, result)
        elif isinstance(result, ModeChange):
            if result.mode is EditorMode.INSERT:
                outcome = core_actions.enter_insert_mode(context, result)
            else:
                outcome = core_actions.exit_insert_mode(context, result)
        else:
            # Swallowed keys such as the ``x`` in ``gx`` still cost a keystroke.
            outcome = context.outcome(
                "ignored", keystroke=context.mode is EditorMode.NORMAL
            )
        return replace(outcome, changed=context.buffer.snapshot() != before)


__all__ = ["ActionDispatcher", "DEFAULT_EDIT_HANDLERS"]
