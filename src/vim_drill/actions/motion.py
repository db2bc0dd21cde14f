"""Counted cursor motions with vim's desired-column memory."""

from __future__ import annotations

from vim_drill.modes import MotionInput
from vim_drill.motions import MotionKind, apply_motion, go_to_line

from .base import DispatchResult, SessionContext


def move_cursor(context: SessionContext, command: MotionInput) -> DispatchResult:
    lines = context.buffer.lines
    state = context.cursor

    if command.count and command.motion.is_line_jump:
        target = go_to_line(lines, command.count)
    else:
        target = state.cursor
        for _ in range(max(command.count, 1)):
            target = apply_motion(lines, target, command.motion, command.char)

    if command.motion.is_vertical:
        state.set_cursor(target.row, state.column_for(lines[target.row]))
    elif command.motion is MotionKind.LINE_END:
        state.set_cursor(*target)
        state.pin_to_line_end()
    else:
        state.move_to(target)

    return context.outcome("motion", keystroke=True, message=command.motion.label)


__all__ = ["move_cursor"]
