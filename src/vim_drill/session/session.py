"""Editing session: one buffer, cursor, parser, and history per exercise."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from vim_drill.actions.base import DispatchResult, EventBus, SessionContext
from vim_drill.buffer import (
    Buffer,
    BufferMirror,
    CursorState,
    Position,
    UndoHistory,
    ensure_cursor,
)
from vim_drill.modes import EditorMode, InputParser
from vim_drill.runtime import telemetry
from vim_drill.runtime.settings import DrillSettings

from .dispatcher import ActionDispatcher


class EditingSession:
    """Feeds keys through the parser and applies them to the buffer.

    Events published on ``bus``:

    ``session.reset`` -- a buffer was (re)loaded; payload is a ``BufferMirror``
    ``session.dispatch`` -- a key was processed; payload is the ``DispatchResult``
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        cursor: Position | tuple[int, int] = Position(0, 0),
        settings: Optional[DrillSettings] = None,
        bus: Optional[EventBus] = None,
        dispatcher: Optional[ActionDispatcher] = None,
    ) -> None:
        self.settings = settings or DrillSettings()
        self.parser = InputParser(self.settings)
        self.dispatcher = dispatcher or ActionDispatcher()
        self.context = SessionContext(
            buffer=Buffer(),
            cursor=CursorState(),
            history=UndoHistory(),
            bus=bus or EventBus(),
        )
        self._initial: tuple[tuple[str, ...], Position] = (("",), Position(0, 0))
        self.load(lines, cursor)

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def history(self) -> UndoHistory:
        return self.context.history

    @property
    def bus(self) -> EventBus:
        return self.context.bus

    @property
    def cursor(self) -> Position:
        return self.context.cursor.cursor

    @property
    def desired_col(self) -> int:
        return self.context.cursor.desired_col

    @property
    def mode(self) -> EditorMode:
        return self.context.mode

    @property
    def lines(self) -> tuple[str, ...]:
        return self.context.buffer.lines

    def load(
        self, lines: Iterable[str], cursor: Position | tuple[int, int] = Position(0, 0)
    ) -> None:
        """Install a new buffer; raises ``BufferValidationError`` on a bad cursor."""

        buffer_lines = tuple(lines) or ("",)
        start = ensure_cursor(buffer_lines, Position(*cursor))
        self._initial = (buffer_lines, start)
        self.restart()

    def restart(self) -> None:
        """Return to the last loaded buffer with fresh parser and history."""

        lines, start = self._initial
        self.context.buffer.replace_lines(lines)
        self.context.cursor.move_to(start)
        self.context.mode = EditorMode.NORMAL
        self.parser.reset()
        self.context.history.reset()
        self.bus.emit("session.reset", self.mirror())

    def feed(self, key: str) -> DispatchResult:
        with telemetry.span(
            "session::feed",
            logger_name="vim_drill.session",
            component="session",
            metadata={"key": key},
        ) as handle:
            parsed = self.parser.feed(key)
            result = self.dispatcher.dispatch(self.context, parsed)
            handle.add_metadata("status", result.status)
        self.bus.emit("session.dispatch", result)
        return result

    def feed_keys(self, keys: Iterable[str]) -> List[DispatchResult]:
        """Feed several keys; a plain string is split into characters."""

        return [self.feed(key) for key in keys]

    def matches(self, lines: Sequence[str]) -> bool:
        return self.context.buffer.matches(lines)

    def mirror(self) -> BufferMirror:
        attributes = {"pending": self.parser.state.value}
        if self.parser.count:
            attributes["count"] = str(self.parser.count)
        return BufferMirror(
            lines=self.context.buffer.lines,
            cursor=self.cursor,
            mode=self.context.mode.value,
            attributes=attributes,
        )


__all__ = ["EditingSession"]
