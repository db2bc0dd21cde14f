"""Shared context, results, and the edit transaction used by action handlers."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, Dict, Optional

from vim_drill.buffer import Buffer, CursorState, Position, UndoHistory
from vim_drill.modes import EditorMode
from vim_drill.runtime import telemetry


class EventBus:
    """Minimal publish/subscribe hub between the session and outer layers."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """What one keypress did to the session.

    ``keystroke`` marks actions an outer scoring layer should count: pending
    prefixes, motions, ``x``, ``r`` and insert entry. Undo/redo, typed text
    and leaving Insert mode are free.
    """

    consumed: bool
    status: str
    mode: EditorMode
    cursor: Position
    changed: bool = False
    keystroke: bool = False
    message: Optional[str] = None


@dataclass(slots=True)
class SessionContext:
    """Everything a handler may read or mutate for one editing session."""

    buffer: Buffer
    cursor: CursorState
    history: UndoHistory
    bus: EventBus
    mode: EditorMode = EditorMode.NORMAL

    def outcome(
        self,
        status: str,
        *,
        consumed: bool = True,
        keystroke: bool = False,
        message: Optional[str] = None,
    ) -> DispatchResult:
        return DispatchResult(
            consumed=consumed,
            status=status,
            mode=self.mode,
            cursor=self.cursor.cursor,
            keystroke=keystroke,
            message=message,
        )


class EditTransaction(AbstractContextManager["EditTransaction"]):
    """Snapshot the buffer for undo, then run the edit inside a telemetry span."""

    def __init__(self, context: SessionContext, label: str) -> None:
        self.context = context
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "EditTransaction":
        cursor = self.context.cursor.cursor
        self.context.history.save(self.context.buffer.snapshot(), cursor)
        self._span_cm = telemetry.span(
            name=f"edit::{self.label}",
            component="edit",
            metadata={"row": cursor.row, "col": cursor.col},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


Handler = Callable[[SessionContext, object], DispatchResult]

__all__ = [
    "DispatchResult",
    "EditTransaction",
    "EventBus",
    "Handler",
    "SessionContext",
]
