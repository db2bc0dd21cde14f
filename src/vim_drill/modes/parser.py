"""Stateful key decoder that owns the active editor mode."""

from __future__ import annotations

from typing import Dict, Optional

from vim_drill.runtime import telemetry
from vim_drill.runtime.settings import DrillSettings

from .base_mode import EditorMode, Mode, ModeChange, ParseResult
from .insert_mode import InsertMode
from .normal_mode import NormalMode, PendingState


class InputParser:
    """Turns one keypress at a time into a single ``ParseResult``.

    The parser switches modes itself: an insert-entry command moves it to
    Insert mode and ``esc`` brings it back, so the caller only reacts to the
    ``ModeChange`` it receives.
    """

    def __init__(self, settings: Optional[DrillSettings] = None) -> None:
        settings = settings or DrillSettings()
        self.normal = NormalMode(max_count=settings.max_count)
        self.insert = InsertMode()
        self._modes: Dict[EditorMode, Mode] = {
            EditorMode.NORMAL: self.normal,
            EditorMode.INSERT: self.insert,
        }
        self._active = EditorMode.NORMAL

    @property
    def mode(self) -> EditorMode:
        return self._active

    @property
    def state(self) -> PendingState:
        return self.normal.state

    @property
    def count(self) -> int:
        return self.normal.count

    @property
    def find_char(self) -> Optional[str]:
        return self.normal.find_char

    def feed(self, key: str) -> ParseResult:
        mode = self._modes[self._active]
        with telemetry.span(
            name=f"parser::{mode.name.value}",
            logger_name="vim_drill.modes",
            metadata={"key": key, "mode": mode.name.value},
        ) as handle:
            result = mode.handle_key(key)
            handle.add_metadata("result", type(result).__name__)
        if isinstance(result, ModeChange):
            self._switch(result.mode)
        return result

    def reset(self) -> None:
        """Drop pending input and return to Normal mode."""

        for mode in self._modes.values():
            mode.reset()
        self._active = EditorMode.NORMAL

    def _switch(self, mode: EditorMode) -> None:
        if mode is self._active:
            return
        self._modes[self._active].reset()
        self._active = mode
        telemetry.record_event(
            "mode.switch", level="debug", data={"mode": mode.value}
        )


__all__ = ["InputParser"]
