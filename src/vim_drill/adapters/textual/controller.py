"""Bridges Textual key events to an ``EditingSession`` and UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vim_drill.actions.base import DispatchResult
from vim_drill.buffer import BufferMirror
from vim_drill.modes.keys import BACKSPACE, CTRL_R, ENTER, ESC, is_printable
from vim_drill.session import EditingSession

# Textual key names that map onto the parser's named keys.
_NAMED_KEYS: Dict[str, str] = {
    "escape": ESC,
    "enter": ENTER,
    "return": ENTER,
    "backspace": BACKSPACE,
    "ctrl+h": BACKSPACE,
    "ctrl+r": CTRL_R,
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_key(key: str, character: Optional[str] = None) -> str:
    """Translate a Textual ``(key, character)`` pair into a parser key.

    Printable characters win over key names (Textual reports ``$`` as
    ``dollar_sign``); anything else passes through and the parser ignores it.
    """

    named = _NAMED_KEYS.get(key)
    if named is not None:
        return named
    if character is not None and is_printable(character):
        return character
    return key


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualDrillAdapter:
    """Feeds normalized keys into a session and refreshes the host UI."""

    def __init__(self, session: EditingSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.session.bus.subscribe("session.reset", self._on_reset)
        self._refresh_buffer()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> DispatchResult:
        normalized = normalize_key(key, character)
        self._log_state("key ->", key=key, normalized=normalized)
        result = self.session.feed(normalized)
        if result.consumed:
            self._refresh_buffer()
            self.hooks.update_status(self.status_line(result))
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            changed=result.changed,
        )
        return result

    def status_line(self, result: Optional[DispatchResult] = None) -> str:
        mode = self.session.mode.value.upper()
        row, col = self.session.cursor
        parts = [f"-- {mode} --", f"{row + 1}:{col + 1}"]
        if result is not None and result.message:
            parts.append(result.message)
        return "  ".join(parts)

    def _on_reset(self, payload: object | None) -> None:
        if isinstance(payload, BufferMirror):
            self.hooks.update_buffer(payload)
        self.hooks.update_status(self.status_line())

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "mode": self.session.mode.value,
            "cursor": tuple(self.session.cursor),
            "pending": self.session.parser.state.value,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualDrillAdapter", "TextualUIHooks", "normalize_key"]
