"""Boundary types exchanged with renderers and hosts."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import Position


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Read-only snapshot describing what a renderer should draw."""

    lines: tuple[str, ...]
    cursor: Position
    mode: str
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferValidationError(RuntimeError):
    """Raised when exercise data places the cursor outside its buffer."""

    def __init__(self, message: str, *, cursor: Position | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
