"""Key identifiers fed to the parser."""

from __future__ import annotations

ESC = "esc"
ENTER = "enter"
BACKSPACE = "backspace"
CTRL_R = "ctrl+r"


def is_single_char(key: str) -> bool:
    return len(key) == 1


def is_printable(key: str) -> bool:
    """A single character that can be inserted into a line."""

    return len(key) == 1 and key.isprintable()


__all__ = [
    "ESC",
    "ENTER",
    "BACKSPACE",
    "CTRL_R",
    "is_single_char",
    "is_printable",
]
