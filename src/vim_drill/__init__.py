"""Vim motion and editing drill engine, independent of any UI."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "modes",
    "motions",
    "runtime",
    "session",
]

__version__ = "0.1.0"
