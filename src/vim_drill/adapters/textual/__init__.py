"""Textual host integration."""

from .controller import TextualDrillAdapter, TextualUIHooks, normalize_key

__all__ = ["TextualDrillAdapter", "TextualUIHooks", "normalize_key"]
