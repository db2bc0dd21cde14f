"""Motion kinds and the pure motion engine."""

from .engine import apply_motion, clamp, go_to_line
from .kinds import SINGLE_KEY_MOTIONS, MotionKind
from .words import next_word_start, previous_word_start, word_end

__all__ = [
    "MotionKind",
    "SINGLE_KEY_MOTIONS",
    "apply_motion",
    "clamp",
    "go_to_line",
    "next_word_start",
    "previous_word_start",
    "word_end",
]
