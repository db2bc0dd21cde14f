"""Session orchestration: dispatcher, editing session, exercise tracking."""

from vim_drill.actions.base import DispatchResult, EventBus, SessionContext

from .dispatcher import DEFAULT_EDIT_HANDLERS, ActionDispatcher
from .exercise import Exercise, ExerciseTracker, generate_target
from .session import EditingSession

__all__ = [
    "ActionDispatcher",
    "DEFAULT_EDIT_HANDLERS",
    "DispatchResult",
    "EditingSession",
    "EventBus",
    "Exercise",
    "ExerciseTracker",
    "SessionContext",
    "generate_target",
]
