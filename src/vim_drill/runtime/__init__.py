"""Runtime services: telemetry and settings."""

from . import settings, telemetry
from .settings import DrillSettings

__all__ = ["DrillSettings", "settings", "telemetry"]
