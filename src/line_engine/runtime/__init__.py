"""Runtime services: telemetry and settings."""

from . import telemetry
from .settings import DEFAULT_SETTINGS, EngineSettings

__all__ = ["telemetry", "EngineSettings", "DEFAULT_SETTINGS"]
