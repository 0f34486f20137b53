"""
Service exports.

Services sit on top of the domain layer: session state for a typing
animation and YAML-backed settings.
"""

from .settings_store import SettingsStore  # noqa: F401
from .typing_session import TypingConfig, TypingFrame, TypingSession  # noqa: F401

__all__ = [
    "SettingsStore",
    "TypingConfig",
    "TypingFrame",
    "TypingSession",
]
