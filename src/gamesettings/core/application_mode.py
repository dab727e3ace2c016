"""Application run modes.

The mode decides how chatty downstream subsystems are.
"""

from __future__ import annotations

import logging
from enum import Enum, auto


class ApplicationMode(Enum):
    """Run mode of the application."""

    DEVELOPER = auto()  # Info logs, developer tooling visible
    DEBUG = auto()  # Everything, including debug logs
    RELEASE = auto()  # Warnings and errors only

    @property
    def log_level(self) -> int:
        """Logging level downstream consumers should use in this mode."""
        return MODE_LOG_LEVELS[self]


MODE_LOG_LEVELS: dict[ApplicationMode, int] = {
    ApplicationMode.DEVELOPER: logging.INFO,
    ApplicationMode.DEBUG: logging.DEBUG,
    ApplicationMode.RELEASE: logging.WARNING,
}
