"""Env configuration adapter producing structured RuntimeOptions."""

from __future__ import annotations

from ..config import Config
from ..core.config_model import RuntimeOptions


def load_runtime_options(source: Config | None = None) -> RuntimeOptions:
    """Build RuntimeOptions from `source`, or from a fresh read of the environment."""
    env = source if source is not None else Config()
    return RuntimeOptions(
        debug=env.DEBUG,
        notifications_enabled=env.NOTIFICATIONS_ENABLED,
        notification_timeout=env.NOTIFICATION_TIMEOUT,
    )
