"""Startup logging driven by a frozen settings snapshot."""

from __future__ import annotations

import logging

from .config_model import RuntimeOptions
from .settings import ReadOnlyGameSettings

_PACKAGE_LOGGER = "gamesettings"


def configure_logging(settings: ReadOnlyGameSettings, options: RuntimeOptions | None = None) -> int:
    """Set package log verbosity from the application mode and log the settings.

    Returns:
        The logging level applied to the package logger
    """
    if not isinstance(settings, ReadOnlyGameSettings):
        raise TypeError(
            f"configure_logging expects frozen settings, call freeze() first: got={type(settings).__name__}"
        )

    level = settings.application_mode.log_level
    if options is not None and options.debug:
        level = logging.DEBUG

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)

    package_logger.info("Starting %s %s (%s)", settings.title, settings.version, settings.application_mode.name)
    for key, value in settings.summary().items():
        package_logger.debug("  %s = %s", key, value)
    return level
