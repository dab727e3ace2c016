"""Exception handler adapter backed by logging."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggingExceptionHandler:
    """Reports exceptions to the log; fatal ones are re-raised after logging."""

    def handle(self, exc: BaseException) -> None:
        logger.error("Unhandled exception: %s", exc, exc_info=exc)

    def handle_fatal(self, exc: BaseException) -> None:
        logger.critical("Fatal exception: %s", exc, exc_info=exc)
        raise exc
