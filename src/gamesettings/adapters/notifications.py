"""Desktop notification adapter."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field

from .. import platform_utils
from ..core.config_model import RuntimeOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesktopNotificationService:
    """Logs notifications and mirrors them to the desktop when possible.

    Holds only frozen options, so one instance can be shared freely.
    The default options are fixed; pass `load_runtime_options()` to honour
    the environment.
    """

    options: RuntimeOptions = field(default_factory=RuntimeOptions)

    def push(self, text: str) -> None:
        logger.info("Notification: %s", text)
        if not self.options.notifications_enabled:
            return
        command = platform_utils.desktop_notifier()
        if command is None:
            return
        timeout_ms = int(self.options.notification_timeout * 1000)
        try:
            subprocess.run(
                [command, "-t", str(timeout_ms), text],
                timeout=self.options.notification_timeout + 1,
                capture_output=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            # Desktop notifications are optional
            logger.debug("Desktop notification failed: %s", e)
