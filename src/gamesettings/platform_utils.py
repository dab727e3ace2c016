"""Platform detection for the notification backend"""

import shutil
import sys

IS_LINUX = sys.platform.startswith("linux")


def has_command(name: str) -> bool:
    """Check whether an executable is on PATH."""
    return shutil.which(name) is not None


def desktop_notifier() -> str | None:
    """Return the desktop notification command for this platform, if any."""
    if IS_LINUX and has_command("notify-send"):
        return "notify-send"
    return None
