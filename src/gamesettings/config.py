"""Runtime options of the gamesettings library, read from the environment."""
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Environment snapshot taken at construction time"""

    def __init__(self):
        self.DEBUG = _env_flag("GAMESETTINGS_DEBUG", "false")

        # Desktop notifications (Linux notify-send)
        self.NOTIFICATIONS_ENABLED = _env_flag("GAMESETTINGS_NOTIFICATIONS", "true")
        self.NOTIFICATION_TIMEOUT = float(os.getenv("GAMESETTINGS_NOTIFICATION_TIMEOUT", "2"))

