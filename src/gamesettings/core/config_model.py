"""Core runtime options model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RuntimeOptions:
    debug: bool = False
    notifications_enabled: bool = True
    notification_timeout: float = 2.0
