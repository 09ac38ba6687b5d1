"""Haptic-style feedback pulses.

Desktops have no vibration motor, so pulses are logged and warning/error
notifications fall back to an audible beep when one is supplied.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from billgen.logs import logger

log = logger(__name__)


class ImpactStyle(Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class NotificationType(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Haptics:
    """Emit impact and notification pulses."""

    def __init__(self, beep: Optional[Callable[[], None]] = None, enabled: bool = True) -> None:
        self.beep = beep
        self.enabled = enabled

    def impact(self, style: ImpactStyle) -> None:
        if self.enabled:
            log.debug("Impact pulse: %s", style.value)

    def notification(self, kind: NotificationType) -> None:
        if not self.enabled:
            return
        log.debug("Notification pulse: %s", kind.value)
        if kind is not NotificationType.SUCCESS and self.beep is not None:
            self.beep()
