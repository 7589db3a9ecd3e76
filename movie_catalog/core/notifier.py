"""
Transient notifications.

One notification is visible at a time; a new one replaces the current one
and each expires after a fixed duration.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from movie_catalog.utils.logging_config import get_logger

logger = get_logger(__name__)


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity
    expires_at: float


class TransientNotifier:
    """Holds the single current notification until it expires."""

    def __init__(self, duration: float = 3.0, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self._clock = clock
        self._current: Notification | None = None

    def notify(self, message: str, severity: Severity | str = Severity.SUCCESS) -> Notification:
        """Show a message, replacing whatever is currently shown."""
        notification = Notification(
            message=message,
            severity=Severity(severity),
            expires_at=self._clock() + self.duration,
        )
        self._current = notification
        logger.debug(f"Notify [{notification.severity.value}]: {message}")
        return notification

    def current(self) -> Notification | None:
        """The visible notification, or None once it has expired."""
        if self._current is not None and self._clock() >= self._current.expires_at:
            self._current = None
        return self._current

    def dismiss(self) -> None:
        self._current = None
