"""
Backend reachability tracking.
"""

import time
from enum import Enum
from typing import Callable

from movie_catalog.core.errors import ConnectivityError
from movie_catalog.utils.logging_config import get_logger

logger = get_logger(__name__)


class ApiStatus(str, Enum):
    CHECKING = "checking"
    ONLINE = "online"
    OFFLINE = "offline"

    @property
    def label(self) -> str:
        return {
            ApiStatus.CHECKING: "Checking...",
            ApiStatus.ONLINE: "Online",
            ApiStatus.OFFLINE: "Offline",
        }[self]


class StatusReflector:
    """
    Tracks whether the backend answers a reachability probe.

    The state is set from the latest probe result only. A probe runs on the
    first check and then whenever `interval` seconds have passed since the
    previous one.

    Args:
        probe: Callable that returns on success and raises
            ConnectivityError when the backend is unreachable or unhealthy
        interval: Seconds between probes
        clock: Monotonic time source
    """

    def __init__(
        self,
        probe: Callable[[], object],
        interval: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.probe = probe
        self.interval = interval
        self._clock = clock
        self.state = ApiStatus.CHECKING
        self.last_checked: float | None = None
        self.last_error: ConnectivityError | None = None

    @property
    def connection_failed(self) -> bool:
        """True when the latest probe got no response at all."""
        return self.last_error is not None and self.last_error.unreachable

    def is_due(self) -> bool:
        if self.last_checked is None:
            return True
        return self._clock() - self.last_checked >= self.interval

    def check(self) -> ApiStatus:
        """Run the probe now and update the state."""
        self.state = ApiStatus.CHECKING
        self.last_checked = self._clock()
        try:
            self.probe()
        except ConnectivityError as e:
            logger.error(f"API connection error: {e}")
            self.state = ApiStatus.OFFLINE
            self.last_error = e
        else:
            self.state = ApiStatus.ONLINE
            self.last_error = None
        return self.state

    def check_if_due(self) -> bool:
        """Probe if the interval has elapsed. Returns True when a probe ran."""
        if not self.is_due():
            return False
        self.check()
        return True
