"""
Unit tests for backend reachability tracking.
"""

from unittest.mock import Mock

import pytest

from movie_catalog.core.errors import ConnectivityError
from movie_catalog.core.status import ApiStatus, StatusReflector


@pytest.fixture
def probe():
    return Mock(return_value=None)


@pytest.fixture
def reflector(probe, clock):
    return StatusReflector(probe, interval=60.0, clock=clock)


class TestStatusReflector:
    """Tests for state transitions and probe scheduling."""

    def test_starts_checking(self, reflector):
        assert reflector.state == ApiStatus.CHECKING
        assert reflector.state.label == "Checking..."

    def test_successful_probe_is_online(self, reflector):
        assert reflector.check() == ApiStatus.ONLINE
        assert reflector.last_error is None

    def test_http_error_is_offline_without_connection_failure(self, reflector, probe):
        probe.side_effect = ConnectivityError("HTTP error! status: 500", status_code=500)
        assert reflector.check() == ApiStatus.OFFLINE
        assert not reflector.connection_failed

    def test_transport_error_is_offline_with_connection_failure(self, reflector, probe):
        probe.side_effect = ConnectivityError("Connection refused")
        assert reflector.check() == ApiStatus.OFFLINE
        assert reflector.connection_failed

    def test_follows_latest_probe_only(self, reflector, probe):
        """No hysteresis: one good probe after a failure is enough."""
        probe.side_effect = ConnectivityError("down")
        reflector.check()
        probe.side_effect = None
        assert reflector.check() == ApiStatus.ONLINE
        assert not reflector.connection_failed

    def test_first_check_always_due(self, reflector, probe):
        assert reflector.check_if_due() is True
        probe.assert_called_once()

    def test_probe_waits_for_interval(self, reflector, probe, clock):
        reflector.check_if_due()
        clock.advance(59)
        assert reflector.check_if_due() is False
        clock.advance(1)
        assert reflector.check_if_due() is True
        assert probe.call_count == 2

    def test_failed_probe_still_scheduled(self, reflector, probe, clock):
        """Probes keep running on the interval after a failure, no backoff."""
        probe.side_effect = ConnectivityError("down")
        reflector.check_if_due()
        clock.advance(60)
        assert reflector.check_if_due() is True
        assert probe.call_count == 2

    def test_checking_while_probe_runs(self, reflector, probe):
        """The state reads CHECKING for as long as the probe is in flight."""
        seen = []
        probe.side_effect = lambda: seen.append(reflector.state)
        reflector.check()
        assert seen == [ApiStatus.CHECKING]
        assert reflector.state == ApiStatus.ONLINE
