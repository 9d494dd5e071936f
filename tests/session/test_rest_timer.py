"""Tests for the rest countdown."""

import threading
from unittest.mock import Mock

import pytest

from ironledger.session import RestTimer
from tests._factories import FakeClock


@pytest.fixture
def on_expired() -> Mock:
    return Mock()


@pytest.fixture
def timer(clock: FakeClock, on_expired: Mock) -> RestTimer:
    return RestTimer(clock=clock, on_expired=on_expired)


class TestRestTimer:
    """Tests for RestTimer."""

    def test_idle_timer(self, timer: RestTimer, on_expired: Mock):
        assert not timer.is_running
        assert timer.refresh() == 0
        on_expired.assert_not_called()

    def test_counts_down_from_wall_clock(self, timer: RestTimer, clock: FakeClock):
        timer.start(90)
        assert timer.is_running
        assert timer.remaining_seconds == 90
        clock.advance(30)
        assert timer.refresh() == 60

    def test_suspended_past_target_expires_once(
        self, timer: RestTimer, clock: FakeClock, on_expired: Mock
    ):
        timer.start(90)
        clock.advance(95)  # no refreshes while suspended

        assert timer.refresh() == 0
        assert timer.expired
        timer.refresh()
        timer.refresh()
        on_expired.assert_called_once()

    def test_extend_mid_countdown(self, timer: RestTimer, clock: FakeClock):
        timer.start(90)
        clock.advance(80)
        assert timer.extend()
        assert timer.remaining_seconds == 40
        assert timer.duration_seconds == 120

    def test_extend_after_expiry_rearms(
        self, timer: RestTimer, clock: FakeClock, on_expired: Mock
    ):
        timer.start(60)
        clock.advance(70)
        timer.refresh()
        assert on_expired.call_count == 1

        assert timer.extend(30)
        assert timer.remaining_seconds == 20
        assert not timer.expired
        clock.advance(20)
        timer.refresh()
        assert on_expired.call_count == 2

    def test_extend_when_idle(self, timer: RestTimer):
        assert not timer.extend()
        assert not timer.is_running

    def test_dismiss(self, timer: RestTimer, clock: FakeClock, on_expired: Mock):
        timer.start(90)
        timer.dismiss()
        clock.advance(100)
        assert not timer.is_running
        assert timer.refresh() == 0
        on_expired.assert_not_called()

    def test_restart_replaces_countdown(self, timer: RestTimer, clock: FakeClock):
        timer.start(150)
        clock.advance(10)
        timer.start(60)
        assert timer.refresh() == 60
        assert timer.duration_seconds == 60

    def test_zero_duration_expires_on_refresh(self, timer: RestTimer, on_expired: Mock):
        timer.start(0)
        assert timer.refresh() == 0
        on_expired.assert_called_once()

    def test_negative_duration(self, timer: RestTimer):
        with pytest.raises(ValueError):
            timer.start(-1)

    def test_negative_extension(self, timer: RestTimer):
        timer.start(90)
        with pytest.raises(ValueError):
            timer.extend(-30)
        assert timer.duration_seconds == 90

    def test_just_expired_only_on_crossing_refresh(self, timer: RestTimer, clock: FakeClock):
        timer.start(60)
        clock.advance(30)
        timer.refresh()
        assert not timer.status().just_expired

        clock.advance(40)
        timer.refresh()
        assert timer.status().just_expired
        timer.refresh()
        status = timer.status()
        assert status.expired and not status.just_expired


class PausingClock(FakeClock):
    """FakeClock that can hold one call until released from another thread."""

    def __init__(self):
        super().__init__()
        self.pause_next = False
        self.entered = threading.Event()
        self.release = threading.Event()

    def __call__(self):
        if self.pause_next:
            self.pause_next = False
            self.entered.set()
            self.release.wait(timeout=5)
        return self.now


def test_start_waits_for_refresh_in_progress(on_expired: Mock):
    clock = PausingClock()
    timer = RestTimer(clock=clock, on_expired=on_expired)
    timer.start(60)
    clock.advance(61)

    clock.pause_next = True
    refresher = threading.Thread(target=timer.refresh)
    refresher.start()
    assert clock.entered.wait(timeout=5)

    starter = threading.Thread(target=timer.start, args=(90,))
    starter.start()
    starter.join(timeout=0.2)
    assert starter.is_alive()  # held until the refresh finishes

    clock.release.set()
    refresher.join(timeout=5)
    starter.join(timeout=5)
    assert on_expired.call_count == 1

    # The new countdown is intact and expires on its own.
    assert timer.refresh() == 90
    clock.advance(100)
    assert timer.refresh() == 0
    assert on_expired.call_count == 2
