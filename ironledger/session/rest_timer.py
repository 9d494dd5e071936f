"""Rest countdown between sets.

The timer stores a target wall-clock instant rather than counting ticks, so a
countdown stays correct when periodic refreshes are dropped or the process is
suspended: remaining time is recomputed from the clock every time it's read.
"""

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, Optional

from pydantic import BaseModel

from ironledger.utils.clock import Clock, utc_now

logger = logging.getLogger(__name__)

# What the "+30s" control adds.
DEFAULT_EXTEND_SECONDS = 30


class RestTimerStatus(BaseModel):
    """A consistent snapshot of the timer.

    `just_expired` is true only for the refresh that reached zero, so pollers
    can notify once; `expired` stays true until the timer is restarted,
    extended or dismissed.
    """

    running: bool
    remaining_seconds: float
    duration_seconds: int
    target: Optional[datetime] = None
    expired: bool
    just_expired: bool = False


class RestTimer:
    """A wall-clock-anchored countdown.

    `refresh()` may be called from a periodic UI callback and from a resume
    handler in any order, and from several threads: every method holds the
    timer's lock.

    Args:
        clock: Returns the current time. Injected for tests.
        on_expired: Called once when a countdown reaches zero.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        on_expired: Callable[[], None] | None = None,
    ):
        self._clock = clock
        self._on_expired = on_expired
        self._lock = threading.RLock()
        self._target: datetime | None = None
        self._duration_seconds = 0
        self._remaining = 0.0
        self._expired = False
        self._just_expired = False

    @property
    def is_running(self) -> bool:
        """True between start() and dismiss(), including after expiry."""
        return self._target is not None

    @property
    def target(self) -> datetime | None:
        return self._target

    @property
    def duration_seconds(self) -> int:
        """The duration the current countdown was started with."""
        return self._duration_seconds

    @property
    def remaining_seconds(self) -> float:
        """Remaining time as of the last start(), extend() or refresh()."""
        return self._remaining

    @property
    def expired(self) -> bool:
        return self._expired

    def status(self) -> RestTimerStatus:
        with self._lock:
            return RestTimerStatus(
                running=self.is_running,
                remaining_seconds=self._remaining,
                duration_seconds=self._duration_seconds,
                target=self._target,
                expired=self._expired,
                just_expired=self._just_expired,
            )

    def start(self, duration_seconds: int) -> None:
        if duration_seconds < 0:
            raise ValueError(f"Rest duration must be non-negative, got {duration_seconds}")
        with self._lock:
            self._target = self._clock() + timedelta(seconds=duration_seconds)
            self._duration_seconds = duration_seconds
            self._remaining = float(duration_seconds)
            self._expired = False
            self._just_expired = False
        logger.debug(f"Rest timer started for {duration_seconds}s")

    def extend(self, delta_seconds: int = DEFAULT_EXTEND_SECONDS) -> bool:
        """Push the target back by `delta_seconds`.

        Works mid-countdown and after expiry as long as the timer hasn't been
        dismissed. Returns False when there is nothing to extend.
        """
        if delta_seconds < 0:
            raise ValueError(f"Rest extension must be non-negative, got {delta_seconds}")
        with self._lock:
            if self._target is None:
                return False
            self._target += timedelta(seconds=delta_seconds)
            self._duration_seconds += delta_seconds
            self.refresh()
            if self._remaining > 0:
                # Back above zero, so reaching zero again notifies again.
                self._expired = False
                self._just_expired = False
            return True

    def refresh(self) -> float:
        """Recompute the remaining time from the clock and return it.

        The first refresh that observes zero fires the expiry callback;
        later ones are no-ops.
        """
        with self._lock:
            self._just_expired = False
            if self._target is None:
                self._remaining = 0.0
                return self._remaining

            remaining = (self._target - self._clock()).total_seconds()
            self._remaining = max(0.0, remaining)
            if self._remaining == 0 and not self._expired:
                self._expired = True
                self._just_expired = True
                logger.debug("Rest timer expired")
                if self._on_expired is not None:
                    self._on_expired()
            return self._remaining

    def dismiss(self) -> None:
        """Cancel the countdown regardless of remaining time."""
        with self._lock:
            self._target = None
            self._duration_seconds = 0
            self._remaining = 0.0
            self._expired = False
            self._just_expired = False
