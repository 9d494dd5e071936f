"""Wall-clock helpers shared by the session store and the rest timer."""

from datetime import datetime, timezone
from typing import Callable

# Anything returning the current time as an aware datetime.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(timezone.utc)
