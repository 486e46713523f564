"""UTC time helpers."""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def unix_seconds(clock: Clock = utc_now) -> int:
    """Return whole seconds since the epoch as reported by ``clock``."""
    return int(clock().timestamp())


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports ``moment``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return lambda: moment
