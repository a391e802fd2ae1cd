"""
BloomFlow Safety — Clock helpers

Engine functions never read wall-clock time on their own: anything
time-dependent takes `now` (or a Clock) from the caller and falls back to
utc_now only at the outer edge.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are treated as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def resolve_now(now: Optional[datetime] = None, clock: Optional[Clock] = None) -> datetime:
    """Pick the explicit `now`, then the clock, then real time"""
    if now is not None:
        return as_utc(now)
    if clock is not None:
        return as_utc(clock())
    return utc_now()
