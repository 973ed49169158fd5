"""
Local timezone helpers.

- local_now: current moment in the configured local timezone.
- attach_local: read a naive datetime as local wall time.
- to_local: convert any datetime to the local timezone.
- with_wall_time / shift: DST-safe field replacement and arithmetic.

"Local" is Settings.LOCAL_TZ when configured, else the system zone.
"""

from datetime import datetime, timedelta
from typing import Optional
from xutils.config.settings import Settings


def local_now() -> datetime:
    tz = Settings.LOCAL_TZ
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def attach_local(dt: datetime) -> datetime:
    """Interpret a naive datetime in the local timezone; aware values pass through."""
    if dt.tzinfo is not None:
        return dt
    tz = Settings.LOCAL_TZ
    if tz is None:
        # Naive astimezone() reads the value as system local time
        return dt.astimezone()
    # pytz-style timezone (has .localize) vs zoneinfo (no .localize)
    if hasattr(tz, "localize"):
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)


def to_local(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is None:
        return None
    dt = attach_local(dt)
    tz = Settings.LOCAL_TZ
    if tz is None:
        return dt.astimezone()
    return dt.astimezone(tz)


def from_epoch_millis(millis: int) -> datetime:
    """Local datetime for epoch milliseconds."""
    seconds, rem = divmod(int(millis), 1000)
    tz = Settings.LOCAL_TZ
    if tz is None:
        dt = datetime.fromtimestamp(seconds).astimezone()
    else:
        dt = datetime.fromtimestamp(seconds, tz)
    return dt.replace(microsecond=rem * 1000)


def with_wall_time(dt: datetime, **fields) -> datetime:
    """
    Replace wall-clock fields and re-resolve the UTC offset for the new time.

    A plain replace() on a pytz-localized value keeps the old offset, which
    is wrong when the new wall time falls on the other side of a DST change.
    """
    tz = dt.tzinfo
    naive = dt.replace(tzinfo=None, **fields)
    if tz is None:
        return naive
    if hasattr(tz, "localize"):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def shift(dt: datetime, delta: timedelta) -> datetime:
    """dt + delta with the offset refreshed for pytz zones."""
    result = dt + delta
    tz = result.tzinfo
    if tz is not None and hasattr(tz, "normalize"):
        return tz.normalize(result)
    return result
