"""
Helpers for optional datetimes.

Expiration checks, formatting, same-day comparisons (today, yesterday,
tomorrow), day boundaries, relative-time text, age and epoch conversion,
arithmetic shortcuts and differences.

Naive datetimes are read as local wall time; "now" and calendar days are
evaluated in the local timezone (see xutils.core.clock).
"""

from datetime import datetime, timedelta
from typing import Optional

from xutils.config.settings import Settings
from xutils.core.clock import attach_local, local_now, shift, to_local, with_wall_time
from xutils.services.date_service import get_date_service


def is_expired(dt: Optional[datetime]) -> bool:
    """
    True if the date is None or before the current moment.

    Example:
        >>> is_expired(datetime(2000, 1, 1))
        True
    """
    if dt is None:
        return True
    return attach_local(dt) < local_now()


def is_expired_with(dt: Optional[datetime], grace: timedelta = timedelta(0)) -> bool:
    """True if the date plus a grace period is before now; None counts as expired."""
    if dt is None:
        return True
    return attach_local(dt) + grace < local_now()


def format_date(dt: Optional[datetime], target_format: str = Settings.DATE_FORMAT) -> str:
    """
    Format with an LDML pattern, trying the supported locales in order.

    Returns "" for None or when no locale can render the pattern.

    Example:
        >>> format_date(datetime(2024, 3, 5), target_format="dd MMM yyyy")
        '05 Mar 2024'
    """
    return get_date_service().format(dt, target_format)


def is_same_day(dt: Optional[datetime], other: datetime) -> bool:
    """Same calendar day in the local timezone."""
    if dt is None:
        return False
    return to_local(dt).date() == to_local(other).date()


def is_today(dt: Optional[datetime]) -> bool:
    return is_same_day(dt, local_now())


def is_yesterday(dt: Optional[datetime]) -> bool:
    return is_same_day(dt, local_now() - timedelta(days=1))


def is_tomorrow(dt: Optional[datetime]) -> bool:
    return is_same_day(dt, local_now() + timedelta(days=1))


def beginning_of_day(dt: Optional[datetime]) -> Optional[datetime]:
    """Midnight (00:00:00) of the same day, keeping the timezone."""
    if dt is None:
        return None
    return with_wall_time(dt, hour=0, minute=0, second=0, microsecond=0)


def end_of_day(dt: Optional[datetime]) -> Optional[datetime]:
    """23:59:59.999 of the same day, keeping the timezone."""
    if dt is None:
        return None
    return with_wall_time(dt, hour=23, minute=59, second=59, microsecond=999000)


def format_relative(dt: Optional[datetime]) -> str:
    """
    Human relative time: "Just now", "5 minute(s) ago", "3 hour(s) ago",
    "Yesterday", "Tomorrow", "4 day(s) ago", "2 month(s) ago", "1 year(s) ago".

    Past and future are both phrased with "ago" beyond tomorrow; months are
    30 days and years 365 days.
    """
    if dt is None:
        return ""

    diff = abs(local_now() - attach_local(dt))
    seconds = int(diff.total_seconds())
    minutes = seconds // 60
    hours = seconds // 3600
    days = diff.days

    if is_today(dt):
        if seconds < 60:
            return "Just now"
        if minutes < 60:
            return f"{minutes} minute(s) ago"
        return f"{hours} hour(s) ago"

    if is_yesterday(dt):
        return "Yesterday"
    if is_tomorrow(dt):
        return "Tomorrow"

    if days < 30:
        return f"{days} day(s) ago"
    if days < 365:
        return f"{days // 30} month(s) ago"

    return f"{days // 365} year(s) ago"


def age(dt: Optional[datetime]) -> Optional[int]:
    """Full years elapsed since dt (birthdate); None for None."""
    if dt is None:
        return None
    return age_years(dt)


def age_years(dt: Optional[datetime]) -> int:
    """
    Full years elapsed since dt; 0 for None.

    Example:
        >>> age_years(datetime(1990, 5, 12))  # on 2024-05-11
        33
    """
    if dt is None:
        return 0

    today = local_now()
    born = to_local(dt)
    years = today.year - born.year

    # if birthday hasn't happened yet this year, subtract one
    if (today.month, today.day) < (born.month, born.day):
        years -= 1

    return years


def to_epoch(dt: Optional[datetime]) -> Optional[int]:
    """Epoch milliseconds."""
    if dt is None:
        return None
    return int(attach_local(dt).timestamp() * 1000)


def to_epoch_seconds(dt: Optional[datetime]) -> Optional[int]:
    if dt is None:
        return None
    return int(attach_local(dt).timestamp())


def add_days(dt: Optional[datetime], days: int) -> Optional[datetime]:
    return shift(dt, timedelta(days=days)) if dt is not None else None


def add_hours(dt: Optional[datetime], hours: int) -> Optional[datetime]:
    return shift(dt, timedelta(hours=hours)) if dt is not None else None


def add_minutes(dt: Optional[datetime], minutes: int) -> Optional[datetime]:
    return shift(dt, timedelta(minutes=minutes)) if dt is not None else None


def subtract_days(dt: Optional[datetime], days: int) -> Optional[datetime]:
    return shift(dt, -timedelta(days=days)) if dt is not None else None


def subtract_hours(dt: Optional[datetime], hours: int) -> Optional[datetime]:
    return shift(dt, -timedelta(hours=hours)) if dt is not None else None


def difference_from(dt: Optional[datetime], other: Optional[datetime]) -> timedelta:
    """dt - other, or zero if either is None."""
    if dt is None or other is None:
        return timedelta(0)
    return attach_local(dt) - attach_local(other)


def difference_abs(dt: Optional[datetime], other: Optional[datetime]) -> timedelta:
    return abs(difference_from(dt, other))


def _whole_units(delta: timedelta, unit: timedelta) -> int:
    # Truncate toward zero like integer division of a signed duration
    ratio = delta / unit
    return int(ratio)


def diff_in_minutes(dt: Optional[datetime], other: Optional[datetime], abs: bool = False) -> int:
    delta = difference_abs(dt, other) if abs else difference_from(dt, other)
    return _whole_units(delta, timedelta(minutes=1))


def diff_in_hours(dt: Optional[datetime], other: Optional[datetime], abs: bool = False) -> int:
    delta = difference_abs(dt, other) if abs else difference_from(dt, other)
    return _whole_units(delta, timedelta(hours=1))
