"""
Helpers for optional integers.

Monetary rendering, epoch-millisecond timestamps (conversion, expiry
checks, formatting) and a few null-safe arithmetic predicates.
"""

from datetime import datetime, timedelta
from typing import Optional

from xutils.config.settings import Settings
from xutils.core.clock import from_epoch_millis, local_now
from xutils.services.date_service import get_date_service
from xutils.utils.currency import CurrencyCountry, format_currency, format_rupiah


def to_rupiah(value: Optional[int], using_symbol: bool = True) -> str:
    """
    Format as Indonesian Rupiah.

    Example:
        >>> to_rupiah(15000)
        'Rp15.000'
        >>> to_rupiah(None, using_symbol=False)
        '0'
    """
    return format_rupiah(value or 0, using_symbol=using_symbol)


def to_currency(
    value: Optional[int],
    country: CurrencyCountry = CurrencyCountry.ID,
    using_symbol: bool = True,
    decimal_digits: int = 0
) -> str:
    """Format as money for country; None formats as 0."""
    return format_currency(value or 0, country, using_symbol, decimal_digits)


def to_date(value: Optional[int]) -> Optional[datetime]:
    """Epoch milliseconds to a local datetime."""
    if value is None:
        return None
    return from_epoch_millis(value)


def is_expired(value: Optional[int]) -> bool:
    """True if the timestamp has passed; None counts as expired."""
    if value is None:
        return True
    return from_epoch_millis(value) < local_now()


def is_expired_with(value: Optional[int], grace: timedelta = timedelta(0)) -> bool:
    """True if timestamp + grace has passed; None counts as expired."""
    if value is None:
        return True
    return from_epoch_millis(value) + grace < local_now()


def format_date(value: Optional[int], to_format: str = Settings.DATE_FORMAT) -> Optional[str]:
    """
    Format epoch milliseconds with an LDML pattern.

    Example:
        >>> format_date(1700000000000, to_format="dd MMM yyyy")
        '14 Nov 2023'
    """
    if value is None:
        return None
    return get_date_service().format_epoch(value, to_format)


def safe(value: Optional[int]) -> int:
    return value if value is not None else 0


def is_positive(value: Optional[int]) -> bool:
    return safe(value) > 0


def is_negative(value: Optional[int]) -> bool:
    return safe(value) < 0


def to_percentage(value: Optional[int], total: int, fix_into: int = 2) -> Optional[str]:
    """
    Express value as a percentage of total.

    Example:
        >>> to_percentage(10, total=100)
        '10.00%'
    """
    if value is None or not total:
        return None
    return f"{value / total * 100:.{fix_into}f}%"
