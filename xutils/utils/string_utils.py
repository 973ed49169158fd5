"""
Helpers for optional strings.

Numeric parsing, date parsing/formatting (delegated to the shared
DateFormatService), currency rendering, validation, masking,
capitalization and other common transformations. Every function accepts
None and returns a documented fallback instead of raising.
"""

import re
from datetime import datetime
from typing import Iterable, Optional

from xutils.config.settings import Settings
from xutils.services.date_service import get_date_service
from xutils.utils.currency import CurrencyCountry, format_currency, format_rupiah

_LEADING_NUMBER = re.compile(r"-?\d*\.?\d*")
_DIGITS_ONLY = re.compile(r"[0-9]+")
_TRUE_WORDS = {'true', 'yes', '1'}
_FALSE_WORDS = {'false', 'no', '0'}


def numeric_only(text: Optional[str]) -> Optional[str]:
    """
    Keep only the digits.

    Example:
        >>> numeric_only("a1b2c3")
        '123'
    """
    if text is None:
        return None
    return re.sub(r"[^0-9]", "", text)


def to_double(text: Optional[str]) -> Optional[float]:
    """
    Parse the leading number of a string ("12.5a" -> 12.5).

    Returns None when the string does not start with a number.
    """
    if text is None:
        return None
    match = _LEADING_NUMBER.match(text)
    numeric = match.group(0) if match else ""
    try:
        return float(numeric)
    except ValueError:
        # Empty prefix, or a lone "-" / "." / "-."
        return None


def to_int(text: Optional[str]) -> Optional[int]:
    """Leading number truncated toward zero ("12.5a" -> 12)."""
    value = to_double(text)
    return int(value) if value is not None else None


def is_numeric(text: Optional[str]) -> bool:
    """True if the string is non-empty and made only of digits 0-9."""
    if not text:
        return False
    return _DIGITS_ONLY.fullmatch(text) is not None


def format_timestamp_epoch(text: Optional[str], target_format: str = Settings.DATE_FORMAT) -> Optional[str]:
    """
    Read the string as epoch milliseconds and format it.

    Example:
        >>> format_timestamp_epoch("1672531200000", target_format="yyyy")
        '2023'
    """
    if not text:
        return None
    epoch = to_int(text)
    if epoch is None:
        return None
    return get_date_service().format_epoch(epoch, target_format)


def to_datetime(
    text: Optional[str],
    origin_format: Optional[str] = None,
    as_local: bool = True
) -> Optional[datetime]:
    """
    Parse a date string.

    Args:
        text: Date text; None or "" yields None
        origin_format: LDML pattern, e.g. "dd/MM/yyyy HH:mm". If None,
            ISO 8601 is tried first, then the fallback pattern list.
        as_local: Convert the result to the local timezone (default True).
            With False, ISO input stays in UTC.

    Returns:
        Timezone-aware datetime, or None if parsing fails.

    Example:
        >>> to_datetime("2025-12-13T01:44:43.147498Z", as_local=False)
        datetime.datetime(2025, 12, 13, 1, 44, 43, 147498, tzinfo=datetime.timezone.utc)
        >>> to_datetime("13/12/2025 01:44", origin_format="dd/MM/yyyy HH:mm").hour
        1
    """
    return get_date_service().parse(text, origin_format, keep_as_local=as_local)


def format_date_string(
    text: Optional[str],
    origin_format: Optional[str] = None,
    target_format: str = 'dd/MM/yyyy'
) -> str:
    """
    Re-format a date string; "" if it cannot be parsed.

    Example:
        >>> format_date_string("15/06/2023", origin_format="dd/MM/yyyy", target_format="yyyy-MM-dd")
        '2023-06-15'
    """
    return get_date_service().format_date_string(text, origin_format, target_format)


def to_rupiah(text: Optional[str], using_symbol: bool = True) -> str:
    """
    Format the numeric string as Indonesian Rupiah; "" if not numeric.

    Example:
        >>> to_rupiah("15000")
        'Rp15.000'
    """
    value = to_int(text)
    if value is None:
        return ""
    return format_rupiah(value, using_symbol=using_symbol)


def to_currency(
    text: Optional[str],
    country: CurrencyCountry = CurrencyCountry.ID,
    using_symbol: bool = True,
    decimal_digits: int = 0
) -> str:
    """Format the numeric string as money; non-numeric input formats as 0."""
    value = to_double(text)
    return format_currency(value if value is not None else 0.0, country, using_symbol, decimal_digits)


def space_every(text: Optional[str], every: int = 4, spacer: str = ' ') -> str:
    """
    Insert spacer after every `every` characters.

    Example:
        >>> space_every("123456789", 3)
        '123 456 789'
    """
    if text is None:
        return ""
    if every <= 0:
        return text
    return re.sub(rf"(.{{{every}}})(?=.)", lambda m: m.group(0) + spacer, text, flags=re.DOTALL)


def capitalize(text: Optional[str]) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(text: Optional[str]) -> str:
    if not text:
        return ""
    return " ".join(capitalize(word) if word else word for word in text.split(" "))


def remove_whitespace(text: Optional[str]) -> str:
    if text is None:
        return ""
    return re.sub(r"\s+", "", text)


def truncate(text: Optional[str], max_length: int, suffix: str = '...') -> str:
    """
    Example:
        >>> truncate("Hello World", 5)
        'Hello...'
    """
    if text is None:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def mask(
    text: Optional[str],
    start: Optional[int] = None,
    end: Optional[int] = None,
    mask_char: str = '*'
) -> str:
    """
    Mask characters in [start, end) for privacy.

    The mask is always end - start characters long, even when end runs
    past the string.

    Example:
        >>> mask("1234567890", start=3, end=7)
        '123****890'
    """
    if not text:
        return ""
    if start is None and end is None:
        return text
    start = 0 if start is None else start
    end = len(text) if end is None else end

    if start < 0 or start >= len(text) or end <= start:
        return text

    return text[:start] + mask_char * (end - start) + text[min(end, len(text)):]


def to_bool(text: Optional[str]) -> Optional[bool]:
    """
    Case-insensitive boolean parsing.

    Accepts "true"/"yes"/"1" and "false"/"no"/"0"; anything else is None.
    """
    if text is None:
        return None
    value = text.strip().lower()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    return None


def contains_any(text: Optional[str], patterns: Iterable[str]) -> bool:
    if text is None:
        return False
    return any(p in text for p in patterns)


def safe(text: Optional[str]) -> str:
    return text if text is not None else ""
