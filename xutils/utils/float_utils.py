"""
Helpers for optional floats.

- Rounding to N decimal places via Decimal (half-up, floor, ceiling).
- Currency, percentage and short ("1.2K") rendering.
- Null-safe arithmetic, clamping and range checks.

None is treated as 0.0 throughout, except where noted.
"""

from decimal import Decimal, ROUND_HALF_UP, ROUND_FLOOR, ROUND_CEILING
from typing import Optional, Union

from xutils.utils.currency import CurrencyCountry, format_currency, format_rupiah, format_number as _format_number

Number = Union[int, float]


def safe(value: Optional[float]) -> float:
    return value if value is not None else 0.0


def is_positive(value: Optional[float]) -> bool:
    return safe(value) > 0


def is_negative(value: Optional[float]) -> bool:
    return safe(value) < 0


def abs_value(value: Optional[float]) -> float:
    return abs(safe(value))


def _quantize(value: Optional[float], fraction_digits: int, rounding: str) -> float:
    """
    Round to fraction_digits places with the given Decimal rounding mode.

    Converts via str to avoid binary float artifacts, e.g. 1.005 stays
    1.005 before rounding instead of 1.00499999...
    """
    if value is None:
        return 0.0
    exponent = Decimal(1).scaleb(-fraction_digits)
    result = float(Decimal(str(value)).quantize(exponent, rounding=rounding))
    # Normalize negative zero to plain zero for prettier display
    if result == 0.0:
        result = 0.0
    return result


def round_to(value: Optional[float], fraction_digits: int) -> float:
    """
    Round half-up to fraction_digits places.

    Example:
        >>> round_to(12.3456, fraction_digits=2)
        12.35
    """
    return _quantize(value, fraction_digits, ROUND_HALF_UP)


def floor_to(value: Optional[float], fraction_digits: int) -> float:
    return _quantize(value, fraction_digits, ROUND_FLOOR)


def ceil_to(value: Optional[float], fraction_digits: int) -> float:
    return _quantize(value, fraction_digits, ROUND_CEILING)


def to_currency(
    value: Optional[float],
    country: CurrencyCountry = CurrencyCountry.ID,
    using_symbol: bool = True,
    decimal_digits: int = 0
) -> str:
    """
    Format as money for country.

    Example:
        >>> to_currency(15000.0, country=CurrencyCountry.US)
        '$15,000'
    """
    return format_currency(safe(value), country, using_symbol, decimal_digits)


def to_rupiah(value: Optional[float], using_symbol: bool = True) -> str:
    return format_rupiah(safe(value), using_symbol=using_symbol)


def to_percentage(value: Optional[float], decimal_digits: int = 0) -> str:
    """
    Example:
        >>> to_percentage(0.25)
        '25%'
    """
    return f"{safe(value) * 100:.{decimal_digits}f}%"


def to_percentage_with_space(value: Optional[float], decimal_digits: int = 0) -> str:
    """
    Example:
        >>> to_percentage_with_space(0.25)
        '25 %'
    """
    return f"{safe(value) * 100:.{decimal_digits}f} %"


def to_short_format(value: Optional[float]) -> str:
    """
    Converts large numbers into short notation:

    - 1,200 -> "1.2K"
    - 5,300,000 -> "5.3M"
    - 7,900,000,000 -> "7.9B"
    """
    num = safe(value)

    if num >= 1e12:
        return f"{num / 1e12:.1f}T"
    if num >= 1e9:
        return f"{num / 1e9:.1f}B"
    if num >= 1e6:
        return f"{num / 1e6:.1f}M"
    if num >= 1e3:
        return f"{num / 1e3:.1f}K"

    return str(float(num))


def safe_divide(value: Optional[float], other: Optional[Number]) -> float:
    """value / other, or 0.0 if either is None or other is zero."""
    if value is None or other is None or other == 0:
        return 0.0
    return value / other


def safe_multiply(value: Optional[float], other: Optional[Number]) -> float:
    if value is None or other is None:
        return 0.0
    return float(value * other)


def clamp(value: Optional[float], min_value: float, max_value: float) -> float:
    val = safe(value)
    if val < min_value:
        return min_value
    if val > max_value:
        return max_value
    return val


def is_between(value: Optional[float], min_value: float, max_value: float) -> bool:
    """Inclusive range check."""
    return min_value <= safe(value) <= max_value


def format_number(value: Optional[float], locale: str = 'en_US', decimal_digits: int = 0) -> str:
    """
    Formats number with grouping based on locale.

    Example:
        >>> format_number(1234567.89)
        '1,234,567.89'
    """
    return _format_number(safe(value), locale=locale, decimal_digits=decimal_digits)
