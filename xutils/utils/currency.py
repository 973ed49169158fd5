"""
Currency and number rendering on top of Babel's CLDR number patterns.

- CurrencyCountry: supported countries with their locale and symbol.
- format_currency: locale-aware money rendering with a custom symbol.
- format_rupiah: Indonesian Rupiah without decimals.
- format_number: grouped decimal rendering for a locale.
"""

import re
from enum import Enum
from typing import Union
from decimal import Decimal
from babel import Locale
from babel.numbers import format_decimal

NumberLike = Union[float, int, Decimal]


class CurrencyCountry(Enum):
    """Supported currency countries: (locale tag, default symbol)."""

    ID = ('id_ID', 'Rp')
    US = ('en_US', '$')
    UK = ('en_GB', '£')
    EU = ('de_DE', '€')
    JP = ('ja_JP', '¥')
    KR = ('ko_KR', '₩')
    CN = ('zh_CN', '¥')
    IN = ('hi_IN', '₹')
    SA = ('ar_SA', 'ر.س')

    @property
    def locale(self) -> str:
        return self.value[0]

    @property
    def symbol(self) -> str:
        return self.value[1]


# Fraction part of a number pattern, e.g. ".00" in "¤#,##0.00"
_FRACTION = re.compile(r"\.[0#]+")


def _currency_pattern(locale: str, symbol: str, decimal_digits: int) -> str:
    """
    Build a number pattern from the locale's standard currency pattern with
    the currency sign replaced by symbol (quoted) and fixed fraction digits.
    """
    pattern = Locale.parse(locale).currency_formats['standard'].pattern
    # Only the positive sub-pattern; Babel derives the negative one
    pattern = pattern.split(';')[0]

    fraction = "." + "0" * decimal_digits if decimal_digits > 0 else ""
    if _FRACTION.search(pattern):
        pattern = _FRACTION.sub(fraction, pattern, count=1)
    else:
        pattern = re.sub(r"0(?=[^0#,]*$)", "0" + fraction, pattern, count=1)

    if symbol:
        quoted = "'" + symbol.replace("'", "''") + "'"
        return pattern.replace('\xa4', quoted)
    return pattern.replace('\xa4', '')


def format_currency(
    value: NumberLike,
    country: CurrencyCountry = CurrencyCountry.ID,
    using_symbol: bool = True,
    decimal_digits: int = 0
) -> str:
    """
    Format a number as money for a country.

    Uses the country's CLDR currency layout (symbol position, grouping and
    decimal separators) with the country's own symbol, rounded to
    decimal_digits. Surrounding whitespace is stripped.

    Example:
        >>> format_currency(15000, CurrencyCountry.US)
        '$15,000'
        >>> format_currency(15000, CurrencyCountry.ID)
        'Rp15.000'
    """
    pattern = _currency_pattern(
        country.locale,
        country.symbol if using_symbol else '',
        max(decimal_digits, 0)
    )
    return format_decimal(value, format=pattern, locale=country.locale).strip()


def format_rupiah(value: NumberLike, using_symbol: bool = True) -> str:
    """
    Format a number as Indonesian Rupiah without decimals.

    Example:
        >>> format_rupiah(15000)
        'Rp15.000'
        >>> format_rupiah(15000, using_symbol=False)
        '15.000'
    """
    formatted = format_currency(value, CurrencyCountry.ID, using_symbol=True)
    return formatted if using_symbol else formatted.replace('Rp', '')


def format_number(value: NumberLike, locale: str = 'en_US', decimal_digits: int = 0) -> str:
    """
    Group digits per locale, keeping at least decimal_digits (and up to 3) fraction digits.

    Example:
        >>> format_number(1234567.89)
        '1,234,567.89'
    """
    required = max(decimal_digits, 0)
    pattern = "#,##0"
    optional = max(3 - required, 0)
    if required or optional:
        pattern += "." + "0" * required + "#" * optional
    return format_decimal(value, format=pattern, locale=locale)
