"""
Utility functions package.

Null-safe helpers grouped by receiver type: datetime_utils, string_utils,
int_utils, float_utils, list_utils, plus currency rendering.
"""

from . import datetime_utils, string_utils, int_utils, float_utils, list_utils
from .currency import CurrencyCountry, format_currency, format_rupiah, format_number

__all__ = [
    'datetime_utils',
    'string_utils',
    'int_utils',
    'float_utils',
    'list_utils',
    'CurrencyCountry',
    'format_currency',
    'format_rupiah',
    'format_number',
]
