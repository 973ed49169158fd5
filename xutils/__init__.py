"""
xutils: null-safe helpers for numbers, strings, dates and lists.

Formatting, parsing and small transformations: currency formatting,
flexible date parsing with locale fallback, string masking/truncation,
list sorting/grouping/chunking.

Helpers live in per-type modules; the date parser is also available as a
service object with injectable pattern and locale lists:

    >>> from xutils import string_utils, DateFormatService
    >>> string_utils.format_date_string("15/06/2023", "dd/MM/yyyy", "yyyy-MM-dd")
    '2023-06-15'
    >>> DateFormatService(locales=["en_US"]).parse("2023-06-15").year
    2023
"""

from .config import Settings, FALLBACK_PATTERNS, SUPPORTED_LOCALES
from .core import (
    setup_logger,
    XUtilsError,
    PatternError,
    DateParseError,
    EmptyInputError,
    ListOperationError,
)
from .services import DateFormatService, get_date_service
from .utils import (
    datetime_utils,
    string_utils,
    int_utils,
    float_utils,
    list_utils,
    CurrencyCountry,
)

__version__ = "0.1.0"

__all__ = [
    'Settings',
    'FALLBACK_PATTERNS',
    'SUPPORTED_LOCALES',
    'setup_logger',
    'XUtilsError',
    'PatternError',
    'DateParseError',
    'EmptyInputError',
    'ListOperationError',
    'DateFormatService',
    'get_date_service',
    'datetime_utils',
    'string_utils',
    'int_utils',
    'float_utils',
    'list_utils',
    'CurrencyCountry',
]
