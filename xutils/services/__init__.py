"""
Services package.

This package provides the flexible date parser/formatter and the LDML
pattern compiler it is built on.
"""

from .date_service import DateFormatService, get_date_service
from .patterns import compile_pattern, parse_strict, tokenize

__all__ = [
    'DateFormatService',
    'get_date_service',
    'compile_pattern',
    'parse_strict',
    'tokenize',
]
