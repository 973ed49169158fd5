"""
Core utilities package.

This package provides logging setup, the exception hierarchy and
local timezone helpers shared by all xutils modules.
"""

from .logger import setup_logger
from .exceptions import (
    XUtilsError,
    PatternError,
    DateParseError,
    EmptyInputError,
    ListOperationError,
)
from .clock import local_now, attach_local, to_local, from_epoch_millis, with_wall_time, shift

__all__ = [
    'setup_logger',
    'XUtilsError',
    'PatternError',
    'DateParseError',
    'EmptyInputError',
    'ListOperationError',
    'local_now',
    'attach_local',
    'to_local',
    'from_epoch_millis',
    'with_wall_time',
    'shift',
]
