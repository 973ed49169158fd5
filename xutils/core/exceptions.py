"""
Exception hierarchy for xutils.

Most public helpers never raise: they return None or "" for absent or
malformed input. These exceptions surface only from the explicit
"or raise" entry points and from list helpers used incorrectly.
"""

from typing import List, Optional, Tuple


class XUtilsError(Exception):
    """Base class for all xutils errors."""


class PatternError(XUtilsError, ValueError):
    """Raised when a date pattern contains an unsupported or malformed field."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid date pattern {pattern!r}: {reason}")


class DateParseError(XUtilsError, ValueError):
    """
    Raised when no candidate could parse a text value.

    Attributes:
        text: The input that failed to parse
        attempts: (pattern, locale) pairs tried, in order; the ISO 8601
            attempt is recorded as ("ISO 8601", None)
    """

    def __init__(
        self,
        text: Optional[str],
        attempts: Optional[List[Tuple[str, Optional[str]]]] = None,
        message: Optional[str] = None
    ) -> None:
        self.text = text
        self.attempts = list(attempts or [])
        if message is None:
            message = f"Unable to parse {text!r} after {len(self.attempts)} attempt(s)"
        super().__init__(message)


class EmptyInputError(DateParseError):
    """Raised when the text to parse is None or empty."""

    def __init__(self, text: Optional[str] = None) -> None:
        super().__init__(text, message="Nothing to parse: input is empty")


class ListOperationError(XUtilsError, ValueError):
    """Raised when a list helper is called with arguments it cannot honor."""
