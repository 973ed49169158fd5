"""
Flexible date parsing and formatting service.

Parses text into timezone-aware datetimes by trying ISO 8601 first, then a
ranked list of LDML patterns, each against a ranked list of locales; the
first strict match wins. Renders datetimes back to text with Babel,
iterating the same locales until one succeeds.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple
from babel.dates import format_datetime as babel_format_datetime

from xutils.config.settings import Settings
from xutils.core.clock import attach_local, to_local, from_epoch_millis
from xutils.core.exceptions import DateParseError, EmptyInputError
from xutils.services.patterns import parse_strict

logger = logging.getLogger(__name__)

ISO_8601 = "ISO 8601"


def _parse_iso(text: str) -> datetime:
    """
    Strict ISO 8601 parse normalized to UTC.

    - A trailing 'Z' means UTC.
    - Text without an offset is local wall time.
    """
    # Normalize 'Z' (Zulu/UTC) suffix to '+00:00' for fromisoformat compatibility
    s = text
    if s.endswith("Z") or s.endswith("z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    return attach_local(dt).astimezone(timezone.utc)


class DateFormatService:
    """
    Date parser/formatter over fixed, ordered pattern and locale lists.

    Both lists are immutable tuples captured at construction, so a service
    can be built with a reduced search space (e.g. in tests) without
    touching process-wide state.

    Attributes:
        patterns (tuple): Fallback patterns, most specific first
        locales (tuple): Locale tags tried for every pattern, in order

    Example:
        >>> service = DateFormatService()
        >>> service.format_date_string("15/06/2023", "dd/MM/yyyy", "yyyy-MM-dd")
        '2023-06-15'
    """

    def __init__(
        self,
        patterns: Optional[Iterable[str]] = None,
        locales: Optional[Iterable[str]] = None
    ) -> None:
        self.patterns: Tuple[str, ...] = tuple(
            Settings.FALLBACK_PATTERNS if patterns is None else patterns
        )
        self.locales: Tuple[str, ...] = tuple(
            Settings.SUPPORTED_LOCALES if locales is None else locales
        )

    def _log_failure(self, message: str) -> None:
        if Settings.DEBUG_PARSE:
            logger.debug(message)

    def parse_or_raise(
        self,
        text: Optional[str],
        explicit_format: Optional[str] = None,
        keep_as_local: bool = True
    ) -> datetime:
        """
        Parse text into a datetime, raising when nothing matches.

        Args:
            text: Input text
            explicit_format: LDML pattern; when given, only this pattern is
                tried (against every locale) and ISO 8601 is skipped
            keep_as_local: Convert the result to the local timezone

        Returns:
            Timezone-aware datetime

        Raises:
            EmptyInputError: text is None or empty
            DateParseError: every candidate failed; .attempts lists them
        """
        if not text:
            raise EmptyInputError(text)

        attempts: List[Tuple[str, Optional[str]]] = []
        parsed: Optional[datetime] = None

        if explicit_format is None:
            attempts.append((ISO_8601, None))
            try:
                parsed = _parse_iso(text)
            except (ValueError, OverflowError) as e:
                # OverflowError: valid ISO text whose UTC moment leaves years 1..9999
                self._log_failure(f"ISO 8601 parse failed for '{text}': {e}")

        if parsed is None:
            candidates = self.patterns if explicit_format is None else (explicit_format,)
            parsed = self._search(text, candidates, attempts)

        if parsed is None:
            raise DateParseError(text, attempts)

        if not keep_as_local:
            return parsed
        try:
            return to_local(parsed)
        except OverflowError as e:
            self._log_failure(f"Local time for '{text}' is out of range: {e}")
            raise DateParseError(text, attempts) from e

    def _search(
        self,
        text: str,
        patterns: Iterable[str],
        attempts: List[Tuple[str, Optional[str]]]
    ) -> Optional[datetime]:
        for pattern in patterns:
            for locale in self.locales:
                attempts.append((pattern, locale))
                try:
                    return attach_local(parse_strict(text, pattern, locale))
                except Exception as e:
                    # Any candidate failure (no match, bad range, missing locale data) means "try next"
                    self._log_failure(
                        f"Parse with format '{pattern}' failed for locale {locale}: {e}"
                    )
        return None

    def parse(
        self,
        text: Optional[str],
        explicit_format: Optional[str] = None,
        keep_as_local: bool = True
    ) -> Optional[datetime]:
        """
        Parse text into a datetime, or None when it cannot be parsed.

        Same search as parse_or_raise(); empty input and exhaustion both
        yield None.
        """
        try:
            return self.parse_or_raise(text, explicit_format, keep_as_local)
        except DateParseError as e:
            if text:
                self._log_failure(str(e))
            return None

    def format(self, value: Optional[datetime], target_format: str) -> str:
        """
        Render a datetime with an LDML pattern.

        Tries each locale in order and returns the first rendering that
        succeeds. Returns "" for None or when no locale can render the
        pattern. Naive datetimes are treated as local wall time.
        """
        if value is None:
            return ""
        value = attach_local(value)
        for locale in self.locales:
            try:
                return babel_format_datetime(value, target_format, locale=locale)
            except Exception as e:
                self._log_failure(f"Format '{target_format}' failed for locale {locale}: {e}")
        return ""

    def format_date_string(
        self,
        text: Optional[str],
        origin_format: Optional[str] = None,
        target_format: str = 'dd/MM/yyyy'
    ) -> str:
        """Parse text (with origin_format, or the full search) and re-render it."""
        if not text:
            return ""
        parsed = self.parse(text, origin_format)
        if parsed is None:
            return ""
        return self.format(parsed, target_format)

    def format_epoch(self, millis: Optional[int], target_format: str = Settings.DATE_FORMAT) -> Optional[str]:
        """Render epoch milliseconds as local time; None for None."""
        if millis is None:
            return None
        try:
            dt = from_epoch_millis(millis)
        except (OverflowError, OSError, ValueError) as e:
            self._log_failure(f"Epoch {millis} out of range: {e}")
            return ""
        return self.format(dt, target_format)


_default_service: Optional[DateFormatService] = None


def get_date_service() -> DateFormatService:
    """Shared service built from Settings' pattern and locale lists."""
    global _default_service
    if _default_service is None:
        _default_service = DateFormatService()
    return _default_service
