"""
LDML date pattern support for strict parsing.

Patterns use the same field letters as Babel / ICU ("yyyy-MM-dd HH:mm",
"dd MMM yyyy", quoted literals like 'T'). A pattern is compiled once per
locale into an anchored regular expression; month names, weekday names
and AM/PM markers come from Babel's CLDR data for that locale.

Strict means:
- the whole input must match (no partial or trailing text),
- every field must be in range,
- the resulting calendar date must exist (no clamping of Feb 31),
- a weekday name, when present, must agree with the date.
"""

import re
from datetime import datetime
from functools import lru_cache
from typing import Dict, List, Optional, Tuple
from babel import Locale

from xutils.core.exceptions import PatternError

# Field letter -> allowed repeat counts for parsing
PARSE_FIELDS = {
    'y': (1, 2, 3, 4),
    'M': (1, 2, 3, 4),
    'd': (1, 2),
    'H': (1, 2),
    'h': (1, 2),
    'm': (1, 2),
    's': (1, 2),
    'S': tuple(range(1, 10)),
    'a': (1,),
    'E': (1, 2, 3, 4),
}

Token = Tuple[str, str]  # ("field", "yyyy") or ("literal", "-")


def tokenize(pattern: str) -> List[Token]:
    """
    Split an LDML pattern into field and literal tokens.

    Letters form fields (runs of the same letter); text inside single quotes
    is literal; two consecutive quotes produce one apostrophe.
    """
    tokens: List[Token] = []
    literal: List[str] = []
    i, n = 0, len(pattern)

    def flush() -> None:
        if literal:
            tokens.append(("literal", "".join(literal)))
            literal.clear()

    while i < n:
        ch = pattern[i]
        if ch == "'":
            # '' outside a quoted section is an escaped apostrophe
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while True:
                end = pattern.find("'", end)
                if end == -1:
                    raise PatternError(pattern, "unterminated quoted literal")
                if end + 1 < n and pattern[end + 1] == "'":
                    end += 2
                    continue
                break
            literal.append(pattern[i + 1:end].replace("''", "'"))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            flush()
            tokens.append(("field", pattern[i:j]))
            i = j
        else:
            literal.append(ch)
            i += 1

    flush()
    return tokens


def _alternation(names: Dict[int, str]) -> Tuple[str, Dict[str, int]]:
    """Regex alternation for localized names plus a case-folded reverse lookup."""
    lookup = {name.casefold(): key for key, name in names.items()}
    # Longest first so "Juni" is not cut short by "Jun"
    ordered = sorted(lookup, key=len, reverse=True)
    return "|".join(re.escape(name) for name in ordered), lookup


def _am_pm_names(babel_locale: Locale) -> Dict[str, str]:
    """AM/PM markers as rendered for field 'a' (abbreviated, then wider fallbacks)."""
    names = babel_locale.day_periods.get('format', {})
    for width in ('abbreviated', 'wide', 'narrow'):
        periods = names.get(width, {})
        if 'am' in periods and 'pm' in periods:
            return {'am': periods['am'], 'pm': periods['pm']}
    return {'am': 'AM', 'pm': 'PM'}


class CompiledPattern:
    """
    A pattern bound to one locale, ready to strictly parse text.

    Attributes:
        pattern: Source LDML pattern
        locale: Locale tag the names were taken from
        regex: Compiled expression, always applied with fullmatch()
        fields: (group name, field token) in pattern order
    """

    def __init__(self, pattern: str, locale: str) -> None:
        self.pattern = pattern
        self.locale = locale
        self.fields: List[Tuple[str, str]] = []
        self.lookups: Dict[str, Dict[str, int]] = {}

        babel_locale = Locale.parse(locale)
        parts: List[str] = []

        for kind, value in tokenize(pattern):
            if kind == "literal":
                parts.append(re.escape(value))
                continue

            char, count = value[0], len(value)
            if char not in PARSE_FIELDS:
                raise PatternError(pattern, f"unsupported field {value!r}")
            if count not in PARSE_FIELDS[char]:
                raise PatternError(pattern, f"invalid length for field {value!r}")

            group = f"f{len(self.fields)}"
            self.fields.append((group, value))
            parts.append(f"(?P<{group}>{self._field_regex(group, char, count, babel_locale)})")

        self.regex = re.compile("".join(parts), re.IGNORECASE)

    def _field_regex(self, group: str, char: str, count: int, babel_locale: Locale) -> str:
        if char == 'y':
            if count == 2:
                return r"\d{2}"
            return r"\d{1,4}" if count == 1 else rf"\d{{{count}}}"
        if char == 'M' and count >= 3:
            width = 'abbreviated' if count == 3 else 'wide'
            expr, self.lookups[group] = _alternation(babel_locale.months['format'][width])
            return expr
        if char == 'E':
            width = 'wide' if count == 4 else 'abbreviated'
            expr, self.lookups[group] = _alternation(babel_locale.days['format'][width])
            return expr
        if char == 'a':
            periods = _am_pm_names(babel_locale)
            expr, lookup = _alternation({0: periods['am'], 12: periods['pm']})
            self.lookups[group] = lookup
            return expr
        if char == 'S':
            return r"\d{1,9}"
        return r"\d{1,2}"

    def parse(self, text: str) -> datetime:
        """
        Strictly parse text into a naive datetime.

        Raises:
            ValueError: If the text does not match or a field is out of range
        """
        match = self.regex.fullmatch(text)
        if match is None:
            raise ValueError(f"{text!r} does not match pattern {self.pattern!r}")

        values: Dict[str, int] = {}
        weekday: Optional[int] = None
        hour12: Optional[int] = None
        pm_offset: Optional[int] = None

        def put(name: str, value: int) -> None:
            if name in values and values[name] != value:
                raise ValueError(f"Conflicting values for {name} in {text!r}")
            values[name] = value

        for group, token in self.fields:
            raw = match.group(group)
            char, count = token[0], len(token)

            if group in self.lookups:
                value = self.lookups[group].get(raw.casefold())
                if value is None:
                    raise ValueError(f"Unknown name {raw!r} for field {token!r}")
                if char == 'M':
                    put('month', value)
                elif char == 'E':
                    weekday = value
                else:
                    pm_offset = value
            elif char == 'y':
                year = int(raw)
                put('year', 2000 + year if count == 2 else year)
            elif char == 'M':
                put('month', int(raw))
            elif char == 'd':
                put('day', int(raw))
            elif char == 'H':
                put('hour', int(raw))
            elif char == 'h':
                hour12 = int(raw)
                if not 1 <= hour12 <= 12:
                    raise ValueError(f"Hour {hour12} out of range 1..12 in {text!r}")
            elif char == 'm':
                put('minute', int(raw))
            elif char == 's':
                put('second', int(raw))
            elif char == 'S':
                put('microsecond', int(raw[:6].ljust(6, '0')))

        if hour12 is not None:
            put('hour', hour12 % 12 + (pm_offset or 0))
        elif pm_offset is not None and 'hour' in values:
            if values['hour'] > 12:
                raise ValueError(f"24-hour value with AM/PM marker in {text!r}")
            values['hour'] = values['hour'] % 12 + pm_offset

        # datetime() enforces month lengths, leap years and time ranges
        result = datetime(
            values.get('year', 1970),
            values.get('month', 1),
            values.get('day', 1),
            values.get('hour', 0),
            values.get('minute', 0),
            values.get('second', 0),
            values.get('microsecond', 0),
        )

        if weekday is not None and result.weekday() != weekday:
            raise ValueError(f"Weekday does not match date {result.date()} in {text!r}")

        return result


@lru_cache(maxsize=512)
def compile_pattern(pattern: str, locale: str) -> CompiledPattern:
    """
    Compile and cache a pattern for a locale.

    Raises:
        PatternError: Unsupported or malformed pattern
        babel.UnknownLocaleError: Locale has no CLDR data
    """
    return CompiledPattern(pattern, locale)


def parse_strict(text: str, pattern: str, locale: str) -> datetime:
    """Strictly parse text with a pattern under one locale (naive result)."""
    return compile_pattern(pattern, locale).parse(text)
