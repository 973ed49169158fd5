"""
Tests for string helpers (utils/string_utils.py)
"""

from datetime import datetime, timezone

from xutils.utils import string_utils as s
from xutils.utils.currency import CurrencyCountry


class TestNumericParsing:
    """numeric_only, to_double, to_int, is_numeric"""

    def test_numeric_only(self):
        assert s.numeric_only("a1b2c3") == "123"
        assert s.numeric_only("123abc") == "123"
        assert s.numeric_only("abc") == ""
        assert s.numeric_only(None) is None

    def test_to_double(self):
        assert s.to_double("12.5a") == 12.5
        assert s.to_double("-3.25") == -3.25
        assert s.to_double("abc") is None
        assert s.to_double("") is None
        assert s.to_double("-") is None
        assert s.to_double(None) is None

    def test_to_int(self):
        assert s.to_int("123a") == 123
        assert s.to_int("12.5a") == 12
        assert s.to_int("-12.9") == -12
        assert s.to_int("abc") is None
        assert s.to_int(None) is None

    def test_is_numeric(self):
        assert s.is_numeric("123") is True
        assert s.is_numeric("123a") is False
        assert s.is_numeric("12.3") is False
        assert s.is_numeric("") is False
        assert s.is_numeric(None) is False


class TestDates:
    """Date parsing and formatting through the shared service"""

    def test_to_datetime_with_format(self):
        result = s.to_datetime("25/12/2024", origin_format="dd/MM/yyyy")

        assert (result.year, result.month, result.day) == (2024, 12, 25)
        assert s.to_datetime(None, origin_format="dd/MM/yyyy") is None

    def test_to_datetime_iso_keep_utc(self):
        result = s.to_datetime("2025-12-13T01:44:43.147498Z", as_local=False)

        assert result == datetime(2025, 12, 13, 1, 44, 43, 147498, tzinfo=timezone.utc)

    def test_to_datetime_iso_local(self):
        """Jakarta is UTC+7"""
        assert s.to_datetime("2025-12-13T01:44:43.147498Z").hour == 8

    def test_to_datetime_custom_format_with_time(self):
        result = s.to_datetime("13/12/2025 01:44", origin_format="dd/MM/yyyy HH:mm")

        assert (result.day, result.hour, result.minute) == (13, 1, 44)

    def test_to_datetime_invalid(self):
        assert s.to_datetime("not a date") is None
        assert s.to_datetime("") is None

    def test_format_date_string(self):
        result = s.format_date_string("15/06/2023", origin_format="dd/MM/yyyy", target_format="yyyy-MM-dd")

        assert result == "2023-06-15"
        assert s.format_date_string("not a date") == ""
        assert s.format_date_string(None) == ""
        assert s.format_date_string("0001-01-01") == ""
        assert s.to_datetime("0001-01-01") is None

    def test_format_date_string_default_target(self):
        assert s.format_date_string("2023-06-15") == "15/06/2023"

    def test_format_timestamp_epoch(self):
        assert s.format_timestamp_epoch("1672531200000", target_format="yyyy") == "2023"
        assert s.format_timestamp_epoch("1672531200000", target_format="dd MMM yyyy") == "01 Jan 2023"
        assert s.format_timestamp_epoch("abc") is None
        assert s.format_timestamp_epoch("") is None
        assert s.format_timestamp_epoch(None) is None


class TestCurrency:
    """to_rupiah and to_currency"""

    def test_to_rupiah(self):
        assert s.to_rupiah("15000") == "Rp15.000"
        assert s.to_rupiah("1500000", using_symbol=False) == "1.500.000"
        assert s.to_rupiah("abc") == ""
        assert s.to_rupiah(None) == ""

    def test_to_currency(self):
        assert s.to_currency("15000", country=CurrencyCountry.US) == "$15,000"
        assert s.to_currency("50.50", country=CurrencyCountry.US, decimal_digits=2) == "$50.50"
        assert s.to_currency("10000", country=CurrencyCountry.ID, using_symbol=False) == "10.000"

    def test_to_currency_non_numeric_is_zero(self):
        assert s.to_currency("abc", country=CurrencyCountry.US) == "$0"


class TestManipulation:
    """Spacing, capitalization, whitespace, truncation, masking"""

    def test_space_every(self):
        assert s.space_every("123456789", every=3) == "123 456 789"
        assert s.space_every("12345", every=4) == "1234 5"
        assert s.space_every("12345678", every=4, spacer="-") == "1234-5678"
        assert s.space_every(None) == ""

    def test_capitalize(self):
        assert s.capitalize("hello world") == "Hello world"
        assert s.capitalize("") == ""
        assert s.capitalize(None) == ""

    def test_capitalize_words(self):
        assert s.capitalize_words("hello world") == "Hello World"
        assert s.capitalize_words("this is a test") == "This Is A Test"
        assert s.capitalize_words("double  space") == "Double  Space"
        assert s.capitalize_words(None) == ""

    def test_remove_whitespace(self):
        assert s.remove_whitespace("  hello world  ") == "helloworld"
        assert s.remove_whitespace("\t tabs \n and newlines") == "tabsandnewlines"
        assert s.remove_whitespace(None) == ""

    def test_truncate(self):
        assert s.truncate("Hello World", 5) == "Hello..."
        assert s.truncate("Short", 10) == "Short"
        assert s.truncate("Hello", 5, suffix="...") == "Hello"
        assert s.truncate("Hello World", 5, suffix="~") == "Hello~"
        assert s.truncate(None, 5) == ""

    def test_mask(self):
        assert s.mask("1234567890", start=3, end=7) == "123****890"
        assert s.mask("password", start=0, end=8, mask_char="#") == "########"
        assert s.mask("short", start=2) == "sh***"
        assert s.mask("1234567890", end=4) == "****567890"
        assert s.mask(None) == ""

    def test_mask_out_of_range_is_unchanged(self):
        assert s.mask("secret") == "secret"
        assert s.mask("secret", start=10) == "secret"
        assert s.mask("secret", start=4, end=2) == "secret"

    def test_mask_end_past_length(self):
        """Mask length follows end - start"""
        assert s.mask("abc", start=1, end=6) == "a*****"


class TestMisc:
    """to_bool, contains_any, safe"""

    def test_to_bool(self):
        assert s.to_bool("true") is True
        assert s.to_bool("YES") is True
        assert s.to_bool(" 1 ") is True
        assert s.to_bool("false") is False
        assert s.to_bool("no") is False
        assert s.to_bool("0") is False
        assert s.to_bool("maybe") is None
        assert s.to_bool(None) is None

    def test_contains_any(self):
        assert s.contains_any("apple banana", patterns=["apple", "kiwi"]) is True
        assert s.contains_any("kiwi orange", patterns=["apple", "banana"]) is False
        assert s.contains_any(None, patterns=["apple"]) is False

    def test_safe(self):
        assert s.safe(None) == ""
        assert s.safe("hello") == "hello"
