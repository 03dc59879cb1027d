"""Unit tests for the coercion helpers."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from recon.domain.model.value_objects import (
    format_amount,
    to_amount,
    to_datetime,
    to_optional_amount,
    to_quantity,
)


class TestToAmount:

    @pytest.mark.parametrize("raw", [None, "", "abc", "NaN", "inf", True, [], {}])
    def test_malformed_becomes_zero(self, raw):
        assert to_amount(raw) == Decimal("0")

    def test_float_keeps_printed_value(self):
        assert to_amount(0.1) == Decimal("0.1")

    def test_numeric_string(self):
        assert to_amount(" 12.50 ") == Decimal("12.50")

    def test_optional_keeps_absence(self):
        assert to_optional_amount(None) is None
        assert to_optional_amount("  ") is None
        assert to_optional_amount("0") == Decimal("0")


class TestToQuantity:

    def test_int_passes_through(self):
        assert to_quantity(7) == 7

    def test_string_and_float(self):
        assert to_quantity("5") == 5
        assert to_quantity(3.9) == 3

    @pytest.mark.parametrize("raw", [None, "x", "", False])
    def test_malformed_becomes_zero(self, raw):
        assert to_quantity(raw) == 0


class TestToDatetime:

    def test_plain_date_string(self):
        assert to_datetime("2024-03-05") == datetime(2024, 3, 5)

    def test_zulu_converted_to_naive_utc(self):
        assert to_datetime("2024-03-05T10:00:00Z") == datetime(2024, 3, 5, 10, 0)

    def test_offset_converted_to_utc(self):
        assert to_datetime("2024-03-05T10:00:00+02:00") == datetime(2024, 3, 5, 8, 0)

    def test_date_object(self):
        assert to_datetime(date(2024, 1, 2)) == datetime(2024, 1, 2)

    def test_garbage_is_none(self):
        assert to_datetime("not a date") is None
        assert to_datetime(None) is None
        assert to_datetime("") is None


def test_format_amount():
    assert format_amount(Decimal("1234.5")) == "1,234.50"
    assert format_amount(Decimal("-3")) == "-3.00"
