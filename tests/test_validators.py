"""Tests for validators and casts (core/validators.py)."""

from __future__ import annotations

import time
from datetime import date, datetime
from decimal import Decimal

import pytest

from rung_cli.core.validators import (
    CALENDAR_FORMAT,
    EMAIL_PATTERN,
    INTEGER_PATTERN,
    SEMVER_PATTERN,
    URL_PATTERN,
    CharCast,
    ColorValidator,
    DateFormatValidator,
    MultiRangeValidator,
    NaturalValidator,
    OneOfValidator,
    PatternValidator,
    RangeValidator,
    to_bool,
    to_date,
    to_datetime,
    to_double,
    to_integer,
    to_integer_list,
    to_money,
)


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

class TestPatternValidator:
    def test_integer_accepts_signed(self) -> None:
        validator = PatternValidator(INTEGER_PATTERN, "nope")
        assert validator("-12") is True
        assert validator(" 7 ") is True

    def test_integer_rejects_decimal(self) -> None:
        assert PatternValidator(INTEGER_PATTERN, "nope")("4.2") == "nope"

    @pytest.mark.parametrize("text", ["me@example.com", "a.b@c.io"])
    def test_email_accepts(self, text: str) -> None:
        assert PatternValidator(EMAIL_PATTERN, "bad")(text) is True

    @pytest.mark.parametrize("text", ["me@", "example.com", "a b@c.io"])
    def test_email_rejects(self, text: str) -> None:
        assert PatternValidator(EMAIL_PATTERN, "bad")(text) == "bad"

    def test_url(self) -> None:
        validator = PatternValidator(URL_PATTERN, "bad")
        assert validator("https://rung.com.br/app") is True
        assert validator("rung.com.br") == "bad"

    def test_semver(self) -> None:
        validator = PatternValidator(SEMVER_PATTERN, "bad")
        assert validator("1.0.0") is True
        assert validator("2.1.0-beta.1+build.5") is True
        assert validator("1.0") == "bad"

    def test_equality_is_structural(self) -> None:
        assert PatternValidator("x", "m") == PatternValidator("x", "m")


class TestNaturalValidator:
    def test_oversized_number_is_a_message(self) -> None:
        assert isinstance(NaturalValidator()("1" * 5000), str)

    def test_zero_and_positive(self) -> None:
        assert NaturalValidator()("0") is True
        assert NaturalValidator()("15") is True

    @pytest.mark.parametrize("text", ["-1", "1.5", "abc", ""])
    def test_rejects(self, text: str) -> None:
        assert isinstance(NaturalValidator()(text), str)


class TestRangeValidator:
    def test_bounds_are_inclusive(self) -> None:
        validator = RangeValidator(1, 10, to_integer)
        assert validator("1") is True
        assert validator("10") is True

    def test_out_of_range(self) -> None:
        result = RangeValidator(1, 10, to_integer)("11")
        assert isinstance(result, str)
        assert "between 1 and 10" in result

    def test_oversized_number_is_a_message(self) -> None:
        assert RangeValidator(1, 10, to_integer)("9" * 5000) == "Please enter a number"

    def test_not_a_number(self) -> None:
        assert RangeValidator(1, 10, to_integer)("ten") == "Please enter a number"

    def test_double_range(self) -> None:
        assert RangeValidator(0.0, 1.0, to_double)("0.5") is True


class TestMultiRangeValidator:
    def test_accepts_ranges(self) -> None:
        assert MultiRangeValidator(1, 10)("1, 3-5, 8") is True

    def test_rejects_member_out_of_range(self) -> None:
        assert isinstance(MultiRangeValidator(1, 10)("9-12"), str)

    def test_rejects_garbage(self) -> None:
        assert isinstance(MultiRangeValidator(1, 10)("one"), str)

    def test_huge_range_is_rejected_without_expanding(self) -> None:
        started = time.perf_counter()
        result = MultiRangeValidator(1, 10)("1-1000000000")
        assert result == "Every number must be between 1 and 10"
        assert time.perf_counter() - started < 1.0

    def test_unbounded(self) -> None:
        validator = MultiRangeValidator(float("-inf"), float("inf"))
        assert validator("-5, 1000000-2000000") is True


class TestOneOfValidator:
    def test_membership(self) -> None:
        validator = OneOfValidator(("red", "blue"))
        assert validator("red") is True
        assert "red, blue" in validator("green")

    def test_non_string_values(self) -> None:
        assert OneOfValidator((1, 2))(2) is True


class TestColorValidator:
    @pytest.mark.parametrize("text", ["#fff", "#FF8800", "rgb(255, 136, 0)"])
    def test_accepts(self, text: str) -> None:
        assert ColorValidator()(text) is True

    @pytest.mark.parametrize("text", ["#ff88", "red", "rgb(300, 0, 0)"])
    def test_rejects(self, text: str) -> None:
        assert isinstance(ColorValidator()(text), str)


class TestDateFormatValidator:
    def test_accepts_matching_date(self) -> None:
        assert DateFormatValidator(CALENDAR_FORMAT)("12/31/20") is True

    def test_rejects_other_format(self) -> None:
        result = DateFormatValidator(CALENDAR_FORMAT)("2020-12-31")
        assert result == "Please enter a date like 12/31/00"


# ---------------------------------------------------------------------------
# Casts
# ---------------------------------------------------------------------------

class TestNumericCasts:
    def test_integer(self) -> None:
        assert to_integer("42") == 42
        assert to_integer(" -3 ") == -3
        assert to_integer(7) == 7

    @pytest.mark.parametrize("value", ["abc", "4.2", "", None, True])
    def test_integer_failure_is_none(self, value: object) -> None:
        assert to_integer(value) is None

    def test_integer_beyond_digit_limit_is_none(self) -> None:
        assert to_integer("1" * 5000) is None

    def test_double(self) -> None:
        assert to_double("2.5") == 2.5
        assert to_double(".5") == 0.5
        assert to_double("x") is None

    def test_money(self) -> None:
        assert to_money("10,50") == Decimal("10.50")
        assert to_money("3") == Decimal("3")
        assert to_money("3.456") is None


class TestIntegerList:
    def test_expands_ranges_in_order(self) -> None:
        assert to_integer_list("8, 1, 3-5") == [8, 1, 3, 4, 5]

    def test_drops_duplicates(self) -> None:
        assert to_integer_list("1-3, 2") == [1, 2, 3]

    def test_reversed_range_is_none(self) -> None:
        assert to_integer_list("5-3") is None

    def test_empty_is_none(self) -> None:
        assert to_integer_list("  ") is None

    def test_endpoint_beyond_digit_limit_is_none(self) -> None:
        assert to_integer_list("1-" + "9" * 5000) is None

    def test_many_duplicates(self) -> None:
        assert to_integer_list("1-50000, 1-50000") == list(range(1, 50001))

    def test_native_list_passes_through(self) -> None:
        assert to_integer_list([1, 2]) == [1, 2]


class TestOtherCasts:
    def test_bool(self) -> None:
        assert to_bool(True) is True
        assert to_bool("yes") is True
        assert to_bool("0") is False
        assert to_bool("maybe") is None

    def test_date(self) -> None:
        assert to_date("02/29/24") == date(2024, 2, 29)
        assert to_date("02/30/24") is None

    def test_datetime(self) -> None:
        assert to_datetime("01/02/24 13:45") == datetime(2024, 1, 2, 13, 45)
        assert to_datetime("01/02/24") is None

    def test_char_truncates(self) -> None:
        assert CharCast(3)("abcdef") == "abc"
        assert CharCast(10)("abc") == "abc"
        assert CharCast(3)(None) is None
