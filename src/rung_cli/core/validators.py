"""Input validators and answer casts for parameter types.

Validators are frozen dataclasses so that two compilations of the same
declaration produce equal prompt descriptors.  Calling a validator with
the raw text returns ``True`` when the input is acceptable, or an error
message shown under the prompt otherwise.

Casts convert raw text into the type's native value.  They **never**
raise: input that does not make sense for the type yields ``None``.
Values that are already native (ints, bools, lists, dates, bytes) pass
through unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

ValidationResult = bool | str
Validator = Callable[[Any], ValidationResult]
Cast = Callable[[Any], Any]

INTEGER_PATTERN = r"[+-]?\d+"
DOUBLE_PATTERN = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
EMAIL_PATTERN = r"[^\s@]+@[^\s@]+\.[^\s@]+"
URL_PATTERN = r"(?:https?|ftp)://[^\s/$.?#][^\s]*"
MONEY_PATTERN = r"[+-]?\d+(?:[.,]\d{1,2})?"
SEMVER_PATTERN = (
    r"(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")
_RGB_COLOR = re.compile(r"rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)")
_MULTI_RANGE_TOKEN = re.compile(r"\s*(-?\d+)\s*(?:-\s*(-?\d+))?\s*")

CALENDAR_FORMAT = "%m/%d/%y"
DATETIME_FORMAT = "%m/%d/%y %H:%M"


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PatternValidator:
    """Accept input whose whole text matches *pattern*."""

    pattern: str
    message: str

    def __call__(self, value: Any) -> ValidationResult:
        if re.fullmatch(self.pattern, _text(value)):
            return True
        return self.message


@dataclass(frozen=True, slots=True)
class NaturalValidator:
    """Accept non-negative integers."""

    message: str = "Please enter a natural number (0 or greater)"

    def __call__(self, value: Any) -> ValidationResult:
        number = to_integer(value)
        if number is None or number < 0:
            return self.message
        return True


@dataclass(frozen=True, slots=True)
class RangeValidator:
    """Accept numbers, parsed by *cast*, inside ``[low, high]``."""

    low: float
    high: float
    cast: Cast

    def __call__(self, value: Any) -> ValidationResult:
        number = self.cast(value)
        if number is None:
            return "Please enter a number"
        if not self.low <= number <= self.high:
            return f"Please enter a number between {self.low} and {self.high}"
        return True


@dataclass(frozen=True, slots=True)
class MultiRangeValidator:
    """Accept ``1, 3-5`` style integer lists whose members lie in ``[low, high]``."""

    low: float
    high: float

    def __call__(self, value: Any) -> ValidationResult:
        ranges = _integer_ranges(value)
        if not ranges:
            return "Please enter numbers or ranges, e.g. 1, 3-5"
        if any(start < self.low or end > self.high for start, end in ranges):
            return f"Every number must be between {self.low} and {self.high}"
        return True


@dataclass(frozen=True, slots=True)
class OneOfValidator:
    """Accept only one of *values*."""

    values: tuple[Any, ...]

    def __call__(self, value: Any) -> ValidationResult:
        if value in self.values or _text(value) in map(str, self.values):
            return True
        return "Please choose one of: " + ", ".join(map(str, self.values))


@dataclass(frozen=True, slots=True)
class ColorValidator:
    """Accept ``#rgb``, ``#rrggbb`` and ``rgb(r, g, b)`` colors."""

    message: str = "Please enter a color such as #ff8800 or rgb(255, 136, 0)"

    def __call__(self, value: Any) -> ValidationResult:
        text = _text(value)
        if _HEX_COLOR.fullmatch(text):
            return True
        match = _RGB_COLOR.fullmatch(text)
        if match and all(int(part) <= 255 for part in match.groups()):
            return True
        return self.message


@dataclass(frozen=True, slots=True)
class DateFormatValidator:
    """Accept text that :func:`datetime.strptime` parses with *fmt*."""

    fmt: str

    def __call__(self, value: Any) -> ValidationResult:
        if _parse_datetime(value, self.fmt) is None:
            display = datetime(2000, 12, 31, 23, 59).strftime(self.fmt)
            return f"Please enter a date like {display}"
        return True


# ---------------------------------------------------------------------------
# Casts
# ---------------------------------------------------------------------------

def identity(value: Any) -> Any:
    return value


def _parse_int(text: str) -> int | None:
    # int() refuses digit strings over sys.get_int_max_str_digits()
    try:
        return int(text)
    except ValueError:
        return None


def to_integer(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = _text(value)
    if not re.fullmatch(INTEGER_PATTERN, text):
        return None
    return _parse_int(text)


def to_double(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = _text(value)
    if not re.fullmatch(DOUBLE_PATTERN, text):
        return None
    return float(text)


def to_money(value: Any) -> Decimal | None:
    """Parse ``12.50`` or ``12,50`` into ``Decimal("12.50")``."""
    if isinstance(value, Decimal):
        return value
    text = _text(value)
    if not re.fullmatch(MONEY_PATTERN, text):
        return None
    try:
        return Decimal(text.replace(",", "."))
    except InvalidOperation:
        return None


def _integer_ranges(value: Any) -> list[tuple[int, int]] | None:
    """Parse ``"1, 3-5"`` into ``[(1, 1), (3, 5)]`` without expanding it."""
    text = _text(value)
    if not text:
        return None
    ranges: list[tuple[int, int]] = []
    for token in text.split(","):
        match = _MULTI_RANGE_TOKEN.fullmatch(token)
        if match is None:
            return None
        start = _parse_int(match.group(1))
        end = _parse_int(match.group(2)) if match.group(2) is not None else start
        if start is None or end is None or end < start:
            return None
        ranges.append((start, end))
    return ranges


def to_integer_list(value: Any) -> list[int] | None:
    """Expand ``"1, 3-5, 8"`` into ``[1, 3, 4, 5, 8]``.

    Order of first appearance is kept and duplicates are dropped.
    """
    if isinstance(value, list):
        return value
    ranges = _integer_ranges(value)
    if ranges is None:
        return None
    numbers = (number for start, end in ranges for number in range(start, end + 1))
    return list(dict.fromkeys(numbers))


def to_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    text = _text(value).lower()
    if text in ("y", "yes", "true", "1"):
        return True
    if text in ("n", "no", "false", "0"):
        return False
    return None


def _parse_datetime(value: Any, fmt: str) -> datetime | None:
    try:
        return datetime.strptime(_text(value), fmt)
    except ValueError:
        return None


def to_date(value: Any) -> date | None:
    if isinstance(value, date):
        return value
    parsed = _parse_datetime(value, CALENDAR_FORMAT)
    return parsed.date() if parsed is not None else None


def to_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    return _parse_datetime(value, DATETIME_FORMAT)


@dataclass(frozen=True, slots=True)
class CharCast:
    """Truncate text to at most *length* characters."""

    length: int

    def __call__(self, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)[: self.length]
