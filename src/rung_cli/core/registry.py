"""Type registry — maps a type tag to its prompt widget, validator and cast.

The registry is a read-only mapping built once at import time.  Each
entry is a builder receiving the declared :class:`TypeDescriptor` (so
parametric types can read ``length``, ``low``/``high`` or ``values``)
and returning the type-specific :class:`Widget`.

Lookup policy
-------------
Unknown tags silently fall back to the ``String`` entry.  A debug
message is logged so typos in declarations can still be tracked down.
``AutoComplete`` has no entry here: its widget needs a suggestion
source and is built by the question compiler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType

from rung_cli.core.models import Choice, Widget, WidgetKind
from rung_cli.core.types import TypeDescriptor
from rung_cli.core.validators import (
    CALENDAR_FORMAT,
    DATETIME_FORMAT,
    DOUBLE_PATTERN,
    EMAIL_PATTERN,
    INTEGER_PATTERN,
    MONEY_PATTERN,
    URL_PATTERN,
    CharCast,
    ColorValidator,
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

logger = logging.getLogger(__name__)

WidgetBuilder = Callable[[TypeDescriptor], Widget]

FALLBACK_TAG = "String"


def _select_choices(descriptor: TypeDescriptor) -> tuple[Choice, ...]:
    """Pair ``(value, label)`` entries into choices, keeping declaration order."""
    return tuple(Choice(label=str(label), value=value) for value, label in descriptor.values)


def _bounds(descriptor: TypeDescriptor) -> tuple[float, float]:
    """Declared ``(low, high)``; a missing bound is unbounded."""
    low = descriptor.low if descriptor.low is not None else float("-inf")
    high = descriptor.high if descriptor.high is not None else float("inf")
    return low, high


def _range_widget(descriptor: TypeDescriptor, cast: Callable[..., object]) -> Widget:
    low, high = _bounds(descriptor)
    return Widget(
        kind=WidgetKind.INPUT,
        validate=RangeValidator(low, high, cast),
        filter=cast,
    )


_BUILDERS: dict[str, WidgetBuilder] = {
    "String": lambda _: Widget(kind=WidgetKind.INPUT),
    "Integer": lambda _: Widget(
        kind=WidgetKind.INPUT,
        validate=PatternValidator(INTEGER_PATTERN, "Please enter an integer"),
        filter=to_integer,
    ),
    "Natural": lambda _: Widget(
        kind=WidgetKind.INPUT,
        validate=NaturalValidator(),
        filter=to_integer,
    ),
    "Double": lambda _: Widget(
        kind=WidgetKind.INPUT,
        validate=PatternValidator(DOUBLE_PATTERN, "Please enter a number"),
        filter=to_double,
    ),
    "Email": lambda _: Widget(
        kind=WidgetKind.INPUT,
        validate=PatternValidator(EMAIL_PATTERN, "Please enter a valid email address"),
    ),
    "Url": lambda _: Widget(
        kind=WidgetKind.INPUT,
        validate=PatternValidator(URL_PATTERN, "Please enter a valid URL"),
    ),
    "Money": lambda _: Widget(
        kind=WidgetKind.INPUT,
        validate=PatternValidator(MONEY_PATTERN, "Please enter an amount such as 10.50"),
        filter=to_money,
    ),
    "Char": lambda d: Widget(kind=WidgetKind.INPUT, filter=CharCast(d.length)),
    "OneOf": lambda d: Widget(
        kind=WidgetKind.LIST,
        validate=OneOfValidator(d.values),
        choices=tuple(Choice(label=str(value), value=value) for value in d.values),
    ),
    "SelectBox": lambda d: Widget(kind=WidgetKind.LIST, choices=_select_choices(d)),
    "MultiSelectBox": lambda d: Widget(kind=WidgetKind.CHECKBOX, choices=_select_choices(d)),
    "IntegerRange": lambda d: _range_widget(d, to_integer),
    "DoubleRange": lambda d: _range_widget(d, to_double),
    "IntegerMultiRange": lambda d: Widget(
        kind=WidgetKind.INPUT,
        validate=MultiRangeValidator(*_bounds(d)),
        filter=to_integer_list,
    ),
    "Calendar": lambda _: Widget(
        kind=WidgetKind.DATETIME,
        filter=to_date,
        date_format=CALENDAR_FORMAT,
    ),
    "DateTime": lambda _: Widget(
        kind=WidgetKind.DATETIME,
        filter=to_datetime,
        date_format=DATETIME_FORMAT,
    ),
    "Color": lambda _: Widget(kind=WidgetKind.COLOR, validate=ColorValidator()),
    "Checkbox": lambda _: Widget(kind=WidgetKind.CONFIRM, filter=to_bool),
    "File": lambda _: Widget(kind=WidgetKind.PATH),
}

REGISTRY = MappingProxyType(_BUILDERS)
"""Read-only tag → widget builder table."""


def lookup(tag: str) -> WidgetBuilder:
    """Return the builder for *tag*, falling back to ``String``."""
    builder = REGISTRY.get(tag)
    if builder is None:
        logger.debug("Unknown parameter type %r, falling back to %s", tag, FALLBACK_TAG)
        return REGISTRY[FALLBACK_TAG]
    return builder


def build_widget(descriptor: TypeDescriptor) -> Widget:
    """Build the widget for *descriptor* (see the module lookup policy)."""
    return lookup(descriptor.tag)(descriptor)
