"""Parameter type declarations used by extension authors.

Extensions declare their parameters with these descriptors::

    from rung_cli.core.types import Integer, OneOf, String

    params = {
        "name": {"description": "What is your name?", "type": String},
        "age": {"description": "How old are you?", "type": Integer},
        "side": {"description": "Pick a side", "type": OneOf(["left", "right"])},
    }

Simple types are module-level constants; parametric types are factory
functions returning a fresh, immutable :class:`TypeDescriptor`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """A type tag plus the parameters of parametric types."""

    tag: str
    """Registry key, e.g. ``"Integer"`` or ``"IntegerRange"``."""

    length: int | None = None
    """Maximum length for ``Char``."""

    low: float | None = None
    """Inclusive lower bound for range types."""

    high: float | None = None
    """Inclusive upper bound for range types."""

    values: tuple[Any, ...] = ()
    """Allowed values (``OneOf``) or ``(value, label)`` pairs (select boxes)."""


# ---------------------------------------------------------------------------
# Simple types
# ---------------------------------------------------------------------------

String = TypeDescriptor("String")
Integer = TypeDescriptor("Integer")
Natural = TypeDescriptor("Natural")
Double = TypeDescriptor("Double")
Email = TypeDescriptor("Email")
Url = TypeDescriptor("Url")
Money = TypeDescriptor("Money")
Calendar = TypeDescriptor("Calendar")
DateTime = TypeDescriptor("DateTime")
Color = TypeDescriptor("Color")
Checkbox = TypeDescriptor("Checkbox")
File = TypeDescriptor("File")
AutoComplete = TypeDescriptor("AutoComplete")


# ---------------------------------------------------------------------------
# Parametric types
# ---------------------------------------------------------------------------

def Char(length: int) -> TypeDescriptor:  # noqa: N802
    """Text truncated to at most *length* characters."""
    return TypeDescriptor("Char", length=length)


def OneOf(values: Iterable[Any]) -> TypeDescriptor:  # noqa: N802
    """A single choice among *values*, shown verbatim."""
    return TypeDescriptor("OneOf", values=tuple(values))


def IntegerRange(low: int, high: int) -> TypeDescriptor:  # noqa: N802
    return TypeDescriptor("IntegerRange", low=low, high=high)


def DoubleRange(low: float, high: float) -> TypeDescriptor:  # noqa: N802
    return TypeDescriptor("DoubleRange", low=low, high=high)


def IntegerMultiRange(low: int, high: int) -> TypeDescriptor:  # noqa: N802
    """A list of integers written as ``1, 3-5, 8`` within ``[low, high]``."""
    return TypeDescriptor("IntegerMultiRange", low=low, high=high)


def SelectBox(values: Mapping[Any, str]) -> TypeDescriptor:  # noqa: N802
    """Single selection; *values* maps stored value → displayed label."""
    return TypeDescriptor("SelectBox", values=tuple(values.items()))


def MultiSelectBox(values: Mapping[Any, str]) -> TypeDescriptor:  # noqa: N802
    """Multiple selection; *values* maps stored value → displayed label."""
    return TypeDescriptor("MultiSelectBox", values=tuple(values.items()))
