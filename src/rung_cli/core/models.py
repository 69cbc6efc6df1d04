"""Domain models for rung-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and construction helpers.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from rung_cli.core.types import String, TypeDescriptor
from rung_cli.core.validators import Cast, Validator, identity


# ---------------------------------------------------------------------------
# Parameter declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParameterConfig:
    """One parameter an extension asks the user for."""

    name: str
    """Unique key within the question set."""

    description: str
    """Shown as the prompt message."""

    type: TypeDescriptor = String

    required: bool = False

    default: Any = None

    extra: Mapping[str, Any] = field(default_factory=dict)
    """Any other declared fields, passed through untouched."""

    @classmethod
    def from_declaration(
        cls,
        name: str,
        declaration: ParameterConfig | Mapping[str, Any],
    ) -> ParameterConfig:
        """Build a config from the plain-dict form used in extension modules.

        ``{"description": ..., "type": Integer, "required": True, "default": 1}``
        — every key other than those four lands in :attr:`extra`.
        """
        if isinstance(declaration, ParameterConfig):
            return declaration
        extra = {
            key: value
            for key, value in declaration.items()
            if key not in ("description", "type", "required", "default")
        }
        declared_type = declaration.get("type") or String
        if isinstance(declared_type, str):
            declared_type = TypeDescriptor(declared_type)
        return cls(
            name=name,
            description=str(declaration.get("description", name)),
            type=declared_type,
            required=bool(declaration.get("required", False)),
            default=declaration.get("default"),
            extra=extra,
        )


# ---------------------------------------------------------------------------
# Prompt descriptors
# ---------------------------------------------------------------------------

class WidgetKind(str, Enum):
    """Input widget a prompt engine should render."""

    INPUT = "input"
    LIST = "list"
    CHECKBOX = "checkbox"
    CONFIRM = "confirm"
    DATETIME = "datetime"
    COLOR = "color"
    PATH = "path"
    AUTOCOMPLETE = "autocomplete"


@dataclass(frozen=True, slots=True)
class Choice:
    """One selectable entry of a list or checkbox widget."""

    label: str
    value: Any


SuggestionSource = Callable[[str], list[str]]


@dataclass(frozen=True, slots=True)
class Widget:
    """Type-specific part of a prompt, produced by the type registry."""

    kind: WidgetKind
    validate: Validator | None = None
    filter: Cast = identity
    choices: tuple[Choice, ...] = ()
    date_format: str | None = None
    """``strptime`` format shown and enforced by ``DATETIME`` widgets."""


@dataclass(frozen=True, slots=True)
class PromptDescriptor:
    """Fully resolved description of how one parameter is prompted."""

    name: str
    message: str
    kind: WidgetKind
    validate: Validator | None = None
    filter: Cast = identity
    choices: tuple[Choice, ...] = ()
    default: Any = None
    date_format: str | None = None
    source: SuggestionSource | None = None
    """Suggestion callable for ``AUTOCOMPLETE`` widgets."""
    extra: Mapping[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Boilerplate
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Category:
    """An extension category as published by the Rung API."""

    name: str
    alias: str


@dataclass(frozen=True, slots=True)
class GeneratedFile:
    """A file of the generated project, relative to the working directory."""

    path: str
    content: str
