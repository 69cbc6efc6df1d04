"""Question compiler — turns parameter declarations into prompt descriptors.

Every declared parameter becomes exactly one :class:`PromptDescriptor`,
in the iteration order of the declaration mapping.  The type-specific
fields come from the type registry; ``name``, ``message``, ``default``
and the pass-through ``extra`` fields are added alongside them and can
never overwrite a type-specific field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rung_cli.core.models import (
    ParameterConfig,
    PromptDescriptor,
    SuggestionSource,
    Widget,
    WidgetKind,
)
from rung_cli.core.registry import build_widget
from rung_cli.exceptions import ConfigurationError

AUTOCOMPLETE_TAG = "AutoComplete"


def normalize_parameters(
    params: Mapping[str, ParameterConfig | Mapping[str, Any]],
) -> list[ParameterConfig]:
    """Convert a declaration mapping into an ordered list of configs."""
    return [ParameterConfig.from_declaration(name, decl) for name, decl in params.items()]


def _autocomplete_widget(
    name: str,
    sources: Mapping[str, SuggestionSource],
) -> tuple[Widget, SuggestionSource]:
    source = sources.get(name)
    if source is None:
        raise ConfigurationError(
            f"No autocomplete source for parameter '{name}'.",
            hint=f"Aren't you missing 'autocomplete/{name}.py'?",
        )
    return Widget(kind=WidgetKind.AUTOCOMPLETE), source


def compile_question(
    config: ParameterConfig,
    sources: Mapping[str, SuggestionSource] | None = None,
) -> PromptDescriptor:
    """Compile a single parameter.

    Raises
    ------
    ConfigurationError
        If *config* is an ``AutoComplete`` parameter without a source.
    """
    source: SuggestionSource | None = None
    if config.type.tag == AUTOCOMPLETE_TAG:
        widget, source = _autocomplete_widget(config.name, sources or {})
    else:
        widget = build_widget(config.type)

    return PromptDescriptor(
        name=config.name,
        message=config.description,
        kind=widget.kind,
        validate=widget.validate,
        filter=widget.filter,
        choices=widget.choices,
        default=config.default,
        date_format=widget.date_format,
        source=source,
        extra=dict(config.extra),
    )


def compile_questions(
    params: Mapping[str, ParameterConfig | Mapping[str, Any]],
    sources: Mapping[str, SuggestionSource] | None = None,
) -> list[PromptDescriptor]:
    """Compile a whole declaration mapping.

    Every ``AutoComplete`` parameter is checked against *sources* before
    anything is returned, so a missing source fails before the first
    prompt is shown.
    """
    return [compile_question(config, sources) for config in normalize_parameters(params)]
