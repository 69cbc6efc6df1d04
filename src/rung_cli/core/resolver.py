"""Answer resolver — casts raw prompt answers and applies defaults.

Validation and resolution are independent stages: validators gate what
the prompt engine accepts, while the resolver trusts that validation
already happened and only casts.  An out-of-range ``"99"`` for an
``IntegerRange(1, 10)`` therefore still resolves to ``99``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rung_cli.core.models import ParameterConfig
from rung_cli.core.registry import build_widget
from rung_cli.core.types import TypeDescriptor


def resolve_value(
    raw: Any,
    type_descriptor: TypeDescriptor,
    default: Any = None,
    required: bool = False,
) -> Any:
    """Return the final value for one answer.

    * A required parameter answered with blank text resolves to ``None``,
      even when a default exists.
    * Otherwise the raw answer is cast; an uncastable answer or an empty
      string resolves to *default*.

    Never raises and never returns an empty string.
    """
    if required and isinstance(raw, str) and not raw.strip():
        return None

    value = build_widget(type_descriptor).filter(raw)
    if value is None or value == "":
        return default
    return value


def resolve_answers(
    configs: Sequence[ParameterConfig],
    raw_answers: Mapping[str, Any],
) -> dict[str, Any]:
    """Resolve every declared parameter; missing answers count as ``None``."""
    return {
        config.name: resolve_value(
            raw_answers.get(config.name),
            config.type,
            config.default,
            config.required,
        )
        for config in configs
    }
