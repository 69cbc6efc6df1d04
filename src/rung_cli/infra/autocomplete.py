"""Discovery of autocomplete suggestion sources.

An extension provides suggestions for an ``AutoComplete`` parameter
``<name>`` with a module ``autocomplete/<name>.py`` exposing::

    def source(text: str) -> list[str]:
        ...

Modules without a callable ``source`` are skipped with a warning, which
makes the question compiler report the parameter as missing a source.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rung_cli.core.models import SuggestionSource
from rung_cli.infra.extension_loader import load_module

logger = logging.getLogger(__name__)

AUTOCOMPLETE_FOLDER = "autocomplete"
SOURCE_ATTRIBUTE = "source"


def load_autocomplete_sources(base: Path | None = None) -> dict[str, SuggestionSource]:
    """Return suggestion sources keyed by parameter name.

    A missing ``autocomplete`` folder simply yields an empty mapping.
    """
    folder = (base if base is not None else Path.cwd()) / AUTOCOMPLETE_FOLDER
    if not folder.is_dir():
        return {}

    sources: dict[str, SuggestionSource] = {}
    for path in sorted(folder.glob("*.py")):
        module = load_module(path, module_name=f"rung_autocomplete_{path.stem}")
        source = getattr(module, SOURCE_ATTRIBUTE, None)
        if not callable(source):
            logger.warning("%s does not define a callable '%s'", path, SOURCE_ATTRIBUTE)
            continue
        sources[path.stem] = source
    return sources
