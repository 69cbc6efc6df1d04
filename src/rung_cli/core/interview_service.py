"""Interview service — declared parameters in, typed answers out.

Pipeline: normalize → compile → prompt → open files → resolve.
Prompting and file reading are delegated to injected collaborators;
their errors propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from rung_cli.core.compiler import compile_questions, normalize_parameters
from rung_cli.core.models import ParameterConfig, SuggestionSource
from rung_cli.core.protocols import FileReader, PromptEngine
from rung_cli.core.resolver import resolve_answers

logger = logging.getLogger(__name__)

FILE_TAG = "File"


class InterviewService:
    """Asks the user for an extension's parameters.

    Parameters
    ----------
    engine:
        Any object satisfying the :class:`PromptEngine` protocol.
    file_reader:
        Reads the content of ``File`` answers.
    sources:
        Autocomplete suggestion sources keyed by parameter name.
    """

    def __init__(
        self,
        engine: PromptEngine,
        file_reader: FileReader,
        sources: Mapping[str, SuggestionSource] | None = None,
    ) -> None:
        self._engine: PromptEngine = engine
        self._file_reader: FileReader = file_reader
        self._sources: Mapping[str, SuggestionSource] = sources or {}

    def ask(
        self,
        params: Mapping[str, ParameterConfig | Mapping[str, Any]],
    ) -> dict[str, Any]:
        """Interview the user and return resolved answers by parameter name.

        Raises
        ------
        ConfigurationError
            Before any prompt, if an ``AutoComplete`` parameter has no source.
        """
        configs = normalize_parameters(params)
        questions = compile_questions(
            {config.name: config for config in configs},
            self._sources,
        )
        raw_answers = self._engine.ask(questions)
        logger.debug("Received %d raw answers", len(raw_answers))
        return resolve_answers(configs, self._open_files(configs, raw_answers))

    def _open_files(
        self,
        configs: list[ParameterConfig],
        raw_answers: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Replace non-empty ``File`` answers with the file content."""
        opened = dict(raw_answers)
        for config in configs:
            path = opened.get(config.name)
            if config.type.tag != FILE_TAG or not isinstance(path, str) or not path.strip():
                continue
            opened[config.name] = self._file_reader.read_bytes(path.strip())
        return opened
