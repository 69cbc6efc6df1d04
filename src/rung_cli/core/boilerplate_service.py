"""Boilerplate service — interviews the user and generates a starter project.

Depends only on protocols injected at construction time: a prompt
engine, a category provider and a project writer.
"""

from __future__ import annotations

import logging

from rung_cli.core.boilerplate import (
    INFO_FOLDER,
    boilerplate_parameters,
    boilerplate_questions,
    project_files,
)
from rung_cli.core.protocols import CategoryProvider, ProjectWriter, PromptEngine
from rung_cli.core.resolver import resolve_answers

logger = logging.getLogger(__name__)


class BoilerplateService:
    """Drives the ``rung boilerplate`` command.

    Parameters
    ----------
    engine:
        Prompt backend used for the project questions.
    categories:
        Source of the category choices.
    writer:
        Creates folders and files on disk.
    sdk_version:
        rung-cli version pinned in the generated manifest.
    """

    def __init__(
        self,
        engine: PromptEngine,
        categories: CategoryProvider,
        writer: ProjectWriter,
        sdk_version: str,
    ) -> None:
        self._engine: PromptEngine = engine
        self._categories: CategoryProvider = categories
        self._writer: ProjectWriter = writer
        self._sdk_version: str = sdk_version

    def generate(self, default_name: str) -> str:
        """Ask the project questions, write the project and return its folder name.

        Raises
        ------
        ProjectGenerationError
            When the project folder cannot be created.
        """
        params = boilerplate_parameters(default_name, self._categories.fetch_categories())
        raw_answers = self._engine.ask(boilerplate_questions(params))
        answers = resolve_answers(list(params.values()), raw_answers)

        name: str = answers["name"]
        self._writer.create_folders(name, [INFO_FOLDER])
        files = project_files(answers, self._sdk_version)
        self._writer.write_files(files)
        logger.debug("Wrote %d files under %s", len(files), name)
        return name
