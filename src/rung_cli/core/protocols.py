"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the CLI and infrastructure adapters
must satisfy.  Core code depends ONLY on these protocols — never on
concrete implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from rung_cli.core.models import Category, GeneratedFile, PromptDescriptor


class PromptEngine(Protocol):
    """Contract for interactive prompt backends."""

    def ask(self, questions: Sequence[PromptDescriptor]) -> dict[str, Any]:
        """Prompt every question in order and return raw answers by name.

        ``CONFIRM`` widgets answer with ``bool``, ``CHECKBOX`` widgets with
        a list of choice values, ``LIST`` widgets with the chosen value and
        every other widget with text.

        Raises
        ------
        PromptAbortedError
            When the user cancels a prompt.
        """
        ...  # pragma: no cover


class FileReader(Protocol):
    """Contract for reading ``File`` answers."""

    def read_bytes(self, path: str) -> bytes:
        """Return the content of *path*, resolved against the working directory.

        Filesystem errors propagate to the caller unchanged.
        """
        ...  # pragma: no cover


class CategoryProvider(Protocol):
    """Contract for the source of extension categories."""

    def fetch_categories(self) -> list[Category]:
        """Return the available categories; never empty."""
        ...  # pragma: no cover


class ProjectWriter(Protocol):
    """Contract for materialising a generated project on disk."""

    def create_folders(self, root: str, subfolders: Sequence[str]) -> None:
        """Create *root* and its *subfolders*.

        Raises
        ------
        ProjectGenerationError
            When *root* cannot be created (e.g. it already exists).
        """
        ...  # pragma: no cover

    def write_files(self, files: Sequence[GeneratedFile]) -> None:
        ...  # pragma: no cover
