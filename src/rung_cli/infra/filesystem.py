"""Filesystem adapters: reading ``File`` answers and writing generated projects."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from rung_cli.core.models import GeneratedFile
from rung_cli.exceptions import ProjectGenerationError

logger = logging.getLogger(__name__)


class WorkingDirectoryFileReader:
    """Read files relative to *base* (the current working directory by default).

    ``OSError`` is not caught: a missing or unreadable file is reported
    by the CLI error boundary.
    """

    def __init__(self, base: Path | None = None) -> None:
        self._base: Path = base if base is not None else Path.cwd()

    def read_bytes(self, path: str) -> bytes:
        return (self._base / path).read_bytes()


class DiskProjectWriter:
    """Create project folders and files under *base*."""

    def __init__(self, base: Path | None = None) -> None:
        self._base: Path = base if base is not None else Path.cwd()

    def create_folders(self, root: str, subfolders: Sequence[str]) -> None:
        target = self._base / root
        try:
            target.mkdir()
            for folder in subfolders:
                (target / folder).mkdir()
        except OSError as exc:
            raise ProjectGenerationError(
                f"Unable to create folder {root}",
                hint="Choose another project name or remove the existing folder.",
            ) from exc

    def write_files(self, files: Sequence[GeneratedFile]) -> None:
        for generated in files:
            destination = self._base / generated.path
            destination.write_text(generated.content, encoding="utf-8")
            logger.debug("Wrote %s", destination)
