"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Rung API (httpx), the
filesystem and extension modules on disk.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from rung_cli.infra.autocomplete import load_autocomplete_sources
from rung_cli.infra.categories import HttpCategoryProvider
from rung_cli.infra.extension_loader import extension_params, load_extension, load_module
from rung_cli.infra.filesystem import DiskProjectWriter, WorkingDirectoryFileReader

__all__: list[str] = [
    "DiskProjectWriter",
    "HttpCategoryProvider",
    "WorkingDirectoryFileReader",
    "extension_params",
    "load_autocomplete_sources",
    "load_extension",
    "load_module",
]
