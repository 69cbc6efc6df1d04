"""Import extension modules (``index.py``, autocomplete sources) from a path."""

from __future__ import annotations

import importlib.util
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType
from typing import Any

from rung_cli.exceptions import ExtensionLoadError

PARAMS_ATTRIBUTE = "params"


def load_module(path: Path, *, module_name: str) -> ModuleType:
    """Execute the Python file at *path* and return it as a module.

    Raises
    ------
    ExtensionLoadError
        If the file is missing or raises while being executed.
    """
    if not path.is_file():
        raise ExtensionLoadError(
            f"Extension file not found: {path}",
            hint="Run the command from the extension folder or pass --file.",
        )
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ExtensionLoadError(f"Cannot import {path}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ExtensionLoadError(
            f"Failed to import {path}: {type(exc).__name__}: {exc}",
        ) from exc
    return module


def load_extension(path: Path) -> ModuleType:
    """Load an extension module and check it declares ``params``."""
    module = load_module(path, module_name="rung_extension")
    params = getattr(module, PARAMS_ATTRIBUTE, None)
    if not isinstance(params, Mapping):
        raise ExtensionLoadError(
            f"{path.name} does not declare a '{PARAMS_ATTRIBUTE}' mapping.",
            hint="Declare params = {\"name\": {\"description\": ..., \"type\": ...}}",
        )
    return module


def extension_params(module: ModuleType) -> Mapping[str, Any]:
    return getattr(module, PARAMS_ATTRIBUTE)
