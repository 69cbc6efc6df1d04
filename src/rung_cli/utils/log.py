"""Logging configuration for the ``rung`` console script.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed here, once, by the CLI layer.
"""

from __future__ import annotations

import logging

_FORMAT = "%(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler without rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + _FORMAT))
        return handler

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Install a single handler on the ``rung_cli`` logger.

    Calling this repeatedly replaces the previous handler instead of
    stacking duplicates.
    """
    root = logging.getLogger("rung_cli")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(_build_handler())
    root.setLevel(level if isinstance(level, int) else level.upper())
