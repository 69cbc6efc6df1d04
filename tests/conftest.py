"""Shared pytest fixtures and configuration for the rung-cli test suite.

Guidelines
----------
* No internet access in any test — httpx is driven by ``MockTransport``.
* questionary is mocked at the prompt-engine boundary.
* Core tests must be pure — no side effects.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from rung_cli.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop the cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers and levels installed by ``configure_logging``."""
    yield
    logger = logging.getLogger("rung_cli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
