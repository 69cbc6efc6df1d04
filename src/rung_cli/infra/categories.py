"""httpx-backed implementation of :class:`~rung_cli.core.protocols.CategoryProvider`.

Any HTTP or decoding failure falls back to the single ``Miscellaneous``
category: the boilerplate command must keep working offline.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from rung_cli.core.boilerplate import DEFAULT_CATEGORY
from rung_cli.core.models import Category

logger = logging.getLogger(__name__)


class HttpCategoryProvider:
    """Fetch categories from ``GET {api_url}/categories``.

    The endpoint answers with ``[{"name": ..., "alias": ...}, ...]``.
    A pre-configured :class:`httpx.Client` may be injected (tests use
    :class:`httpx.MockTransport`).
    """

    def __init__(
        self,
        api_url: str,
        *,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url: str = api_url.rstrip("/") + "/categories"
        self._timeout: float = timeout
        self._client: httpx.Client | None = client

    def fetch_categories(self) -> list[Category]:
        try:
            payload = self._get()
            categories = [
                Category(name=str(entry["name"]), alias=str(entry["alias"]))
                for entry in payload
            ]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Could not fetch categories from %s: %s", self._url, exc)
            return [DEFAULT_CATEGORY]

        if not categories:
            logger.warning("No categories returned by %s", self._url)
            return [DEFAULT_CATEGORY]
        return categories

    def _get(self) -> Any:
        if self._client is not None:
            response = self._client.get(self._url, timeout=self._timeout)
        else:
            response = httpx.get(self._url, timeout=self._timeout)
        response.raise_for_status()
        return response.json()
