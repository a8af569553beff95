# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Loader for fixture suites served over HTTP(S)."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional
from urllib.parse import urlparse

import httpx

from ...exceptions import FixtureError
from ..files import SUPPORTED_SUFFIXES, parse_fixture_text
from ..models import FixtureSuite, parse_fixture
from .base import FixtureLoader

logger = logging.getLogger(__name__)

ENV_HTTP_TIMEOUT = "SCHEMABOUND_HTTP_TIMEOUT"
DEFAULT_TIMEOUT = 10.0
DEFAULT_RETRIES = 3
BACKOFF_BASE_SECONDS = 0.5

_RETRYABLE_STATUS = {429}


def _default_timeout() -> float:
    raw = os.getenv(ENV_HTTP_TIMEOUT)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return max(float(raw), 0.1)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", ENV_HTTP_TIMEOUT, raw)
        return DEFAULT_TIMEOUT


class HttpFixtureLoader(FixtureLoader):
    """Fetches a JSON or YAML fixture suite with ``httpx``.

    5xx and 429 responses are retried with exponential backoff; other
    client errors fail immediately. The format is taken from the URL suffix,
    then the ``Content-Type`` header, defaulting to JSON.
    """

    name = "http"

    def __init__(
        self,
        url: str,
        *,
        timeout: Optional[float] = None,
        retries: int = DEFAULT_RETRIES,
    ):
        self.url = url
        self.timeout = timeout if timeout is not None else _default_timeout()
        self.retries = max(int(retries), 0)

    async def _load(self) -> FixtureSuite:
        response = await self._fetch()
        suffix = self._suffix_for(response)
        raw = parse_fixture_text(response.text, suffix=suffix, source=self.url)
        return parse_fixture(raw, source=self.url)

    async def _fetch(self) -> httpx.Response:
        last_error: Optional[str] = None
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            for attempt in range(self.retries + 1):
                if attempt:
                    delay = BACKOFF_BASE_SECONDS * (2 ** (attempt - 1))
                    logger.debug("Retrying %s in %.2fs (attempt %d)", self.url, delay, attempt + 1)
                    await asyncio.sleep(delay)

                try:
                    response = await client.get(self.url)
                except httpx.HTTPError as exc:
                    last_error = f"{type(exc).__name__}: {exc}"
                    logger.warning("Fixture request to %s failed: %s", self.url, last_error)
                    continue

                status = response.status_code
                if status >= 500 or status in _RETRYABLE_STATUS:
                    last_error = f"HTTP {status}"
                    logger.warning("Fixture server returned %s for %s", status, self.url)
                    continue
                if status >= 400:
                    raise FixtureError(f"Fixture request rejected with HTTP {status}", source=self.url)
                return response

        raise FixtureError(
            f"Fixture request failed after {self.retries + 1} attempt(s): {last_error}",
            source=self.url,
        )

    def _suffix_for(self, response: httpx.Response) -> str:
        path = urlparse(self.url).path.lower()
        for suffix in SUPPORTED_SUFFIXES:
            if path.endswith(suffix):
                return suffix
        content_type = response.headers.get("content-type", "").lower()
        if "yaml" in content_type:
            return ".yaml"
        return ".json"


__all__ = ["ENV_HTTP_TIMEOUT", "HttpFixtureLoader"]
