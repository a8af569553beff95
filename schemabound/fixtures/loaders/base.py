# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Abstract base class for fixture loaders."""

from __future__ import annotations

import abc
import logging
import time
from typing import List

from ...telemetry.metrics import record_fixture_load
from ..models import FixtureGroup, FixtureSuite

logger = logging.getLogger(__name__)


class FixtureLoader(abc.ABC):
    """Fetches a fixture suite from somewhere."""

    #: Label used for telemetry attributes.
    name: str = "base"

    async def load_suite(self) -> FixtureSuite:
        """Load the suite and record latency and status."""

        started = time.perf_counter()
        try:
            suite = await self._load()
        except Exception:
            record_fixture_load(self.name, "error", (time.perf_counter() - started) * 1000)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        record_fixture_load(self.name, "ok", elapsed_ms)
        logger.info(
            "Loaded %d groups (%d cases) from %s in %.1f ms",
            len(suite.groups),
            suite.case_count,
            suite.source,
            elapsed_ms,
        )
        return suite

    async def load_groups(self) -> List[FixtureGroup]:
        """Load the suite and return only its groups."""

        return (await self.load_suite()).groups

    @abc.abstractmethod
    async def _load(self) -> FixtureSuite:
        """Fetch and parse the suite."""


__all__ = ["FixtureLoader"]
