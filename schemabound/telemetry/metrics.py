# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for schemabound."""

from __future__ import annotations

import logging
from typing import Mapping

from .runtime import meter

logger = logging.getLogger(__name__)

validation_total = meter.create_counter(
    name="schemabound.validation.total",
    description="Counts range validations, tagged by result and instance kind.",
    unit="1",
)

conformance_case_total = meter.create_counter(
    name="schemabound.conformance.case.total",
    description="Counts conformance cases executed, tagged by pass/fail status.",
    unit="1",
)

fixture_load_total = meter.create_counter(
    name="schemabound.fixture.load.total",
    description="Counts fixture suite loads, tagged by loader and status.",
    unit="1",
)

fixture_load_latency_ms = meter.create_histogram(
    name="schemabound.fixture.load.latency.ms",
    description="Time taken to load and parse a fixture suite.",
    unit="ms",
)


def record_validation(result: bool, kind: str) -> None:
    """Increment the validation counter; never lets telemetry break a check."""

    _safe_add(validation_total, {"result": "valid" if result else "invalid", "kind": kind})


def record_case(passed: bool) -> None:
    _safe_add(conformance_case_total, {"status": "passed" if passed else "failed"})


def record_fixture_load(loader: str, status: str, latency_ms: float) -> None:
    _safe_add(fixture_load_total, {"loader": loader, "status": status})
    try:
        fixture_load_latency_ms.record(latency_ms, {"loader": loader})
    except Exception:  # pragma: no cover - exporter failures
        logger.debug("Failed to record fixture load latency", exc_info=True)


def _safe_add(counter, attributes: Mapping[str, str]) -> None:
    try:
        counter.add(1, dict(attributes))
    except Exception:  # pragma: no cover - exporter failures
        logger.debug("Failed to record metric %s", getattr(counter, "name", counter), exc_info=True)


__all__ = [
    "conformance_case_total",
    "fixture_load_latency_ms",
    "fixture_load_total",
    "record_case",
    "record_fixture_load",
    "record_validation",
    "validation_total",
]
