# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry package: OpenTelemetry instruments."""

from .metrics import (
    conformance_case_total,
    fixture_load_latency_ms,
    fixture_load_total,
    record_case,
    record_fixture_load,
    record_validation,
    validation_total,
)
from .runtime import meter

__all__ = [
    "conformance_case_total",
    "fixture_load_latency_ms",
    "fixture_load_total",
    "meter",
    "record_case",
    "record_fixture_load",
    "record_validation",
    "validation_total",
]
