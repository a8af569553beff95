# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter shared by all schemabound instruments.

Without an SDK meter provider configured by the host application the API
hands back no-op instruments.
"""

from __future__ import annotations

from opentelemetry import metrics

METER_NAME = "schemabound"

meter = metrics.get_meter(METER_NAME)

__all__ = ["METER_NAME", "meter"]
