# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for schemabound."""

from __future__ import annotations

from typing import Optional


class SchemaboundError(Exception):
    """Base class for every error raised by schemabound."""


class ConfigurationError(SchemaboundError):
    """Raised when a schema or fixture location is malformed.

    Schemas are compiled eagerly, so a typo such as ``maximun`` or a
    non-numeric ``maximum`` surfaces here rather than as a silently
    ignored bound.
    """


class FixtureError(SchemaboundError):
    """Raised when a fixture suite cannot be fetched or parsed."""

    def __init__(self, message: str, *, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "FixtureError",
    "SchemaboundError",
]
