# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Fixture suite data structures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..exceptions import FixtureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixtureCase:
    """One instance plus the expected verdict."""

    description: str
    data: Any
    valid: bool

    @classmethod
    def from_mapping(cls, raw: Any, *, location: str) -> "FixtureCase":
        if not isinstance(raw, Mapping):
            raise FixtureError(f"Case at {location} must be an object, got {type(raw).__name__}")
        description = _require_str(raw, "description", location)
        if "data" not in raw:
            raise FixtureError(f"Case at {location} is missing 'data'")
        valid = raw.get("valid")
        if not isinstance(valid, bool):
            raise FixtureError(f"Case at {location} must have a boolean 'valid', got {valid!r}")
        return cls(description=description, data=raw["data"], valid=valid)


@dataclass(frozen=True)
class FixtureGroup:
    """A schema and the cases exercised against it.

    The schema is kept raw; compilation happens in the runner so that a bad
    schema fails its own group instead of the whole suite.
    """

    description: str
    schema: Mapping[str, Any]
    tests: List[FixtureCase] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, raw: Any, *, location: str) -> "FixtureGroup":
        if not isinstance(raw, Mapping):
            raise FixtureError(f"Group at {location} must be an object, got {type(raw).__name__}")
        description = _require_str(raw, "description", location)
        schema = raw.get("schema")
        if not isinstance(schema, Mapping):
            raise FixtureError(f"Group at {location} must have an object 'schema', got {schema!r}")
        tests = raw.get("tests")
        if not isinstance(tests, list):
            raise FixtureError(f"Group at {location} must have a list of 'tests'")

        cases = [
            FixtureCase.from_mapping(item, location=f"{location}.tests[{index}]")
            for index, item in enumerate(tests)
        ]
        return cls(description=description, schema=dict(schema), tests=cases)


@dataclass
class FixtureSuite:
    """Ordered groups plus free-form metadata."""

    groups: List[FixtureGroup]
    metadata: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None

    @property
    def case_count(self) -> int:
        return sum(len(group.tests) for group in self.groups)


def parse_fixture(raw: Any, *, source: Optional[str] = None) -> FixtureSuite:
    """Build a :class:`FixtureSuite` from decoded YAML/JSON.

    Accepts a top-level list of groups or a mapping with a ``groups`` key and
    optional ``metadata``.
    """

    metadata: Dict[str, Any] = {}
    if isinstance(raw, Mapping):
        raw_metadata = raw.get("metadata") or {}
        if not isinstance(raw_metadata, Mapping):
            raise FixtureError("'metadata' must be an object", source=source)
        metadata = dict(raw_metadata)
        raw_groups = raw.get("groups")
    else:
        raw_groups = raw

    if not isinstance(raw_groups, Sequence) or isinstance(raw_groups, (str, bytes)):
        raise FixtureError("Fixture must be a list of groups or an object with 'groups'", source=source)

    try:
        groups = [
            FixtureGroup.from_mapping(item, location=f"groups[{index}]")
            for index, item in enumerate(raw_groups)
        ]
    except FixtureError as exc:
        if source and exc.source is None:
            raise FixtureError(str(exc), source=source) from exc
        raise

    logger.debug("Parsed %d fixture groups from %s", len(groups), source or "<memory>")
    return FixtureSuite(groups=groups, metadata=metadata, source=source)


def _require_str(raw: Mapping[str, Any], key: str, location: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise FixtureError(f"Entry at {location} must have a string '{key}', got {value!r}")
    return value


__all__ = ["FixtureCase", "FixtureGroup", "FixtureSuite", "parse_fixture"]
