# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""schemabound: upper-bound range validation and its conformance fixtures.

Typical use::

    from schemabound import validate

    validate({"maximum": 3.0}, 2.6)                            # True
    validate({"maximum": 3.0, "exclusiveMaximum": True}, 3.0)  # False
"""

from .exceptions import ConfigurationError, FixtureError, SchemaboundError
from .fixtures import FixtureCase, FixtureGroup, FixtureSuite, load_builtin_fixture, load_fixture_file
from .runner import CaseOutcome, SuiteReport, run_groups
from .validation import (
    InstanceKind,
    RangeValidator,
    SchemaFragment,
    ValidationResult,
    ValidationViolation,
    get_range_validator,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "CaseOutcome",
    "ConfigurationError",
    "FixtureCase",
    "FixtureError",
    "FixtureGroup",
    "FixtureSuite",
    "InstanceKind",
    "RangeValidator",
    "SchemaFragment",
    "SchemaboundError",
    "SuiteReport",
    "ValidationResult",
    "ValidationViolation",
    "get_range_validator",
    "load_builtin_fixture",
    "load_fixture_file",
    "run_groups",
    "validate",
]
