# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation package - upper-bound range checking.

Pure constraint checking: schemas are compiled into immutable fragments and
instances are never transformed.
"""

from .base import ValidationResult, ValidationViolation
from .instance import InstanceKind, classify, is_number
from .range import RangeValidator, get_range_validator, validate
from .schema import SchemaFragment

__all__ = [
    "InstanceKind",
    "RangeValidator",
    "SchemaFragment",
    "ValidationResult",
    "ValidationViolation",
    "classify",
    "get_range_validator",
    "is_number",
    "validate",
]
