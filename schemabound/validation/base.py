# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Result types shared by the validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class ValidationViolation:
    """A single failed keyword."""

    keyword: str
    expected: Any
    actual: Any
    message: str


@dataclass
class ValidationResult:
    """Outcome of checking one instance against one schema fragment."""

    allowed: bool
    violations: List[ValidationViolation] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(allowed=True)

    @classmethod
    def denied(cls, violation: ValidationViolation) -> "ValidationResult":
        return cls(allowed=False, violations=[violation])


__all__ = ["ValidationResult", "ValidationViolation"]
