# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Upper-bound range validation (``maximum`` / ``exclusiveMaximum``)."""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping, Union

from ..telemetry.metrics import record_validation
from .base import ValidationResult, ValidationViolation
from .instance import classify, is_nan, is_number
from .schema import EXCLUSIVE_MAXIMUM, MAXIMUM, SchemaFragment

logger = logging.getLogger(__name__)

SchemaLike = Union[SchemaFragment, Mapping[str, Any]]


class RangeValidator:
    """Stateless predicate for the upper-bound keywords.

    Non-numeric instances always pass: ``maximum`` constrains numbers only.
    Equality with the bound passes in inclusive mode and fails in exclusive
    mode. A NaN instance never satisfies a bound.
    """

    def validate(self, schema: SchemaLike, instance: Any) -> bool:
        """Return True when *instance* satisfies *schema*."""

        return self.check(schema, instance).allowed

    def check(self, schema: SchemaLike, instance: Any) -> ValidationResult:
        """Like :meth:`validate` but report the failed keyword.

        Raw mappings are compiled first and may raise
        :class:`~schemabound.exceptions.ConfigurationError`.
        """

        fragment = SchemaFragment.from_mapping(schema)
        result = self._evaluate(fragment, instance)
        record_validation(result.allowed, _kind_label(instance))
        return result

    def _evaluate(self, fragment: SchemaFragment, instance: Any) -> ValidationResult:
        if not is_number(instance):
            return ValidationResult.ok()

        maximum = fragment.maximum
        if maximum is None:
            return ValidationResult.ok()

        if fragment.exclusive_maximum:
            if instance < maximum:
                return ValidationResult.ok()
            keyword = EXCLUSIVE_MAXIMUM
            relation = "less than"
        else:
            if instance <= maximum:
                return ValidationResult.ok()
            keyword = MAXIMUM
            relation = "less than or equal to"

        if is_nan(instance):
            message = f"value nan is not comparable to {MAXIMUM} {maximum!r}"
        else:
            message = f"value {instance!r} must be {relation} {maximum!r}"

        logger.debug("Range check failed: %s", message)
        return ValidationResult.denied(
            ValidationViolation(
                keyword=keyword,
                expected=maximum,
                actual=instance,
                message=message,
            )
        )


def _kind_label(instance: Any) -> str:
    try:
        return classify(instance).value
    except TypeError:
        return "unknown"


_VALIDATOR: Final[RangeValidator] = RangeValidator()


def get_range_validator() -> RangeValidator:
    """Return the process-wide range validator instance."""

    return _VALIDATOR


def validate(schema: SchemaLike, instance: Any) -> bool:
    """Module-level shortcut for ``get_range_validator().validate``."""

    return _VALIDATOR.validate(schema, instance)


__all__ = [
    "RangeValidator",
    "SchemaLike",
    "get_range_validator",
    "validate",
]
