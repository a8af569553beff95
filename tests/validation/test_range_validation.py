# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import math
from fractions import Fraction

import pytest

from schemabound.exceptions import ConfigurationError
from schemabound.validation import (
    RangeValidator,
    SchemaFragment,
    ValidationResult,
    ValidationViolation,
    get_range_validator,
    validate,
)


INCLUSIVE = SchemaFragment(maximum=3.0)
EXCLUSIVE = SchemaFragment(maximum=3.0, exclusive_maximum=True)


def _validate(schema, instance):
    return RangeValidator().validate(schema, instance)


# ------------------------------------------------------------------
# Scenarios from the bundled maximum fixture
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "schema,data,expected",
    [
        ({"maximum": 3.0}, 2.6, True),
        ({"maximum": 3.0}, 3.5, False),
        ({"maximum": 3.0}, "x", True),
        ({"maximum": 3.0, "exclusiveMaximum": True}, 2.2, True),
        ({"maximum": 3.0, "exclusiveMaximum": True}, 3.0, False),
    ],
)
def test_fixture_scenarios(schema, data, expected):
    assert _validate(schema, data) is expected


def test_boundary_is_valid_when_inclusive():
    assert _validate(INCLUSIVE, 3.0) is True
    assert _validate(INCLUSIVE, 3) is True


def test_boundary_is_invalid_when_exclusive():
    assert _validate(EXCLUSIVE, 3.0) is False
    assert _validate(EXCLUSIVE, 3) is False


def test_exclusive_false_behaves_like_inclusive():
    schema = {"maximum": 3.0, "exclusiveMaximum": False}
    assert _validate(schema, 3.0) is True
    assert _validate(schema, 3.0000001) is False


@pytest.mark.parametrize(
    "instance",
    ["x", "", "10", True, False, None, {"a": 10}, [10, 20], (5,)],
)
def test_non_numbers_are_ignored(instance):
    assert _validate(INCLUSIVE, instance) is True
    assert _validate(EXCLUSIVE, instance) is True


def test_booleans_are_not_compared_numerically():
    # True == 1, so a numeric comparison against 0 would fail
    assert _validate({"maximum": 0}, True) is True


def test_missing_maximum_accepts_everything():
    assert _validate(SchemaFragment(), 1e308) is True
    assert _validate({}, 10) is True


@pytest.mark.parametrize(
    "instance,inclusive,exclusive",
    [
        (-1, True, True),
        (0, True, True),
        (2.999, True, True),
        (3, True, False),
        (3.001, False, False),
        (100, False, False),
        (Fraction(5, 2), True, True),
    ],
)
def test_matches_real_ordering(instance, inclusive, exclusive):
    assert _validate(INCLUSIVE, instance) is inclusive
    assert _validate(EXCLUSIVE, instance) is exclusive


def test_integer_maximum_with_float_instance():
    assert _validate({"maximum": 10}, 9.5) is True
    assert _validate({"maximum": 10}, 10.5) is False


def test_nan_instance_is_always_invalid():
    assert _validate(INCLUSIVE, math.nan) is False
    assert _validate(EXCLUSIVE, math.nan) is False


def test_infinite_instances_use_standard_ordering():
    assert _validate(INCLUSIVE, -math.inf) is True
    assert _validate(INCLUSIVE, math.inf) is False
    assert _validate(EXCLUSIVE, math.inf) is False


def test_validate_is_idempotent():
    validator = RangeValidator()
    results = {validator.validate(EXCLUSIVE, 3.0) for _ in range(5)}
    assert results == {False}


# ------------------------------------------------------------------
# Structured results
# ------------------------------------------------------------------


def test_check_reports_maximum_violation():
    result = RangeValidator().check(INCLUSIVE, 3.5)

    assert isinstance(result, ValidationResult)
    assert result.allowed is False
    assert not result
    [violation] = result.violations
    assert isinstance(violation, ValidationViolation)
    assert violation.keyword == "maximum"
    assert violation.expected == 3.0
    assert violation.actual == 3.5
    assert "less than or equal to" in violation.message


def test_check_reports_exclusive_violation():
    result = RangeValidator().check(EXCLUSIVE, 3.0)

    [violation] = result.violations
    assert violation.keyword == "exclusiveMaximum"
    assert violation.message == "value 3.0 must be less than 3.0"


def test_check_passes_with_no_violations():
    result = RangeValidator().check(INCLUSIVE, 1)
    assert result.allowed is True
    assert result.violations == []


def test_violation_repr_contains_keyword():
    result = RangeValidator().check(INCLUSIVE, 4)
    assert "keyword='maximum'" in repr(result.violations[0])


def test_nan_violation_message():
    result = RangeValidator().check(INCLUSIVE, math.nan)
    assert "nan" in result.violations[0].message


# ------------------------------------------------------------------
# Raw schema compilation through the validator
# ------------------------------------------------------------------


def test_malformed_raw_schema_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        _validate({"maximum": "3"}, 2)


def test_unknown_keyword_in_raw_schema_raises():
    with pytest.raises(ConfigurationError) as exc_info:
        _validate({"maximun": 3}, 2)
    assert "maximun" in str(exc_info.value)


def test_process_wide_validator_and_shortcut():
    assert get_range_validator() is get_range_validator()
    assert validate({"maximum": 3.0}, 2.6) is True
    assert validate({"maximum": 3.0}, 3.5) is False


def test_integer_maximum_beyond_float_range_compares_exactly():
    huge = 10**400
    assert _validate({"maximum": huge}, 5) is True
    assert _validate({"maximum": huge}, 1e308) is True
    assert _validate({"maximum": huge}, huge + 1) is False
    assert _validate({"maximum": huge, "exclusiveMaximum": True}, huge) is False
