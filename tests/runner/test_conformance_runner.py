# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""End-to-end conformance runs over fixture groups."""

import logging

import pytest

from schemabound.fixtures import FixtureCase, FixtureGroup
from schemabound.runner import CaseOutcome, run_groups
from schemabound.validation import RangeValidator


def test_builtin_maximum_suite_passes(maximum_suite):
    report = run_groups(maximum_suite.groups)

    assert report.ok is True
    assert report.total == 5
    assert report.passed == 5
    assert report.failures == []
    assert report.format().startswith("5/5 cases passed")


def test_mismatch_is_reported_not_raised(caplog):
    groups = [
        FixtureGroup(
            description="maximum validation",
            schema={"maximum": 3.0},
            tests=[
                FixtureCase("wrong expectation", 3.5, True),
                FixtureCase("below the maximum is valid", 2.6, True),
            ],
        )
    ]

    with caplog.at_level(logging.WARNING, logger="schemabound.runner"):
        report = run_groups(groups)

    assert report.total == 2
    assert report.failed == 1
    [failure] = report.failures
    assert failure.key == "maximum validation wrong expectation"
    assert failure.expected is True
    assert failure.actual is False
    assert "maximum validation wrong expectation" in report.format()
    assert any("FAIL" in message for message in caplog.messages)


def test_bad_schema_fails_its_group_and_run_continues(caplog):
    groups = [
        FixtureGroup("broken", {"maximum": "three"}, [FixtureCase("a", 1, True)]),
        FixtureGroup("fine", {"maximum": 3}, [FixtureCase("b", 2, True)]),
    ]

    with caplog.at_level(logging.ERROR, logger="schemabound.runner"):
        report = run_groups(groups)

    assert report.total == 2
    [failure] = report.failures
    assert failure.group == "broken"
    assert failure.actual is None
    assert "must be a number" in failure.error
    assert "broken a:" in report.format()
    assert any("Skipping group" in message for message in caplog.messages)


def test_lenient_mode_ignores_foreign_keywords():
    groups = [
        FixtureGroup(
            "typed maximum",
            {"type": "number", "maximum": 3},
            [FixtureCase("above", 4, False)],
        )
    ]

    assert run_groups(groups).ok is False
    assert run_groups(groups, strict=False).ok is True


def test_uses_supplied_validator(maximum_suite):
    class AlwaysValid(RangeValidator):
        def validate(self, schema, instance):
            return True

    report = run_groups(maximum_suite.groups, validator=AlwaysValid())

    assert report.failed == 2
    assert {f.case for f in report.failures} == {
        "above the maximum is invalid",
        "boundary point is invalid",
    }


@pytest.mark.parametrize(
    "outcome,passed",
    [
        (CaseOutcome("g", "c", True, True), True),
        (CaseOutcome("g", "c", False, True), False),
        (CaseOutcome("g", "c", True, None, "boom"), False),
    ],
)
def test_case_outcome_passed(outcome, passed):
    assert outcome.passed is passed
