# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Conformance runner: drives fixture groups through the range validator.

Each case is reported individually. A mismatch between the expected and
computed verdict is logged and recorded, never raised, so one failing case
cannot hide the rest of the suite.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .exceptions import ConfigurationError
from .fixtures.models import FixtureGroup
from .telemetry.metrics import record_case
from .validation import RangeValidator, SchemaFragment, get_range_validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaseOutcome:
    group: str
    case: str
    expected: bool
    actual: Optional[bool]
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.actual == self.expected

    @property
    def key(self) -> str:
        """Group and case descriptions joined, used to report failures."""
        return f"{self.group} {self.case}"


@dataclass
class SuiteReport:
    outcomes: List[CaseOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def failures(self) -> List[CaseOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def passed(self) -> int:
        return self.total - self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def format(self) -> str:
        lines = [f"{self.passed}/{self.total} cases passed"]
        for outcome in self.failures:
            if outcome.error:
                lines.append(f" - {outcome.key}: {outcome.error}")
            else:
                lines.append(
                    f" - {outcome.key}: expected {_verdict(outcome.expected)}, "
                    f"got {_verdict(outcome.actual)}"
                )
        return "\n".join(lines)


def run_groups(
    groups: Iterable[FixtureGroup],
    validator: Optional[RangeValidator] = None,
    *,
    strict: bool = True,
) -> SuiteReport:
    """Run every case of every group and collect the outcomes.

    :param groups: Fixture groups in file order.
    :param validator: Validator to exercise; defaults to the process-wide one.
    :param strict: Reject schemas carrying keywords other than the range ones.
    """

    validator = validator or get_range_validator()
    report = SuiteReport()

    for index, group in enumerate(groups):
        try:
            fragment = SchemaFragment.from_mapping(
                group.schema, strict=strict, location=f"groups[{index}] ({group.description!r})"
            )
        except ConfigurationError as exc:
            logger.error("Skipping group %r: %s", group.description, exc)
            for case in group.tests:
                outcome = CaseOutcome(group.description, case.description, case.valid, None, str(exc))
                record_case(False)
                report.outcomes.append(outcome)
            continue

        for case in group.tests:
            actual = validator.validate(fragment, case.data)
            outcome = CaseOutcome(group.description, case.description, case.valid, actual)
            record_case(outcome.passed)
            if outcome.passed:
                logger.debug("PASS %s", outcome.key)
            else:
                logger.warning(
                    "FAIL %s: expected %s, got %s",
                    outcome.key,
                    _verdict(case.valid),
                    _verdict(actual),
                )
            report.outcomes.append(outcome)

    logger.info("Conformance run finished: %d/%d passed", report.passed, report.total)
    return report


def _verdict(value: Optional[bool]) -> str:
    if value is None:
        return "error"
    return "valid" if value else "invalid"


__all__ = ["CaseOutcome", "SuiteReport", "run_groups"]
