# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Implementations of the ``schemabound`` subcommands."""

from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any

from ..exceptions import ConfigurationError
from ..fixtures import (
    BuiltinFixtureLoader,
    FileFixtureLoader,
    FixtureLoader,
    HttpFixtureLoader,
    iter_fixture_candidates,
    locate_fixture_file,
)
from ..fixtures.files import ENV_FIXTURE_FILE
from ..runner import run_groups
from ..validation import SchemaFragment, get_range_validator

logger = logging.getLogger("schemabound.cli")

EXIT_OK = 0
EXIT_FAILED = 1


def _loader_from_args(args: argparse.Namespace) -> FixtureLoader:
    url = getattr(args, "url", None)
    fixture = getattr(args, "fixture", None)
    builtin = getattr(args, "builtin", None)

    chosen = [value for value in (url, fixture, builtin) if value]
    if len(chosen) > 1:
        raise ConfigurationError("Use only one of --fixture, --url or --builtin")
    if url:
        return HttpFixtureLoader(url, timeout=getattr(args, "timeout", None))
    if builtin:
        return BuiltinFixtureLoader(builtin)
    if fixture:
        return FileFixtureLoader(fixture)

    if not any(path.is_file() for path in iter_fixture_candidates()) and not os.getenv(ENV_FIXTURE_FILE):
        logger.info("No fixture file configured; running the builtin 'maximum' suite")
        return BuiltinFixtureLoader("maximum")
    return FileFixtureLoader(locate_fixture_file())


async def run_suite_command(args: argparse.Namespace) -> int:
    """Run a fixture suite and print a summary."""

    loader = _loader_from_args(args)
    suite = await loader.load_suite()
    report = run_groups(suite.groups, strict=not getattr(args, "lenient", False))
    print(report.format())
    return EXIT_OK if report.ok else EXIT_FAILED


async def show_command(args: argparse.Namespace) -> int:
    """List the groups and cases of a fixture suite."""

    suite = await _loader_from_args(args).load_suite()
    for group in suite.groups:
        print(f"{group.description}  {json.dumps(group.schema, sort_keys=True, default=str)}")
        for case in group.tests:
            verdict = "valid" if case.valid else "invalid"
            print(f"  - {case.description}: {json.dumps(case.data, default=str)} -> {verdict}")
    return EXIT_OK


def check_command(args: argparse.Namespace) -> int:
    """Validate a single JSON value against a JSON schema fragment."""

    schema = SchemaFragment.from_mapping(_parse_json(args.schema, "--schema"), location="--schema")
    instance = _parse_json(args.value, "VALUE")

    result = get_range_validator().check(schema, instance)
    if result.allowed:
        print("valid")
        return EXIT_OK

    print("invalid")
    for violation in result.violations:
        print(f" - {violation.keyword}: {violation.message}")
    return EXIT_FAILED


def _parse_json(text: str, label: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{label} is not valid JSON: {exc}") from exc


__all__ = [
    "EXIT_FAILED",
    "EXIT_OK",
    "check_command",
    "run_suite_command",
    "show_command",
]
