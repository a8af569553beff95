# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Argument parsing and dispatch for the ``schemabound`` command."""

from __future__ import annotations

import argparse
import inspect
import logging
import sys
from typing import Optional, Sequence

import anyio

from ..exceptions import SchemaboundError
from .commands import check_command, run_suite_command, show_command

logger = logging.getLogger("schemabound.cli")

EXIT_ERROR = 2


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--fixture", help="Path to a YAML or JSON fixture file")
    parser.add_argument("--url", help="URL of a fixture suite served over HTTP(S)")
    parser.add_argument("--builtin", help="Name of a bundled fixture (e.g. 'maximum')")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schemabound",
        description="Validate instances against maximum/exclusiveMaximum and run conformance fixtures.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a conformance fixture suite")
    _add_source_arguments(run_parser)
    run_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Ignore schema keywords other than maximum/exclusiveMaximum",
    )
    run_parser.set_defaults(func=run_suite_command, is_async=True)

    check_parser = subparsers.add_parser("check", help="Validate a single JSON value")
    check_parser.add_argument("--schema", required=True, help='Schema as JSON, e.g. \'{"maximum": 3}\'')
    check_parser.add_argument("value", help="Instance as JSON, e.g. 2.5 or '\"x\"'")
    check_parser.set_defaults(func=check_command, is_async=False)

    show_parser = subparsers.add_parser("show", help="List the groups and cases of a fixture suite")
    _add_source_arguments(show_parser)
    show_parser.set_defaults(func=show_command, is_async=True)

    return parser


def run_command(args: argparse.Namespace):
    """Invoke ``args.func``, driving coroutines with anyio."""

    func = args.func
    if getattr(args, "is_async", False) or inspect.iscoroutinefunction(func):
        return anyio.run(func, args)
    return func(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        code = run_command(args)
    except SchemaboundError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return int(code or 0)


__all__ = ["build_parser", "main", "run_command"]
