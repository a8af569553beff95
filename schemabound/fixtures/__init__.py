"""Fixture suites: data model, file discovery and loaders."""

from .files import (
    builtin_fixture_names,
    iter_fixture_candidates,
    load_builtin_fixture,
    load_fixture_file,
    locate_fixture_file,
)
from .loaders import BuiltinFixtureLoader, FileFixtureLoader, FixtureLoader, HttpFixtureLoader
from .models import FixtureCase, FixtureGroup, FixtureSuite, parse_fixture

__all__ = [
    "BuiltinFixtureLoader",
    "FileFixtureLoader",
    "FixtureCase",
    "FixtureGroup",
    "FixtureLoader",
    "FixtureSuite",
    "HttpFixtureLoader",
    "builtin_fixture_names",
    "iter_fixture_candidates",
    "load_builtin_fixture",
    "load_fixture_file",
    "locate_fixture_file",
    "parse_fixture",
]
