"""Fixture loader implementations."""

from .base import FixtureLoader
from .file import BuiltinFixtureLoader, FileFixtureLoader
from .http import HttpFixtureLoader

__all__ = [
    "BuiltinFixtureLoader",
    "FileFixtureLoader",
    "FixtureLoader",
    "HttpFixtureLoader",
]
