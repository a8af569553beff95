# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Loaders for fixtures on local disk or bundled with the package."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from anyio import to_thread

from ..files import load_builtin_fixture, load_fixture_file, locate_fixture_file
from ..models import FixtureSuite
from .base import FixtureLoader


class FileFixtureLoader(FixtureLoader):
    """Reads a YAML/JSON fixture file.

    When no path is given the file is located via
    :func:`~schemabound.fixtures.files.locate_fixture_file`.
    """

    name = "file"

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._path = path

    @property
    def path(self) -> Path:
        return locate_fixture_file(self._path)

    async def _load(self) -> FixtureSuite:
        path = self.path
        return await to_thread.run_sync(load_fixture_file, path)


class BuiltinFixtureLoader(FixtureLoader):
    """Loads a fixture shipped inside ``schemabound.fixtures.data``."""

    name = "builtin"

    def __init__(self, fixture_name: str = "maximum"):
        self.fixture_name = fixture_name

    async def _load(self) -> FixtureSuite:
        return load_builtin_fixture(self.fixture_name)


__all__ = ["BuiltinFixtureLoader", "FileFixtureLoader"]
