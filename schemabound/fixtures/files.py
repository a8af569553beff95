# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Fixture file discovery and parsing."""

from __future__ import annotations

import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

import yaml

from ..exceptions import ConfigurationError, FixtureError
from .models import FixtureSuite, parse_fixture

logger = logging.getLogger(__name__)

ENV_FIXTURE_FILE = "SCHEMABOUND_FIXTURE_FILE"
DEFAULT_BASENAME = "schemabound-fixture"
CONFIG_BASENAME = "fixture"
SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")

_BUILTIN_PACKAGE = "schemabound.fixtures.data"

PathLike = Union[str, os.PathLike]


def _config_home() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def _default_candidates(cwd: Path) -> List[Path]:
    candidates = [cwd / f"{DEFAULT_BASENAME}{suffix}" for suffix in SUPPORTED_SUFFIXES]
    config_dir = _config_home() / "schemabound"
    candidates.extend(config_dir / f"{CONFIG_BASENAME}{suffix}" for suffix in SUPPORTED_SUFFIXES)
    return candidates


def iter_fixture_candidates(cwd: Optional[Path] = None) -> Iterator[Path]:
    """Yield fixture file locations in lookup order.

    The ``SCHEMABOUND_FIXTURE_FILE`` override comes first, then the working
    directory, then ``$XDG_CONFIG_HOME/schemabound``.
    """

    override = os.getenv(ENV_FIXTURE_FILE)
    if override:
        yield Path(override).expanduser()
    yield from _default_candidates(cwd or Path.cwd())


def locate_fixture_file(fixture_path: Optional[PathLike] = None) -> Path:
    """Resolve the fixture file to run.

    :raises ConfigurationError: if an explicit path does not exist, if no
        candidate exists, or if more than one default candidate exists.
    """

    if fixture_path is not None:
        path = Path(fixture_path).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"Fixture file not found: {path}")
        return path

    override = os.getenv(ENV_FIXTURE_FILE)
    if override:
        path = Path(override).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"{ENV_FIXTURE_FILE} points to a missing file: {path}")
        return path

    found = [path for path in _default_candidates(Path.cwd()) if path.is_file()]
    if not found:
        raise ConfigurationError(
            "No fixture file found. Pass --fixture or set "
            f"{ENV_FIXTURE_FILE}."
        )
    if len(found) > 1:
        raise ConfigurationError(
            "Multiple fixture files found; keep only one: "
            + ", ".join(str(path) for path in found)
        )
    return found[0]


def parse_fixture_text(text: str, *, suffix: str, source: Optional[str] = None) -> Any:
    """Decode fixture *text* according to *suffix* (``.json`` or YAML)."""

    suffix = suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ConfigurationError(
            f"Unsupported fixture format '{suffix}'. Supported: {', '.join(SUPPORTED_SUFFIXES)}"
        )
    try:
        if suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise FixtureError(f"Could not parse fixture: {exc}", source=source) from exc


def load_fixture_file(path: PathLike) -> FixtureSuite:
    """Read and parse a YAML or JSON fixture file."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FixtureError(f"Could not read fixture: {exc}", source=str(path)) from exc

    raw = parse_fixture_text(text, suffix=path.suffix, source=str(path))
    return parse_fixture(raw, source=str(path))


def builtin_fixture_names() -> List[str]:
    """Names of the fixtures bundled with the package."""

    names = []
    for entry in resources.files(_BUILTIN_PACKAGE).iterdir():
        stem, dot, suffix = entry.name.rpartition(".")
        if dot and f".{suffix}" in SUPPORTED_SUFFIXES:
            names.append(stem)
    return sorted(names)


def load_builtin_fixture(name: str) -> FixtureSuite:
    """Load a bundled fixture by name, e.g. ``"maximum"``."""

    root = resources.files(_BUILTIN_PACKAGE)
    for suffix in SUPPORTED_SUFFIXES:
        entry = root / f"{name}{suffix}"
        if entry.is_file():
            source = f"builtin:{name}"
            raw = parse_fixture_text(entry.read_text(encoding="utf-8"), suffix=suffix, source=source)
            return parse_fixture(raw, source=source)
    raise ConfigurationError(
        f"Unknown builtin fixture '{name}'. Available: {builtin_fixture_names()}"
    )


__all__ = [
    "ENV_FIXTURE_FILE",
    "SUPPORTED_SUFFIXES",
    "builtin_fixture_names",
    "iter_fixture_candidates",
    "load_builtin_fixture",
    "load_fixture_file",
    "locate_fixture_file",
    "parse_fixture_text",
]
