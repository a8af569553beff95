# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Compiled schema fragments for the upper-bound range keywords."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..exceptions import ConfigurationError
from .instance import is_number

logger = logging.getLogger(__name__)

MAXIMUM = "maximum"
EXCLUSIVE_MAXIMUM = "exclusiveMaximum"

KNOWN_KEYWORDS = frozenset({MAXIMUM, EXCLUSIVE_MAXIMUM})

Number = Union[int, float]


@dataclass(frozen=True)
class SchemaFragment:
    """An immutable upper bound.

    ``maximum`` is ``None`` when the schema does not carry the keyword, in
    which case every instance is valid.
    """

    maximum: Optional[Number] = None
    exclusive_maximum: bool = False

    def __post_init__(self) -> None:
        if self.maximum is not None:
            _check_maximum(self.maximum, location="<fragment>")
        if not isinstance(self.exclusive_maximum, bool):
            raise ConfigurationError(
                f"'{EXCLUSIVE_MAXIMUM}' must be a boolean, got {self.exclusive_maximum!r}"
            )

    @classmethod
    def from_mapping(
        cls,
        raw: Any,
        *,
        strict: bool = True,
        location: str = "<schema>",
    ) -> "SchemaFragment":
        """Compile a raw schema mapping such as ``{"maximum": 3.0}``.

        :param raw: Decoded schema object.
        :param strict: When true, keywords other than ``maximum`` and
                       ``exclusiveMaximum`` are rejected. When false they are
                       ignored.
        :param location: Label used in error messages (e.g. the fixture group).
        :raises ConfigurationError: if the schema is malformed.
        """

        if isinstance(raw, SchemaFragment):
            return raw
        if not isinstance(raw, Mapping):
            raise ConfigurationError(
                f"Schema at {location} must be an object, got {type(raw).__name__}"
            )

        unknown = sorted(str(key) for key in raw.keys() if key not in KNOWN_KEYWORDS)
        if unknown:
            if strict:
                raise ConfigurationError(
                    f"Unknown keyword(s) {unknown} in schema at {location}. "
                    f"Valid keywords: {sorted(KNOWN_KEYWORDS)}"
                )
            logger.debug("Ignoring unsupported keyword(s) %s at %s", unknown, location)

        maximum = raw.get(MAXIMUM)
        has_maximum = MAXIMUM in raw
        if has_maximum:
            _check_maximum(maximum, location=location)

        exclusive = raw.get(EXCLUSIVE_MAXIMUM, False)
        if not isinstance(exclusive, bool):
            raise ConfigurationError(
                f"'{EXCLUSIVE_MAXIMUM}' at {location} must be a boolean, got {exclusive!r}"
            )
        if EXCLUSIVE_MAXIMUM in raw and not has_maximum:
            raise ConfigurationError(
                f"'{EXCLUSIVE_MAXIMUM}' at {location} requires '{MAXIMUM}'"
            )

        return cls(maximum=maximum if has_maximum else None, exclusive_maximum=exclusive)

    def to_mapping(self) -> dict:
        data: dict = {}
        if self.maximum is not None:
            data[MAXIMUM] = self.maximum
        if self.exclusive_maximum:
            data[EXCLUSIVE_MAXIMUM] = True
        return data


def _check_maximum(value: Any, *, location: str) -> None:
    if not is_number(value):
        raise ConfigurationError(
            f"'{MAXIMUM}' at {location} must be a number, got {value!r}"
        )
    # ints are exact and may exceed the float range
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigurationError(
            f"'{MAXIMUM}' at {location} must be finite, got {value!r}"
        )


__all__ = [
    "EXCLUSIVE_MAXIMUM",
    "KNOWN_KEYWORDS",
    "MAXIMUM",
    "SchemaFragment",
]
