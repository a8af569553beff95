# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Classification of Python values into JSON instance kinds.

Instances arrive as decoded JSON/YAML, so any value maps onto one of six
variants. Keywords that only constrain numbers use :func:`is_number` and
short-circuit for every other kind.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class InstanceKind(str, Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"


def is_number(value: Any) -> bool:
    """Return True for real numbers. ``bool`` is a distinct kind, not a number."""

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def classify(value: Any) -> InstanceKind:
    """Return the :class:`InstanceKind` of *value*.

    Raises:
        TypeError: if *value* has no JSON counterpart (e.g. ``bytes``, ``set``).
    """

    # bool before number: bool subclasses int
    if isinstance(value, bool):
        return InstanceKind.BOOLEAN
    if is_number(value):
        return InstanceKind.NUMBER
    if value is None:
        return InstanceKind.NULL
    if isinstance(value, str):
        return InstanceKind.STRING
    if isinstance(value, Mapping):
        return InstanceKind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return InstanceKind.ARRAY
    raise TypeError(f"{type(value).__name__} is not a JSON instance type")


__all__ = ["InstanceKind", "classify", "is_nan", "is_number"]
