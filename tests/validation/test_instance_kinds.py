# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from decimal import Decimal

import pytest

from schemabound.validation import InstanceKind, classify, is_number


@pytest.mark.parametrize(
    "value,kind",
    [
        (1, InstanceKind.NUMBER),
        (2.5, InstanceKind.NUMBER),
        (True, InstanceKind.BOOLEAN),
        (False, InstanceKind.BOOLEAN),
        ("x", InstanceKind.STRING),
        (None, InstanceKind.NULL),
        ({"a": 1}, InstanceKind.OBJECT),
        ([1, 2], InstanceKind.ARRAY),
        ((1, 2), InstanceKind.ARRAY),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


@pytest.mark.parametrize("value", [b"bytes", {1, 2}, object(), Decimal("1.5")])
def test_classify_rejects_non_json_values(value):
    with pytest.raises(TypeError):
        classify(value)


def test_bool_is_not_a_number():
    assert is_number(1) is True
    assert is_number(True) is False
    assert is_number("1") is False


def test_kind_values_match_json_type_names():
    assert {kind.value for kind in InstanceKind} == {
        "number",
        "string",
        "boolean",
        "null",
        "object",
        "array",
    }
