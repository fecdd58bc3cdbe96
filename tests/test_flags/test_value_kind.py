from datetime import timedelta
from decimal import Decimal
from enum import IntEnum

import pytest

from flagkit import ValueKind


class Priority(IntEnum):
    LOW = 1


@pytest.mark.parametrize(
    "value,expected",
    [
        ("bool", ValueKind.BOOL),
        ("boolean", ValueKind.BOOL),
        ("int32", ValueKind.INT),
        ("INT64", ValueKind.INT64),
        ("uint32", ValueKind.UINT),
        (" str ", ValueKind.STRING),
        ("float32", ValueKind.FLOAT),
        ("float64", ValueKind.DOUBLE),
        ("timedelta", ValueKind.DURATION),
        ("decimal", ValueKind.DECIMAL),
    ],
)
def test_aliases(value, expected):
    assert ValueKind(value) == expected


@pytest.mark.parametrize("value", ["int8", "", 3, None])
def test_invalid_kind(value):
    with pytest.raises(ValueError, match="Invalid ValueKind"):
        ValueKind(value)


@pytest.mark.parametrize(
    "value,expected",
    [
        (False, ValueKind.BOOL),
        (0, ValueKind.INT64),
        (0.0, ValueKind.DOUBLE),
        (Decimal(1), ValueKind.DECIMAL),
        (timedelta(0), ValueKind.DURATION),
        ("", ValueKind.STRING),
        (Priority.LOW, ValueKind.CUSTOM),
        ([], ValueKind.CUSTOM),
    ],
)
def test_infer(value, expected):
    assert ValueKind.infer(value) == expected


def test_bounds():
    assert ValueKind.INT.bounds == (-(2**31), 2**31 - 1)
    assert ValueKind.INT64.bounds == (-(2**63), 2**63 - 1)
    assert ValueKind.UINT.bounds == (0, 2**32 - 1)
    assert ValueKind.UINT64.bounds == (0, 2**64 - 1)
    assert ValueKind.FLOAT.bounds is None
    assert ValueKind.UINT.is_integer
    assert not ValueKind.DECIMAL.is_integer


def test_choices_and_str():
    assert ValueKind.DURATION in ValueKind.choices()
    assert len(ValueKind.choices()) == 11
    assert str(ValueKind.DOUBLE) == "double"
