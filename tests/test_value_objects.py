"""Tests for the fixed-width integer helpers."""

import dataclasses

import pytest

from composite.core.exceptions import OperandRangeError, OperandTypeError
from composite.domain import Int32, INT32_MAX, INT32_MIN, add_int32, to_int32


def test_to_int32_identity_in_range():
    for value in (0, 1, -1, INT32_MAX, INT32_MIN):
        assert to_int32(value) == value


def test_to_int32_wraps():
    assert to_int32(INT32_MAX + 1) == INT32_MIN
    assert to_int32(INT32_MIN - 1) == INT32_MAX
    assert to_int32(2 ** 32) == 0


def test_add_int32():
    assert add_int32(9, 11) == 20
    assert add_int32(INT32_MAX, 1) == INT32_MIN
    assert add_int32(INT32_MIN, -1) == INT32_MAX


def test_add_int32_validates_operands():
    with pytest.raises(OperandRangeError):
        add_int32(INT32_MAX + 1, 0)
    with pytest.raises(ValueError):
        add_int32(0, INT32_MIN - 1)
    with pytest.raises(OperandTypeError):
        add_int32(1, "2")


def test_int32_value_object():
    operand = Int32(7)
    assert int(operand) == 7
    assert str(operand) == "7"
    with pytest.raises(dataclasses.FrozenInstanceError):
        operand.value = 8
