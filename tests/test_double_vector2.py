"""DoubleVector2: IEEE-754 division by zero and narrowing casts."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from yavml import DoubleVector2, FloatVector2, IntVector2
from yavml.config import INT32_MAX, INT32_MIN

INF = math.inf


def test_divide_by_zero_component_gives_infinity() -> None:
    assert DoubleVector2(1.0, 1.0) / DoubleVector2(1.0, 0.0) == DoubleVector2(1.0, INF)


def test_divide_by_zero_scalar_gives_infinity() -> None:
    assert DoubleVector2(1.0, 1.0) / 0.0 == DoubleVector2(INF, INF)


def test_zero_over_zero_is_nan() -> None:
    result = DoubleVector2(0.0, -2.0) / 0
    assert math.isnan(result.x)
    assert result.y == -INF


def test_keeps_double_precision() -> None:
    result = DoubleVector2(0.1, 0.0) + DoubleVector2(0.2, 0.0)
    assert result.x == 0.1 + 0.2


def test_as_float_rounds_to_nearest_float32() -> None:
    vector = DoubleVector2(6.22, 7.22).as_float()
    assert vector.x == float(np.float32(6.22))
    assert vector.y == float(np.float32(7.22))
    assert vector.x == pytest.approx(6.21999979019165, abs=1e-12)
    assert vector == FloatVector2(6.22, 7.22)


def test_as_float_overflows_to_infinity() -> None:
    assert DoubleVector2(1e300, -1e300).as_float() == FloatVector2(INF, -INF)


def test_as_int_truncates_toward_zero() -> None:
    assert DoubleVector2(6.21999979019165, 7.21999979019165).as_int() == IntVector2(6, 7)
    assert DoubleVector2(-0.5, -1.999).as_int() == IntVector2(0, -1)


def test_as_int_saturates_out_of_range() -> None:
    assert DoubleVector2(1e20, -1e20).as_int() == IntVector2(INT32_MAX, INT32_MIN)
    assert DoubleVector2(INF, -INF).as_int() == IntVector2(INT32_MAX, INT32_MIN)


def test_as_int_keeps_values_just_inside_range() -> None:
    assert DoubleVector2(2147483647.9, -2147483648.9).as_int() == IntVector2(INT32_MAX, INT32_MIN)


def test_as_int_maps_nan_to_zero() -> None:
    assert DoubleVector2(math.nan, 3.0).as_int() == IntVector2(0, 3)


def test_lossy_casts_are_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="yavml")
    DoubleVector2(math.nan, 1e20).as_int()
    messages = [record.getMessage() for record in caplog.records if record.name == "yavml.scalar"]
    assert len(messages) == 2
    assert "NaN" in messages[0]
    assert "saturated" in messages[1]


def test_exact_cast_is_not_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="yavml")
    DoubleVector2(1.5, -2.5).as_int()
    assert not [record for record in caplog.records if record.name == "yavml.scalar"]


def test_length_propagates_nan() -> None:
    assert math.isnan(DoubleVector2(math.nan, 1.0).length())


def test_to_array_is_float64() -> None:
    arr = DoubleVector2(6.22, 7.22).to_array()
    assert arr.dtype == np.float64
    assert arr.tolist() == [6.22, 7.22]
