"""Shared fixtures: run the common vector laws against every component type."""

from __future__ import annotations

import pytest

from yavml import DoubleVector2, FloatVector2, IntVector2

VARIANTS = [IntVector2, FloatVector2, DoubleVector2]


@pytest.fixture(params=VARIANTS, ids=lambda cls: cls.__name__)
def vector_cls(request):
    return request.param
