from __future__ import annotations

from math import isclose

import pytest

from unicost.core.errors import NonFiniteResult
from unicost.core.inflation import project


def test_zero_years_returns_value_unchanged():
    assert project(9250.0, 0, 0.025) == 9250.0


def test_compound_growth():
    assert isclose(project(1000.0, 2, 0.1), 1210.0, rel_tol=1e-12)


def test_fractional_and_negative_years():
    assert isclose(project(100.0, 0.5, 0.21), 110.0, rel_tol=1e-12)
    assert isclose(project(121.0, -2, 0.1), 100.0, rel_tol=1e-12)


def test_zero_rate_is_identity():
    assert project(15180.0, 12.7, 0.0) == 15180.0


def test_overflow_is_reported():
    with pytest.raises(NonFiniteResult):
        project(1.0, 1e6, 1.0)
