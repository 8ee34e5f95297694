import math

import pytest

from core import Operators


def test_results_are_python_floats():
    assert type(Operators.add(1, 2)) is float
    assert type(Operators.sqrt(4)) is float


def test_arithmetic():
    assert Operators.add(2, 3) == 5.0
    assert Operators.sub(2, 3) == -1.0
    assert Operators.mul(2, 3) == 6.0
    assert Operators.div(3, 2) == 1.5
    assert Operators.power(2, 0.5) == pytest.approx(math.sqrt(2))
    assert Operators.square(-3) == 9.0


def test_trig_uses_radians():
    assert Operators.sin(math.pi / 2) == pytest.approx(1.0)
    assert Operators.cos(0) == pytest.approx(1.0)
    assert Operators.tan(math.pi / 4) == pytest.approx(1.0)


def test_non_finite_results_do_not_raise():
    assert Operators.div(1, 0) == math.inf
    assert Operators.div(-1, 0) == -math.inf
    assert math.isnan(Operators.div(0, 0))
    assert math.isnan(Operators.sqrt(-1))
    assert math.isnan(Operators.power(-8, 1 / 3))
    assert Operators.square(1e200) == math.inf
    assert Operators.power(10, 400) == math.inf
    assert math.isnan(Operators.sin(math.inf))


def test_nan_propagates():
    assert math.isnan(Operators.add(math.nan, 1))
    assert math.isnan(Operators.mul(math.inf, 0))
