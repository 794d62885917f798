import math

import pytest

from SciCalc import error as E
from SciCalc import ScientificEngine as S
from SciCalc.config_manager import AngleMode


@pytest.mark.parametrize("x", [0, 1, -45.5, 360, 1e6, 1e-3])
def test_angle_conversions_invert(x):
    assert S.rad_to_deg(S.deg_to_rad(x)) == pytest.approx(x)
    assert S.rad_to_grad(S.grad_to_rad(x)) == pytest.approx(x)


def test_to_and_from_radians():
    assert S.to_radians(180, AngleMode.DEG) == pytest.approx(math.pi)
    assert S.to_radians(200, AngleMode.GRAD) == pytest.approx(math.pi)
    assert S.to_radians(1.5, AngleMode.RAD) == 1.5
    assert S.from_radians(math.pi, AngleMode.GRAD) == pytest.approx(200)
    assert S.from_radians(math.pi, AngleMode.DEG) == pytest.approx(180)


def test_combination_symmetry():
    for n in range(30):
        for r in range(n + 1):
            assert S.combination(n, r) == S.combination(n, n - r)


def test_combination_values():
    assert S.combination(52, 5) == 2598960
    assert S.combination(10, 0) == 1
    assert S.combination(3, 5) == 0
    with pytest.raises(E.Overflow):
        S.combination(2000, 1000)


def test_permutation_values():
    assert S.permutation(5, 2) == 20
    assert S.permutation(5, 0) == 1
    assert S.permutation(3, 5) == 0
    with pytest.raises(E.DomainError):
        S.permutation(-1, 2)


def test_factorial_limits():
    assert S.factorial(10) == 3628800
    assert math.isfinite(S.factorial(170))
    with pytest.raises(E.Overflow) as excinfo:
        S.factorial(171)
    assert excinfo.value.code == "3027"
    with pytest.raises(E.DomainError):
        S.factorial(-1)
    with pytest.raises(E.DomainError):
        S.factorial(2.5)


def test_constants():
    assert S.constant_value("π") == math.pi
    assert S.constant_value("e") == math.e
    with pytest.raises(E.SyntaxError):
        S.constant_value("tau")


def test_near_zero():
    assert S.is_near_zero(1e-11)
    assert S.is_near_zero(-1e-11)
    assert not S.is_near_zero(1e-9)
