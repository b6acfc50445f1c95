import math

import numpy as np
import pytest

from cylindy import InvalidMaterial, InvalidStress, safety_factors, von_mises, von_mises_field


def test_pure_hoop_stress_equals_hoop_magnitude() -> None:
    assert von_mises(0.0, 250.0) == pytest.approx(250.0)
    assert von_mises(0.0, -250.0) == pytest.approx(250.0)


def test_equal_principal_stresses_have_zero_von_mises() -> None:
    assert von_mises(-75.0, -75.0, -75.0) == 0.0


def test_von_mises_with_axial_stress() -> None:
    # Pure shear state: (s, -s, 0) -> sqrt(3) s
    assert von_mises(-100.0, 100.0, 0.0) == pytest.approx(100.0 * math.sqrt(3.0))
    # Uniaxial axial stress
    assert von_mises(0.0, 0.0, 300.0) == pytest.approx(300.0)


def test_von_mises_is_never_negative_or_nan() -> None:
    value = von_mises(1e-300, 1e-300, 1e-300)
    assert value >= 0.0
    assert not math.isnan(value)


def test_vectorized_von_mises_matches_scalar() -> None:
    sr = np.array([-100.0, -50.0, 0.0])
    st = np.array([166.0, 120.0, 66.0])

    field = von_mises_field(sr, st, 20.0)

    expected = [von_mises(r, t, 20.0) for r, t in zip(sr, st)]
    assert field == pytest.approx(expected)


def test_safety_factors_follow_reciprocal_law() -> None:
    factors = safety_factors(200.0, Sy=800.0, Su=1000.0)

    assert factors.SF_y == pytest.approx(4.0)
    assert factors.SF_u == pytest.approx(5.0)
    assert factors.SF_y * 200.0 == pytest.approx(800.0)
    assert factors.minimum == pytest.approx(4.0)


def test_zero_stress_gives_infinite_safety_factors() -> None:
    factors = safety_factors(0.0, Sy=800.0, Su=1000.0)

    assert math.isinf(factors.SF_y)
    assert math.isinf(factors.SF_u)


@pytest.mark.parametrize("Sy, Su", [(0.0, 100.0), (-500.0, 800.0), (800.0, 0.0), (800.0, 700.0)])
def test_invalid_strengths_are_rejected(Sy: float, Su: float) -> None:
    with pytest.raises(InvalidMaterial):
        safety_factors(100.0, Sy=Sy, Su=Su)


def test_negative_stress_is_rejected() -> None:
    with pytest.raises(InvalidStress):
        safety_factors(-1.0, Sy=800.0, Su=1000.0)


def test_equal_yield_and_ultimate_is_accepted() -> None:
    factors = safety_factors(100.0, Sy=500.0, Su=500.0)
    assert factors.SF_y == factors.SF_u
