import math

import pytest

from cylindy import (
    BracketingFailure,
    BurstSearchConfig,
    ConvergenceFailure,
    InvalidGeometry,
    InvalidLoad,
    InvalidMaterial,
    NumericalError,
    burst_pressure_estimate,
    lame_coefficients,
    solve_burst_pressure,
    stresses,
    von_mises,
)
from cylindy.cylinder.burst import bore_yield_objective, find_burst_root


def _bore_von_mises(ri: float, ro: float, p_i: float, p_o: float = 0.0) -> float:
    coeffs = lame_coefficients(ri, ro, p_i, p_o)
    state = stresses(ri, coeffs.A, coeffs.B)
    return von_mises(state.sigma_r, state.sigma_theta)


def test_artillery_barrel_burst_pressure_matches_closed_form() -> None:
    # ri/ro = 1/2: bore σ_vm = p * 7/3, so p_burst = 3 Sy / 7
    burst = burst_pressure_estimate(ri=75.0, ro=150.0, Sy=800.0)

    assert burst == pytest.approx(2400.0 / 7.0, rel=1e-9)
    assert 0.0 < burst < 4000.0


@pytest.mark.parametrize(
    "ri, ro, Sy, p_o",
    [
        (75.0, 150.0, 800.0, 0.0),
        (5.0, 10.0, 1000.0, 0.0),
        (25.0, 26.0, 350.0, 0.0),
        (5.0, 30.0, 1172.0, 0.0),
        (10.0, 20.0, 655.0, 15.0),
    ],
)
def test_bore_reaches_yield_at_burst_pressure(ri: float, ro: float, Sy: float, p_o: float) -> None:
    burst = burst_pressure_estimate(ri, ro, Sy, p_o)

    assert _bore_von_mises(ri, ro, burst, p_o) == pytest.approx(Sy, abs=1e-6)


def test_solution_reports_search_statistics() -> None:
    solution = solve_burst_pressure(75.0, 150.0, 800.0)

    assert solution.expansions == 0
    assert 1 <= solution.iterations <= 100
    assert abs(solution.residual) < 1e-6


def test_very_thick_wall_is_bracketed_by_default_bound() -> None:
    # ro >> ri: p_burst -> Sy / sqrt(3)
    solution = solve_burst_pressure(1.0, 1000.0, 500.0)
    assert solution.expansions == 0
    assert solution.pressure < 10 * 500.0


def test_small_initial_bracket_is_expanded() -> None:
    config = BurstSearchConfig(initial_upper_factor=0.01)

    solution = solve_burst_pressure(75.0, 150.0, 800.0, config=config)

    assert solution.expansions > 0
    assert solution.pressure == pytest.approx(2400.0 / 7.0, rel=1e-9)


def test_bracketing_failure_when_expansions_are_exhausted() -> None:
    config = BurstSearchConfig(initial_upper_factor=1e-6, max_expansions=2)

    with pytest.raises(BracketingFailure):
        solve_burst_pressure(75.0, 150.0, 800.0, config=config)


def test_bore_already_yielding_under_external_pressure_is_not_bracketed() -> None:
    with pytest.raises(BracketingFailure):
        burst_pressure_estimate(10.0, 20.0, Sy=100.0, p_o=500.0)


def test_convergence_failure_carries_iteration_count() -> None:
    config = BurstSearchConfig(max_iterations=3)

    with pytest.raises(ConvergenceFailure) as excinfo:
        solve_burst_pressure(75.0, 150.0, 800.0, config=config)

    assert excinfo.value.iterations == 3


def test_unevaluable_objective_raises_numerical_error() -> None:
    def objective(p: float) -> float | None:
        if p == 0.0:
            return -1.0
        if p > 50.0:
            return 1.0
        return None

    with pytest.raises(NumericalError):
        find_burst_root(objective, 100.0)


def test_objective_is_none_for_negative_pressure() -> None:
    objective = bore_yield_objective(10.0, 20.0, 500.0)

    assert objective(-1.0) is None
    assert objective(0.0) == pytest.approx(-500.0)
    assert objective(math.nan) is None


def test_objective_is_none_for_invalid_radii() -> None:
    assert bore_yield_objective(-1.0, 2.0, 800.0)(100.0) is None
    assert bore_yield_objective(5.0, 5.0, 800.0)(100.0) is None


def test_invalid_radii_surface_as_numerical_error() -> None:
    with pytest.raises(NumericalError):
        find_burst_root(bore_yield_objective(5.0, 5.0, 800.0), 8000.0)


def test_zero_objective_at_zero_pressure_returns_zero() -> None:
    solution = find_burst_root(lambda p: p, 10.0)

    assert solution.pressure == 0.0
    assert solution.iterations == 0


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"ri": 0.0, "ro": 10.0, "Sy": 500.0}, InvalidGeometry),
        ({"ri": 10.0, "ro": 5.0, "Sy": 500.0}, InvalidGeometry),
        ({"ri": 5.0, "ro": 10.0, "Sy": 0.0}, InvalidMaterial),
        ({"ri": 5.0, "ro": 10.0, "Sy": 500.0, "p_o": -1.0}, InvalidLoad),
    ],
)
def test_invalid_inputs_are_rejected(kwargs: dict, error: type) -> None:
    with pytest.raises(error):
        burst_pressure_estimate(**kwargs)


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        BurstSearchConfig(max_iterations=0)
    with pytest.raises(ValueError):
        BurstSearchConfig(tolerance=0.0)
