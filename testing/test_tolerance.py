import pytest

from cylindy import (
    MaterialStrength,
    NegativeWallThickness,
    InvalidLoad,
    WorstCaseAnalysisFailure,
    apply_pressure_tolerance,
    calculate_worst_case_dimensions,
    custom_tolerances,
    perform_worst_case_analysis,
    validate_tolerance_params,
)
from cylindy.tolerance import ToleranceBand, ToleranceSpec

MATERIAL = MaterialStrength(Sy=1000.0, Su=1200.0)


@pytest.fixture
def custom_spec() -> ToleranceSpec:
    return custom_tolerances(bore_plus=10, bore_minus=5, shaft_plus=8, shaft_minus=12)


def test_custom_tolerances(custom_spec) -> None:
    assert custom_spec.fit_class == "custom"
    assert custom_spec.is_custom
    assert custom_spec.bore.upper == 10
    assert custom_spec.bore.lower == -5
    assert custom_spec.shaft.upper == 8
    assert custom_spec.shaft.lower == -12
    assert custom_spec.bore.tolerance == 15
    assert custom_spec.shaft.tolerance == 20


def test_custom_minus_sign_is_ignored() -> None:
    spec = custom_tolerances(bore_plus=10, bore_minus=-5)

    assert spec.bore.lower == -5
    assert spec.bore.tolerance == 15


def test_worst_and_best_case_dimensions(custom_spec) -> None:
    dims = calculate_worst_case_dimensions(5.0, 10.0, custom_spec)

    assert dims.worst_case.ri == pytest.approx(5.010, abs=1e-9)
    assert dims.worst_case.ro == pytest.approx(9.988, abs=1e-9)
    assert dims.best_case.ri == pytest.approx(4.995, abs=1e-9)
    assert dims.best_case.ro == pytest.approx(10.008, abs=1e-9)
    assert dims.worst_case.wall_thickness == pytest.approx(4.978, abs=1e-9)
    assert dims.best_case.wall_thickness == pytest.approx(5.013, abs=1e-9)

    wall = dims.wall_thickness_range
    assert wall.min <= wall.nominal <= wall.max


def test_negative_wall_thickness_is_rejected() -> None:
    spec = ToleranceSpec(
        bore=ToleranceBand(upper=3000.0, lower=0.0, tolerance=3000.0),
        shaft=ToleranceBand(upper=0.0, lower=-3000.0, tolerance=3000.0),
        fit_class="custom",
    )

    with pytest.raises(NegativeWallThickness):
        calculate_worst_case_dimensions(5.0, 10.0, spec)


def test_pressure_tolerance() -> None:
    pressures = apply_pressure_tolerance(400.0, 0.05)

    assert pressures.worst_case == pytest.approx(420.0)
    assert pressures.best_case == pytest.approx(380.0)
    assert pressures.variation == pytest.approx(20.0)
    assert pressures.increase == pytest.approx(5.0)


@pytest.mark.parametrize("nominal, factor", [(-1.0, 0.05), (400.0, -0.01), (400.0, 1.5)])
def test_invalid_pressure_tolerance(nominal: float, factor: float) -> None:
    with pytest.raises(InvalidLoad):
        apply_pressure_tolerance(nominal, factor)


def test_worst_case_analysis_with_custom_tolerances(custom_spec) -> None:
    result = perform_worst_case_analysis(
        ri=5.0,
        ro=10.0,
        nominal_pressure=400.0,
        material=MATERIAL,
        tolerances=custom_spec,
        pressure_factor=0.05,
    )

    nominal = result.nominal.safety_factors.SF_y
    worst = result.worst_case.safety_factors.SF_y
    best = result.best_case.safety_factors.SF_y
    assert worst <= nominal <= best

    margin = result.safety_factor_margin
    assert margin.yield_ratio == pytest.approx(worst / nominal)
    assert margin.yield_ratio < 1.0

    summary = result.summary
    assert summary.worst_case_safety_factor == worst
    assert summary.nominal_safety_factor == nominal
    assert summary.wall_thickness_reduction == pytest.approx((5.0 - 4.978) / 5.0 * 100.0)
    assert summary.pressure_increase == pytest.approx(5.0)

    assert result.worst_case.load.p_i == pytest.approx(420.0)
    assert result.info["tolerances"]["fit_class"] == "custom"


def test_worst_case_analysis_with_iso_tables(tolerance_tables) -> None:
    result = perform_worst_case_analysis(
        ri=5.0,
        ro=10.0,
        nominal_pressure=400.0,
        material=MATERIAL,
        fit_class="H7/h6",
        pressure_level="precision",
        repository=tolerance_tables,
    )

    assert result.tolerances.fit_class == "H7/h6"
    assert result.pressures.tolerance == pytest.approx(0.02)
    assert result.worst_case.safety_factors.SF_y <= result.nominal.safety_factors.SF_y


def test_worst_case_analysis_uses_packaged_tables_by_default() -> None:
    result = perform_worst_case_analysis(
        ri=5.0, ro=10.0, nominal_pressure=400.0, material=MATERIAL, fit_class="H8/h7"
    )

    assert result.tolerances.description == "Standard running fit"
    assert result.pressures.tolerance == pytest.approx(0.05)


def test_zero_nominal_pressure_has_no_pressure_increase(custom_spec) -> None:
    result = perform_worst_case_analysis(
        ri=5.0,
        ro=10.0,
        nominal_pressure=0.0,
        material=MATERIAL,
        tolerances=custom_spec,
        pressure_factor=0.05,
    )

    assert result.summary.pressure_increase == 0.0
    assert result.safety_factor_margin.yield_ratio == 1.0


def test_unknown_fit_class_fails(tolerance_tables) -> None:
    with pytest.raises(WorstCaseAnalysisFailure) as excinfo:
        perform_worst_case_analysis(
            ri=5.0,
            ro=10.0,
            nominal_pressure=400.0,
            material=MATERIAL,
            fit_class="Z9/z9",
            repository=tolerance_tables,
        )

    assert excinfo.value.stage == "tolerances"
    assert isinstance(excinfo.value.cause, KeyError)
    assert str(excinfo.value).startswith("Worst-case analysis failed")


def test_negative_wall_fails_with_dimensions_stage() -> None:
    spec = custom_tolerances(bore_plus=6000, shaft_minus=6000)

    with pytest.raises(WorstCaseAnalysisFailure) as excinfo:
        perform_worst_case_analysis(
            ri=5.0, ro=10.0, nominal_pressure=400.0, material=MATERIAL, tolerances=spec, pressure_factor=0.05
        )

    assert excinfo.value.stage == "dimensions"
    assert isinstance(excinfo.value.cause, NegativeWallThickness)


def test_validate_tolerance_params() -> None:
    assert validate_tolerance_params(5.0, 10.0, 400.0, 1000.0, 1200.0) == []

    errors = validate_tolerance_params(0.0, -1.0, -5.0, 0.0, -1.0)
    assert "Inner radius must be positive" in errors
    assert "Outer radius must be greater than inner radius" in errors
    assert "Pressure must be non-negative" in errors
    assert "Yield strength must be positive" in errors
    assert "Ultimate strength must be greater than or equal to yield strength" in errors
