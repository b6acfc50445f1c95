import pytest

from cylindy import MaterialStrength, PressureLoad, analyze_cylinder, check_design
from cylindy.checks import utilization

MATERIAL = MaterialStrength(Sy=1000.0, Su=1200.0)


def test_cylinder_check_passes_at_default_target(thick_cylinder, chamber_load, steel) -> None:
    result = analyze_cylinder(thick_cylinder, chamber_load, steel)

    check = result.check()

    assert check.analysis_type == "cylinder"
    assert check.target_safety_factor == 3.0
    assert check.passed
    assert check.governing_location == "inner"
    assert check.governing_limit_state == "yield"
    # Bore von Mises is 700/3 MPa, so SF_y = 24/7
    assert check.governing_utilization == pytest.approx(3.0 * 7.0 / 24.0)


def test_cylinder_check_fails_above_capacity(thick_cylinder, chamber_load, steel) -> None:
    check = check_design(analyze_cylinder(thick_cylinder, chamber_load, steel), target_safety_factor=4.0)

    assert not check.passed
    assert check.governing_utilization == pytest.approx(4.0 * 7.0 / 24.0)
    inner, outer = check.details
    assert not inner.passed
    assert outer.passed
    assert outer.SF_y == pytest.approx(12.0)


def test_burst_utilization_is_reported_for_bore(thick_cylinder, chamber_load, steel) -> None:
    result = analyze_cylinder(thick_cylinder, chamber_load, steel)

    inner, outer = check_design(result).details

    assert inner.burst_util == pytest.approx(100.0 / (2400.0 / 7.0))
    assert outer.burst_util is None
    assert check_design(result).meta["burst_pressure_MPa"] == pytest.approx(2400.0 / 7.0)


def test_unloaded_cylinder_has_zero_utilization(thick_cylinder, steel) -> None:
    check = check_design(analyze_cylinder(thick_cylinder, PressureLoad(p_i=0.0), steel))

    assert check.passed
    assert check.governing_utilization == 0.0


def test_compound_check_covers_every_location(compound_system) -> None:
    result = compound_system.analyze(operating_pressure=400.0, material=MATERIAL)

    check = result.check(target_safety_factor=2.0)

    assert check.analysis_type == "compound"
    assert [d.location for d in check.details] == [
        "barrel_inner",
        "barrel_interface",
        "trunnion_interface",
        "trunnion_outer",
    ]
    governing = result.governing_location
    assert check.governing_location == governing.location.label
    assert check.governing_utilization == pytest.approx(2.0 / governing.safety_factors.SF_y)
    assert check.meta["contact_pressure_MPa"] == result.contact_pressure


def test_info_is_tabular(thick_cylinder, chamber_load, steel) -> None:
    info = check_design(analyze_cylinder(thick_cylinder, chamber_load, steel)).info

    assert info["passed"] is True
    assert len(info["details"]) == 2
    assert info["details"][0]["location"] == "inner"
    assert info["details"][0]["r_mm"] == 25.0


def test_invalid_targets_and_results(thick_cylinder, chamber_load, steel) -> None:
    result = analyze_cylinder(thick_cylinder, chamber_load, steel)

    with pytest.raises(ValueError):
        check_design(result, target_safety_factor=0.0)
    with pytest.raises(TypeError):
        check_design(object())


def test_utilization() -> None:
    assert utilization(3.0, 6.0) == 0.5
    assert utilization(3.0, float("inf")) == 0.0
