import math

import numpy as np
import pytest

from cylindy import (
    CylinderAnalysisFailure,
    CylinderGeometry,
    InvalidGeometry,
    InvalidLoad,
    InvalidMaterial,
    MaterialStrength,
    PressureLoad,
    analyze_circle,
    analyze_cylinder,
    generate_stress_field,
)


def test_thick_cylinder_end_to_end(thick_cylinder, chamber_load, steel) -> None:
    result = analyze_cylinder(thick_cylinder, chamber_load, steel)

    assert result.coefficients.A == pytest.approx(33.333, rel=1e-4)
    assert result.inner.sigma_r == pytest.approx(-100.0, abs=1e-6)
    assert result.inner.sigma_theta == pytest.approx(166.67, rel=1e-4)
    assert result.outer.sigma_r == pytest.approx(0.0, abs=1e-6)
    assert result.outer.sigma_theta == pytest.approx(66.667, rel=1e-4)

    # Bore governs for internal pressure
    assert result.inner.sigma_vm > result.outer.sigma_vm
    assert result.max_von_mises == result.inner.sigma_vm
    assert result.safety_factors.SF_y == pytest.approx(800.0 / result.inner.sigma_vm)


def test_artillery_barrel_scenario() -> None:
    result = analyze_circle(ri=75.0, ro=150.0, p_i=400.0, Sy=800.0, Su=1000.0)

    assert 0.5 < result.safety_factors.SF_y < 10.0
    assert result.safety_factors.SF_y == pytest.approx(6.0 / 7.0, rel=1e-9)
    assert result.burst_pressure == pytest.approx(2400.0 / 7.0, rel=1e-9)
    assert result.burst_ratio == pytest.approx(400.0 / (2400.0 / 7.0), rel=1e-9)


def test_axial_stress_enters_von_mises(thick_cylinder, chamber_load, steel) -> None:
    plain = analyze_cylinder(thick_cylinder, chamber_load, steel)
    with_axial = analyze_cylinder(thick_cylinder, chamber_load, steel, sigma_axial=50.0)

    assert with_axial.inner.state.sigma_axial == 50.0
    assert with_axial.inner.sigma_vm != pytest.approx(plain.inner.sigma_vm)
    # Burst pressure is defined by the pressure-only bore stress
    assert with_axial.burst_pressure == pytest.approx(plain.burst_pressure)


def test_external_pressure_is_used_for_burst_pressure(thick_cylinder, steel) -> None:
    free = analyze_cylinder(thick_cylinder, PressureLoad(p_i=100.0), steel)
    loaded = analyze_cylinder(thick_cylinder, PressureLoad(p_i=100.0, p_o=20.0), steel)

    assert loaded.burst_pressure != pytest.approx(free.burst_pressure)
    assert loaded.outer.sigma_r == pytest.approx(-20.0, abs=1e-6)


def test_zero_pressure_gives_infinite_safety_factors(thick_cylinder, steel) -> None:
    result = analyze_cylinder(thick_cylinder, PressureLoad(p_i=0.0), steel)

    assert math.isinf(result.safety_factors.SF_y)
    assert result.burst_ratio == 0.0


def test_info_contains_tabulated_values(thick_cylinder, chamber_load, steel) -> None:
    info = analyze_cylinder(thick_cylinder, chamber_load, steel).info

    assert set(info) == {
        "lame_coefficients",
        "stresses",
        "safety_factors",
        "burst_pressure",
        "geometry",
        "material",
    }
    assert info["geometry"]["p_i"] == 100.0
    assert info["stresses"]["inner"]["r"] == 25.0


def test_inputs_validate_on_construction() -> None:
    with pytest.raises(InvalidGeometry):
        CylinderGeometry(ri=10.0, ro=10.0)
    with pytest.raises(InvalidLoad):
        PressureLoad(p_i=-5.0)
    with pytest.raises(InvalidMaterial):
        MaterialStrength(Sy=900.0, Su=800.0)


def test_geometry_from_diameters() -> None:
    geometry = CylinderGeometry.from_diameters(bore=7.62, outer=25.4)

    assert geometry.ri == pytest.approx(3.81)
    assert geometry.wall_thickness == pytest.approx(8.89)
    assert geometry.diameter_ratio == pytest.approx(25.4 / 7.62)


def test_analyze_circle_wraps_invalid_inputs() -> None:
    with pytest.raises(CylinderAnalysisFailure) as excinfo:
        analyze_circle(ri=50.0, ro=25.0, p_i=100.0, Sy=800.0, Su=1000.0)

    err = excinfo.value
    assert err.stage == "inputs"
    assert isinstance(err.cause, InvalidGeometry)
    assert str(err).startswith("Analysis failed")


def test_failing_stage_is_reported(thick_cylinder, steel) -> None:
    # The bore already yields under external pressure alone
    load = PressureLoad(p_i=0.0, p_o=2000.0)

    with pytest.raises(CylinderAnalysisFailure) as excinfo:
        analyze_cylinder(thick_cylinder, load, steel)

    assert excinfo.value.stage == "burst_pressure"


def test_stress_field_spans_wall(thick_cylinder, chamber_load, steel) -> None:
    result = analyze_cylinder(thick_cylinder, chamber_load, steel)

    field = result.field(num_points=11)

    assert len(field) == 11
    assert field.radii[0] == pytest.approx(25.0)
    assert field.radii[-1] == pytest.approx(50.0)
    assert np.all(np.diff(field.radii) > 0)
    assert field.sigma_r[0] == pytest.approx(-100.0, abs=1e-6)
    assert field.max_point == pytest.approx(25.0)
    assert field.max_von_mises == pytest.approx(result.inner.sigma_vm)
    assert field.to_records()[0]["r"] == pytest.approx(25.0)


def test_stress_field_rejects_single_point() -> None:
    with pytest.raises(ValueError):
        generate_stress_field(25.0, 50.0, 1.0, 1.0, num_points=1)
