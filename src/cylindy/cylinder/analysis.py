"""
Complete single-cylinder analysis.

Combines the Lamé solution, Von Mises stress, safety factors and burst
pressure into one result:

    geometry + load + material -> analyze_cylinder() -> CylinderResult
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any

from ..errors import CylinderAnalysisFailure, CylinderError
from .burst import BurstSearchConfig, burst_pressure_estimate
from .criteria import SafetyFactors, safety_factors, von_mises
from .field import StressField, generate_stress_field
from .geometry import CylinderGeometry, MaterialStrength, PressureLoad
from .lame import LameCoefficients, StressState, lame_coefficients, stresses_from

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationStress:
    """Stress state and Von Mises stress at one radius."""

    radius: float
    state: StressState
    sigma_vm: float

    @property
    def sigma_r(self) -> float:
        return self.state.sigma_r

    @property
    def sigma_theta(self) -> float:
        return self.state.sigma_theta

    @property
    def info(self) -> dict[str, float]:
        return {
            "r": self.radius,
            "sigma_r": self.state.sigma_r,
            "sigma_theta": self.state.sigma_theta,
            "sigma_axial": self.state.sigma_axial,
            "sigma_vm": self.sigma_vm,
        }


def evaluate_location(
    radius: float, coefficients: LameCoefficients, sigma_axial: float = 0.0
) -> LocationStress:
    state = stresses_from(radius, coefficients).with_axial(sigma_axial)
    sigma_vm = von_mises(state.sigma_r, state.sigma_theta, sigma_axial)
    return LocationStress(radius=radius, state=state, sigma_vm=sigma_vm)


@dataclass(frozen=True)
class CylinderResult:
    """Single-cylinder analysis result.

    Safety factors are evaluated at the bore, where the Von Mises stress of
    an internally pressurized cylinder is largest.
    """

    geometry: CylinderGeometry
    load: PressureLoad
    material: MaterialStrength
    coefficients: LameCoefficients
    inner: LocationStress
    outer: LocationStress
    safety_factors: SafetyFactors
    burst_pressure: float
    sigma_axial: float = 0.0

    @property
    def max_von_mises(self) -> float:
        return max(self.inner.sigma_vm, self.outer.sigma_vm)

    @property
    def burst_ratio(self) -> float:
        """Operating pressure as a fraction of the burst pressure."""
        if self.burst_pressure == 0:
            return math.inf
        return self.load.p_i / self.burst_pressure

    def field(self, num_points: int = 100) -> StressField:
        return generate_stress_field(
            self.geometry.ri,
            self.geometry.ro,
            self.coefficients.A,
            self.coefficients.B,
            num_points,
        )

    def plot(self, *, num_points: int = 100, **kwargs):
        from ..plotting import plot_stress_field

        return plot_stress_field(self.field(num_points), **kwargs)

    def check(self, **kwargs):
        from ..checks import check_design

        return check_design(self, **kwargs)

    @property
    def info(self) -> dict[str, Any]:
        return {
            "lame_coefficients": {"A": self.coefficients.A, "B": self.coefficients.B},
            "stresses": {"inner": self.inner.info, "outer": self.outer.info},
            "safety_factors": {"SF_y": self.safety_factors.SF_y, "SF_u": self.safety_factors.SF_u},
            "burst_pressure": self.burst_pressure,
            "geometry": {
                "ri": self.geometry.ri,
                "ro": self.geometry.ro,
                "p_i": self.load.p_i,
                "p_o": self.load.p_o,
            },
            "material": {"Sy": self.material.Sy, "Su": self.material.Su},
        }


def analyze_cylinder(
    geometry: CylinderGeometry,
    load: PressureLoad,
    material: MaterialStrength,
    *,
    sigma_axial: float = 0.0,
    burst_config: BurstSearchConfig | None = None,
) -> CylinderResult:
    """Analyze one thick-walled cylinder.

    Raises:
        CylinderAnalysisFailure: wrapping the error of the failing stage
    """
    stage = "lame_coefficients"
    try:
        coefficients = lame_coefficients(geometry.ri, geometry.ro, load.p_i, load.p_o)

        stage = "stresses"
        inner = evaluate_location(geometry.ri, coefficients, sigma_axial)
        outer = evaluate_location(geometry.ro, coefficients, sigma_axial)

        stage = "safety_factors"
        factors = safety_factors(inner.sigma_vm, material.Sy, material.Su)

        stage = "burst_pressure"
        burst = burst_pressure_estimate(
            geometry.ri, geometry.ro, material.Sy, load.p_o, burst_config
        )
    except CylinderError as exc:
        logger.debug("Cylinder analysis failed during %s: %s", stage, exc)
        raise CylinderAnalysisFailure(stage, exc) from exc

    return CylinderResult(
        geometry=geometry,
        load=load,
        material=material,
        coefficients=coefficients,
        inner=inner,
        outer=outer,
        safety_factors=factors,
        burst_pressure=burst,
        sigma_axial=sigma_axial,
    )


def analyze_circle(
    ri: float,
    ro: float,
    p_i: float,
    Sy: float,
    Su: float,
    p_o: float = 0.0,
    sigma_axial: float = 0.0,
) -> CylinderResult:
    """Scalar-argument form of `analyze_cylinder`.

    Invalid inputs are reported as `CylinderAnalysisFailure` just like a
    failing stage.
    """
    try:
        geometry = CylinderGeometry(ri=ri, ro=ro)
        load = PressureLoad(p_i=p_i, p_o=p_o)
        material = MaterialStrength(Sy=Sy, Su=Su)
    except CylinderError as exc:
        raise CylinderAnalysisFailure("inputs", exc) from exc
    return analyze_cylinder(geometry, load, material, sigma_axial=sigma_axial)
