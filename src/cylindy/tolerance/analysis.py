"""
Worst-case tolerance analysis of a single cylinder.

Nominal, worst-case (largest bore, smallest outer diameter, highest
pressure) and best-case scenarios are each run through
`analyze_cylinder`, and the safety factors are compared.

Usage:
    from cylindy import MaterialStrength, perform_worst_case_analysis

    result = perform_worst_case_analysis(
        ri=5.0,
        ro=10.0,
        nominal_pressure=400.0,
        material=MaterialStrength(Sy=1000.0, Su=1200.0),
        fit_class="H7/h6",
    )
    print(result.summary.safety_margin)
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING, Any

from ..cylinder.analysis import CylinderResult, analyze_circle
from ..cylinder.geometry import MaterialStrength
from ..errors import CylinderError, WorstCaseAnalysisFailure
from .dimensions import DimensionSet, PressureVariation, apply_pressure_tolerance, calculate_worst_case_dimensions
from .models import ToleranceSpec

if TYPE_CHECKING:
    from ..data.tolerances import ToleranceRepository

logger = logging.getLogger(__name__)


def _ratio(worst: float, nominal: float) -> float:
    if math.isinf(worst) and math.isinf(nominal):
        return 1.0
    if math.isinf(nominal):
        return 0.0
    return worst / nominal


@dataclass(frozen=True)
class SafetyFactorMargin:
    """Worst-case safety factors as a fraction of the nominal ones."""

    yield_ratio: float
    ultimate_ratio: float


@dataclass(frozen=True)
class WorstCaseSummary:
    worst_case_safety_factor: float
    nominal_safety_factor: float
    safety_margin: float
    wall_thickness_reduction: float
    pressure_increase: float


@dataclass(frozen=True)
class WorstCaseResult:
    """Result of `perform_worst_case_analysis`."""

    tolerances: ToleranceSpec
    dimensions: DimensionSet
    pressures: PressureVariation
    nominal: CylinderResult
    worst_case: CylinderResult
    best_case: CylinderResult

    @property
    def safety_factor_margin(self) -> SafetyFactorMargin:
        worst = self.worst_case.safety_factors
        nominal = self.nominal.safety_factors
        return SafetyFactorMargin(
            yield_ratio=_ratio(worst.SF_y, nominal.SF_y),
            ultimate_ratio=_ratio(worst.SF_u, nominal.SF_u),
        )

    @property
    def summary(self) -> WorstCaseSummary:
        return WorstCaseSummary(
            worst_case_safety_factor=self.worst_case.safety_factors.SF_y,
            nominal_safety_factor=self.nominal.safety_factors.SF_y,
            safety_margin=self.safety_factor_margin.yield_ratio,
            wall_thickness_reduction=self.dimensions.wall_thickness_reduction,
            pressure_increase=self.pressures.increase,
        )

    @property
    def info(self) -> dict[str, Any]:
        margin = self.safety_factor_margin
        summary = self.summary
        return {
            "tolerances": self.tolerances.info,
            "dimensions": self.dimensions.info,
            "pressure_variations": self.pressures.info,
            "analyses": {
                "nominal": self.nominal.info,
                "worst_case": self.worst_case.info,
                "best_case": self.best_case.info,
            },
            "safety_factor_margin": {
                "yield": margin.yield_ratio,
                "ultimate": margin.ultimate_ratio,
            },
            "summary": {
                "worst_case_safety_factor": summary.worst_case_safety_factor,
                "nominal_safety_factor": summary.nominal_safety_factor,
                "safety_margin": summary.safety_margin,
                "wall_thickness_reduction": summary.wall_thickness_reduction,
                "pressure_increase": summary.pressure_increase,
            },
        }


def _resolve_repository(repository: "ToleranceRepository | None") -> "ToleranceRepository":
    if repository is not None:
        return repository
    from ..data.tolerances import ToleranceRepository

    return ToleranceRepository.from_package()


def perform_worst_case_analysis(
    ri: float,
    ro: float,
    nominal_pressure: float,
    material: MaterialStrength,
    *,
    fit_class: str = "H7/h6",
    standard: str = "iso286",
    tolerances: ToleranceSpec | None = None,
    pressure_factor: float | None = None,
    pressure_level: str = "commercial",
    external_pressure: float = 0.0,
    sigma_axial: float = 0.0,
    repository: "ToleranceRepository | None" = None,
) -> WorstCaseResult:
    """
    Compare nominal, worst-case and best-case cylinder analyses.

    Args:
        ri, ro: Nominal radii (mm)
        nominal_pressure: Nominal internal pressure (MPa)
        material: Yield and ultimate strength
        fit_class: Fit class looked up in `standard` (ignored when `tolerances` is given)
        standard: "iso286" or "ansi_b42"
        tolerances: Explicit tolerance bands, e.g. from `custom_tolerances`
        pressure_factor: Relative pressure band; looked up by `pressure_level` when None
        pressure_level: "precision", "commercial" or "field_conditions"
        external_pressure: External pressure (MPa)
        sigma_axial: Axial stress (MPa)
        repository: Tolerance tables; the packaged tables are used when None

    Raises:
        WorstCaseAnalysisFailure: wrapping the error of the failing stage
    """
    stage = "tolerances"
    try:
        if tolerances is None or pressure_factor is None:
            repository = _resolve_repository(repository)

        spec = tolerances
        if spec is None:
            spec = repository.lookup(standard, fit_class, ri * 2.0, ro * 2.0)

        stage = "dimensions"
        dimensions = calculate_worst_case_dimensions(ri, ro, spec)

        stage = "pressure"
        if pressure_factor is None:
            pressure_factor = repository.pressure_tolerance_factor(pressure_level)
        pressures = apply_pressure_tolerance(nominal_pressure, pressure_factor)

        analyses = {}
        for stage, dims, pressure in (
            ("nominal_analysis", dimensions.nominal, pressures.nominal),
            ("worst_case_analysis", dimensions.worst_case, pressures.worst_case),
            ("best_case_analysis", dimensions.best_case, pressures.best_case),
        ):
            analyses[stage] = analyze_circle(
                ri=dims.ri,
                ro=dims.ro,
                p_i=pressure,
                Sy=material.Sy,
                Su=material.Su,
                p_o=external_pressure,
                sigma_axial=sigma_axial,
            )
    except (CylinderError, KeyError, ValueError) as exc:
        logger.debug("Worst-case analysis failed during %s: %s", stage, exc)
        raise WorstCaseAnalysisFailure(stage, exc) from exc

    return WorstCaseResult(
        tolerances=spec,
        dimensions=dimensions,
        pressures=pressures,
        nominal=analyses["nominal_analysis"],
        worst_case=analyses["worst_case_analysis"],
        best_case=analyses["best_case_analysis"],
    )


def validate_tolerance_params(
    ri: float,
    ro: float,
    nominal_pressure: float,
    Sy: float,
    Su: float,
) -> list[str]:
    """Human-readable problems with the inputs; empty when valid."""
    errors = []
    if ri <= 0:
        errors.append("Inner radius must be positive")
    if ro <= ri:
        errors.append("Outer radius must be greater than inner radius")
    if nominal_pressure < 0:
        errors.append("Pressure must be non-negative")
    if Sy <= 0:
        errors.append("Yield strength must be positive")
    if Su < Sy:
        errors.append("Ultimate strength must be greater than or equal to yield strength")
    return errors
