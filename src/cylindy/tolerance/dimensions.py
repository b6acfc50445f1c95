"""
Worst-case and best-case dimensions and pressures.

Maximum hoop stress comes from the largest bore and the smallest outer
diameter, so:

    worst: ri + bore.upper,  ro + shaft.lower
    best:  ri + bore.lower,  ro + shaft.upper
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import InvalidLoad, NegativeWallThickness
from .models import ToleranceSpec

UM_PER_MM = 1000.0


@dataclass(frozen=True)
class Dimensions:
    """Radii of one tolerance scenario (mm)."""

    ri: float
    ro: float

    @property
    def wall_thickness(self) -> float:
        return self.ro - self.ri

    @property
    def info(self) -> dict[str, float]:
        return {"ri": self.ri, "ro": self.ro, "wall_thickness": self.wall_thickness}


@dataclass(frozen=True)
class WallThicknessRange:
    min: float
    max: float
    nominal: float


@dataclass(frozen=True)
class DimensionSet:
    nominal: Dimensions
    worst_case: Dimensions
    best_case: Dimensions

    @property
    def wall_thickness_range(self) -> WallThicknessRange:
        return WallThicknessRange(
            min=self.worst_case.wall_thickness,
            max=self.best_case.wall_thickness,
            nominal=self.nominal.wall_thickness,
        )

    @property
    def wall_thickness_reduction(self) -> float:
        """Worst-case wall thinning as a percentage of the nominal wall."""
        nominal = self.nominal.wall_thickness
        return (nominal - self.worst_case.wall_thickness) / nominal * 100.0

    @property
    def info(self) -> dict[str, Any]:
        wall = self.wall_thickness_range
        return {
            "nominal": self.nominal.info,
            "worst_case": self.worst_case.info,
            "best_case": self.best_case.info,
            "wall_thickness": {"min": wall.min, "max": wall.max, "nominal": wall.nominal},
        }


def calculate_worst_case_dimensions(ri: float, ro: float, spec: ToleranceSpec) -> DimensionSet:
    """
    Apply tolerance bands to nominal radii.

    Args:
        ri: Nominal inner radius (mm)
        ro: Nominal outer radius (mm)
        spec: Bore and shaft bands (µm)

    Raises:
        NegativeWallThickness: worst-case ri >= worst-case ro
    """
    worst = Dimensions(
        ri=ri + spec.bore.upper / UM_PER_MM,
        ro=ro + spec.shaft.lower / UM_PER_MM,
    )
    best = Dimensions(
        ri=ri + spec.bore.lower / UM_PER_MM,
        ro=ro + spec.shaft.upper / UM_PER_MM,
    )

    if worst.ri >= worst.ro:
        raise NegativeWallThickness(
            f"Worst-case tolerances result in negative wall thickness "
            f"(ri={worst.ri}, ro={worst.ro})"
        )

    return DimensionSet(nominal=Dimensions(ri=ri, ro=ro), worst_case=worst, best_case=best)


@dataclass(frozen=True)
class PressureVariation:
    """Nominal pressure and its ± band (MPa)."""

    nominal: float
    tolerance: float
    worst_case: float
    best_case: float
    variation: float

    @property
    def increase(self) -> float:
        """Worst-case pressure rise as a percentage of nominal (0 for zero nominal)."""
        if self.nominal == 0:
            return 0.0
        return (self.worst_case - self.nominal) / self.nominal * 100.0

    @property
    def info(self) -> dict[str, float]:
        return {
            "nominal": self.nominal,
            "tolerance": self.tolerance,
            "worst_case": self.worst_case,
            "best_case": self.best_case,
            "variation": self.variation,
        }


def apply_pressure_tolerance(nominal: float, factor: float) -> PressureVariation:
    """Worst case ``nominal·(1 + f)``, best case ``nominal·(1 - f)``."""
    if nominal < 0:
        raise InvalidLoad(f"Pressure must be non-negative (nominal={nominal})")
    if not 0.0 <= factor <= 1.0:
        raise InvalidLoad(f"Pressure tolerance factor must be between 0 and 1 (factor={factor})")

    variation = nominal * factor
    return PressureVariation(
        nominal=nominal,
        tolerance=factor,
        worst_case=nominal + variation,
        best_case=nominal - variation,
        variation=variation,
    )
