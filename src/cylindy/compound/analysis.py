"""
Compound cylinder (barrel + trunnion) analysis by superposition.

Two linear elastic fields are solved independently and added:

- preload:   barrel (0, p_c), trunnion (p_c, 0) from the interference fit
- operating: barrel (p_op, p_ext), trunnion (p_ext, p_ext)

    σ_combined(r) = σ_preload(r) + σ_operating(r)

Von Mises stress and safety factors are then evaluated at the critical
locations around the interface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import math
from typing import Any

from ..cylinder.analysis import LocationStress
from ..cylinder.criteria import SafetyFactors, safety_factors, von_mises
from ..cylinder.field import StressField, sample_field
from ..cylinder.geometry import MaterialStrength, check_pressures
from ..cylinder.lame import LameCoefficients, StressState, lame_coefficients, stresses_from
from ..errors import CompoundAnalysisFailure, CylinderError
from .contact import contact_pressure
from .geometry import CompoundSystem, ElasticCylinder

logger = logging.getLogger(__name__)


class Region(Enum):
    BARREL = "barrel"
    TRUNNION = "trunnion"


class Location(Enum):
    """Critical radii, as (region, factor on the interface radius)."""

    BARREL_INNER = ("barrel_inner", Region.BARREL, 0.999)
    BARREL_INTERFACE = ("barrel_interface", Region.BARREL, 1.0)
    TRUNNION_INTERFACE = ("trunnion_interface", Region.TRUNNION, 1.0)
    TRUNNION_OUTER = ("trunnion_outer", Region.TRUNNION, 1.5)

    def __init__(self, label: str, region: Region, radius_factor: float) -> None:
        self.label = label
        self.region = region
        self.radius_factor = radius_factor

    def radius(self, interface_radius: float) -> float:
        return interface_radius * self.radius_factor


@dataclass(frozen=True)
class RegionField:
    """Lamé field of one body under one load case."""

    region: Region
    coefficients: LameCoefficients
    p_i: float
    p_o: float

    def stress_at(self, r: float) -> StressState:
        return stresses_from(r, self.coefficients)


@dataclass(frozen=True)
class FieldSet:
    """Barrel and trunnion fields of one load case."""

    barrel: RegionField
    trunnion: RegionField

    def region(self, region: Region) -> RegionField:
        if region is Region.BARREL:
            return self.barrel
        return self.trunnion

    def stress_at(self, region: Region, r: float) -> StressState:
        return self.region(region).stress_at(r)


@dataclass(frozen=True)
class CombinedFieldSet:
    """Superposition of the preload and operating fields."""

    preload: FieldSet
    operating: FieldSet

    def coefficients(self, region: Region) -> LameCoefficients:
        pre = self.preload.region(region).coefficients
        op = self.operating.region(region).coefficients
        return LameCoefficients(A=pre.A + op.A, B=pre.B + op.B)

    def stress_at(self, region: Region, r: float) -> StressState:
        return self.preload.stress_at(region, r) + self.operating.stress_at(region, r)


@dataclass(frozen=True)
class LocationResult:
    location: Location
    stress: LocationStress
    safety_factors: SafetyFactors

    @property
    def sigma_vm(self) -> float:
        return self.stress.sigma_vm

    @property
    def info(self) -> dict[str, Any]:
        return {
            "location": self.location.label,
            "region": self.location.region.value,
            **self.stress.info,
            "SF_y": self.safety_factors.SF_y,
            "SF_u": self.safety_factors.SF_u,
        }


def _solve_field(
    region: Region, cylinder: ElasticCylinder, p_i: float, p_o: float
) -> RegionField:
    coefficients = lame_coefficients(cylinder.ri, cylinder.ro, p_i, p_o)
    return RegionField(region=region, coefficients=coefficients, p_i=p_i, p_o=p_o)


def preload_fields(system: CompoundSystem, p_contact: float) -> FieldSet:
    """Interference-fit stresses: the trunnion squeezes the barrel."""
    return FieldSet(
        barrel=_solve_field(Region.BARREL, system.barrel, 0.0, p_contact),
        trunnion=_solve_field(Region.TRUNNION, system.trunnion, p_contact, 0.0),
    )


def operating_fields(
    system: CompoundSystem, operating_pressure: float, external_pressure: float
) -> FieldSet:
    """Operating stresses; only the barrel sees chamber pressure."""
    return FieldSet(
        barrel=_solve_field(Region.BARREL, system.barrel, operating_pressure, external_pressure),
        trunnion=_solve_field(
            Region.TRUNNION, system.trunnion, external_pressure, external_pressure
        ),
    )


def evaluate_locations(
    combined: CombinedFieldSet,
    interface_radius: float,
    material: MaterialStrength,
    sigma_axial: float = 0.0,
) -> dict[Location, LocationResult]:
    results: dict[Location, LocationResult] = {}
    for location in Location:
        r = location.radius(interface_radius)
        state = combined.stress_at(location.region, r).with_axial(sigma_axial)
        sigma_vm = von_mises(state.sigma_r, state.sigma_theta, sigma_axial)
        results[location] = LocationResult(
            location=location,
            stress=LocationStress(radius=r, state=state, sigma_vm=sigma_vm),
            safety_factors=safety_factors(sigma_vm, material.Sy, material.Su),
        )
    return results


@dataclass(frozen=True)
class CompoundStressField:
    barrel: StressField
    trunnion: StressField
    interface_radius: float

    @property
    def combined(self) -> StressField:
        return StressField.concatenate([self.barrel, self.trunnion], label="combined")


@dataclass(frozen=True)
class CompoundResult:
    """Result of `analyze_compound_cylinder`."""

    system: CompoundSystem
    material: MaterialStrength
    contact_pressure: float
    operating_pressure: float
    external_pressure: float
    preload: FieldSet
    operating: FieldSet
    combined: CombinedFieldSet
    locations: dict[Location, LocationResult]
    sigma_axial: float = 0.0

    @property
    def interface_radius(self) -> float:
        return self.system.interface_radius

    def at(self, location: Location) -> LocationResult:
        return self.locations[location]

    @property
    def governing_location(self) -> LocationResult:
        """Location with the lowest yield safety factor."""
        return min(self.locations.values(), key=lambda loc: loc.safety_factors.SF_y)

    @property
    def min_safety_factor(self) -> float:
        if not self.locations:
            return math.inf
        return self.governing_location.safety_factors.SF_y

    def field(self, points_per_region: int = 50) -> CompoundStressField:
        return generate_compound_stress_field(self, points_per_region)

    def plot(self, *, points_per_region: int = 50, **kwargs):
        from ..plotting import plot_compound_stress_field

        return plot_compound_stress_field(self.field(points_per_region), **kwargs)

    def check(self, **kwargs):
        from ..checks import check_design

        return check_design(self, **kwargs)

    @property
    def info(self) -> dict[str, Any]:
        barrel = self.system.barrel
        trunnion = self.system.trunnion
        return {
            "contact_pressure": self.contact_pressure,
            "geometry": {
                "barrel": {"ri": barrel.ri, "ro": barrel.ro},
                "trunnion": {"ri": trunnion.ri, "ro": trunnion.ro},
                "interference": self.system.interference,
            },
            "loadings": {
                "operating_pressure": self.operating_pressure,
                "external_pressure": self.external_pressure,
                "contact_pressure": self.contact_pressure,
            },
            "analysis": {loc.label: res.info for loc, res in self.locations.items()},
        }


def analyze_compound_cylinder(
    system: CompoundSystem,
    *,
    operating_pressure: float,
    material: MaterialStrength,
    external_pressure: float = 0.0,
    sigma_axial: float = 0.0,
) -> CompoundResult:
    """
    Analyze a barrel/trunnion interference fit under operating pressure.

    Args:
        system: Barrel, trunnion and interference
        operating_pressure: Chamber pressure in the barrel bore (MPa)
        material: Strengths used for the safety factors
        external_pressure: Pressure on the outside of both bodies (MPa)
        sigma_axial: Axial stress included in the Von Mises stress (MPa)

    Raises:
        CompoundAnalysisFailure: wrapping the error of the failing stage
    """
    stage = "contact_pressure"
    try:
        p_contact = contact_pressure(system.barrel, system.trunnion, system.interference)

        stage = "preload"
        preload = preload_fields(system, p_contact)

        stage = "operating"
        check_pressures(operating_pressure, external_pressure)
        operating = operating_fields(system, operating_pressure, external_pressure)

        stage = "critical_locations"
        combined = CombinedFieldSet(preload=preload, operating=operating)
        locations = evaluate_locations(combined, system.interface_radius, material, sigma_axial)
    except CylinderError as exc:
        logger.debug("Compound analysis failed during %s: %s", stage, exc)
        raise CompoundAnalysisFailure(stage, exc) from exc

    logger.debug("Contact pressure %.6g MPa for interference %g mm", p_contact, system.interference)

    return CompoundResult(
        system=system,
        material=material,
        contact_pressure=p_contact,
        operating_pressure=operating_pressure,
        external_pressure=external_pressure,
        preload=preload,
        operating=operating,
        combined=combined,
        locations=locations,
        sigma_axial=sigma_axial,
    )


def generate_compound_stress_field(
    result: CompoundResult, points_per_region: int = 50
) -> CompoundStressField:
    """Sample the combined field: barrel ri -> interface, interface -> trunnion ro."""
    interface = result.interface_radius
    barrel_coeffs = result.combined.coefficients(Region.BARREL)
    trunnion_coeffs = result.combined.coefficients(Region.TRUNNION)

    barrel = sample_field(
        result.system.barrel.ri,
        interface,
        barrel_coeffs.A,
        barrel_coeffs.B,
        points_per_region,
        label=Region.BARREL.value,
    )
    trunnion = sample_field(
        interface,
        result.system.trunnion.ro,
        trunnion_coeffs.A,
        trunnion_coeffs.B,
        points_per_region,
        label=Region.TRUNNION.value,
    )
    return CompoundStressField(barrel=barrel, trunnion=trunnion, interface_radius=interface)
