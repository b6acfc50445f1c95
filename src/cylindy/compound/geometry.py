"""
Barrel + trunnion geometry for interference-fit (compound cylinder) analysis.

The trunnion bore is machined smaller than the barrel outer radius by the
interference δ:

    trunnion.ri = barrel.ro - δ

All lengths in mm, elastic modulus in MPa, Poisson ratio dimensionless.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from ..cylinder.geometry import CylinderGeometry, MaterialStrength, check_radii
from ..errors import IncompatibleGeometry, InvalidGeometry, InvalidMaterial

if TYPE_CHECKING:
    from .analysis import CompoundResult

logger = logging.getLogger(__name__)

# Absolute tolerance (mm) on trunnion.ri == barrel.ro - interference
INTERFACE_TOLERANCE = 1e-6

# Interference above this fraction of the thinner wall is reported as suspicious
MAX_REASONABLE_INTERFERENCE_RATIO = 0.01


@dataclass(frozen=True)
class ElasticCylinder:
    """Cylinder geometry with isotropic elastic properties.

    Attributes:
        ri: Inner radius (mm)
        ro: Outer radius (mm)
        E: Elastic modulus (MPa)
        nu: Poisson's ratio, 0 <= nu < 0.5
        name: Label used in error messages
    """

    ri: float
    ro: float
    E: float
    nu: float
    name: str = "Cylinder"

    def __post_init__(self) -> None:
        check_radii(self.ri, self.ro, name=self.name)
        if self.E <= 0:
            raise InvalidMaterial(f"{self.name} elastic modulus must be positive (E={self.E})")
        if self.nu < 0 or self.nu >= 0.5:
            raise InvalidMaterial(
                f"{self.name} Poisson's ratio must be between 0 and 0.5 (nu={self.nu})"
            )

    @classmethod
    def from_gpa(cls, ri: float, ro: float, E_gpa: float, nu: float, name: str = "Cylinder") -> "ElasticCylinder":
        return cls(ri=ri, ro=ro, E=E_gpa * 1000.0, nu=nu, name=name)

    @property
    def geometry(self) -> CylinderGeometry:
        return CylinderGeometry(ri=self.ri, ro=self.ro)

    @property
    def wall_thickness(self) -> float:
        return self.ro - self.ri


def check_interference(barrel: ElasticCylinder, trunnion: ElasticCylinder, interference: float) -> None:
    """Raise unless interference >= 0 and the radii are compatible."""
    if interference < 0:
        raise InvalidGeometry(f"Interference must be non-negative (interference={interference})")

    expected = barrel.ro - interference
    if abs(trunnion.ri - expected) > INTERFACE_TOLERANCE:
        raise IncompatibleGeometry(
            f"Trunnion inner radius ({trunnion.ri}) must equal barrel outer radius "
            f"minus interference ({expected})"
        )


def validate_geometry(barrel: ElasticCylinder, trunnion: ElasticCylinder, interference: float) -> bool:
    """Validate a barrel/trunnion pair.

    Returns True when valid. An interference larger than 1% of the thinner
    wall is allowed but logged as a warning.
    """
    check_interference(barrel, trunnion, interference)

    limit = min(barrel.wall_thickness, trunnion.wall_thickness) * MAX_REASONABLE_INTERFERENCE_RATIO
    if interference > limit:
        logger.warning(
            "Large interference (%g mm) relative to wall thickness (limit %g mm); "
            "this may cause excessive stresses",
            interference,
            limit,
        )
    return True


@dataclass(frozen=True)
class CompoundSystem:
    """Barrel shrink-fitted into a trunnion.

    Compatibility of the radii is checked when the system is analyzed so
    that the failure is reported with analysis context.
    """

    barrel: ElasticCylinder
    trunnion: ElasticCylinder
    interference: float

    @property
    def interface_radius(self) -> float:
        return self.barrel.ro

    def validate(self) -> bool:
        return validate_geometry(self.barrel, self.trunnion, self.interference)

    def analyze(
        self,
        *,
        operating_pressure: float,
        material: MaterialStrength,
        external_pressure: float = 0.0,
        sigma_axial: float = 0.0,
    ) -> "CompoundResult":
        """Analyze this system and return a `CompoundResult`."""
        from .analysis import analyze_compound_cylinder

        return analyze_compound_cylinder(
            self,
            operating_pressure=operating_pressure,
            material=material,
            external_pressure=external_pressure,
            sigma_axial=sigma_axial,
        )
