"""Geometry, load and strength inputs for a single thick-walled cylinder.

All lengths are in mm and all pressures/strengths in MPa.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidGeometry, InvalidLoad, InvalidMaterial


def check_radii(ri: float, ro: float, *, name: str = "Cylinder") -> None:
    """Raise `InvalidGeometry` unless ``0 < ri < ro``."""
    if ri <= 0:
        raise InvalidGeometry(f"{name} inner radius must be positive (ri={ri})")
    if ro <= ri:
        raise InvalidGeometry(
            f"{name} outer radius must be greater than inner radius (ri={ri}, ro={ro})"
        )


def check_pressures(p_i: float, p_o: float) -> None:
    if p_i < 0 or p_o < 0:
        raise InvalidLoad(f"Pressures must be non-negative (p_i={p_i}, p_o={p_o})")


def check_strengths(Sy: float, Su: float) -> None:
    if Sy <= 0 or Su <= 0:
        raise InvalidMaterial(f"Material strengths must be positive (Sy={Sy}, Su={Su})")
    if Su < Sy:
        raise InvalidMaterial(
            f"Ultimate strength must be greater than or equal to yield strength (Sy={Sy}, Su={Su})"
        )


@dataclass(frozen=True)
class CylinderGeometry:
    """Thick cylinder cross-section.

    Attributes:
        ri: Inner (bore) radius (mm)
        ro: Outer radius (mm)
    """

    ri: float
    ro: float

    def __post_init__(self) -> None:
        check_radii(self.ri, self.ro)

    @classmethod
    def from_diameters(cls, bore: float, outer: float) -> "CylinderGeometry":
        return cls(ri=bore / 2.0, ro=outer / 2.0)

    @property
    def wall_thickness(self) -> float:
        return self.ro - self.ri

    @property
    def diameter_ratio(self) -> float:
        return self.ro / self.ri


@dataclass(frozen=True)
class PressureLoad:
    """Internal and external pressure (MPa)."""

    p_i: float
    p_o: float = 0.0

    def __post_init__(self) -> None:
        check_pressures(self.p_i, self.p_o)


@dataclass(frozen=True)
class MaterialStrength:
    """Yield and ultimate strength (MPa)."""

    Sy: float
    Su: float

    def __post_init__(self) -> None:
        check_strengths(self.Sy, self.Su)
