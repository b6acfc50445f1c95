"""
Lamé solution for an axisymmetric thick-walled cylinder.

For internal pressure p_i and external pressure p_o:

    σ_r = A - B/r²
    σ_θ = A + B/r²

    A = (p_i ri² - p_o ro²) / (ro² - ri²)
    B = (p_i - p_o) ri² ro² / (ro² - ri²)

The coefficients reproduce the boundary conditions exactly:
σ_r(ri) = -p_i and σ_r(ro) = -p_o.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidGeometry
from .geometry import check_pressures, check_radii


@dataclass(frozen=True)
class LameCoefficients:
    A: float
    B: float


@dataclass(frozen=True)
class StressState:
    """Principal stresses at a radius (MPa).

    Adding two states superposes them component by component.
    """

    sigma_r: float
    sigma_theta: float
    sigma_axial: float = 0.0

    def __add__(self, other: "StressState") -> "StressState":
        if not isinstance(other, StressState):
            return NotImplemented
        return StressState(
            sigma_r=self.sigma_r + other.sigma_r,
            sigma_theta=self.sigma_theta + other.sigma_theta,
            sigma_axial=self.sigma_axial + other.sigma_axial,
        )

    def with_axial(self, sigma_axial: float) -> "StressState":
        return StressState(self.sigma_r, self.sigma_theta, sigma_axial)


def lame_coefficients(ri: float, ro: float, p_i: float, p_o: float = 0.0) -> LameCoefficients:
    """
    Lamé coefficients for a cylinder under internal and external pressure.

    Args:
        ri: Inner radius (mm)
        ro: Outer radius (mm)
        p_i: Internal pressure (MPa)
        p_o: External pressure (MPa)

    Raises:
        InvalidGeometry: ri <= 0 or ro <= ri
        InvalidLoad: negative pressure
    """
    check_radii(ri, ro)
    check_pressures(p_i, p_o)

    ri2 = ri * ri
    ro2 = ro * ro
    delta_r2 = ro2 - ri2

    A = (p_i * ri2 - p_o * ro2) / delta_r2
    B = (p_i - p_o) * ri2 * ro2 / delta_r2
    return LameCoefficients(A=A, B=B)


def stresses(r: float, A: float, B: float) -> StressState:
    """Radial and hoop stress at radius r for coefficients (A, B)."""
    if r <= 0:
        raise InvalidGeometry(f"Radius must be positive (r={r})")

    r2 = r * r
    return StressState(sigma_r=A - B / r2, sigma_theta=A + B / r2)


def stresses_from(r: float, coefficients: LameCoefficients) -> StressState:
    return stresses(r, coefficients.A, coefficients.B)
