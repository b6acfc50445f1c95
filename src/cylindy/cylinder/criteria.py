"""Von Mises equivalent stress and safety factors."""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from ..errors import InvalidStress
from .geometry import check_strengths


def von_mises(sigma_r: float, sigma_theta: float, sigma_axial: float = 0.0) -> float:
    """
    Von Mises equivalent stress from the three principal stresses.

    σ_vm = √(σ_θ² + σ_r² + σ_z² - σ_θ σ_r - σ_θ σ_z - σ_r σ_z)

    With σ_z = 0 this reduces to the plane-stress form.
    """
    radicand = (
        sigma_theta * sigma_theta
        + sigma_r * sigma_r
        + sigma_axial * sigma_axial
        - sigma_theta * sigma_r
        - sigma_theta * sigma_axial
        - sigma_r * sigma_axial
    )
    # Positive semi-definite form; only rounding can push it below zero.
    return math.sqrt(max(radicand, 0.0))


def von_mises_field(
    sigma_r: np.ndarray,
    sigma_theta: np.ndarray,
    sigma_axial: np.ndarray | float = 0.0,
) -> np.ndarray:
    """Vectorized `von_mises` over numpy arrays."""
    sr = np.asarray(sigma_r, dtype=float)
    st = np.asarray(sigma_theta, dtype=float)
    sa = np.asarray(sigma_axial, dtype=float)
    radicand = st**2 + sr**2 + sa**2 - st * sr - st * sa - sr * sa
    return np.sqrt(np.maximum(radicand, 0.0))


@dataclass(frozen=True)
class SafetyFactors:
    """Safety factors against yield and ultimate strength."""

    SF_y: float
    SF_u: float

    @property
    def minimum(self) -> float:
        return min(self.SF_y, self.SF_u)


def safety_factors(sigma_vm: float, Sy: float, Su: float) -> SafetyFactors:
    """
    Safety factors SF_y = Sy/σ_vm and SF_u = Su/σ_vm.

    Zero stress gives infinite factors.

    Raises:
        InvalidMaterial: Sy <= 0, Su <= 0 or Su < Sy
        InvalidStress: σ_vm < 0
    """
    check_strengths(Sy, Su)
    if sigma_vm < 0:
        raise InvalidStress(f"Von Mises stress must be non-negative (sigma_vm={sigma_vm})")

    if sigma_vm == 0:
        return SafetyFactors(SF_y=math.inf, SF_u=math.inf)

    return SafetyFactors(SF_y=Sy / sigma_vm, SF_u=Su / sigma_vm)
