"""Stress distribution through the wall for visualization."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..errors import InvalidGeometry
from .criteria import von_mises_field
from .geometry import check_radii


@dataclass(frozen=True)
class StressField:
    """Sampled stresses at increasing radii (mm / MPa)."""

    radii: np.ndarray
    sigma_r: np.ndarray
    sigma_theta: np.ndarray
    sigma_vm: np.ndarray
    label: str = ""

    def __len__(self) -> int:
        return len(self.radii)

    @property
    def max_von_mises(self) -> float:
        return float(np.max(self.sigma_vm)) if len(self.sigma_vm) else 0.0

    @property
    def max_point(self) -> float:
        """Radius of the largest Von Mises stress."""
        return float(self.radii[int(np.argmax(self.sigma_vm))])

    def to_records(self) -> list[dict[str, float]]:
        return [
            {
                "r": float(r),
                "sigma_r": float(sr),
                "sigma_theta": float(st),
                "sigma_vm": float(vm),
            }
            for r, sr, st, vm in zip(self.radii, self.sigma_r, self.sigma_theta, self.sigma_vm)
        ]

    @classmethod
    def concatenate(cls, fields: list["StressField"], label: str = "") -> "StressField":
        radii = np.concatenate([f.radii for f in fields])
        order = np.argsort(radii, kind="stable")
        return cls(
            radii=radii[order],
            sigma_r=np.concatenate([f.sigma_r for f in fields])[order],
            sigma_theta=np.concatenate([f.sigma_theta for f in fields])[order],
            sigma_vm=np.concatenate([f.sigma_vm for f in fields])[order],
            label=label,
        )


def sample_field(
    r_start: float,
    r_end: float,
    A: float,
    B: float,
    num_points: int,
    *,
    sigma_axial: float = 0.0,
    label: str = "",
) -> StressField:
    """Evaluate Lamé stresses at `num_points` radii from r_start to r_end inclusive."""
    if num_points < 2:
        raise ValueError("num_points must be at least 2")
    if r_start <= 0 or r_end <= 0:
        raise InvalidGeometry(f"Radius must be positive (r_start={r_start}, r_end={r_end})")

    radii = np.linspace(r_start, r_end, num_points)
    r2 = radii**2
    sigma_r = A - B / r2
    sigma_theta = A + B / r2
    sigma_vm = von_mises_field(sigma_r, sigma_theta, sigma_axial)
    return StressField(
        radii=radii,
        sigma_r=sigma_r,
        sigma_theta=sigma_theta,
        sigma_vm=sigma_vm,
        label=label,
    )


def generate_stress_field(
    ri: float,
    ro: float,
    A: float,
    B: float,
    num_points: int = 100,
) -> StressField:
    """Stress field across the full wall of a single cylinder."""
    check_radii(ri, ro)
    return sample_field(ri, ro, A, B, num_points, label="cylinder")
