"""
Design checks of cylinder results against a target safety factor.

Utilization of a limit state is ``target_safety_factor / SF`` so that a
location passes when every utilization is at most 1.0. An infinite safety
factor (no stress) has zero utilization. Results follow a small dataclass
API with an ``info`` dict for tabulation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any

from .compound.analysis import CompoundResult
from .cylinder.analysis import CylinderResult
from .cylinder.criteria import SafetyFactors, safety_factors

DEFAULT_TARGET_SAFETY_FACTOR = 3.0


def utilization(target: float, factor: float) -> float:
    if math.isinf(factor):
        return 0.0
    return target / factor


@dataclass
class DesignCheckDetail:
    location: str
    radius: float
    sigma_vm: float
    SF_y: float
    SF_u: float
    yield_util: float
    ultimate_util: float
    governing_util: float
    governing_limit_state: str
    burst_util: float | None = None

    @property
    def passed(self) -> bool:
        return self.governing_util <= 1.0

    @property
    def info(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "r_mm": self.radius,
            "sigma_vm_MPa": self.sigma_vm,
            "SF_y": self.SF_y,
            "SF_u": self.SF_u,
            "yield_util": self.yield_util,
            "ultimate_util": self.ultimate_util,
            "burst_util": self.burst_util,
            "governing_util": self.governing_util,
            "governing_limit_state": self.governing_limit_state,
            "passed": self.passed,
        }


@dataclass
class DesignCheckResult:
    analysis_type: str
    target_safety_factor: float
    details: list[DesignCheckDetail] = field(default_factory=list)
    governing_location: str | None = None
    governing_limit_state: str | None = None
    governing_utilization: float = 0.0
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.governing_utilization <= 1.0

    @property
    def info(self) -> dict[str, Any]:
        return {
            "analysis_type": self.analysis_type,
            "target_safety_factor": self.target_safety_factor,
            "governing_location": self.governing_location,
            "governing_limit_state": self.governing_limit_state,
            "governing_utilization": self.governing_utilization,
            "passed": self.passed,
            "meta": dict(self.meta),
            "details": [d.info for d in self.details],
        }


def _detail(
    location: str,
    radius: float,
    sigma_vm: float,
    factors: SafetyFactors,
    target: float,
    burst_util: float | None = None,
) -> DesignCheckDetail:
    limit_states = {
        "yield": utilization(target, factors.SF_y),
        "ultimate": utilization(target, factors.SF_u),
    }
    if burst_util is not None:
        limit_states["burst"] = burst_util
    governing_state, governing_util = max(limit_states.items(), key=lambda item: item[1])
    return DesignCheckDetail(
        location=location,
        radius=radius,
        sigma_vm=sigma_vm,
        SF_y=factors.SF_y,
        SF_u=factors.SF_u,
        yield_util=limit_states["yield"],
        ultimate_util=limit_states["ultimate"],
        governing_util=governing_util,
        governing_limit_state=governing_state,
        burst_util=burst_util,
    )


def get_governing(details: list[DesignCheckDetail]) -> tuple[str | None, str | None, float]:
    """Return (location, limit_state, utilization) for the governing location."""
    if not details:
        return None, None, 0.0
    detail = max(details, key=lambda d: d.governing_util)
    return detail.location, detail.governing_limit_state, detail.governing_util


def check_cylinder(
    result: CylinderResult, target_safety_factor: float = DEFAULT_TARGET_SAFETY_FACTOR
) -> DesignCheckResult:
    material = result.material
    burst_util = result.burst_ratio

    details = [
        _detail(
            "inner",
            result.inner.radius,
            result.inner.sigma_vm,
            result.safety_factors,
            target_safety_factor,
            burst_util=burst_util,
        ),
        _detail(
            "outer",
            result.outer.radius,
            result.outer.sigma_vm,
            safety_factors(result.outer.sigma_vm, material.Sy, material.Su),
            target_safety_factor,
        ),
    ]
    location, limit_state, util = get_governing(details)
    return DesignCheckResult(
        analysis_type="cylinder",
        target_safety_factor=target_safety_factor,
        details=details,
        governing_location=location,
        governing_limit_state=limit_state,
        governing_utilization=util,
        meta={"burst_pressure_MPa": result.burst_pressure, "p_i_MPa": result.load.p_i},
    )


def check_compound(
    result: CompoundResult, target_safety_factor: float = DEFAULT_TARGET_SAFETY_FACTOR
) -> DesignCheckResult:
    details = [
        _detail(
            location.label,
            loc.stress.radius,
            loc.sigma_vm,
            loc.safety_factors,
            target_safety_factor,
        )
        for location, loc in result.locations.items()
    ]
    location, limit_state, util = get_governing(details)
    return DesignCheckResult(
        analysis_type="compound",
        target_safety_factor=target_safety_factor,
        details=details,
        governing_location=location,
        governing_limit_state=limit_state,
        governing_utilization=util,
        meta={
            "contact_pressure_MPa": result.contact_pressure,
            "operating_pressure_MPa": result.operating_pressure,
        },
    )


def check_design(
    result: CylinderResult | CompoundResult,
    target_safety_factor: float = DEFAULT_TARGET_SAFETY_FACTOR,
) -> DesignCheckResult:
    """Check a `CylinderResult` or `CompoundResult` against a target safety factor."""
    if target_safety_factor <= 0:
        raise ValueError("target_safety_factor must be positive")

    if isinstance(result, CylinderResult):
        return check_cylinder(result, target_safety_factor)
    if isinstance(result, CompoundResult):
        return check_compound(result, target_safety_factor)
    raise TypeError(f"Cannot check a {type(result).__name__}")


__all__ = [
    "DEFAULT_TARGET_SAFETY_FACTOR",
    "DesignCheckDetail",
    "DesignCheckResult",
    "check_cylinder",
    "check_compound",
    "check_design",
    "get_governing",
    "utilization",
]
