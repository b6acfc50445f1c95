"""
Burst pressure estimate by bisection.

The burst pressure is the internal pressure at which the Von Mises stress
at the bore reaches the yield strength:

    f(p) = σ_vm(ri; p, p_o) - Sy = 0

f is monotonically increasing in p for a fixed geometry, so the root is
bracketed between 0 and a bound that is doubled until f turns positive.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable

from ..errors import (
    BracketingFailure,
    ConvergenceFailure,
    CylinderError,
    InvalidLoad,
    InvalidMaterial,
    NumericalError,
)
from .criteria import von_mises
from .geometry import check_radii
from .lame import lame_coefficients, stresses_from

logger = logging.getLogger(__name__)

# Objective value, or None where the trial pressure cannot be evaluated.
Objective = Callable[[float], "float | None"]


@dataclass(frozen=True)
class BurstSearchConfig:
    """Configuration for the burst pressure bisection."""

    max_iterations: int = 100
    tolerance: float = 1e-9
    initial_upper_factor: float = 10.0  # p_high = factor * Sy
    max_expansions: int = 20

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if self.tolerance <= 0:
            raise ValueError("tolerance must be positive")
        if self.initial_upper_factor <= 0:
            raise ValueError("initial_upper_factor must be positive")
        if self.max_expansions < 0:
            raise ValueError("max_expansions must be non-negative")


@dataclass(frozen=True)
class BurstSolution:
    """Result from the burst pressure solver."""

    pressure: float
    iterations: int
    expansions: int
    residual: float


def bore_yield_objective(ri: float, ro: float, Sy: float, p_o: float = 0.0) -> Objective:
    """Build f(p) = σ_vm at the bore minus Sy.

    The returned callable yields None instead of raising when p cannot be
    evaluated: invalid radii or pressures, or a non-finite stress.
    """

    def evaluate(p_i: float) -> float | None:
        if not p_i >= 0.0:
            return None
        try:
            state = stresses_from(ri, lame_coefficients(ri, ro, p_i, p_o))
        except CylinderError:
            return None
        value = von_mises(state.sigma_r, state.sigma_theta) - Sy
        return value if math.isfinite(value) else None

    return evaluate


def find_burst_root(
    evaluate_fn: Objective,
    p_high: float,
    config: BurstSearchConfig = BurstSearchConfig(),
) -> BurstSolution:
    """
    Bracket and bisect the root of an increasing objective on [0, p_high].

    Args:
        evaluate_fn: Function(p) -> objective value or None
        p_high: Initial upper bound, doubled while f(p_high) < 0
        config: Search configuration

    Raises:
        BracketingFailure: f stays negative after all expansions, or f(0) > 0
        NumericalError: the objective could not be evaluated
        ConvergenceFailure: iterations exhausted
    """
    p_low = 0.0
    f_low = evaluate_fn(p_low)
    if f_low is None:
        raise NumericalError("Numerical error in burst pressure calculation at p=0")
    if f_low == 0.0:
        return BurstSolution(pressure=0.0, iterations=0, expansions=0, residual=0.0)
    if f_low > 0.0:
        raise BracketingFailure(
            "Bore exceeds yield at zero internal pressure; burst pressure is not bracketed "
            f"(f(0)={f_low:.6g} MPa)"
        )

    f_high = evaluate_fn(p_high)
    expansions = 0
    while f_high is not None and f_high < 0 and expansions < config.max_expansions:
        p_high *= 2.0
        f_high = evaluate_fn(p_high)
        expansions += 1

    if f_high is None:
        raise NumericalError(f"Numerical error in burst pressure calculation at p={p_high:.6g}")
    if f_high < 0:
        raise BracketingFailure(
            f"Could not find upper bound for burst pressure after {expansions} expansions "
            f"(p_high={p_high:.6g} MPa)"
        )

    logger.debug("Burst pressure bracketed in [0, %.6g] after %d expansions", p_high, expansions)

    for iteration in range(1, config.max_iterations + 1):
        p_mid = (p_low + p_high) / 2.0
        f_mid = evaluate_fn(p_mid)

        if f_mid is None:
            raise NumericalError(
                f"Numerical error in burst pressure calculation at p={p_mid:.6g}"
            )

        if abs(f_mid) < config.tolerance or (p_high - p_low) < config.tolerance:
            logger.debug("Burst pressure %.9g MPa after %d iterations", p_mid, iteration)
            return BurstSolution(
                pressure=p_mid,
                iterations=iteration,
                expansions=expansions,
                residual=f_mid,
            )

        if f_mid * f_low < 0:
            p_high = p_mid
        else:
            p_low = p_mid
            f_low = f_mid

    raise ConvergenceFailure(
        f"Burst pressure calculation failed to converge after {config.max_iterations} iterations",
        iterations=config.max_iterations,
    )


def solve_burst_pressure(
    ri: float,
    ro: float,
    Sy: float,
    p_o: float = 0.0,
    config: BurstSearchConfig | None = None,
) -> BurstSolution:
    """Solve for the internal pressure that brings the bore to yield."""
    check_radii(ri, ro)
    if Sy <= 0:
        raise InvalidMaterial(f"Yield strength must be positive (Sy={Sy})")
    if p_o < 0:
        raise InvalidLoad(f"External pressure must be non-negative (p_o={p_o})")

    config = config or BurstSearchConfig()
    objective = bore_yield_objective(ri, ro, Sy, p_o)
    return find_burst_root(objective, config.initial_upper_factor * Sy, config)


def burst_pressure_estimate(
    ri: float,
    ro: float,
    Sy: float,
    p_o: float = 0.0,
    config: BurstSearchConfig | None = None,
) -> float:
    """Estimated burst pressure (MPa); see `solve_burst_pressure`."""
    return solve_burst_pressure(ri, ro, Sy, p_o, config).pressure
