"""Single thick-walled cylinder: Lamé solution, failure criteria, burst pressure."""

from .analysis import CylinderResult, LocationStress, analyze_circle, analyze_cylinder
from .burst import (
    BurstSearchConfig,
    BurstSolution,
    bore_yield_objective,
    burst_pressure_estimate,
    find_burst_root,
    solve_burst_pressure,
)
from .criteria import SafetyFactors, safety_factors, von_mises, von_mises_field
from .field import StressField, generate_stress_field
from .geometry import CylinderGeometry, MaterialStrength, PressureLoad
from .lame import LameCoefficients, StressState, lame_coefficients, stresses

__all__ = [
    "CylinderGeometry",
    "PressureLoad",
    "MaterialStrength",
    "LameCoefficients",
    "StressState",
    "lame_coefficients",
    "stresses",
    "von_mises",
    "von_mises_field",
    "SafetyFactors",
    "safety_factors",
    "BurstSearchConfig",
    "BurstSolution",
    "bore_yield_objective",
    "find_burst_root",
    "solve_burst_pressure",
    "burst_pressure_estimate",
    "StressField",
    "generate_stress_field",
    "LocationStress",
    "CylinderResult",
    "analyze_cylinder",
    "analyze_circle",
]
