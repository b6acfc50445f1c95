"""Manufacturing tolerance (worst-case / best-case) analysis."""

from .analysis import (
    SafetyFactorMargin,
    WorstCaseResult,
    WorstCaseSummary,
    perform_worst_case_analysis,
    validate_tolerance_params,
)
from .dimensions import (
    DimensionSet,
    Dimensions,
    PressureVariation,
    WallThicknessRange,
    apply_pressure_tolerance,
    calculate_worst_case_dimensions,
)
from .models import CUSTOM_FIT_CLASS, ToleranceBand, ToleranceSpec, custom_tolerances

__all__ = [
    "ToleranceBand",
    "ToleranceSpec",
    "CUSTOM_FIT_CLASS",
    "custom_tolerances",
    "Dimensions",
    "DimensionSet",
    "WallThicknessRange",
    "calculate_worst_case_dimensions",
    "PressureVariation",
    "apply_pressure_tolerance",
    "SafetyFactorMargin",
    "WorstCaseSummary",
    "WorstCaseResult",
    "perform_worst_case_analysis",
    "validate_tolerance_params",
]
