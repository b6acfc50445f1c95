"""Exception taxonomy for cylinder stress calculations.

Validation errors are raised by the leaf calculations at the point of
detection. Solver errors come from the burst-pressure bisection. The
orchestration layers (single cylinder, compound, worst case) only re-wrap
inner failures with the stage that failed.
"""

from __future__ import annotations


class CylinderError(Exception):
    """Base class for every error raised by cylindy calculations."""


# === Validation ===


class InvalidGeometry(CylinderError, ValueError):
    """Radii violate ``0 < ri < ro`` (or a sampling radius is not positive)."""


class InvalidLoad(CylinderError, ValueError):
    """A pressure is negative or a pressure tolerance is out of range."""


class InvalidMaterial(CylinderError, ValueError):
    """Strengths, elastic modulus or Poisson ratio are out of range."""


class InvalidStress(CylinderError, ValueError):
    """An equivalent stress is negative."""


class IncompatibleGeometry(CylinderError, ValueError):
    """Trunnion bore does not match the barrel outer radius minus interference."""


class NegativeWallThickness(CylinderError, ValueError):
    """Worst-case tolerances leave no wall between bore and outer surface."""


# === Solver ===


class BracketingFailure(CylinderError, ArithmeticError):
    """No upper bound was found that brackets the burst pressure."""


class ConvergenceFailure(CylinderError, ArithmeticError):
    """Bisection ran out of iterations."""

    def __init__(self, message: str, iterations: int) -> None:
        super().__init__(message)
        self.iterations = iterations


class NumericalError(CylinderError, ArithmeticError):
    """The burst objective could not be evaluated at a trial pressure."""


# === Orchestration ===


class AnalysisFailure(CylinderError):
    """An orchestrated analysis failed in one of its stages.

    Attributes:
        stage: Name of the stage that raised (e.g. ``"contact_pressure"``)
        cause: The original exception
    """

    prefix = "Analysis failed"

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"{self.prefix} during {stage}: {cause}")
        self.stage = stage
        self.cause = cause


class CylinderAnalysisFailure(AnalysisFailure):
    prefix = "Analysis failed"


class CompoundAnalysisFailure(AnalysisFailure):
    prefix = "Compound cylinder analysis failed"


class WorstCaseAnalysisFailure(AnalysisFailure):
    prefix = "Worst-case analysis failed"


__all__ = [
    "CylinderError",
    "InvalidGeometry",
    "InvalidLoad",
    "InvalidMaterial",
    "InvalidStress",
    "IncompatibleGeometry",
    "NegativeWallThickness",
    "BracketingFailure",
    "ConvergenceFailure",
    "NumericalError",
    "AnalysisFailure",
    "CylinderAnalysisFailure",
    "CompoundAnalysisFailure",
    "WorstCaseAnalysisFailure",
]
