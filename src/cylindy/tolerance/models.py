"""
Manufacturing tolerance bands for bore and outer diameter.

Offsets are in µm relative to the nominal dimension. A band is applied to
a radius as ``r + offset / 1000`` (mm).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CUSTOM_FIT_CLASS = "custom"


@dataclass(frozen=True)
class ToleranceBand:
    """Upper/lower deviation of one dimension (µm).

    Attributes:
        upper: Largest allowed deviation
        lower: Smallest allowed deviation
        tolerance: Total band width
    """

    upper: float
    lower: float
    tolerance: float

    @classmethod
    def symmetric(cls, tolerance: float) -> "ToleranceBand":
        """Band of total width `tolerance` centred on nominal (±tolerance/2)."""
        half = tolerance / 2.0
        return cls(upper=half, lower=-half, tolerance=tolerance)

    @classmethod
    def from_deviations(cls, plus: float, minus: float) -> "ToleranceBand":
        """Band from unsigned plus/minus deviations; the sign of `minus` is ignored."""
        return cls(upper=plus, lower=-abs(minus), tolerance=abs(plus) + abs(minus))

    @property
    def info(self) -> dict[str, float]:
        return {"upper": self.upper, "lower": self.lower, "tolerance": self.tolerance}


@dataclass(frozen=True)
class ToleranceSpec:
    """Bore (hole) and shaft (outer diameter) tolerance bands."""

    bore: ToleranceBand
    shaft: ToleranceBand
    fit_class: str
    description: str = ""
    clearance_allowance: float = 0.0

    @property
    def is_custom(self) -> bool:
        return self.fit_class == CUSTOM_FIT_CLASS

    @property
    def info(self) -> dict[str, Any]:
        return {
            "fit_class": self.fit_class,
            "description": self.description,
            "bore": self.bore.info,
            "shaft": self.shaft.info,
            "clearance_allowance": self.clearance_allowance,
        }


def custom_tolerances(
    bore_plus: float = 0.0,
    bore_minus: float = 0.0,
    shaft_plus: float = 0.0,
    shaft_minus: float = 0.0,
) -> ToleranceSpec:
    """User-defined tolerances (µm)."""
    return ToleranceSpec(
        bore=ToleranceBand.from_deviations(bore_plus, bore_minus),
        shaft=ToleranceBand.from_deviations(shaft_plus, shaft_minus),
        fit_class=CUSTOM_FIT_CLASS,
        description="User-defined tolerances",
    )
