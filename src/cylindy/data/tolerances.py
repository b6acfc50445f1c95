"""
ISO 286 and ANSI B4.2 fit tolerance tables.

ISO 286 tables map a nominal diameter (mm) to a tolerance (µm). ANSI B4.2
tables map a nominal diameter (in) to a tolerance in thousandths of an
inch; one thousandth is 25.4 µm. Tolerances are applied symmetrically,
±tolerance/2, to the bore and to the outer diameter.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..tolerance.models import CUSTOM_FIT_CLASS, ToleranceBand, ToleranceSpec
from .repository import Document, JsonRepository

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4
UM_PER_THOU = 25.4

STANDARDS = ("iso286", "ansi_b42")
DEFAULT_PRESSURE_FACTOR = 0.05


def interpolate_tolerance(table: Mapping[Any, float], diameter: float) -> float:
    """Linearly interpolate a diameter -> tolerance table.

    Keys may be numbers or numeric strings. Diameters outside the table are
    clamped to the first/last entry.
    """
    if not table:
        raise ValueError("Tolerance table is empty")

    points = sorted((float(d), float(t)) for d, t in table.items())

    if diameter <= points[0][0]:
        return points[0][1]
    if diameter >= points[-1][0]:
        return points[-1][1]

    for (d1, t1), (d2, t2) in zip(points, points[1:]):
        if d1 <= diameter <= d2:
            ratio = (diameter - d1) / (d2 - d1)
            return t1 + ratio * (t2 - t1)

    return points[0][1]


FALLBACK_TOLERANCES: Document = {
    "iso286": {
        "fits": {
            "H7/h6": {
                "description": "Precision running fit",
                "hole": {"tolerance_factors": {"10": 15, "20": 26, "30": 36, "50": 50}},
                "shaft": {"tolerance_factors": {"10": 9, "20": 16, "30": 23, "50": 32}},
            },
            "H8/h7": {
                "description": "Standard running fit",
                "hole": {"tolerance_factors": {"10": 22, "20": 39, "30": 52, "50": 74}},
                "shaft": {"tolerance_factors": {"10": 15, "20": 26, "30": 36, "50": 50}},
            },
        }
    },
    "ansi_b42": {"fits": {}},
    "pressure_tolerance_factors": {
        "factors": {
            "precision": 0.02,
            "commercial": 0.05,
            "field_conditions": 0.10,
        }
    },
    "metadata": {"version": "fallback", "description": "Fallback tolerance data"},
}


class ToleranceRepository(JsonRepository):
    """Fit tolerance tables and pressure tolerance factors.

    Usage:
        tables = ToleranceRepository.from_package()
        spec = tables.iso286("H7/h6", inner_diameter=10.0, outer_diameter=20.0)
    """

    filename = "tolerances.json"
    kind = "tolerance"

    def validate(self, data: Document) -> None:
        if not isinstance(data, dict):
            raise ValueError("Tolerance data must be a JSON object")
        for section in ("iso286", "pressure_tolerance_factors"):
            if section not in data:
                raise ValueError(f"Tolerance data is missing '{section}'")
        if not isinstance(data["iso286"].get("fits"), dict):
            raise ValueError("Tolerance data has no ISO 286 fits")

    def fallback(self) -> Document:
        return FALLBACK_TOLERANCES

    def describe(self, data: Document) -> str:
        return f"{len(data['iso286']['fits'])} ISO 286 fits"

    def _fits(self, standard: str) -> dict[str, Any]:
        if standard not in STANDARDS:
            raise ValueError(
                f"Unknown tolerance standard: {standard}. Available: {', '.join(STANDARDS)}"
            )
        return self.data.get(standard, {}).get("fits", {})

    def _fit(self, standard: str, fit_class: str) -> dict[str, Any]:
        fits = self._fits(standard)
        if fit_class not in fits:
            name = "ISO 286" if standard == "iso286" else "ANSI B4.2"
            raise KeyError(
                f"Unknown {name} fit class: {fit_class}. Available: {', '.join(fits) or 'none'}"
            )
        return fits[fit_class]

    def iso286(self, fit_class: str, inner_diameter: float, outer_diameter: float) -> ToleranceSpec:
        """ISO 286 tolerances (µm) for a bore and outer diameter (mm)."""
        fit = self._fit("iso286", fit_class)
        bore = interpolate_tolerance(fit["hole"]["tolerance_factors"], inner_diameter)
        shaft = interpolate_tolerance(fit["shaft"]["tolerance_factors"], outer_diameter)
        return ToleranceSpec(
            bore=ToleranceBand.symmetric(bore),
            shaft=ToleranceBand.symmetric(shaft),
            fit_class=fit_class,
            description=fit.get("description", ""),
        )

    def ansi_b42(self, fit_class: str, inner_diameter: float, outer_diameter: float) -> ToleranceSpec:
        """ANSI B4.2 tolerances (µm) for a bore and outer diameter (mm)."""
        fit = self._fit("ansi_b42", fit_class)
        inner_in = inner_diameter / MM_PER_INCH
        outer_in = outer_diameter / MM_PER_INCH

        bore = interpolate_tolerance(fit["hole"]["tolerance_factors"], inner_in) * UM_PER_THOU
        shaft = interpolate_tolerance(fit["shaft"]["tolerance_factors"], outer_in) * UM_PER_THOU

        clearance = 0.0
        if fit["hole"].get("clearance_factors"):
            clearance = interpolate_tolerance(fit["hole"]["clearance_factors"], inner_in) * UM_PER_THOU

        return ToleranceSpec(
            bore=ToleranceBand.symmetric(bore),
            shaft=ToleranceBand.symmetric(shaft),
            fit_class=fit_class,
            description=fit.get("description", ""),
            clearance_allowance=clearance,
        )

    def lookup(
        self, standard: str, fit_class: str, inner_diameter: float, outer_diameter: float
    ) -> ToleranceSpec:
        if fit_class == CUSTOM_FIT_CLASS:
            raise ValueError("Custom fits are not tabulated; build them with custom_tolerances()")
        if standard == "iso286":
            return self.iso286(fit_class, inner_diameter, outer_diameter)
        if standard == "ansi_b42":
            return self.ansi_b42(fit_class, inner_diameter, outer_diameter)
        raise ValueError(f"Unknown tolerance standard: {standard}. Available: {', '.join(STANDARDS)}")

    def available_classes(self, standard: str = "iso286") -> list[tuple[str, str]]:
        """(fit class, label) pairs for `standard`."""
        return [
            (key, f"{key} - {fit.get('description', '')}")
            for key, fit in self._fits(standard).items()
        ]

    def pressure_levels(self) -> dict[str, float]:
        return dict(self.data["pressure_tolerance_factors"]["factors"])

    def pressure_tolerance_factor(self, level: str = "commercial") -> float:
        """Relative pressure band for a tolerance level; unknown levels use 5%."""
        levels = self.pressure_levels()
        if level not in levels:
            logger.warning(
                "Unknown pressure tolerance level '%s', using %.2f", level, DEFAULT_PRESSURE_FACTOR
            )
            return DEFAULT_PRESSURE_FACTOR
        return float(levels[level])
