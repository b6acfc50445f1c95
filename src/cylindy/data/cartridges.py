"""
Cartridge database: chamber/bore diameters (mm) and maximum pressure (MPa).
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Any, Mapping

from ..units import UnitSystem, from_si, units_for
from .repository import Document, JsonRepository, is_number

# Chamber diameter mismatch (mm) that triggers a selection warning
DIAMETER_WARNING_THRESHOLD = 0.1

POPULAR_IDS = (
    "223-rem",
    "556-nato",
    "9mm-luger",
    "308-win",
    "762-nato",
    "45-acp",
    "30-06",
    "300-win-mag",
)

FALLBACK_CARTRIDGES: Document = {
    "cartridges": [
        {
            "id": "223-rem",
            "name": ".223 Remington",
            "category": "Rifle",
            "chamber_diameter": 5.69,
            "bore_diameter": 5.56,
            "max_pressure": 379.21,
            "standard": "SAAMI",
            "notes": "Fallback cartridge data",
        },
        {
            "id": "308-win",
            "name": ".308 Winchester",
            "category": "Rifle",
            "chamber_diameter": 7.85,
            "bore_diameter": 7.62,
            "max_pressure": 413.69,
            "standard": "SAAMI",
            "notes": "Fallback cartridge data",
        },
        {
            "id": "9mm-luger",
            "name": "9x19mm Parabellum",
            "category": "Pistol",
            "chamber_diameter": 9.93,
            "bore_diameter": 9.02,
            "max_pressure": 241.32,
            "standard": "SAAMI",
            "notes": "Fallback cartridge data",
        },
    ],
    "categories": [
        {"id": "rifle", "name": "Rifle"},
        {"id": "pistol", "name": "Pistol"},
    ],
    "metadata": {"version": "fallback", "description": "Fallback cartridge data"},
}


@dataclass(frozen=True)
class CartridgeRecord:
    id: str
    name: str
    category: str
    chamber_diameter: float
    max_pressure: float
    bore_diameter: float | None = None
    standard: str = ""
    description: str = ""
    notes: str = ""
    applications: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, entry: Mapping[str, Any]) -> "CartridgeRecord":
        bore = entry.get("bore_diameter")
        return cls(
            id=entry["id"],
            name=entry["name"],
            category=entry.get("category", ""),
            chamber_diameter=float(entry["chamber_diameter"]),
            max_pressure=float(entry["max_pressure"]),
            bore_diameter=float(bore) if bore is not None else None,
            standard=entry.get("standard", ""),
            description=entry.get("description", ""),
            notes=entry.get("notes", ""),
            applications=tuple(entry.get("applications", ())),
        )

    @property
    def effective_bore_diameter(self) -> float:
        """Bore diameter, or the chamber diameter when no bore is listed."""
        return self.bore_diameter if self.bore_diameter is not None else self.chamber_diameter

    @property
    def category_id(self) -> str:
        return re.sub(r"\s+", "-", self.category.lower())

    def specs(self, system: UnitSystem = UnitSystem.SI) -> dict[str, Any]:
        units = units_for(system)
        return {
            "chamber_diameter": from_si(self.chamber_diameter, "diameter", system),
            "bore_diameter": from_si(self.effective_bore_diameter, "diameter", system),
            "max_pressure": from_si(self.max_pressure, "pressure", system),
            "units": {"diameter": units["diameter"], "pressure": units["pressure"]},
        }

    def matches(self, term: str) -> bool:
        term = term.lower()
        compact = re.sub(r"[^a-z0-9]", "", term)
        return (
            term in self.name.lower()
            or term in self.category.lower()
            or term in self.description.lower()
            or any(term in app.lower() for app in self.applications)
            or (bool(compact) and compact in self.id.lower())
        )


@dataclass(frozen=True)
class SelectionCheck:
    """Outcome of `CartridgeRepository.validate_selection`."""

    is_valid: bool
    warnings: list[str]
    recommendations: list[str]


class CartridgeRepository(JsonRepository):
    """Cartridge records loaded from ``cartridges.json``."""

    filename = "cartridges.json"
    kind = "cartridge"

    def validate(self, data: Document) -> None:
        if not isinstance(data, dict):
            raise ValueError("Cartridge data must be a JSON object")
        cartridges = data.get("cartridges")
        if not isinstance(cartridges, list) or not cartridges:
            raise ValueError("Cartridge data has no cartridges")
        for entry in cartridges:
            if not isinstance(entry, dict) or not entry.get("id") or not entry.get("name"):
                raise ValueError(f"Invalid cartridge entry: {entry!r}")
            chamber = entry.get("chamber_diameter")
            pressure = entry.get("max_pressure")
            if not is_number(chamber) or not 0 < chamber <= 50:
                raise ValueError(f"Cartridge {entry['id']} has an invalid chamber diameter")
            if not is_number(pressure) or not 0 < pressure <= 1000:
                raise ValueError(f"Cartridge {entry['id']} has an invalid max pressure")

    def fallback(self) -> Document:
        return FALLBACK_CARTRIDGES

    def describe(self, data: Document) -> str:
        return f"{len(data['cartridges'])} cartridges"

    def all(self) -> list[CartridgeRecord]:
        return [CartridgeRecord.from_dict(entry) for entry in self.data["cartridges"]]

    def get(self, cartridge_id: str) -> CartridgeRecord | None:
        for record in self.all():
            if record.id == cartridge_id:
                return record
        return None

    def by_category(self, category_id: str) -> list[CartridgeRecord]:
        category_id = category_id.lower()
        return [
            c for c in self.all()
            if c.category_id == category_id or c.category.lower() == category_id
        ]

    def categories(self) -> list[dict[str, str]]:
        return list(self.data.get("categories", []))

    def search(self, term: str) -> list[CartridgeRecord]:
        if not term or not term.strip():
            return self.all()
        return [c for c in self.all() if c.matches(term.strip())]

    def by_application(self, application: str) -> list[CartridgeRecord]:
        application = application.lower()
        return [
            c for c in self.all()
            if any(application in app.lower() for app in c.applications)
        ]

    def by_pressure_range(self, min_pressure: float, max_pressure: float) -> list[CartridgeRecord]:
        return [c for c in self.all() if min_pressure <= c.max_pressure <= max_pressure]

    def compatible(self, barrel_diameter: float, tolerance: float = 0.5) -> list[CartridgeRecord]:
        """Cartridges whose chamber diameter is within `tolerance` mm of `barrel_diameter`."""
        return [
            c for c in self.all()
            if abs(c.chamber_diameter - barrel_diameter) <= tolerance
        ]

    def popular(self) -> list[CartridgeRecord]:
        by_id = {c.id: c for c in self.all()}
        return [by_id[cid] for cid in POPULAR_IDS if cid in by_id]

    def validate_selection(
        self, cartridge_id: str, inner_diameter: float, outer_diameter: float
    ) -> SelectionCheck:
        """Check a cartridge against a barrel's bore and outer diameter (mm)."""
        cartridge = self.get(cartridge_id)
        if cartridge is None:
            return SelectionCheck(is_valid=False, warnings=["Cartridge not found"], recommendations=[])

        warnings: list[str] = []
        recommendations: list[str] = []

        diameter_diff = abs(cartridge.chamber_diameter - inner_diameter)
        if not diameter_diff <= DIAMETER_WARNING_THRESHOLD:
            warnings.append(
                f"Cartridge chamber diameter ({cartridge.chamber_diameter}mm) differs "
                f"significantly from barrel inner diameter ({inner_diameter}mm)"
            )
            recommendations.append("Verify chamber dimensions and headspace requirements")

        if not inner_diameter > 0:
            warnings.append(f"Barrel inner diameter must be positive ({inner_diameter}mm)")
            return SelectionCheck(is_valid=False, warnings=warnings, recommendations=recommendations)

        wall_thickness = (outer_diameter - inner_diameter) / 2.0
        thickness_ratio = wall_thickness / (inner_diameter / 2.0)

        if cartridge.max_pressure > 400 and thickness_ratio < 0.5:
            warnings.append(
                f"High pressure cartridge ({cartridge.max_pressure}MPa) with relatively thin barrel wall"
            )
            recommendations.append("Consider increasing barrel outer diameter for higher safety factor")

        if cartridge.max_pressure > 450 and thickness_ratio < 0.7:
            warnings.append("Very high pressure cartridge with thin barrel wall - potential safety concern")
            recommendations.append("Strongly recommend thicker barrel wall for this pressure level")

        return SelectionCheck(
            is_valid=not warnings, warnings=warnings, recommendations=recommendations
        )
