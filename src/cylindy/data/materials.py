"""
Barrel material database.

Properties are stored in SI: Sy and Su in MPa, E in GPa, density in kg/m3.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..compound.geometry import ElasticCylinder
from ..cylinder.geometry import MaterialStrength
from ..units import UnitSystem, from_si, units_for
from .repository import Document, JsonRepository, is_number

FALLBACK_MATERIALS: Document = {
    "materials": [
        {
            "id": "4140-ht",
            "name": "4140 Steel (Heat Treated)",
            "category": "Carbon Steel",
            "condition": "Quenched & Tempered",
            "properties": {"Sy": 655, "Su": 827, "E": 200, "nu": 0.3, "density": 7850},
            "notes": "Fallback material data",
        },
        {
            "id": "17-4ph-h900",
            "name": "17-4 PH Stainless (H900)",
            "category": "Stainless Steel",
            "condition": "Precipitation Hardened",
            "properties": {"Sy": 1172, "Su": 1310, "E": 197, "nu": 0.3, "density": 7800},
            "notes": "Fallback material data",
        },
    ],
    "categories": [
        {"id": "carbon-steel", "name": "Carbon Steel"},
        {"id": "stainless-steel", "name": "Stainless Steel"},
    ],
    "metadata": {"version": "fallback", "description": "Fallback material data"},
}


@dataclass(frozen=True)
class MaterialRecord:
    """One material of the database (SI units, E in GPa)."""

    id: str
    name: str
    category: str
    condition: str
    Sy: float
    Su: float
    E: float
    nu: float = 0.3
    density: float = 7850.0
    description: str = ""
    notes: str = ""
    applications: tuple[str, ...] = field(default_factory=tuple)
    is_custom: bool = False

    @classmethod
    def from_dict(cls, entry: Mapping[str, Any]) -> "MaterialRecord":
        props = entry["properties"]
        return cls(
            id=entry["id"],
            name=entry["name"],
            category=entry.get("category", ""),
            condition=entry.get("condition", ""),
            Sy=float(props["Sy"]),
            Su=float(props["Su"]),
            E=float(props["E"]),
            nu=float(props.get("nu", 0.3)),
            density=float(props.get("density", 7850.0)),
            description=entry.get("description", ""),
            notes=entry.get("notes", ""),
            applications=tuple(entry.get("applications", ())),
        )

    @property
    def category_id(self) -> str:
        return self.category.lower().replace(" ", "-")

    @property
    def strength(self) -> MaterialStrength:
        return MaterialStrength(Sy=self.Sy, Su=self.Su)

    def elastic_cylinder(self, ri: float, ro: float, name: str = "Cylinder") -> ElasticCylinder:
        """Cylinder of this material; E is converted from GPa to MPa."""
        return ElasticCylinder.from_gpa(ri=ri, ro=ro, E_gpa=self.E, nu=self.nu, name=name)

    def properties(self, system: UnitSystem = UnitSystem.SI) -> dict[str, Any]:
        """Properties converted to the units of `system`, with a `units` entry."""
        units = units_for(system)
        return {
            "Sy": from_si(self.Sy, "stress", system),
            "Su": from_si(self.Su, "stress", system),
            "E": from_si(self.E, "modulus", system),
            "nu": self.nu,
            "density": from_si(self.density, "density", system),
            "units": {
                "Sy": units["stress"],
                "Su": units["stress"],
                "E": units["modulus"],
                "nu": "dimensionless",
                "density": units["density"],
            },
        }

    def matches(self, term: str) -> bool:
        term = term.lower()
        return (
            term in self.name.lower()
            or term in self.category.lower()
            or term in self.condition.lower()
            or term in self.description.lower()
            or any(term in app.lower() for app in self.applications)
        )


def custom_material(
    name: str,
    Sy: float,
    Su: float,
    E: float = 200.0,
    nu: float = 0.3,
    density: float = 7850.0,
    notes: str = "",
) -> MaterialRecord:
    return MaterialRecord(
        id="custom",
        name=name or "Custom Material",
        category="Custom",
        condition="User Defined",
        Sy=Sy,
        Su=Su,
        E=E,
        nu=nu,
        density=density,
        notes=notes,
        is_custom=True,
    )


def validate_custom_material(properties: Mapping[str, Any]) -> list[str]:
    """Problems with user-entered material properties (SI units); empty when valid."""
    errors = []
    for prop in ("Sy", "Su"):
        value = properties.get(prop)
        if not is_number(value) or value <= 0:
            errors.append(f"{prop} must be a positive number")

    Sy = properties.get("Sy")
    Su = properties.get("Su")
    if is_number(Sy) and is_number(Su) and Sy >= Su:
        errors.append("Yield strength must be less than ultimate strength")

    if is_number(Sy) and not 50 <= Sy <= 2000:
        errors.append("Yield strength should be between 50-2000 MPa")
    if is_number(Su) and not 100 <= Su <= 3000:
        errors.append("Ultimate strength should be between 100-3000 MPa")

    E = properties.get("E")
    if is_number(E) and not 50 <= E <= 500:
        errors.append("Elastic modulus should be between 50-500 GPa")

    nu = properties.get("nu")
    if is_number(nu) and not 0.1 <= nu <= 0.5:
        errors.append("Poisson's ratio should be between 0.1-0.5")

    return errors


class MaterialRepository(JsonRepository):
    """Material records loaded from ``materials.json``.

    Usage:
        materials = MaterialRepository.from_package()
        steel = materials.get("4140-ht")
        result = analyze_cylinder(geometry, load, steel.strength)
    """

    filename = "materials.json"
    kind = "material"

    def validate(self, data: Document) -> None:
        if not isinstance(data, dict):
            raise ValueError("Material data must be a JSON object")
        materials = data.get("materials")
        if not isinstance(materials, list) or not materials:
            raise ValueError("Material data has no materials")
        for entry in materials:
            if not isinstance(entry, dict) or not entry.get("id") or not entry.get("name"):
                raise ValueError(f"Invalid material entry: {entry!r}")
            props = entry.get("properties")
            if not isinstance(props, dict) or not all(
                is_number(props.get(key)) for key in ("Sy", "Su", "E")
            ):
                raise ValueError(f"Material {entry['id']} is missing Sy, Su or E")

    def fallback(self) -> Document:
        return FALLBACK_MATERIALS

    def describe(self, data: Document) -> str:
        return f"{len(data['materials'])} materials"

    def all(self) -> list[MaterialRecord]:
        return [MaterialRecord.from_dict(entry) for entry in self.data["materials"]]

    def get(self, material_id: str) -> MaterialRecord | None:
        for record in self.all():
            if record.id == material_id:
                return record
        return None

    def by_category(self, category_id: str) -> list[MaterialRecord]:
        category_id = category_id.lower()
        return [
            m for m in self.all()
            if m.category_id == category_id or m.category.lower() == category_id
        ]

    def categories(self) -> list[dict[str, str]]:
        return list(self.data.get("categories", []))

    def search(self, term: str) -> list[MaterialRecord]:
        if not term or not term.strip():
            return self.all()
        return [m for m in self.all() if m.matches(term.strip())]

    def recommendations(self, application: str) -> list[MaterialRecord]:
        """Materials suited to an application ("high-pressure", "lightweight", ...)."""
        materials = self.all()
        application = application.lower()

        if application == "high-pressure":
            return [m for m in materials if m.Sy > 700]
        if application == "corrosion-resistant":
            return [
                m for m in materials
                if "stainless" in m.category.lower() or "inconel" in m.id or "ti-" in m.id
            ]
        if application == "lightweight":
            return [m for m in materials if m.density < 5000 or "ti-" in m.id]
        if application == "high-temperature":
            return [m for m in materials if "inconel" in m.id or "17-4ph" in m.id]
        if application == "budget":
            return [m for m in materials if "carbon" in m.category.lower()]
        return materials
