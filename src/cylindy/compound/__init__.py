"""Compound (barrel + trunnion interference fit) cylinder analysis."""

from .analysis import (
    CombinedFieldSet,
    CompoundResult,
    CompoundStressField,
    FieldSet,
    Location,
    LocationResult,
    Region,
    RegionField,
    analyze_compound_cylinder,
    generate_compound_stress_field,
)
from .contact import compliance, contact_pressure
from .geometry import (
    INTERFACE_TOLERANCE,
    CompoundSystem,
    ElasticCylinder,
    check_interference,
    validate_geometry,
)

__all__ = [
    "ElasticCylinder",
    "CompoundSystem",
    "INTERFACE_TOLERANCE",
    "check_interference",
    "validate_geometry",
    "compliance",
    "contact_pressure",
    "Region",
    "Location",
    "RegionField",
    "FieldSet",
    "CombinedFieldSet",
    "LocationResult",
    "CompoundResult",
    "CompoundStressField",
    "analyze_compound_cylinder",
    "generate_compound_stress_field",
]
