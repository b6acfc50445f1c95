"""Reference data: fit tolerance tables, materials and cartridges."""

from .cache import SingleFlight
from .cartridges import CartridgeRecord, CartridgeRepository, SelectionCheck
from .materials import MaterialRecord, MaterialRepository, custom_material, validate_custom_material
from .repository import JsonRepository
from .tolerances import ToleranceRepository, interpolate_tolerance

__all__ = [
    "SingleFlight",
    "JsonRepository",
    "ToleranceRepository",
    "interpolate_tolerance",
    "MaterialRecord",
    "MaterialRepository",
    "custom_material",
    "validate_custom_material",
    "CartridgeRecord",
    "CartridgeRepository",
    "SelectionCheck",
]
