"""
Unit conversion and display formatting.

Calculations are carried out in SI base units (mm, MPa, GPa, kg/m3). This
module converts inputs and results to and from the inch-pound (IP) system
for display. The unit system is always passed explicitly.

Example:
    >>> round(convert(1.0, "in", "mm"), 6)
    25.4
    >>> format_value(from_si(414.0, "pressure", UnitSystem.IP), "psi")
    '60045.6 psi'
"""

from __future__ import annotations

from enum import Enum
import math


class UnitSystem(str, Enum):
    SI = "SI"
    IP = "IP"


# Multipliers from the base unit of each category (first entry)
CONVERSION_FACTORS: dict[str, dict[str, float]] = {
    "length": {
        "mm": 1.0,
        "in": 1.0 / 25.4,
    },
    "pressure": {
        "MPa": 1.0,
        "psi": 145.0377377,
        "ksi": 0.145037737,
    },
    "modulus": {
        "GPa": 1.0,
        "psi": 145037.7377,
        "ksi": 145.037737,
    },
    "stress": {
        "MPa": 1.0,
        "psi": 145.0377377,
        "ksi": 0.145037737,
    },
    "density": {
        "kg/m3": 1.0,
        "lb/ft3": 0.062427974,
    },
}

UNIT_SYSTEMS: dict[UnitSystem, dict[str, str]] = {
    UnitSystem.SI: {
        "length": "mm",
        "diameter": "mm",
        "thickness": "mm",
        "pressure": "MPa",
        "stress": "MPa",
        "modulus": "GPa",
        "density": "kg/m3",
    },
    UnitSystem.IP: {
        "length": "in",
        "diameter": "in",
        "thickness": "in",
        "pressure": "psi",
        # ksi keeps stress values readable
        "stress": "ksi",
        "modulus": "ksi",
        "density": "lb/ft3",
    },
}


def _category(from_unit: str, to_unit: str) -> dict[str, float]:
    for factors in CONVERSION_FACTORS.values():
        if from_unit in factors and to_unit in factors:
            return factors
    raise ValueError(f"Cannot convert from {from_unit} to {to_unit}: incompatible units")


def convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert `value` between two units of the same quantity."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise ValueError(f"Value must be a valid number (value={value!r})")
    if from_unit == to_unit:
        return value

    factors = _category(from_unit, to_unit)
    return value / factors[from_unit] * factors[to_unit]


def units_for(system: UnitSystem | str) -> dict[str, str]:
    """Display unit of each measurement type in `system`."""
    try:
        return dict(UNIT_SYSTEMS[UnitSystem(system)])
    except ValueError:
        raise ValueError(f"Invalid unit system: {system!r}. Use 'SI' or 'IP'") from None


def _unit_of(quantity: str, system: UnitSystem | str) -> str:
    units = units_for(system)
    if quantity not in units:
        raise ValueError(f"Unknown measurement type: {quantity}")
    return units[quantity]


def from_si(value: float, quantity: str, system: UnitSystem | str) -> float:
    """Convert an SI base value of `quantity` to the unit used by `system`."""
    return convert(value, _unit_of(quantity, UnitSystem.SI), _unit_of(quantity, system))


def to_si(value: float, quantity: str, system: UnitSystem | str) -> float:
    """Convert a value of `quantity` in `system` units to SI base units."""
    return convert(value, _unit_of(quantity, system), _unit_of(quantity, UnitSystem.SI))


def _auto_precision(value: float, unit: str) -> int:
    magnitude = abs(value)
    if unit in ("mm", "in"):
        if magnitude < 10:
            return 3
        return 2 if magnitude < 100 else 1
    if unit in ("MPa", "psi", "ksi"):
        return 2 if magnitude < 10 else 1
    return 2


def format_value(value: float, unit: str, precision: int | None = None) -> str:
    """Format `value` with its unit, choosing the precision from the magnitude if not given."""
    if value is None or math.isnan(value):
        return f"-- {unit}"
    if math.isinf(value):
        return f"{'∞' if value > 0 else '-∞'} {unit}"
    if precision is None:
        precision = _auto_precision(value, unit)
    return f"{value:.{precision}f} {unit}"
