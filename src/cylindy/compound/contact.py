"""
Contact pressure of an interference fit.

For two concentric cylinders with radial interference δ:

    p_c = δ / (C_b + C_t)

with the plane-strain compliance of each cylinder

    C = (ro² + ri²) / (E (ro² - ri²)) · (1 - ν²)
"""

from __future__ import annotations

from .geometry import ElasticCylinder, check_interference


def compliance(cylinder: ElasticCylinder) -> float:
    """Plane-strain compliance factor (mm/MPa per unit radius change)."""
    ri2 = cylinder.ri * cylinder.ri
    ro2 = cylinder.ro * cylinder.ro
    return (ro2 + ri2) / (cylinder.E * (ro2 - ri2)) * (1.0 - cylinder.nu * cylinder.nu)


def contact_pressure(barrel: ElasticCylinder, trunnion: ElasticCylinder, interference: float) -> float:
    """
    Contact pressure (MPa) between barrel and trunnion.

    Args:
        barrel: Inner cylinder
        trunnion: Outer cylinder, trunnion.ri == barrel.ro - interference
        interference: Radial interference δ (mm), >= 0

    Raises:
        InvalidGeometry: negative interference
        IncompatibleGeometry: trunnion bore does not match barrel.ro - δ
    """
    check_interference(barrel, trunnion, interference)

    if interference == 0:
        return 0.0

    return interference / (compliance(barrel) + compliance(trunnion))
