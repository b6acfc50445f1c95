import matplotlib

matplotlib.use("Agg")

import pytest

from cylindy import (
    CompoundSystem,
    CylinderGeometry,
    ElasticCylinder,
    MaterialStrength,
    PressureLoad,
    ToleranceRepository,
)


@pytest.fixture
def thick_cylinder() -> CylinderGeometry:
    """ri = 25 mm, ro = 50 mm (diameter ratio 2)."""
    return CylinderGeometry(ri=25.0, ro=50.0)


@pytest.fixture
def chamber_load() -> PressureLoad:
    return PressureLoad(p_i=100.0)


@pytest.fixture
def steel() -> MaterialStrength:
    return MaterialStrength(Sy=800.0, Su=1000.0)


@pytest.fixture
def barrel() -> ElasticCylinder:
    return ElasticCylinder.from_gpa(ri=5.0, ro=10.0, E_gpa=200.0, nu=0.3, name="Barrel")


@pytest.fixture
def trunnion() -> ElasticCylinder:
    """Trunnion bore 0.1 mm under the barrel outer radius."""
    return ElasticCylinder.from_gpa(ri=9.9, ro=20.0, E_gpa=200.0, nu=0.3, name="Trunnion")


@pytest.fixture
def compound_system(barrel: ElasticCylinder, trunnion: ElasticCylinder) -> CompoundSystem:
    return CompoundSystem(barrel=barrel, trunnion=trunnion, interference=0.1)


@pytest.fixture
def tolerance_tables() -> ToleranceRepository:
    return ToleranceRepository.from_package()


@pytest.fixture
def fallback_tolerance_tables() -> ToleranceRepository:
    def broken_loader():
        raise OSError("tolerances.json not reachable")

    return ToleranceRepository(loader=broken_loader)
