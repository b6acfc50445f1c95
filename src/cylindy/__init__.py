"""
Cylindy - Thick-Walled Cylinder Stress Analysis Package

Calculate stresses and safety margins of pressurized gun barrels and
shrink-fitted barrel/trunnion assemblies using Lamé elasticity theory.
Lengths are in mm and pressures/stresses in MPa.

Example usage (Single cylinder):
    from cylindy import CylinderGeometry, PressureLoad, MaterialStrength, analyze_cylinder

    geometry = CylinderGeometry(ri=25.0, ro=50.0)
    load = PressureLoad(p_i=100.0)
    material = MaterialStrength(Sy=800.0, Su=1000.0)

    result = analyze_cylinder(geometry, load, material)
    print(f"SF_y: {result.safety_factors.SF_y:.2f}")
    print(f"Burst pressure: {result.burst_pressure:.1f} MPa")

    # Design check against a target safety factor
    check = result.check(target_safety_factor=3.0)
    if check.passed:
        print(f"OK: {check.governing_utilization:.1%}")

    # Plot stresses through the wall
    result.plot()

Example usage (Barrel + trunnion interference fit):
    from cylindy import CompoundSystem, ElasticCylinder, MaterialStrength

    barrel = ElasticCylinder.from_gpa(ri=5.0, ro=10.0, E_gpa=200.0, nu=0.3, name="Barrel")
    trunnion = ElasticCylinder.from_gpa(ri=9.9, ro=20.0, E_gpa=200.0, nu=0.3, name="Trunnion")
    system = CompoundSystem(barrel=barrel, trunnion=trunnion, interference=0.1)

    result = system.analyze(operating_pressure=400.0, material=MaterialStrength(Sy=1000.0, Su=1200.0))
    print(f"Contact pressure: {result.contact_pressure:.1f} MPa")
    print(f"Governing: {result.governing_location.location.label}")

Example usage (Worst-case tolerances):
    from cylindy import MaterialStrength, custom_tolerances, perform_worst_case_analysis

    result = perform_worst_case_analysis(
        ri=5.0,
        ro=10.0,
        nominal_pressure=400.0,
        material=MaterialStrength(Sy=1000.0, Su=1200.0),
        tolerances=custom_tolerances(bore_plus=10, bore_minus=5, shaft_plus=8, shaft_minus=12),
        pressure_factor=0.05,
    )
    print(f"Safety margin: {result.summary.safety_margin:.3f}")
"""

from .cylinder import (
    CylinderGeometry,
    PressureLoad,
    MaterialStrength,
    LameCoefficients,
    StressState,
    lame_coefficients,
    stresses,
    von_mises,
    von_mises_field,
    SafetyFactors,
    safety_factors,
    BurstSearchConfig,
    BurstSolution,
    solve_burst_pressure,
    burst_pressure_estimate,
    StressField,
    generate_stress_field,
    LocationStress,
    CylinderResult,
    analyze_cylinder,
    analyze_circle,
)

from .compound import (
    ElasticCylinder,
    CompoundSystem,
    Region,
    Location,
    CompoundResult,
    CompoundStressField,
    compliance,
    contact_pressure,
    validate_geometry,
    analyze_compound_cylinder,
    generate_compound_stress_field,
)

from .tolerance import (
    ToleranceBand,
    ToleranceSpec,
    custom_tolerances,
    calculate_worst_case_dimensions,
    apply_pressure_tolerance,
    WorstCaseResult,
    perform_worst_case_analysis,
    validate_tolerance_params,
)

from .data import (
    ToleranceRepository,
    MaterialRepository,
    CartridgeRepository,
    interpolate_tolerance,
    validate_custom_material,
)

from .checks import DesignCheckDetail, DesignCheckResult, check_design
from .plotting import plot_stress_field, plot_compound_stress_field
from .units import UnitSystem, convert, format_value, from_si, to_si, units_for
from .errors import (
    CylinderError,
    InvalidGeometry,
    InvalidLoad,
    InvalidMaterial,
    InvalidStress,
    IncompatibleGeometry,
    NegativeWallThickness,
    BracketingFailure,
    ConvergenceFailure,
    NumericalError,
    AnalysisFailure,
    CylinderAnalysisFailure,
    CompoundAnalysisFailure,
    WorstCaseAnalysisFailure,
)

__all__ = [
    # Single cylinder inputs
    "CylinderGeometry",
    "PressureLoad",
    "MaterialStrength",
    # Lamé solution and criteria
    "LameCoefficients",
    "StressState",
    "lame_coefficients",
    "stresses",
    "von_mises",
    "von_mises_field",
    "SafetyFactors",
    "safety_factors",
    # Burst pressure
    "BurstSearchConfig",
    "BurstSolution",
    "solve_burst_pressure",
    "burst_pressure_estimate",
    # Single cylinder analysis
    "StressField",
    "generate_stress_field",
    "LocationStress",
    "CylinderResult",
    "analyze_cylinder",
    "analyze_circle",
    # Compound cylinder
    "ElasticCylinder",
    "CompoundSystem",
    "Region",
    "Location",
    "CompoundResult",
    "CompoundStressField",
    "compliance",
    "contact_pressure",
    "validate_geometry",
    "analyze_compound_cylinder",
    "generate_compound_stress_field",
    # Tolerances
    "ToleranceBand",
    "ToleranceSpec",
    "custom_tolerances",
    "calculate_worst_case_dimensions",
    "apply_pressure_tolerance",
    "WorstCaseResult",
    "perform_worst_case_analysis",
    "validate_tolerance_params",
    # Reference data
    "ToleranceRepository",
    "MaterialRepository",
    "CartridgeRepository",
    "interpolate_tolerance",
    "validate_custom_material",
    # Checks
    "DesignCheckDetail",
    "DesignCheckResult",
    "check_design",
    # Plotting
    "plot_stress_field",
    "plot_compound_stress_field",
    # Units
    "UnitSystem",
    "convert",
    "format_value",
    "from_si",
    "to_si",
    "units_for",
    # Errors
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

__version__ = "0.1.0"
