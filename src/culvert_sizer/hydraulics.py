"""Area-based hydraulic sizing helpers.

The primary workflow turns channel measurements into a culvert diameter:

1. Average the top width and depth readings.
2. Treat the channel as a trapezoid to get its cross-sectional area.
3. Triple that area to get the culvert end-opening area.
4. Size a circular opening with the same area and round up to the catalog.

The remaining helpers (pipe area, Manning capacity, the two watershed methods and
the sizing assessment) are used by reports and by crews that cannot measure
the channel directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from .catalog import STANDARD_CATALOG, StandardSizeCatalog
from .classes_references import InvalidInput
from .models import StreamMeasurement
from .type_helpers import SizingAssessment
from .units import circle_area, diameter_mm_for_area, millimetres_to_metres

END_OPENING_MULTIPLIER = 3.0
CONCRETE_MANNING_N = 0.013
WATERSHED_RUNOFF_COEFFICIENT = 0.3
DEFAULT_RUNOFF_COEFFICIENT = 0.45
RATIONAL_METHOD_UNIT_FACTOR = 0.00278
DESIGN_FLOW_VELOCITY_M_S = 1.5


@dataclass(slots=True)
class HydraulicArea:
    """Intermediate values of the area-based method.

    Attributes:
        average_top_width: Mean of the top width readings (m).
        average_depth: Mean of the depth readings (m).
        cross_sectional_area: Trapezoidal channel area (m^2).
        end_opening_area: Required culvert opening area (m^2).
        calculated_diameter: Diameter matching the opening area, before catalog rounding (mm).
        area_based: `calculated_diameter` rounded up to the catalog (mm).
    """

    average_top_width: float
    average_depth: float
    cross_sectional_area: float
    end_opening_area: float
    calculated_diameter: int
    area_based: int


def compute_hydraulic_area(
    measurement: StreamMeasurement,
    catalog: StandardSizeCatalog = STANDARD_CATALOG,
) -> HydraulicArea:
    """Run the area-based method for a stream measurement."""
    measurement.assert_valid(prefix="Measurement: ")
    average_top_width: float = measurement.average_top_width
    average_depth: float = measurement.average_depth
    cross_sectional_area: float = ((average_top_width + measurement.bottom_width) / 2) * average_depth
    end_opening_area: float = cross_sectional_area * END_OPENING_MULTIPLIER
    calculated_diameter: int = diameter_mm_for_area(end_opening_area)
    area_based: int = catalog.round_up(calculated_diameter)
    logger.debug(
        "Area method: cross-section {cross:.4f} m^2, end opening {opening:.4f} m^2, "
        "diameter {diameter} mm -> {area_based} mm",
        cross=cross_sectional_area,
        opening=end_opening_area,
        diameter=calculated_diameter,
        area_based=area_based,
    )
    return HydraulicArea(
        average_top_width=average_top_width,
        average_depth=average_depth,
        cross_sectional_area=cross_sectional_area,
        end_opening_area=end_opening_area,
        calculated_diameter=calculated_diameter,
        area_based=area_based,
    )


def pipe_area(diameter_mm: float) -> float:
    """Return the open area in m^2 of a circular culvert."""
    _require_positive("Diameter", diameter_mm)
    return circle_area(millimetres_to_metres(diameter_mm))


def flow_capacity(diameter_mm: float, slope: float, manning_n: float = CONCRETE_MANNING_N) -> float:
    """
    Return the full-pipe flow capacity in m^3/s using Manning's equation.

    Args:
        diameter_mm: Culvert diameter in millimetres.
        slope: Barrel slope as a fraction (0.02 for 2%).
        manning_n: Roughness coefficient; defaults to concrete pipe.
    """
    _require_positive("Diameter", diameter_mm)
    _require_positive("Slope", slope)
    _require_positive("Manning's n", manning_n)
    radius: float = millimetres_to_metres(diameter_mm) / 2
    area: float = math.pi * radius**2
    hydraulic_radius: float = radius / 2
    return (1.0 / manning_n) * area * hydraulic_radius ** (2 / 3) * math.sqrt(slope)


def size_from_watershed(
    area_km2: float,
    precipitation_mm_hr: float,
    climate_factor: float = 1.0,
    catalog: StandardSizeCatalog = STANDARD_CATALOG,
) -> int:
    """Estimate a standard culvert size from watershed area when the channel cannot be measured."""
    _require_positive("Watershed area", area_km2)
    _require_positive("Precipitation intensity", precipitation_mm_hr)
    if not math.isfinite(climate_factor) or climate_factor < 1.0:
        raise InvalidInput([f"Climate factor must be 1.0 or greater (got {climate_factor!r})."])
    flow: float = area_km2 * precipitation_mm_hr * WATERSHED_RUNOFF_COEFFICIENT * climate_factor
    diameter: float = math.sqrt(flow * 1000) * 30
    size: int = catalog.round_up(diameter)
    logger.debug(
        "Watershed method: {area} km^2 at {intensity} mm/hr -> {diameter:.0f} mm -> {size} mm",
        area=area_km2,
        intensity=precipitation_mm_hr,
        diameter=diameter,
        size=size,
    )
    return size


@dataclass(slots=True)
class RationalMethodSizing:
    """Rational-method design flow and the culvert that carries it.

    Attributes:
        design_flow: Peak flow including the climate factor (m^3/s).
        culvert_area: Opening area that passes `design_flow` at the design velocity (m^2).
        calculated_diameter: Circle diameter matching `culvert_area` (mm).
        size: `calculated_diameter` rounded up to the catalog (mm).
    """

    design_flow: float
    culvert_area: float
    calculated_diameter: int
    size: int


def size_from_rational_method(
    area_km2: float,
    intensity_mm_hr: float,
    runoff_coefficient: float = DEFAULT_RUNOFF_COEFFICIENT,
    climate_factor: float = 1.0,
    velocity_m_s: float = DESIGN_FLOW_VELOCITY_M_S,
    catalog: StandardSizeCatalog = STANDARD_CATALOG,
) -> RationalMethodSizing:
    """
    Size a culvert from watershed data with the rational method (Q = C·I·A).

    Args:
        area_km2: Watershed area in square kilometres.
        intensity_mm_hr: Design rainfall intensity in mm/hr.
        runoff_coefficient: Runoff coefficient C, in (0, 1].
        climate_factor: Multiplier on the peak flow, 1.0 or greater.
        velocity_m_s: Flow velocity used to turn the flow into an opening area.

    Raises:
        InvalidInput: If any input is out of range.
    """
    _require_positive("Watershed area", area_km2)
    _require_positive("Rainfall intensity", intensity_mm_hr)
    _require_positive("Runoff coefficient", runoff_coefficient)
    _require_positive("Design velocity", velocity_m_s)
    errors: list[str] = []
    if runoff_coefficient > 1.0:
        errors.append(f"Runoff coefficient must be between 0 and 1 (got {runoff_coefficient!r}).")
    if not math.isfinite(climate_factor) or climate_factor < 1.0:
        errors.append(f"Climate factor must be 1.0 or greater (got {climate_factor!r}).")
    if errors:
        raise InvalidInput(errors)

    design_flow: float = (
        runoff_coefficient * intensity_mm_hr * area_km2 * RATIONAL_METHOD_UNIT_FACTOR * climate_factor
    )
    culvert_area: float = design_flow / velocity_m_s
    calculated_diameter: int = diameter_mm_for_area(culvert_area)
    size: int = catalog.round_up(calculated_diameter)
    logger.debug(
        "Rational method: Q {flow:.3f} m^3/s, opening {area:.4f} m^2 -> {diameter} mm -> {size} mm",
        flow=design_flow,
        area=culvert_area,
        diameter=calculated_diameter,
        size=size,
    )
    return RationalMethodSizing(
        design_flow=design_flow,
        culvert_area=culvert_area,
        calculated_diameter=calculated_diameter,
        size=size,
    )


def assess_culvert_sizing(installed_mm: float, required_mm: float) -> SizingAssessment:
    """Compare an installed culvert with the required diameter."""
    _require_positive("Installed diameter", installed_mm)
    _require_positive("Required diameter", required_mm)
    ratio: float = installed_mm / required_mm
    if ratio < 0.9:
        return SizingAssessment.UNDERSIZED
    if ratio > 1.5:
        return SizingAssessment.OVERSIZED
    return SizingAssessment.APPROPRIATE


def describe_culvert_size(diameter_mm: int) -> str:
    """Human-readable size class for a culvert diameter."""
    if diameter_mm < 400:
        return f"Small culvert ({diameter_mm}mm)"
    if diameter_mm < 800:
        return f"Medium culvert ({diameter_mm}mm)"
    if diameter_mm < 1200:
        return f"Large culvert ({diameter_mm}mm)"
    return f"Very large culvert ({diameter_mm}mm)"


def _require_positive(label: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        raise InvalidInput([f"{label} must be a positive number (got {value!r})."])


__all__: list[str] = [
    "CONCRETE_MANNING_N",
    "END_OPENING_MULTIPLIER",
    "HydraulicArea",
    "RationalMethodSizing",
    "assess_culvert_sizing",
    "compute_hydraulic_area",
    "describe_culvert_size",
    "flow_capacity",
    "pipe_area",
    "size_from_rational_method",
    "size_from_watershed",
]
