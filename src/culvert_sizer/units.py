"""Unit conversion and circular-section helpers shared across the sizing domain."""

import math

M_TO_MM = 1000.0
MM_TO_M: float = 1 / M_TO_MM


def metres_to_millimetres(value: float) -> float:
    """Convert metres into millimetres."""
    return value * M_TO_MM


def millimetres_to_metres(value: float) -> float:
    """Convert millimetres into metres."""
    return value * MM_TO_M


def circle_area(diameter_m: float) -> float:
    """Area in m^2 of a circle with the given diameter in metres."""
    radius: float = diameter_m / 2
    return math.pi * radius**2


def diameter_mm_for_area(area_m2: float) -> int:
    """Smallest whole-millimetre circle diameter whose area covers `area_m2`."""
    required_radius: float = math.sqrt(area_m2 / math.pi)
    return math.ceil(metres_to_millimetres(required_radius * 2))
