"""Climate projection uplift applied to the culvert opening area."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .catalog import STANDARD_CATALOG, StandardSizeCatalog
from .models import ClimateScenario
from .type_helpers import ClimateScenarioTag
from .units import diameter_mm_for_area

SCENARIO_FACTORS: dict[ClimateScenarioTag, float] = {
    ClimateScenarioTag.NONE: 1.0,
    ClimateScenarioTag.NEAR_TERM: 1.10,
    ClimateScenarioTag.LONG_TERM: 1.20,
}


@dataclass(slots=True)
class ClimateAdjustment:
    """Climate factor used and the resulting size."""

    factor: float = 1.0
    adjusted_area: float = 0.0
    adjusted_size: int = 0

    @property
    def applied(self) -> bool:
        return self.factor > 1.0


def resolve_climate_factor(scenario: ClimateScenario | None) -> float:
    """Return the uplift factor for a scenario; an explicit custom factor wins over the tag."""
    if scenario is None:
        return 1.0
    scenario.assert_valid(prefix="Climate: ")
    if scenario.custom_factor is not None:
        return scenario.custom_factor
    return SCENARIO_FACTORS.get(scenario.tag, 1.0)


def apply_climate(
    transport_adjusted_size: int,
    end_opening_area: float,
    scenario: ClimateScenario | None,
    catalog: StandardSizeCatalog = STANDARD_CATALOG,
) -> ClimateAdjustment:
    """
    Resize the opening for projected flows.

    The uplifted size never drops below `transport_adjusted_size`.
    """
    factor: float = resolve_climate_factor(scenario)
    if factor <= 1.0:
        return ClimateAdjustment(factor=1.0, adjusted_area=end_opening_area, adjusted_size=transport_adjusted_size)
    adjusted_area: float = end_opening_area * factor
    rounded: int = catalog.round_up(diameter_mm_for_area(adjusted_area))
    adjusted_size: int = max(rounded, transport_adjusted_size)
    logger.debug(
        "Climate factor {factor:.2f}: opening {area:.4f} m^2 -> {rounded} mm, adopted {size} mm",
        factor=factor,
        area=adjusted_area,
        rounded=rounded,
        size=adjusted_size,
    )
    return ClimateAdjustment(factor=factor, adjusted_area=adjusted_area, adjusted_size=adjusted_size)
