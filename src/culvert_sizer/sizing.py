"""Size resolution: combine the area method, the California table and the adjustments."""

from __future__ import annotations

from loguru import logger

from .california import Sized, TableResult, lookup_table
from .catalog import PROFESSIONAL_ENGINEERING_THRESHOLD_MM, STANDARD_CATALOG, StandardSizeCatalog
from .climate import ClimateAdjustment, apply_climate
from .hydraulics import HydraulicArea, compute_hydraulic_area
from .models import ClimateScenario, StreamMeasurement, TransportParameters
from .results import SizingResult
from .transport import TransportAdjustment, apply_transport


def size_culvert(
    measurement: StreamMeasurement,
    transport: TransportParameters | None = None,
    climate: ClimateScenario | None = None,
    *,
    catalog: StandardSizeCatalog = STANDARD_CATALOG,
    threshold_mm: int = PROFESSIONAL_ENGINEERING_THRESHOLD_MM,
) -> SizingResult:
    """
    Recommend a culvert diameter for a measured stream.

    The area method and the California Method table are evaluated independently
    and the larger answer becomes the base size. When the table cannot size the
    stream, the unrounded area-based diameter is carried as the base so reports
    keep a numeric signal. Transport and climate adjustments then only ever
    increase the size.

    Args:
        measurement: Channel readings for the crossing.
        transport: Optional debris/sediment observations.
        climate: Optional climate projection scenario.
        catalog: Standard diameters to round to.
        threshold_mm: Diameter at or above which professional design is required.

    Returns:
        The complete `SizingResult`.

    Raises:
        InvalidInput: If any input fails validation. Nothing is computed in that case.
    """
    measurement.assert_valid(prefix="Measurement: ")
    if transport is not None:
        transport.assert_valid(prefix="Transport: ")
    if climate is not None:
        climate.assert_valid(prefix="Climate: ")

    area: HydraulicArea = compute_hydraulic_area(measurement, catalog=catalog)
    table: TableResult = lookup_table(area.average_top_width, area.average_depth)

    requires_professional_design: bool = not isinstance(table, Sized)
    table_based: int | None = table.diameter if isinstance(table, Sized) else None
    if table_based is None:
        base_size: int = area.calculated_diameter
    else:
        base_size = max(area.area_based, table_based)

    transport_adjustment: TransportAdjustment = apply_transport(base_size, transport, catalog=catalog)
    climate_adjustment: ClimateAdjustment = apply_climate(
        transport_adjustment.adjusted_size,
        area.end_opening_area,
        climate,
        catalog=catalog,
    )
    recommended_size: int = climate_adjustment.adjusted_size
    if recommended_size >= threshold_mm or transport_adjustment.capped:
        requires_professional_design = True

    result = SizingResult(
        average_top_width=area.average_top_width,
        average_depth=area.average_depth,
        cross_sectional_area=area.cross_sectional_area,
        end_opening_area=area.end_opening_area,
        calculated_diameter=area.calculated_diameter,
        area_based=area.area_based,
        table_based=table_based,
        base_size=base_size,
        transport_index=transport_adjustment.index,
        transport_recommendation=transport_adjustment.recommendation,
        transport_tips=transport_adjustment.tips,
        transport_bump_capped=transport_adjustment.capped,
        transport_adjusted_size=transport_adjustment.adjusted_size,
        climate_factor=climate_adjustment.factor,
        climate_adjusted_size=climate_adjustment.adjusted_size,
        recommended_size=recommended_size,
        requires_professional_design=requires_professional_design,
    )
    logger.info(
        "Sized culvert: base {base} mm, recommended {size} mm (professional design: {flag})",
        base=base_size,
        size=recommended_size,
        flag=requires_professional_design,
    )
    return result
