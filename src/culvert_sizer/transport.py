"""Water transport potential: debris and sediment risk scoring."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .catalog import STANDARD_CATALOG, StandardSizeCatalog
from .models import TransportParameters

DEBRIS_WEIGHT = 1.0
SEDIMENT_WEIGHT_PER_CM = 0.05
LOG_WEIGHT_PER_M = 5.0
TRANSPORT_INDEX_THRESHOLD = 4.0

TRANSPORT_RECOMMENDATION = (
    "High water transport potential: culvert upsized one standard size to pass debris and sediment."
)
TRANSPORT_TIPS: tuple[str, ...] = (
    "Bevel the inlet to improve flow and reduce debris snagging.",
    "Armour the outlet with a rock apron to prevent scour.",
    "Install a debris rack upstream of the inlet.",
    "Schedule regular inspection and clean-out after high flows.",
)


@dataclass(slots=True)
class TransportAdjustment:
    """Outcome of the transport check for one base size.

    `capped` is True when the index called for a larger culvert but the base
    size was already at or beyond the top of the catalog.
    """

    index: float = 0.0
    adjusted_size: int = 0
    recommendation: str | None = None
    tips: tuple[str, ...] = ()
    capped: bool = False

    @property
    def bumped(self) -> bool:
        return self.recommendation is not None and not self.capped


def transport_index(params: TransportParameters | None) -> float:
    """Composite debris/sediment score; 0 when transport was not assessed."""
    if params is None:
        return 0.0
    params.assert_valid(prefix="Transport: ")
    return (
        DEBRIS_WEIGHT * int(params.debris_rating)
        + SEDIMENT_WEIGHT_PER_CM * params.sediment_depth_cm
        + LOG_WEIGHT_PER_M * params.log_diameter_m
    )


def apply_transport(
    base_size: int,
    params: TransportParameters | None,
    catalog: StandardSizeCatalog = STANDARD_CATALOG,
) -> TransportAdjustment:
    """Bump `base_size` one catalog step when the transport index reaches the threshold."""
    index: float = transport_index(params)
    if index < TRANSPORT_INDEX_THRESHOLD:
        return TransportAdjustment(index=index, adjusted_size=base_size)

    next_size: int | None = catalog.next_above(base_size)
    if next_size is None:
        logger.warning(
            "Transport index {index:.2f} calls for a larger culvert but {size} mm is at the catalog limit",
            index=index,
            size=base_size,
        )
        return TransportAdjustment(
            index=index,
            adjusted_size=base_size,
            recommendation=TRANSPORT_RECOMMENDATION,
            tips=TRANSPORT_TIPS,
            capped=True,
        )
    logger.debug("Transport index {index:.2f}: {base} mm -> {size} mm", index=index, base=base_size, size=next_size)
    return TransportAdjustment(
        index=index,
        adjusted_size=next_size,
        recommendation=TRANSPORT_RECOMMENDATION,
        tips=TRANSPORT_TIPS,
    )
