"""Sizing result record and tabulation helpers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Iterable
from _collections_abc import Mapping

from .models.base import normalize_sequence

if TYPE_CHECKING:
    import pandas as pd

    from .field_card import FieldCard


@dataclass(slots=True)
class SizingResult:
    """Everything the engine computed for one crossing.

    Attributes:
        average_top_width: Mean top width (m).
        average_depth: Mean depth (m).
        cross_sectional_area: Trapezoidal channel area (m^2).
        end_opening_area: Required opening area before climate uplift (m^2).
        calculated_diameter: Area-based diameter before catalog rounding (mm).
        area_based: Area-based diameter rounded to the catalog (mm).
        table_based: California Method diameter, or None when the table calls
            for professional design.
        base_size: Size before transport and climate adjustments (mm).
        transport_index: Debris/sediment score, 0 when not assessed.
        transport_recommendation: Fixed advice when the index triggered an upsize.
        transport_tips: Mitigation measures attached to the recommendation.
        transport_bump_capped: The index asked for an upsize that the catalog could not supply.
        transport_adjusted_size: Size after the transport check (mm).
        climate_factor: Uplift factor applied to the opening area.
        climate_adjusted_size: Size after the climate check (mm).
        recommended_size: Final recommendation (mm).
        requires_professional_design: Licensed engineering review is required.
    """

    average_top_width: float
    average_depth: float
    cross_sectional_area: float
    end_opening_area: float
    calculated_diameter: int
    area_based: int
    table_based: int | None
    base_size: int
    transport_index: float = 0.0
    transport_recommendation: str | None = None
    transport_tips: tuple[str, ...] = ()
    transport_bump_capped: bool = False
    transport_adjusted_size: int = 0
    climate_factor: float = 1.0
    climate_adjusted_size: int = 0
    recommended_size: int = 0
    requires_professional_design: bool = False

    def describe(self) -> str:
        flag: str = ", professional design" if self.requires_professional_design else ""
        return f"SizingResult(recommended={self.recommended_size} mm{flag})"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    @property
    def climate_applied(self) -> bool:
        return self.climate_factor > 1.0

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {field.name: getattr(self, field.name) for field in fields(self)}
        data["transport_tips"] = list(self.transport_tips)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SizingResult":
        table_based: Any = data.get("table_based")
        recommendation: Any = data.get("transport_recommendation")
        return cls(
            average_top_width=float(data.get("average_top_width", 0.0)),
            average_depth=float(data.get("average_depth", 0.0)),
            cross_sectional_area=float(data.get("cross_sectional_area", 0.0)),
            end_opening_area=float(data.get("end_opening_area", 0.0)),
            calculated_diameter=int(data.get("calculated_diameter", 0)),
            area_based=int(data.get("area_based", 0)),
            table_based=int(table_based) if table_based is not None else None,
            base_size=int(data.get("base_size", 0)),
            transport_index=float(data.get("transport_index", 0.0)),
            transport_recommendation=str(recommendation) if recommendation is not None else None,
            transport_tips=tuple(str(tip) for tip in normalize_sequence(data.get("transport_tips"))),
            transport_bump_capped=bool(data.get("transport_bump_capped", False)),
            transport_adjusted_size=int(data.get("transport_adjusted_size", 0)),
            climate_factor=float(data.get("climate_factor", 1.0)),
            climate_adjusted_size=int(data.get("climate_adjusted_size", 0)),
            recommended_size=int(data.get("recommended_size", 0)),
            requires_professional_design=bool(data.get("requires_professional_design", False)),
        )


RESULT_COLUMNS: tuple[str, ...] = (
    "average_top_width",
    "average_depth",
    "cross_sectional_area",
    "end_opening_area",
    "area_based",
    "table_based",
    "base_size",
    "transport_index",
    "climate_factor",
    "recommended_size",
    "requires_professional_design",
)


def results_dataframe(cards: Iterable["FieldCard"]) -> "pd.DataFrame":
    """Return a pandas DataFrame with one row per sized field card, indexed by stream id."""
    import pandas as pd

    rows: list[dict[str, object]] = []
    for card in cards:
        row: dict[str, object] = {"stream_id": card.stream_id, "location": card.location}
        if card.result is not None:
            for column in RESULT_COLUMNS:
                row[column] = getattr(card.result, column)
        rows.append(row)
    df = pd.DataFrame(rows, columns=["stream_id", "location", *RESULT_COLUMNS])
    if not df.empty:
        df = df.set_index("stream_id").sort_index()
    return df
