"Plain-text report rendering for sized field cards."

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .field_card import FieldCard
from .hydraulics import describe_culvert_size
from .results import SizingResult
from .type_helpers import ClimateScenarioTag

CLIMATE_LABELS: dict[ClimateScenarioTag, str] = {
    ClimateScenarioTag.NONE: "None",
    ClimateScenarioTag.NEAR_TERM: "Near-term / 2050s (+10%)",
    ClimateScenarioTag.LONG_TERM: "Long-term / 2080s (+20%)",
    ClimateScenarioTag.CUSTOM: "Custom",
}
TRANSPORT_GUIDELINES: tuple[str, ...] = (
    "Transport assessments are not simple averages of parameters.",
    "One critical risk factor dominates the overall assessment.",
    "A single high-instability feature can mobilize major sediment.",
    "Always err on the side of the highest rating.",
)
PROFESSIONAL_DESIGN_NOTE = "NOTE: Professional engineering design is required for this installation."


class ReportWriter:
    """Writes a culvert sizing report (.txt) for one field card."""

    def __init__(self, card: FieldCard) -> None:
        self.card: FieldCard = card

    def write(self, output_path: Path, *, overwrite: bool = True) -> Path:
        """Render the report and write it to disk."""
        output_path = output_path.with_suffix(".txt")
        if self.card.result is None:
            raise ValueError(f"Field card '{self.card.stream_id}' has not been sized yet.")
        if output_path.exists() and not overwrite:
            raise FileExistsError(f"{output_path} already exists. Set overwrite=True to replace it.")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as handle:
            handle.write(self.render())
        logger.info("Wrote sizing report for {stream} to {path}", stream=self.card.stream_id, path=output_path)
        return output_path

    def render(self) -> str:
        """Return the report text without touching the filesystem."""
        if self.card.result is None:
            raise ValueError(f"Field card '{self.card.stream_id}' has not been sized yet.")
        lines: list[str] = []
        self._collect(lines, self.card.result)
        return "\n".join(lines) + "\n"

    def _collect(self, lines: list[str], result: SizingResult) -> None:
        card: FieldCard = self.card
        lines.append("Culvert Sizing Results")
        lines.append("")
        lines.append(f"Stream/Culvert ID: {card.stream_id}")
        lines.append(f"Location: {card.location or 'Not specified'}")
        if card.gps is not None:
            lines.append(f"GPS: {card.gps[0]:.5f}, {card.gps[1]:.5f}")
        else:
            lines.append("GPS: Not captured")
        self._section(lines, "STREAM MEASUREMENTS")
        lines.append(f"- Average Top Width: {result.average_top_width:.2f} m")
        lines.append(f"- Bottom Width: {card.measurement.bottom_width:.2f} m")
        lines.append(f"- Average Depth: {result.average_depth:.2f} m")
        lines.append(f"- Cross-sectional Area: {result.cross_sectional_area:.2f} m²")
        lines.append(f"- End Opening Area: {result.end_opening_area:.2f} m²")
        self._write_transport(lines, result)
        self._write_climate(lines, result)
        self._section(lines, "RESULTS")
        lines.append(f"- Area-based Size: {result.area_based} mm")
        table: str = f"{result.table_based} mm" if result.table_based is not None else "Professional design (Q100)"
        lines.append(f"- California Method Size: {table}")
        lines.append(f"- Base Size: {result.base_size} mm")
        lines.append(
            f"- Recommended Culvert Size: {result.recommended_size} mm ({result.recommended_size / 1000:.2f} m)"
        )
        lines.append(f"- {describe_culvert_size(result.recommended_size)}")
        if result.requires_professional_design:
            lines.append("")
            lines.append(PROFESSIONAL_DESIGN_NOTE)
        if card.notes:
            self._section(lines, "NOTES")
            lines.append(card.notes)
        if card.photos:
            self._section(lines, "PHOTOS")
            lines.extend(f"- {photo}" for photo in card.photos)

    def _write_transport(self, lines: list[str], result: SizingResult) -> None:
        transport = self.card.transport
        if transport is None:
            return
        self._section(lines, "TRANSPORTABILITY ASSESSMENT")
        lines.append(f"- Debris Rating: {transport.debris_rating.name.title()}")
        lines.append(f"- Sediment Depth: {transport.sediment_depth_cm:g} cm")
        lines.append(f"- Max Log Diameter: {transport.log_diameter_m:g} m")
        lines.append(f"- Transport Index: {result.transport_index:.2f}")
        if result.transport_recommendation:
            lines.append(f"- {result.transport_recommendation}")
            lines.extend(f"  * {tip}" for tip in result.transport_tips)
        if result.transport_bump_capped:
            lines.append("- No larger standard size is available; upsizing requires professional design.")
        lines.extend(f"  ! {guideline}" for guideline in TRANSPORT_GUIDELINES)

    def _write_climate(self, lines: list[str], result: SizingResult) -> None:
        climate = self.card.climate
        if climate is None or not result.climate_applied:
            return
        self._section(lines, "CLIMATE PROJECTION")
        lines.append(f"- Scenario: {CLIMATE_LABELS.get(climate.tag, climate.tag.value)}")
        lines.append(f"- Factor: {result.climate_factor:.2f} (+{(result.climate_factor - 1) * 100:.0f}%)")
        lines.append(f"- Climate-adjusted Size: {result.climate_adjusted_size} mm")

    @staticmethod
    def _section(lines: list[str], title: str) -> None:
        lines.append("")
        lines.append(f"{title}:")
