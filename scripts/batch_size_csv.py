"""Batch culvert sizing for a CSV list of surveyed crossings.

Expected columns (one row per crossing):

- ``stream_id``, ``location``
- ``top_widths`` and ``depths`` as semicolon-separated readings in metres
- ``bottom_width`` in metres
- optional ``debris_rating`` (low/medium/high), ``sediment_depth_cm``, ``log_diameter_m``
- optional ``climate`` (none/near-term/long-term/2050s/2080s) or ``climate_factor``
"""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from loguru import logger
from pandas import DataFrame

from culvert_sizer import (
    ClimateScenario,
    DebrisRating,
    FieldCard,
    FieldCardStore,
    StreamMeasurement,
    TransportParameters,
    results_dataframe,
)
from culvert_sizer.models import parse_scenario_tag


@dataclass(slots=True)
class BatchOutcome:
    cards: list[FieldCard]
    failures: list[tuple[str, str]]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Size every crossing listed in a CSV file.")
    parser.add_argument("--input", type=Path, required=True, help="CSV source file.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("culvert_sizing_results.csv"),
        help="CSV results output.",
    )
    parser.add_argument("--store", type=Path, help="Optionally save every sized card to this field card store.")
    return parser.parse_args()


def _readings(value: Any) -> list[float]:
    if _is_blank(value):
        return []
    return [float(part) for part in str(value).split(";") if part.strip()]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value)) or str(value).strip() == ""


def card_from_row(row: pd.Series) -> FieldCard:
    transport: TransportParameters | None = None
    if not _is_blank(row.get("debris_rating")):
        transport = TransportParameters(
            debris_rating=DebrisRating[str(row["debris_rating"]).strip().upper()],
            sediment_depth_cm=0.0 if _is_blank(row.get("sediment_depth_cm")) else float(row["sediment_depth_cm"]),
            log_diameter_m=0.0 if _is_blank(row.get("log_diameter_m")) else float(row["log_diameter_m"]),
        )
    climate: ClimateScenario | None = None
    if not _is_blank(row.get("climate_factor")):
        climate = ClimateScenario.custom(float(row["climate_factor"]))
    elif not _is_blank(row.get("climate")):
        climate = ClimateScenario(tag=parse_scenario_tag(row["climate"]))
    return FieldCard(
        stream_id=str(row["stream_id"]).strip(),
        location="" if _is_blank(row.get("location")) else str(row["location"]),
        measurement=StreamMeasurement.of(
            _readings(row.get("top_widths")),
            float(row["bottom_width"]),
            _readings(row.get("depths")),
        ),
        transport=transport,
        climate=climate,
    )


def size_rows(frame: DataFrame) -> BatchOutcome:
    outcome = BatchOutcome(cards=[], failures=[])
    for _, row in frame.iterrows():
        stream_id: str = str(row.get("stream_id", "<unnamed>"))
        try:
            card: FieldCard = card_from_row(row)
            card.calculate()
        except (KeyError, ValueError) as exc:
            logger.warning("Skipping {stream}: {error}", stream=stream_id, error=exc)
            outcome.failures.append((stream_id, str(exc)))
            continue
        outcome.cards.append(card)
    return outcome


def main() -> None:
    args: argparse.Namespace = parse_args()
    frame: DataFrame = pd.read_csv(args.input, dtype={"top_widths": str, "depths": str})
    outcome: BatchOutcome = size_rows(frame)
    results: DataFrame = results_dataframe(outcome.cards)
    results.to_csv(args.output)
    print(f"Sized {len(outcome.cards)} crossings -> {args.output}")
    if args.store is not None:
        store = FieldCardStore(args.store)
        for card in outcome.cards:
            store.save(card)
        print(f"Saved {len(outcome.cards)} field cards to {store.path}")
    for stream_id, error in outcome.failures:
        print(f"  {stream_id}: {error}")


if __name__ == "__main__":
    main()
