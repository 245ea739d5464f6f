"""Simple CLI entry point for culvert-sizer."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Sequence, TypeVar

from .config import load_field_card_from_json
from .field_card import FieldCard
from .models import ClimateScenario, StreamMeasurement, TransportParameters, parse_scenario_tag
from .results import SizingResult
from .storage import FieldCardStore
from .type_helpers import DebrisRating
from .writer import ReportWriter

T = TypeVar("T")


def main(argv: Sequence[str] | None = None) -> int:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Size culverts from field stream measurements."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    size_parser: argparse.ArgumentParser = subparsers.add_parser(
        name="size",
        help="Size a crossing described by a JSON field card configuration.",
    )
    size_parser.add_argument("--config", type=Path, required=True, help="Path to the JSON configuration file.")
    _add_output_arguments(size_parser)

    measure_parser: argparse.ArgumentParser = subparsers.add_parser(
        name="measure",
        help="Size a crossing from measurements given on the command line.",
    )
    measure_parser.add_argument("--stream-id", default="CLI", help="Stream/culvert identifier.")
    measure_parser.add_argument("--location", default="", help="Free-form site location.")
    measure_parser.add_argument(
        "--top-width", type=float, action="append", required=True, help="Top width reading (m). Repeat per reading."
    )
    measure_parser.add_argument("--bottom-width", type=float, required=True, help="Bottom width (m).")
    measure_parser.add_argument(
        "--depth", type=float, action="append", required=True, help="Depth reading (m). Repeat per reading."
    )
    measure_parser.add_argument(
        "--debris",
        choices=[rating.name.lower() for rating in DebrisRating],
        help="Debris rating. Enables the transport assessment.",
    )
    measure_parser.add_argument("--sediment-cm", type=float, default=0.0, help="Sediment wedge depth (cm).")
    measure_parser.add_argument("--log-diameter", type=float, default=0.0, help="Largest mobile log diameter (m).")
    climate_group = measure_parser.add_mutually_exclusive_group()
    climate_group.add_argument("--climate", help="Climate scenario: none, near-term, long-term (or 2050s/2080s).")
    climate_group.add_argument("--climate-factor", type=float, help="Custom climate uplift factor (> 1.0).")
    _add_output_arguments(measure_parser)

    history_parser: argparse.ArgumentParser = subparsers.add_parser(
        name="history",
        help="List field cards saved in the store.",
    )
    history_parser.add_argument("--store", type=Path, help="Field card store (JSON). Defaults to the configured store.")

    subparsers.add_parser(name="demo", help="Size a sample stream and print the report.")

    args: argparse.Namespace = parser.parse_args(list(argv) if argv is not None else None)
    if args.command == "size":
        card: FieldCard = _guard(lambda: load_field_card_from_json(args.config))
        _run_size(card=card, args=args)
        return 0
    if args.command == "measure":
        card = _guard(lambda: _card_from_arguments(args))
        _run_size(card=card, args=args)
        return 0
    if args.command == "history":
        _run_history(store_path=args.store)
        return 0
    if args.command == "demo":
        _run_demo()
        return 0
    parser.error(message=f"Unhandled command {args.command}")
    return 1


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--save", action="store_true", help="Save the sized field card to the store.")
    parser.add_argument("--store", type=Path, help="Field card store (JSON). Defaults to the configured store.")
    parser.add_argument("--report", type=Path, help="Write a plain-text report to this path.")
    parser.add_argument("--overwrite", action="store_true", help="Replace the report if it already exists.")


def _card_from_arguments(args: argparse.Namespace) -> FieldCard:
    transport: TransportParameters | None = None
    if args.debris is not None:
        transport = TransportParameters(
            debris_rating=DebrisRating[args.debris.upper()],
            sediment_depth_cm=args.sediment_cm,
            log_diameter_m=args.log_diameter,
        )
    climate: ClimateScenario | None = None
    if args.climate_factor is not None:
        climate = ClimateScenario.custom(args.climate_factor)
    elif args.climate is not None:
        climate = ClimateScenario(tag=parse_scenario_tag(args.climate))
    return FieldCard(
        stream_id=args.stream_id,
        location=args.location,
        measurement=StreamMeasurement.of(args.top_width, args.bottom_width, args.depth),
        transport=transport,
        climate=climate,
    )


def _run_size(card: FieldCard, args: argparse.Namespace) -> None:
    result: SizingResult = _guard(card.calculate)
    print(_summary(card, result))
    if args.report is not None:
        path: Path = ReportWriter(card).write(args.report, overwrite=args.overwrite)
        print(f"Wrote report to {path}")
    if args.save:
        store = FieldCardStore(args.store)
        card_id: str = store.save(card)
        print(f"Saved field card {card_id} to {store.path}")


def _run_history(store_path: Path | None) -> None:
    store = FieldCardStore(store_path)
    frame = _guard(store.dataframe)
    if frame.empty:
        print(f"No field cards saved in {store.path}")
        return
    print(frame.to_string())


def _run_demo() -> None:
    card = FieldCard(
        stream_id="DEMO-1",
        location="Demo forest road, km 4.2",
        measurement=StreamMeasurement.of([1.0, 1.1, 0.9], 0.5, [0.2, 0.22, 0.18]),
        transport=TransportParameters(debris_rating=DebrisRating.MEDIUM, sediment_depth_cm=15.0, log_diameter_m=0.1),
        climate=ClimateScenario(tag=parse_scenario_tag("2050s")),
        notes="Automatically generated demo field card.",
    )
    card.calculate()
    print(ReportWriter(card).render(), end="")


def _summary(card: FieldCard, result: SizingResult) -> str:
    summary: str = f"{card.stream_id}: recommended culvert {result.recommended_size} mm"
    if result.requires_professional_design:
        summary += " (professional design required)"
    return summary


def _guard(action: Callable[[], T]) -> T:
    """Run `action`, turning InvalidInput and other ValueErrors into a clean exit."""
    try:
        return action()
    except ValueError as exc:
        raise SystemExit(f"Invalid input: {exc}") from exc
