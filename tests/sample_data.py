"""Shared sample data structures used across tests."""

from __future__ import annotations

import json

from culvert_sizer import (
    ClimateScenario,
    ClimateScenarioTag,
    DebrisRating,
    FieldCard,
    StreamMeasurement,
    TransportParameters,
)

CONFIG_MAPPING: dict[str, object] = {
    "site": {
        "stream_id": "CR-101",
        "location": "Mainline road, km 12.5",
        "gps": {"latitude": 49.2501, "longitude": -123.1002},
        "notes": "Undercut banks upstream of the inlet.",
        "photos": ["inlet.jpg", "outlet.jpg"],
    },
    "measurement": {
        "top_widths": [1.0, 1.0, 1.0],
        "bottom_width": 0.5,
        "depths": [0.2, 0.2, 0.2],
    },
    "transport": {
        "debris_rating": "high",
        "sediment_depth_cm": 10.0,
        "log_diameter_m": 0.5,
    },
    "climate": {"scenario": "long-term"},
}

CONFIG_JSON: str = json.dumps(CONFIG_MAPPING, indent=2)


def sample_measurement() -> StreamMeasurement:
    """Channel readings with a 1.0 m top width, 0.5 m bed and 0.2 m depth."""
    return StreamMeasurement.of([1.0, 1.0, 1.0], 0.5, [0.2, 0.2, 0.2])


def build_sample_card() -> FieldCard:
    """Construct a FieldCard that mirrors the fixture configuration."""

    return FieldCard(
        stream_id="CR-101",
        location="Mainline road, km 12.5",
        gps=(49.2501, -123.1002),
        notes="Undercut banks upstream of the inlet.",
        photos=["inlet.jpg", "outlet.jpg"],
        measurement=sample_measurement(),
        transport=TransportParameters(debris_rating=DebrisRating.HIGH, sediment_depth_cm=10.0, log_diameter_m=0.5),
        climate=ClimateScenario(tag=ClimateScenarioTag.LONG_TERM),
    )
