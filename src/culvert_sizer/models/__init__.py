"""
Input models for the culvert sizing engine.

These data classes describe what a field crew measures at a crossing: the
stream channel, the debris and sediment transport risk, and the climate
projection to design for.
"""

from __future__ import annotations

from .base import Validatable
from .stream_measurement import StreamMeasurement
from .transport_parameters import TransportParameters
from .climate_scenario import ClimateScenario, parse_scenario_tag

__all__: list[str] = [
    "Validatable",
    "StreamMeasurement",
    "TransportParameters",
    "ClimateScenario",
    "parse_scenario_tag",
]
