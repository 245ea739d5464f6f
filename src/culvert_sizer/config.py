"""Helpers for loading `FieldCard` instances from configuration files."""

from __future__ import annotations

from collections.abc import Mapping, Sequence as ABCSequence
from pathlib import Path
from typing import Any, cast

import json

from .field_card import FieldCard
from .models import ClimateScenario, StreamMeasurement, TransportParameters, parse_scenario_tag
from .type_helpers import DebrisRating

JSONMapping = Mapping[str, Any]


def load_field_card_from_json(path: Path) -> FieldCard:
    """Read a JSON file from disk and create a `FieldCard`."""

    raw_data: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw_data, Mapping):
        raise ValueError("Top-level JSON document must be an object.")
    data: JSONMapping = cast(JSONMapping, raw_data)
    return field_card_from_mapping(data)


def field_card_from_mapping(config: JSONMapping) -> FieldCard:
    """Build a FieldCard from the parsed configuration mapping."""
    site: JSONMapping = _optional_section(config, "site") or {}

    card = FieldCard()
    card.stream_id = _require_str(entry=site, key="stream_id", context="site")
    card.location = str(site.get("location", ""))
    card.notes = str(site.get("notes", ""))
    card.gps = _parse_gps(site.get("gps"))
    card.photos = [str(photo) for photo in _parse_list(site.get("photos", []), context="Site 'photos'")]

    measurement_section: JSONMapping | None = _optional_section(config, "measurement")
    if measurement_section is None:
        raise ValueError("Missing required 'measurement' section.")
    card.measurement = _parse_measurement(measurement_section)

    transport_section: JSONMapping | None = _optional_section(config, "transport")
    if transport_section is not None:
        card.transport = _parse_transport(transport_section)

    climate_section: JSONMapping | None = _optional_section(config, "climate")
    if climate_section is not None:
        card.climate = _parse_climate(climate_section)
    return card


def _parse_measurement(entry: JSONMapping) -> StreamMeasurement:
    """
    Convert the measurement section into a StreamMeasurement.

    Value checks (positive readings, non-empty lists) are left to the model so
    that they surface as `InvalidInput`.
    """
    if "bottom_width" not in entry:
        raise ValueError("Missing required field 'bottom_width' in measurement")
    return StreamMeasurement.of(
        top_widths=_parse_floats(entry.get("top_widths", []), context="Measurement 'top_widths'"),
        bottom_width=_parse_float(entry["bottom_width"], context="Measurement 'bottom_width'"),
        depths=_parse_floats(entry.get("depths", []), context="Measurement 'depths'"),
    )


def _parse_transport(entry: JSONMapping) -> TransportParameters:
    """
    Convert the transport section into TransportParameters.

    The debris rating accepts the enum names in any case ("high", "HIGH").
    """
    return TransportParameters(
        debris_rating=_parse_debris_rating(entry.get("debris_rating", DebrisRating.LOW.name)),
        sediment_depth_cm=_parse_float(entry.get("sediment_depth_cm", 0.0), context="Transport 'sediment_depth_cm'"),
        log_diameter_m=_parse_float(entry.get("log_diameter_m", 0.0), context="Transport 'log_diameter_m'"),
    )


def _parse_climate(entry: JSONMapping) -> ClimateScenario:
    factor_raw: Any = entry.get("custom_factor")
    factor: float | None = None
    if factor_raw is not None:
        factor = _parse_float(factor_raw, context="Climate 'custom_factor'")
    return ClimateScenario(tag=parse_scenario_tag(entry.get("scenario")), custom_factor=factor)


def _parse_debris_rating(value: Any) -> DebrisRating:
    """
    Convert a debris rating name from config into a DebrisRating enum member.

    Normalizes the input string to uppercase to match enum member names.
    """
    if isinstance(value, DebrisRating):
        return value
    normalized: str = str(value).strip().upper()
    try:
        return DebrisRating[normalized]
    except KeyError as exc:
        raise ValueError(f"Unsupported debris rating '{value}'") from exc


def _parse_gps(value: Any) -> tuple[float, float] | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        mapping: JSONMapping = cast(JSONMapping, value)
        if "latitude" not in mapping or "longitude" not in mapping:
            raise ValueError("Site 'gps' must include latitude and longitude")
        return (
            _parse_float(mapping["latitude"], context="GPS latitude"),
            _parse_float(mapping["longitude"], context="GPS longitude"),
        )
    values: list[float] = _parse_floats(value, context="Site 'gps'")
    if len(values) != 2:
        raise ValueError("Site 'gps' must be [latitude, longitude]")
    return values[0], values[1]


def _optional_section(config: JSONMapping, key: str) -> JSONMapping | None:
    """Return a nested object, None when absent, or raise if it is not an object."""
    raw: Any = config.get(key)
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ValueError(f"'{key}' section must be an object.")
    return cast(JSONMapping, raw)


def _parse_list(value: Any, context: str) -> list[Any]:
    if not isinstance(value, ABCSequence) or isinstance(value, (str, bytes)):
        raise ValueError(f"{context} must be a list")
    return list(cast(ABCSequence[Any], value))


def _parse_floats(value: Any, context: str) -> list[float]:
    return [_parse_float(item, context=context) for item in _parse_list(value, context=context)]


def _parse_float(value: Any, context: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{context} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{context} must be a number, got {value!r}") from exc


def _require_str(entry: JSONMapping, key: str, context: str) -> str:
    """Fetch a mandatory string field or raise a ValueError with context."""
    if key not in entry:
        raise ValueError(f"Missing required field '{key}' in {context}")
    value = entry[key]
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' in {context} must be a string")
    return value
