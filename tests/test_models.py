"""Validation coverage for the input models and field cards."""

from __future__ import annotations

import math

import pytest

from culvert_sizer import (
    DebrisRating,
    FieldCard,
    InvalidInput,
    StreamMeasurement,
    TransportParameters,
    results_dataframe,
)

from .sample_data import build_sample_card


def test_measurement_collects_every_error() -> None:
    measurement: StreamMeasurement = StreamMeasurement.of([1.0, math.nan], 0.0, [])
    errors: list[str] = measurement.validate("Site: ")

    assert "Site: Top width #2 must be a positive number (got nan)." in errors
    assert any(message.startswith("Site: Bottom width") for message in errors)
    assert "Site: At least one depth reading is required." in errors


def test_measurement_readings_need_not_match_in_count() -> None:
    measurement: StreamMeasurement = StreamMeasurement.of([1.0, 1.2, 0.8, 1.0], 0.5, [0.2])
    assert measurement.validate() == []
    assert measurement.average_top_width == pytest.approx(1.0)


def test_boolean_readings_are_not_numbers() -> None:
    measurement = StreamMeasurement(top_widths=(True,), bottom_width=0.5, depths=(0.2,))
    assert any("Top width #1" in message for message in measurement.validate())


def test_transport_parameters_round_trip() -> None:
    params = TransportParameters(debris_rating=DebrisRating.MEDIUM, sediment_depth_cm=5.0, log_diameter_m=0.2)
    assert params.to_dict()["debris_rating"] == "medium"
    assert TransportParameters.from_dict(params.to_dict()) == params
    assert TransportParameters.from_dict({}).debris_rating is DebrisRating.LOW


def test_invalid_input_joins_messages() -> None:
    error = InvalidInput(["first", "second"])
    assert str(error) == "first; second"
    assert error.errors == ["first", "second"]
    assert str(InvalidInput([])) == "Unknown input error."


def test_field_card_requires_stream_id_and_valid_gps() -> None:
    card: FieldCard = build_sample_card()
    card.stream_id = " "
    card.gps = (91.0, -200.0)
    errors: list[str] = card.validate()

    assert "Stream ID is required." in errors
    assert "GPS latitude must be between -90 and 90." in errors
    assert "GPS longitude must be between -180 and 180." in errors
    with pytest.raises(InvalidInput):
        card.calculate()
    assert card.result is None


def test_field_card_round_trip() -> None:
    card: FieldCard = build_sample_card()
    card.calculate()
    assert FieldCard.from_dict(card.to_dict()) == card


def test_results_dataframe_is_indexed_by_stream() -> None:
    card: FieldCard = build_sample_card()
    card.calculate()

    frame = results_dataframe([card])

    assert frame.index.name == "stream_id"
    assert frame.loc["CR-101", "base_size"] == 900
    assert frame.loc["CR-101", "transport_index"] == pytest.approx(6.0)
    assert results_dataframe([]).empty
