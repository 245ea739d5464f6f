"""End-to-end size resolution."""

from __future__ import annotations

import pytest

from culvert_sizer import (
    ClimateScenario,
    ClimateScenarioTag,
    DebrisRating,
    InvalidInput,
    SizingResult,
    StreamMeasurement,
    TransportParameters,
    size_culvert,
)
from culvert_sizer.transport import TRANSPORT_RECOMMENDATION

from .sample_data import sample_measurement

HIGH_TRANSPORT = TransportParameters(debris_rating=DebrisRating.HIGH, sediment_depth_cm=10.0, log_diameter_m=0.5)
LONG_TERM = ClimateScenario(tag=ClimateScenarioTag.LONG_TERM)


def test_measurement_only() -> None:
    result: SizingResult = size_culvert(sample_measurement())

    assert result.average_top_width == pytest.approx(1.0)
    assert result.average_depth == pytest.approx(0.2)
    assert result.cross_sectional_area == pytest.approx(0.15)
    assert result.end_opening_area == pytest.approx(0.45)
    assert result.area_based == 800
    assert result.table_based == 900
    assert result.base_size == 900
    assert result.transport_index == 0.0
    assert result.transport_recommendation is None
    assert result.climate_factor == 1.0
    assert result.recommended_size == 900
    assert not result.requires_professional_design


def test_stream_beyond_table_needs_professional_design() -> None:
    measurement: StreamMeasurement = StreamMeasurement.of([5.5, 5.5, 5.5], 0.5, [0.2, 0.2, 0.2])
    result: SizingResult = size_culvert(measurement)

    assert result.table_based is None
    assert result.calculated_diameter == 1514
    assert result.base_size == 1514
    assert result.recommended_size == 1514
    assert result.requires_professional_design


def test_transport_bump() -> None:
    result: SizingResult = size_culvert(sample_measurement(), HIGH_TRANSPORT)

    assert result.transport_index == pytest.approx(6.0)
    assert result.transport_adjusted_size == 1000
    assert result.transport_recommendation == TRANSPORT_RECOMMENDATION
    assert len(result.transport_tips) == 4
    assert result.recommended_size == 1000


def test_long_term_climate() -> None:
    result: SizingResult = size_culvert(sample_measurement(), climate=LONG_TERM)

    assert result.climate_factor == pytest.approx(1.2)
    assert result.climate_applied
    assert result.climate_adjusted_size == 900
    assert result.recommended_size >= result.transport_adjusted_size


def test_transport_and_climate_combined() -> None:
    result: SizingResult = size_culvert(sample_measurement(), HIGH_TRANSPORT, LONG_TERM)

    assert result.base_size == 900
    assert result.transport_adjusted_size == 1000
    assert result.climate_adjusted_size == 1000
    assert result.recommended_size == 1000
    assert not result.requires_professional_design


def test_adjustments_never_reduce_size() -> None:
    result: SizingResult = size_culvert(sample_measurement(), HIGH_TRANSPORT, ClimateScenario.custom(2.0))

    assert result.base_size <= result.transport_adjusted_size <= result.climate_adjusted_size
    assert result.recommended_size == result.climate_adjusted_size == 1200


def test_reaching_threshold_requires_professional_design() -> None:
    measurement: StreamMeasurement = StreamMeasurement.of([1.8], 1.8, [0.5])
    transport = TransportParameters(debris_rating=DebrisRating.HIGH, sediment_depth_cm=20.0)

    unadjusted: SizingResult = size_culvert(measurement)
    assert unadjusted.base_size == 1900
    assert not unadjusted.requires_professional_design

    bumped: SizingResult = size_culvert(measurement, transport)
    assert bumped.recommended_size == 2000
    assert bumped.requires_professional_design


def test_capped_transport_bump_requires_professional_design() -> None:
    measurement: StreamMeasurement = StreamMeasurement.of([1.8], 4.0, [0.5])
    transport = TransportParameters(debris_rating=DebrisRating.HIGH, sediment_depth_cm=20.0)

    plain: SizingResult = size_culvert(measurement, threshold_mm=5000)
    assert plain.base_size == 2000
    assert not plain.requires_professional_design

    capped: SizingResult = size_culvert(measurement, transport, threshold_mm=5000)
    assert capped.transport_bump_capped
    assert capped.recommended_size == 2000
    assert capped.requires_professional_design


def test_invalid_inputs_are_rejected_before_sizing() -> None:
    with pytest.raises(InvalidInput, match="Bottom width"):
        size_culvert(StreamMeasurement.of([1.0], 0.0, [0.2]))
    with pytest.raises(InvalidInput, match="Log diameter"):
        size_culvert(sample_measurement(), TransportParameters(log_diameter_m=-0.1))
    with pytest.raises(InvalidInput, match="Custom climate factor"):
        size_culvert(sample_measurement(), climate=ClimateScenario.custom(1.0))


def test_result_round_trips_through_dict() -> None:
    result: SizingResult = size_culvert(sample_measurement(), HIGH_TRANSPORT, LONG_TERM)
    restored: SizingResult = SizingResult.from_dict(result.to_dict())

    assert restored == result
    assert isinstance(result.to_dict()["transport_tips"], list)


@pytest.mark.parametrize("top_width", [0.3, 1.0, 2.2, 4.5])
@pytest.mark.parametrize("depth", [0.1, 0.3, 0.5])
@pytest.mark.parametrize(
    "climate",
    [None, ClimateScenario(tag=ClimateScenarioTag.NEAR_TERM), LONG_TERM, ClimateScenario.custom(1.8)],
)
def test_sizes_never_decrease_through_the_pipeline(
    top_width: float, depth: float, climate: ClimateScenario | None
) -> None:
    measurement: StreamMeasurement = StreamMeasurement.of([top_width], top_width / 2, [depth])
    result: SizingResult = size_culvert(measurement, HIGH_TRANSPORT, climate)

    assert result.transport_adjusted_size >= result.base_size
    assert result.climate_adjusted_size >= result.transport_adjusted_size
    assert result.recommended_size == result.climate_adjusted_size
    assert result.requires_professional_design == (
        result.table_based is None or result.recommended_size >= 2000 or result.transport_bump_capped
    )
