"""Field card: one site assessment with its inputs and, once computed, its result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, cast
from _collections_abc import Mapping

from loguru import logger

from .models import ClimateScenario, StreamMeasurement, TransportParameters, Validatable
from .models.base import is_finite_number, normalize_mapping, normalize_sequence, string_list
from .results import SizingResult
from .sizing import size_culvert


@dataclass(slots=True)
class FieldCard(Validatable):
    """A saved crossing assessment.

    `id`, `created_at` and `updated_at` are assigned by the field card store.
    `photos` are opaque references to images managed elsewhere.
    """

    stream_id: str = ""
    location: str = ""
    measurement: StreamMeasurement = field(default_factory=StreamMeasurement)
    transport: TransportParameters | None = None
    climate: ClimateScenario | None = None
    gps: tuple[float, float] | None = None
    notes: str = ""
    photos: list[str] = field(default_factory=string_list)
    result: SizingResult | None = None
    id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def describe(self) -> str:
        size: str = f"{self.result.recommended_size} mm" if self.result else "not sized"
        return f"FieldCard(stream_id={self.stream_id or '<unnamed>'}, {size})"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    def calculate(self) -> SizingResult:
        """Run the sizing engine on this card's inputs and attach the result."""
        self.assert_valid()
        self.result = size_culvert(self.measurement, self.transport, self.climate)
        logger.debug("Calculated {card}", card=self.describe())
        return self.result

    def validate(self, prefix: str = "") -> list[str]:
        errors: list[str] = []
        if not self.stream_id.strip():
            errors.append(f"{prefix}Stream ID is required.")
        errors.extend(self.measurement.validate(f"{prefix}Measurement: "))
        if self.transport is not None:
            errors.extend(self.transport.validate(f"{prefix}Transport: "))
        if self.climate is not None:
            errors.extend(self.climate.validate(f"{prefix}Climate: "))
        if self.gps is not None:
            latitude, longitude = self.gps
            if not (is_finite_number(latitude) and -90 <= latitude <= 90):
                errors.append(f"{prefix}GPS latitude must be between -90 and 90.")
            if not (is_finite_number(longitude) and -180 <= longitude <= 180):
                errors.append(f"{prefix}GPS longitude must be between -180 and 180.")
        return errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "stream_id": self.stream_id,
            "location": self.location,
            "gps": list(self.gps) if self.gps is not None else None,
            "notes": self.notes,
            "photos": list(self.photos),
            "measurement": self.measurement.to_dict(),
            "transport": self.transport.to_dict() if self.transport is not None else None,
            "climate": self.climate.to_dict() if self.climate is not None else None,
            "result": self.result.to_dict() if self.result is not None else None,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldCard":
        gps_values: list[Any] = normalize_sequence(data.get("gps"))
        transport_raw: Any = data.get("transport")
        climate_raw: Any = data.get("climate")
        result_raw: Any = data.get("result")
        return cls(
            id=cast(str | None, data.get("id")),
            stream_id=str(data.get("stream_id", "")),
            location=str(data.get("location", "")),
            gps=(float(gps_values[0]), float(gps_values[1])) if len(gps_values) == 2 else None,
            notes=str(data.get("notes", "")),
            photos=[str(photo) for photo in normalize_sequence(data.get("photos"))],
            measurement=StreamMeasurement.from_dict(normalize_mapping(data.get("measurement"))),
            transport=TransportParameters.from_dict(transport_raw) if isinstance(transport_raw, Mapping) else None,
            climate=ClimateScenario.from_dict(climate_raw) if isinstance(climate_raw, Mapping) else None,
            result=SizingResult.from_dict(result_raw) if isinstance(result_raw, Mapping) else None,
            created_at=cast(str | None, data.get("created_at")),
            updated_at=cast(str | None, data.get("updated_at")),
        )
