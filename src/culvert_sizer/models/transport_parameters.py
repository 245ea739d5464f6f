"""Debris and sediment transport observations for a crossing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from _collections_abc import Mapping

from .base import Validatable, is_non_negative_number
from ..type_helpers import DebrisRating, coerce_enum


@dataclass(frozen=True, slots=True)
class TransportParameters(Validatable):
    """Water transport potential inputs.

    `sediment_depth_cm` is the depth of the sediment wedge behind the inlet in
    centimetres; `log_diameter_m` is the largest mobile log seen in the channel.
    """

    debris_rating: DebrisRating = DebrisRating.LOW
    sediment_depth_cm: float = 0.0
    log_diameter_m: float = 0.0

    def describe(self) -> str:
        return (
            f"TransportParameters(debris={self.debris_rating.name}, "
            f"sediment={self.sediment_depth_cm} cm, log={self.log_diameter_m} m)"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    def validate(self, prefix: str = "") -> list[str]:
        errors: list[str] = []
        if not isinstance(self.debris_rating, DebrisRating):
            errors.append(f"{prefix}Debris rating must be low, medium or high (got {self.debris_rating!r}).")
        if not is_non_negative_number(self.sediment_depth_cm):
            errors.append(f"{prefix}Sediment depth must be zero or greater (got {self.sediment_depth_cm!r}).")
        if not is_non_negative_number(self.log_diameter_m):
            errors.append(f"{prefix}Log diameter must be zero or greater (got {self.log_diameter_m!r}).")
        return errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "debris_rating": self.debris_rating.name.lower(),
            "sediment_depth_cm": self.sediment_depth_cm,
            "log_diameter_m": self.log_diameter_m,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransportParameters":
        return cls(
            debris_rating=coerce_enum(DebrisRating, data.get("debris_rating"), default=DebrisRating.LOW),
            sediment_depth_cm=float(data.get("sediment_depth_cm", 0.0)),
            log_diameter_m=float(data.get("log_diameter_m", 0.0)),
        )
