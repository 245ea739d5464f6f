"""Stream channel measurements taken at a crossing site."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean
from typing import Any
from _collections_abc import Iterable, Mapping

from .base import Validatable, is_positive_number, normalize_sequence


@dataclass(frozen=True, slots=True)
class StreamMeasurement(Validatable):
    """Bankfull channel readings for one assessment.

    Top widths and depths are independent readings along the reach; their
    counts need not match. All values are in metres.
    """

    top_widths: tuple[float, ...] = ()
    bottom_width: float = 0.0
    depths: tuple[float, ...] = ()

    @classmethod
    def of(cls, top_widths: Iterable[float], bottom_width: float, depths: Iterable[float]) -> "StreamMeasurement":
        """Build a measurement from any iterables of readings."""
        return cls(top_widths=tuple(top_widths), bottom_width=bottom_width, depths=tuple(depths))

    def describe(self) -> str:
        return (
            f"StreamMeasurement(top_widths={len(self.top_widths)}, "
            f"bottom_width={self.bottom_width}, depths={len(self.depths)})"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    @property
    def average_top_width(self) -> float:
        return fmean(self.top_widths)

    @property
    def average_depth(self) -> float:
        return fmean(self.depths)

    def validate(self, prefix: str = "") -> list[str]:
        errors: list[str] = []
        if not self.top_widths:
            errors.append(f"{prefix}At least one top width reading is required.")
        for index, value in enumerate(self.top_widths, start=1):
            if not is_positive_number(value):
                errors.append(f"{prefix}Top width #{index} must be a positive number (got {value!r}).")
        if not is_positive_number(self.bottom_width):
            errors.append(f"{prefix}Bottom width must be a positive number (got {self.bottom_width!r}).")
        if not self.depths:
            errors.append(f"{prefix}At least one depth reading is required.")
        for index, value in enumerate(self.depths, start=1):
            if not is_positive_number(value):
                errors.append(f"{prefix}Depth #{index} must be a positive number (got {value!r}).")
        return errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "top_widths": list(self.top_widths),
            "bottom_width": self.bottom_width,
            "depths": list(self.depths),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StreamMeasurement":
        return cls(
            top_widths=tuple(float(value) for value in normalize_sequence(data.get("top_widths"))),
            bottom_width=float(data.get("bottom_width", 0.0)),
            depths=tuple(float(value) for value in normalize_sequence(data.get("depths"))),
        )
