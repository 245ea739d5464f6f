"""Enums and enum helpers shared between the sizing models."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

TEnum = TypeVar("TEnum", bound=Enum)


def coerce_enum(enum_cls: type[TEnum], value: Any, *, default: TEnum) -> TEnum:
    """Return enum member from the provided value, accepting names/values."""

    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            pass
    return enum_cls(value)


class DebrisRating(int, Enum):
    """Field rating of woody debris available to the stream."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3


class ClimateScenarioTag(str, Enum):
    """Climate projection horizons offered in the field."""

    NONE = "none"
    NEAR_TERM = "near-term"
    LONG_TERM = "long-term"
    CUSTOM = "custom"


# Labels used by the field forms for the projection horizons.
CLIMATE_TAG_ALIASES: dict[str, ClimateScenarioTag] = {
    "2050s": ClimateScenarioTag.NEAR_TERM,
    "2080s": ClimateScenarioTag.LONG_TERM,
}


class ProfessionalDesignRequired(Enum):
    """Sentinel for California Method cells that fall outside standard sizing."""

    Q100 = "Q100"

    def __str__(self) -> str:
        return "professional design required"


class SizingAssessment(str, Enum):
    """How an installed culvert compares with the required diameter."""

    UNDERSIZED = "undersized"
    APPROPRIATE = "appropriate"
    OVERSIZED = "oversized"
