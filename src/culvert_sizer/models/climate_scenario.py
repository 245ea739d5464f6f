"""Climate projection scenario selected for a crossing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from _collections_abc import Mapping

from loguru import logger

from .base import Validatable, is_positive_number
from ..type_helpers import CLIMATE_TAG_ALIASES, ClimateScenarioTag


def parse_scenario_tag(value: Any) -> ClimateScenarioTag:
    """
    Convert a scenario label into a `ClimateScenarioTag`.

    Accepts enum values ("long-term"), member names ("LONG_TERM") and the field
    form labels ("2080s"). Unrecognized labels resolve to NONE so that they
    apply no uplift.
    """
    if value is None:
        return ClimateScenarioTag.NONE
    if isinstance(value, ClimateScenarioTag):
        return value
    normalized: str = str(value).strip().lower()
    if normalized in CLIMATE_TAG_ALIASES:
        return CLIMATE_TAG_ALIASES[normalized]
    for tag in ClimateScenarioTag:
        if normalized in (tag.value, tag.name.lower(), tag.value.replace("-", "_")):
            return tag
    logger.warning("Unrecognized climate scenario {value!r}; no uplift will be applied", value=value)
    return ClimateScenarioTag.NONE


@dataclass(frozen=True, slots=True)
class ClimateScenario(Validatable):
    """Scenario tag plus an optional explicit uplift factor.

    A custom factor takes priority over the tag when both are given.
    """

    tag: ClimateScenarioTag = ClimateScenarioTag.NONE
    custom_factor: float | None = None

    @classmethod
    def custom(cls, factor: float) -> "ClimateScenario":
        return cls(tag=ClimateScenarioTag.CUSTOM, custom_factor=factor)

    def describe(self) -> str:
        if self.custom_factor is not None:
            return f"ClimateScenario(tag={self.tag.value}, factor={self.custom_factor})"
        return f"ClimateScenario(tag={self.tag.value})"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    def validate(self, prefix: str = "") -> list[str]:
        errors: list[str] = []
        if not isinstance(self.tag, ClimateScenarioTag):
            errors.append(f"{prefix}Unsupported climate scenario {self.tag!r}.")
        if self.custom_factor is not None:
            if not is_positive_number(self.custom_factor) or self.custom_factor <= 1.0:
                errors.append(f"{prefix}Custom climate factor must be greater than 1.0 (got {self.custom_factor!r}).")
        elif self.tag is ClimateScenarioTag.CUSTOM:
            errors.append(f"{prefix}Custom climate scenarios require an uplift factor.")
        return errors

    def to_dict(self) -> dict[str, Any]:
        return {"scenario": self.tag.value, "custom_factor": self.custom_factor}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClimateScenario":
        factor: Any = data.get("custom_factor")
        return cls(
            tag=parse_scenario_tag(data.get("scenario")),
            custom_factor=float(factor) if factor is not None else None,
        )
