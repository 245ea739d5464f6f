"""Standard culvert diameters and the rounding rules built on them."""

from __future__ import annotations

import bisect
import math
from _collections_abc import Iterable, Iterator

from loguru import logger

from .classes_references import InvalidInput

STANDARD_SIZES_MM: tuple[int, ...] = (
    300,
    400,
    500,
    600,
    700,
    800,
    900,
    1000,
    1200,
    1400,
    1500,
    1600,
    1800,
    1900,
    2000,
)
PROFESSIONAL_ENGINEERING_THRESHOLD_MM = 2000


class StandardSizeCatalog:
    """
    Ordered set of permitted culvert diameters in millimetres.

    The first entry is the smallest culvert the system will recommend and the
    last is the largest that can be selected without professional design.
    """

    def __init__(self, sizes: Iterable[int]) -> None:
        values: tuple[int, ...] = tuple(int(size) for size in sizes)
        if not values:
            raise InvalidInput(["Size catalog must contain at least one diameter."])
        if any(later <= earlier for earlier, later in zip(values, values[1:])):
            raise InvalidInput(["Size catalog diameters must be strictly increasing."])
        self.sizes: tuple[int, ...] = values

    def describe(self) -> str:
        return f"StandardSizeCatalog({self.minimum}-{self.maximum} mm, {len(self.sizes)} sizes)"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    def __contains__(self, value: object) -> bool:
        return value in self.sizes

    def __iter__(self) -> Iterator[int]:
        return iter(self.sizes)

    def __len__(self) -> int:
        return len(self.sizes)

    @property
    def minimum(self) -> int:
        return self.sizes[0]

    @property
    def maximum(self) -> int:
        return self.sizes[-1]

    def round_up(self, value: float) -> int:
        """
        Return the smallest catalog diameter that is at least `value`.

        Values above the largest diameter fall back to the catalog maximum;
        deciding whether that needs professional design is left to the caller.

        Raises:
            InvalidInput: If `value` is not a positive finite number.
        """
        _require_positive(value)
        index: int = bisect.bisect_left(self.sizes, value)
        if index == len(self.sizes):
            logger.debug(
                "Diameter {value} mm exceeds catalog; falling back to {maximum} mm",
                value=value,
                maximum=self.maximum,
            )
            return self.maximum
        return self.sizes[index]

    def next_above(self, value: float) -> int | None:
        """Return the catalog diameter strictly greater than `value`, or None at the top."""
        _require_positive(value)
        index: int = bisect.bisect_right(self.sizes, value)
        if index == len(self.sizes):
            return None
        return self.sizes[index]


def _require_positive(value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput([f"Diameter must be a number, got {value!r}."])
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput([f"Diameter must be a positive finite number, got {value!r}."])


STANDARD_CATALOG = StandardSizeCatalog(STANDARD_SIZES_MM)


def round_up_to_standard(value: float, catalog: StandardSizeCatalog = STANDARD_CATALOG) -> int:
    """Round a diameter (mm) up to the next standard culvert size."""
    return catalog.round_up(value)


def next_size_above(value: float, catalog: StandardSizeCatalog = STANDARD_CATALOG) -> int | None:
    """Return the standard size one step above `value`, if any."""
    return catalog.next_above(value)


__all__: list[str] = [
    "PROFESSIONAL_ENGINEERING_THRESHOLD_MM",
    "STANDARD_CATALOG",
    "STANDARD_SIZES_MM",
    "StandardSizeCatalog",
    "next_size_above",
    "round_up_to_standard",
]
