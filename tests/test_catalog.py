"""Standard size catalog rounding rules."""

from __future__ import annotations

import math

import pytest

from culvert_sizer import InvalidInput, StandardSizeCatalog
from culvert_sizer.catalog import STANDARD_CATALOG, STANDARD_SIZES_MM, next_size_above, round_up_to_standard


def test_standard_catalog_bounds() -> None:
    assert STANDARD_CATALOG.minimum == 300
    assert STANDARD_CATALOG.maximum == 2000
    assert list(STANDARD_CATALOG) == list(STANDARD_SIZES_MM)
    assert 1900 in STANDARD_CATALOG
    assert 1100 not in STANDARD_CATALOG


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, 300), (300, 300), (300.5, 400), (757, 800), (1001, 1200), (1514, 1600), (2000, 2000)],
)
def test_round_up_returns_smallest_size_at_or_above(value: float, expected: int) -> None:
    assert round_up_to_standard(value) == expected


def test_round_up_beyond_catalog_returns_maximum() -> None:
    assert round_up_to_standard(2600) == 2000


def test_next_size_above() -> None:
    assert next_size_above(900) == 1000
    assert next_size_above(950) == 1000
    assert next_size_above(1900) == 2000
    assert next_size_above(2000) is None
    assert next_size_above(2500) is None


@pytest.mark.parametrize("value", [0, -5.0, math.nan, math.inf])
def test_round_up_rejects_non_positive_values(value: float) -> None:
    with pytest.raises(InvalidInput, match="Diameter"):
        round_up_to_standard(value)


def test_catalog_must_be_strictly_increasing() -> None:
    with pytest.raises(InvalidInput, match="strictly increasing"):
        StandardSizeCatalog([300, 300, 400])
    with pytest.raises(InvalidInput, match="at least one"):
        StandardSizeCatalog([])


def test_custom_catalog() -> None:
    catalog = StandardSizeCatalog([450, 900])
    assert catalog.round_up(500) == 900
    assert catalog.next_above(450) == 900
    assert len(catalog) == 2
    assert "450-900 mm" in catalog.describe()


@pytest.mark.parametrize("size", STANDARD_SIZES_MM)
def test_every_standard_size_is_a_fixed_point(size: int) -> None:
    assert round_up_to_standard(size) == size
    assert round_up_to_standard(size - 0.5) == size


def test_round_up_never_decreases() -> None:
    previous: int = 0
    for diameter in range(1, 2601):
        rounded: int = round_up_to_standard(diameter)
        assert rounded >= previous, f"{diameter} mm rounded down to {rounded} mm"
        assert rounded in STANDARD_CATALOG
        assert rounded >= min(diameter, STANDARD_CATALOG.maximum)
        previous = rounded
