"""California Method table lookups."""

from __future__ import annotations

import math

import pytest

from culvert_sizer import CALIFORNIA_METHOD_TABLE, Q100, InvalidInput, Sized, lookup_table
from culvert_sizer.california import DEPTH_COLUMNS_CM, TableCell, depth_key, width_key


def test_table_covers_every_width_and_depth() -> None:
    assert sorted(CALIFORNIA_METHOD_TABLE) == list(range(1, 51))
    for row in CALIFORNIA_METHOD_TABLE.values():
        assert tuple(row) == DEPTH_COLUMNS_CM


def test_table_rows_never_decrease_with_depth() -> None:
    for width_dm, row in CALIFORNIA_METHOD_TABLE.items():
        sized: list[int] = [cell for cell in row.values() if isinstance(cell, int)]
        assert sized == sorted(sized), f"row {width_dm} decreases"
        cells: list[TableCell] = list(row.values())
        first_q100: int = next((i for i, cell in enumerate(cells) if cell is Q100), len(cells))
        assert all(cell is Q100 for cell in cells[first_q100:])


@pytest.mark.parametrize(
    ("width", "depth", "expected"),
    [
        (1.0, 0.20, 900),
        (0.1, 0.05, 600),
        (1.9, 0.45, 1900),
    ],
)
def test_exact_cells(width: float, depth: float, expected: int) -> None:
    assert lookup_table(width, depth) == Sized(diameter=expected)


def test_q100_cell_is_professional_design() -> None:
    assert lookup_table(1.9, 0.50) is Q100
    assert str(Q100) == "professional design required"


def test_rounding_is_half_up() -> None:
    assert width_key(0.96) == 10
    assert width_key(1.04) == 10
    assert depth_key(0.18) == 20
    assert depth_key(0.17) == 15
    assert lookup_table(1.04, 0.21) == lookup_table(1.0, 0.20)


def test_small_values_clamp_to_the_first_row_and_column() -> None:
    assert lookup_table(0.01, 0.01) == Sized(diameter=600)


def test_beyond_table_requires_professional_design() -> None:
    assert lookup_table(5.5, 0.2) is Q100
    assert lookup_table(1.0, 0.6) is Q100


def test_lookup_rounds_toward_larger_neighbour_when_cell_missing() -> None:
    table: dict[int, dict[int, TableCell]] = {
        10: {5: 600, 20: 900},
        20: {5: 700, 20: 1200},
    }
    assert lookup_table(1.0, 0.10, table=table) == Sized(diameter=900)
    assert lookup_table(1.5, 0.05, table=table) == Sized(diameter=700)


def test_lookup_rejects_non_finite_values() -> None:
    with pytest.raises(InvalidInput, match="finite"):
        lookup_table(math.nan, 0.2)
