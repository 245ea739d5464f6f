"""California Method lookup for non-fish-bearing stream culverts.

The table maps the average bankfull top width of a stream (0.1 m steps from
0.1 m to 5.0 m) and its average depth (0.05 m steps from 0.05 m to 0.50 m) to a
minimum culvert diameter in millimetres. Cells marked `Q100` are streams that
need a professionally designed crossing sized for the 100-year flood.

Keys are stored as integers (width in decimetres, depth in centimetres) so the
lookup never depends on float formatting. Lookups never round a request down
onto a smaller tabulated stream; undersizing is the failure mode the method
exists to prevent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from .classes_references import InvalidInput
from .type_helpers import ProfessionalDesignRequired

Q100 = ProfessionalDesignRequired.Q100
TableCell = int | ProfessionalDesignRequired

WIDTH_STEP_DM = 1
DEPTH_STEP_CM = 5
MIN_WIDTH_DM = 1
MAX_WIDTH_DM = 50
MIN_DEPTH_CM = 5
MAX_DEPTH_CM = 50

DEPTH_COLUMNS_CM: tuple[int, ...] = tuple(range(MIN_DEPTH_CM, MAX_DEPTH_CM + 1, DEPTH_STEP_CM))

# Width (dm) -> sizes for depths 0.05, 0.10, ... 0.50 m.
_ROWS: dict[int, tuple[TableCell, ...]] = {
    1: (600, 600, 600, 600, 600, 600, 600, 600, 600, 600),
    2: (600, 600, 600, 600, 600, 600, 600, 600, 600, 700),
    3: (600, 600, 600, 600, 600, 600, 700, 700, 800, 800),
    4: (600, 600, 600, 600, 700, 700, 800, 800, 900, 900),
    5: (600, 600, 600, 700, 700, 800, 900, 900, 1000, 1000),
    6: (600, 600, 700, 700, 800, 900, 900, 1000, 1000, 1200),
    7: (600, 600, 700, 800, 900, 900, 1000, 1200, 1200, 1200),
    8: (600, 600, 700, 800, 900, 900, 1200, 1200, 1200, 1400),
    9: (600, 600, 800, 900, 1000, 1200, 1200, 1200, 1400, 1400),
    10: (600, 700, 800, 900, 1000, 1200, 1200, 1400, 1400, 1500),
    11: (600, 700, 800, 1000, 1200, 1200, 1400, 1400, 1400, 1500),
    12: (600, 700, 900, 1000, 1200, 1200, 1400, 1400, 1500, 1600),
    13: (600, 800, 900, 1000, 1200, 1400, 1400, 1500, 1500, 1600),
    14: (600, 800, 900, 1200, 1200, 1400, 1400, 1500, 1600, 1800),
    15: (600, 800, 1000, 1200, 1200, 1400, 1500, 1600, 1800, 1800),
    16: (600, 800, 1000, 1200, 1400, 1400, 1500, 1600, 1800, 1900),
    17: (600, 800, 1000, 1200, 1400, 1400, 1600, 1800, 1800, 1900),
    18: (600, 900, 1000, 1200, 1400, 1500, 1600, 1800, 1900, 1900),
    19: (600, 900, 1200, 1400, 1400, 1500, 1600, 1800, 1900, Q100),
    20: (700, 900, 1200, 1400, 1400, 1600, 1800, 1800, 1900, Q100),
    21: (700, 900, 1200, 1400, 1500, 1600, 1800, 1900, Q100, Q100),
    22: (700, 1000, 1200, 1400, 1500, 1600, 1800, 1900, Q100, Q100),
    23: (700, 1000, 1200, 1400, 1600, 1800, 1800, Q100, Q100, Q100),
    24: (700, 1000, 1200, 1400, 1600, 1800, 1900, Q100, Q100, Q100),
    25: (700, 1000, 1400, 1500, 1600, 1800, 1900, Q100, Q100, Q100),
    26: (800, 1000, 1400, 1500, 1600, 1800, 1900, Q100, Q100, Q100),
    27: (800, 1000, 1400, 1500, 1600, 1800, 1900, Q100, Q100, Q100),
    28: (800, 1200, 1400, 1500, 1800, 1900, Q100, Q100, Q100, Q100),
    29: (800, 1200, 1400, 1500, 1800, 1900, Q100, Q100, Q100, Q100),
    30: (800, 1200, 1400, 1600, 1800, 1900, Q100, Q100, Q100, Q100),
    31: (800, 1200, 1400, 1600, 1800, 1900, Q100, Q100, Q100, Q100),
    32: (800, 1200, 1400, 1600, 1800, Q100, Q100, Q100, Q100, Q100),
    33: (800, 1200, 1400, 1600, 1800, Q100, Q100, Q100, Q100, Q100),
    34: (900, 1200, 1500, 1600, 1900, Q100, Q100, Q100, Q100, Q100),
    35: (900, 1200, 1500, 1800, 1900, Q100, Q100, Q100, Q100, Q100),
    36: (900, 1200, 1500, 1800, 1900, Q100, Q100, Q100, Q100, Q100),
    37: (900, 1200, 1500, 1800, 1900, Q100, Q100, Q100, Q100, Q100),
    38: (900, 1400, 1500, 1800, Q100, Q100, Q100, Q100, Q100, Q100),
    39: (900, 1400, 1500, 1800, Q100, Q100, Q100, Q100, Q100, Q100),
    40: (900, 1400, 1600, 1800, Q100, Q100, Q100, Q100, Q100, Q100),
    41: (900, 1400, 1600, 1800, Q100, Q100, Q100, Q100, Q100, Q100),
    42: (900, 1400, 1600, 1800, Q100, Q100, Q100, Q100, Q100, Q100),
    43: (900, 1400, 1600, 1900, Q100, Q100, Q100, Q100, Q100, Q100),
    44: (1000, 1400, 1600, 1900, Q100, Q100, Q100, Q100, Q100, Q100),
    45: (1000, 1400, 1800, 1900, Q100, Q100, Q100, Q100, Q100, Q100),
    46: (1000, 1400, 1800, 1900, Q100, Q100, Q100, Q100, Q100, Q100),
    47: (1000, 1400, 1800, 1900, Q100, Q100, Q100, Q100, Q100, Q100),
    48: (1000, 1400, 1800, Q100, Q100, Q100, Q100, Q100, Q100, Q100),
    49: (1000, 1400, 1800, Q100, Q100, Q100, Q100, Q100, Q100, Q100),
    50: (1000, 1400, 1800, Q100, Q100, Q100, Q100, Q100, Q100, Q100),
}

CALIFORNIA_METHOD_TABLE: dict[int, dict[int, TableCell]] = {
    width_dm: dict(zip(DEPTH_COLUMNS_CM, row)) for width_dm, row in _ROWS.items()
}


@dataclass(frozen=True, slots=True)
class Sized:
    """A table answer that resolved to a standard diameter."""

    diameter: int

    def __str__(self) -> str:
        return f"{self.diameter} mm"


TableResult = Sized | ProfessionalDesignRequired


def width_key(width_m: float) -> int:
    """Round a width in metres half-up to the nearest 0.1 m row key (decimetres)."""
    return math.floor(width_m * 10 + 0.5) * WIDTH_STEP_DM


def depth_key(depth_m: float) -> int:
    """Round a depth in metres half-up to the nearest 0.05 m column key (centimetres)."""
    return math.floor(depth_m * 20 + 0.5) * DEPTH_STEP_CM


def lookup_table(
    width: float,
    depth: float,
    table: dict[int, dict[int, TableCell]] = CALIFORNIA_METHOD_TABLE,
) -> TableResult:
    """
    Look up the California Method culvert size for an average width and depth.

    Args:
        width: Average bankfull top width in metres.
        depth: Average bankfull depth in metres.
        table: Lookup table keyed by width (dm) then depth (cm).

    Returns:
        `Sized` with the tabulated diameter, or `ProfessionalDesignRequired.Q100`
        when the stream is beyond the table or the cell itself requires design.

    Raises:
        InvalidInput: If either value is not a finite number.
    """
    if not (math.isfinite(width) and math.isfinite(depth)):
        raise InvalidInput([f"Table lookup needs finite width and depth, got ({width!r}, {depth!r})."])
    width_dm: int = max(width_key(width), MIN_WIDTH_DM)
    if width_dm > MAX_WIDTH_DM:
        logger.debug("Width {width:.3f} m is beyond the California Method table", width=width)
        return Q100
    depth_cm: int = max(depth_key(depth), MIN_DEPTH_CM)
    if depth_cm > MAX_DEPTH_CM:
        logger.debug("Depth {depth:.3f} m is beyond the California Method table", depth=depth)
        return Q100
    cell: TableCell = _resolve_cell(table, width_dm=width_dm, depth_cm=depth_cm)
    logger.debug(
        "California Method cell ({width_dm} dm, {depth_cm} cm) -> {cell}",
        width_dm=width_dm,
        depth_cm=depth_cm,
        cell=cell,
    )
    if isinstance(cell, ProfessionalDesignRequired):
        return cell
    return Sized(diameter=cell)


def _resolve_cell(table: dict[int, dict[int, TableCell]], *, width_dm: int, depth_cm: int) -> TableCell:
    """Return the exact cell or its nearest neighbour at or above the request."""
    row: dict[int, TableCell] | None = table.get(width_dm)
    if row is None:
        widths: list[int] = sorted(table)
        resolved_width: int = next((key for key in widths if key >= width_dm), widths[-1])
        return _resolve_cell(table, width_dm=resolved_width, depth_cm=depth_cm)
    if depth_cm in row:
        return row[depth_cm]
    depths: list[int] = sorted(row)
    resolved_depth: int = next((key for key in depths if key >= depth_cm), depths[-1])
    return row[resolved_depth]


__all__: list[str] = [
    "CALIFORNIA_METHOD_TABLE",
    "DEPTH_COLUMNS_CM",
    "Q100",
    "Sized",
    "TableResult",
    "depth_key",
    "lookup_table",
    "width_key",
]
