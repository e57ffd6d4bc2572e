"""
Layer 1 — Plate Geometry
========================
Logical shape of a microtiter plate and the naming of its wells.

Wells are addressed by zero-based (row, column) pairs:
  - row:    0 = A … 7 = H on a standard 96-well plate
  - column: 0 = 1 … 11 = 12

Physical well centers follow the ANSI/SLAS SBS footprint (127.76 × 85.48 mm)
and are only used for display; the generator never checks them against a
real plate.
"""

from dataclasses import dataclass
from typing import Dict, Tuple
import re
import string

# ── Standard plate geometry (ANSI/SLAS 4-2004) ───────────────────────────────
DEFAULT_ROWS = 8
DEFAULT_COLUMNS = 12
WELL_PITCH_96 = 9.0        # mm center-to-center
PLATE_OFFSET_X = 14.38     # mm from plate left edge to A1 well center
PLATE_OFFSET_Y = 11.24     # mm from plate top edge to A1 well center

# Common plate formats, (rows, columns) → well pitch in mm
PLATE_FORMATS: Dict[Tuple[int, int], float] = {
    (2, 3):   39.0,
    (3, 4):   26.0,
    (4, 6):   19.3,
    (6, 8):   13.0,
    (8, 12):  9.0,
    (16, 24): 4.5,
    (32, 48): 2.25,
}

_WELL_NAME_RE = re.compile(r"^([A-Za-z]+)0*(\d+)$")


def row_label(row: int) -> str:
    """Letter label for a 0-based row index (0 → A, 25 → Z, 26 → AA)."""
    if row < 0:
        raise ValueError(f"Row {row} must be non-negative")
    label = ""
    n = row + 1
    while n:
        n, rem = divmod(n - 1, 26)
        label = string.ascii_uppercase[rem] + label
    return label


def row_index(label: str) -> int:
    """Inverse of row_label()."""
    n = 0
    for ch in label.upper():
        n = n * 26 + (ord(ch) - ord("A") + 1)
    return n - 1


def well_name(row: int, column: int) -> str:
    """'A1'-style name of a 0-based (row, column) well."""
    if column < 0:
        raise ValueError(f"Column {column} must be non-negative")
    return f"{row_label(row)}{column + 1}"


def parse_well_name(name: str) -> Tuple[int, int]:
    """Convert 'A1' / 'h12' / 'B03' to a 0-based (row, column) pair."""
    m = _WELL_NAME_RE.match(name.strip())
    if not m or int(m.group(2)) < 1:
        raise ValueError(f"Invalid well name '{name}'")
    return row_index(m.group(1)), int(m.group(2)) - 1


@dataclass(frozen=True)
class PlateShape:
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS

    def __post_init__(self):
        for value in (self.rows, self.columns):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Plate dimensions must be integers, got {self.rows!r}×{self.columns!r}")
        if self.rows < 1 or self.columns < 1:
            raise ValueError(
                f"Plate dimensions must be positive, got {self.rows}×{self.columns}")

    @classmethod
    def from_dimensions(cls, dimensions) -> "PlateShape":
        """Build from a (rows, columns) pair."""
        try:
            rows, columns = dimensions
        except (TypeError, ValueError):
            raise ValueError(
                f"Dimensions must be a (rows, columns) pair, got {dimensions!r}") from None
        return cls(rows, columns)

    @property
    def n_wells(self) -> int:
        return self.rows * self.columns

    @property
    def well_pitch(self) -> float:
        return PLATE_FORMATS.get((self.rows, self.columns), WELL_PITCH_96)

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def well_center_xy(self, row: int, column: int) -> Tuple[float, float]:
        """(x, y) mm of a well relative to the plate's top-left corner."""
        pitch = self.well_pitch
        return PLATE_OFFSET_X + column * pitch, PLATE_OFFSET_Y + row * pitch

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "columns": self.columns,
            "n_wells": self.n_wells,
            "well_pitch_mm": self.well_pitch,
        }
