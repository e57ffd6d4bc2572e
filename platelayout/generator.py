"""
Layer 3 — Plate Layout Generator
================================
Hands out wells of a microtiter plate one at a time (or one group at a time),
in a fixed order, yielding each well only once.

The full sequence is computed once at construction by one of the strategies
in strategies.py. Every take removes wells from that sequence in place:

  take_next()            – first remaining well
  take_next(column=c)    – first remaining well in column c
  take_next_group()      – next group_size wells, positionally contiguous
  iterate_column(c)      – advance a caller-held column cursor with wraparound

Exhaustion is signalled by None / [] and is never an error.

Not thread-safe: use one generator per consumer or serialize calls externally.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

import numpy as np

from platelayout import config
from platelayout.logger import get_logger
from platelayout.plate import PlateShape, well_name
from platelayout.strategies import (
    LayoutStrategy, STRATEGIES, build_layout, make_start_offsets,
)

Well = Tuple[int, int]

logger = get_logger(__name__)


class PlateLayoutGenerator:
    def __init__(self, group_size: Optional[int] = None, strategy=None,
                 dimensions: Optional[Tuple[int, int]] = None):
        if group_size is None:
            group_size = config.DEFAULT_GROUP_SIZE
        if strategy is None:
            strategy = config.DEFAULT_STRATEGY
        if dimensions is None:
            dimensions = config.get_default_dimensions()

        if isinstance(group_size, bool) or not isinstance(group_size, int) or group_size < 1:
            raise ValueError(f"Group size must be a positive integer, got {group_size!r}")

        self.strategy = LayoutStrategy.parse(strategy)
        self.shape = PlateShape.from_dimensions(dimensions)
        self.requested_group_size = group_size
        self.group_size = STRATEGIES[self.strategy].effective_group_size(group_size)
        self.start_offsets = make_start_offsets(self.shape.rows, group_size)
        self._layout: List[Well] = build_layout(
            self.strategy, self.shape.rows, self.shape.columns,
            group_size, self.start_offsets)

        logger.debug(
            "Built %s layout: %d wells on %d×%d plate, group size %d, start offsets %s",
            self.strategy.value, len(self._layout), self.shape.rows,
            self.shape.columns, self.group_size, self.start_offsets)

    @property
    def rows(self) -> int:
        return self.shape.rows

    @property
    def columns(self) -> int:
        return self.shape.columns

    # ── Consumption ────────────────────────────────────────────────────────

    def take_next(self, column: Optional[int] = None) -> Optional[Well]:
        """Remove and return the next well, or None when nothing matches."""
        i = self._start_index(column)
        if i is None:
            logger.debug("No wells left%s", _column_suffix(column))
            return None
        return self._layout.pop(i)

    def take_next_group(self, column: Optional[int] = None) -> List[Well]:
        """
        Remove and return up to group_size consecutive wells.

        The column only picks where the group starts; the wells after it are
        taken in layout order whatever their column.
        """
        i = self._start_index(column)
        if i is None:
            logger.debug("No wells left%s", _column_suffix(column))
            return []
        group = self._layout[i:i + self.group_size]
        del self._layout[i:i + self.group_size]
        if len(group) < self.group_size:
            logger.debug("Short group: %d of %d wells", len(group), self.group_size)
        return group

    def iterate_column(self, column: Optional[int] = None) -> Optional[int]:
        """
        Advance a caller-held column cursor.

        Wraps to 0 only once the cursor has reached `columns`, one past the
        last valid index, so callers see `columns` once per cycle.
        """
        if column is None:
            return None
        if column < self.columns:
            return column + 1
        return 0

    def _start_index(self, column: Optional[int]) -> Optional[int]:
        if column is None:
            return 0 if self._layout else None
        for i, (_, col) in enumerate(self._layout):
            if col == column:
                return i
        return None

    # ── Inspection ─────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._layout)

    @property
    def is_exhausted(self) -> bool:
        return not self._layout

    def remaining(self) -> List[Well]:
        return list(self._layout)

    def order_map(self) -> np.ndarray:
        """
        rows × columns array of each remaining well's position in the
        sequence; -1 for wells already taken or never in the layout.
        Wells outside the plate shape (CDC layouts on small plates) are skipped.
        """
        grid = np.full((self.rows, self.columns), -1, dtype=int)
        for idx, (r, c) in enumerate(self._layout):
            if self.shape.contains(r, c):
                grid[r, c] = idx
        return grid

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy.value,
            "plate": self.shape.to_dict(),
            "group_size": self.group_size,
            "requested_group_size": self.requested_group_size,
            "start_offsets": self.start_offsets,
            "n_remaining": len(self._layout),
            "exhausted": self.is_exhausted,
            "remaining": [self._well_dict(r, c) for r, c in self._layout],
        }

    def _well_dict(self, row: int, column: int) -> dict:
        x, y = self.shape.well_center_xy(row, column)
        return {
            "row": row,
            "column": column,
            "name": well_name(row, column),
            "x_mm": round(x, 2),
            "y_mm": round(y, 2),
        }


def _column_suffix(column: Optional[int]) -> str:
    return "" if column is None else f" in column {column}"
