"""
Layer 2 — Layout Strategies
===========================
Traversal orders used to precompute a plate layout.

Each strategy is a pure function

    (rows, columns, group_size, start_offsets) -> List[(row, column)]

selected through a closed LayoutStrategy enumeration. Strategies:

  SampleLayout     – row-block, then column left→right, then row within group
                     (replicates stacked in one column, e.g. samples in triplicate)
  PrimerLayout     – row within group outermost, then row-block, then column
                     (one reagent per group row, loaded across the plate)
  CdcSampleLayout  – SampleLayout hardwired to a 12-column plate split into two
                     4-row super-blocks starting at rows 0 and 4
  CdcPrimerLayout  – PrimerLayout hardwired to the same two super-blocks and to
                     3 replicate rows regardless of the configured group size
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

Well = Tuple[int, int]
StrategyFunc = Callable[[int, int, int, List[int]], List[Well]]

# CDC plate map: 12 columns, super-blocks at rows A and E
CDC_COLUMNS = 12
CDC_BLOCK_STARTS = (0, 4)
CDC_BLOCK_HEIGHT = 4
CDC_PRIMER_REPLICATES = 3


class UnknownStrategy(ValueError):
    """Raised when a layout strategy name is not recognized.

    Attributes:
        strategy: The name that was requested.
        available: Names of the recognized strategies.
    """

    def __init__(self, strategy, available: Optional[List[str]] = None):
        self.strategy = strategy
        self.available = available or []
        message = f"Unknown layout strategy '{strategy}'."
        if self.available:
            message += f" Available: {', '.join(self.available)}"
        super().__init__(message)


class LayoutStrategy(str, Enum):
    SAMPLE_LAYOUT     = "SampleLayout"
    PRIMER_LAYOUT     = "PrimerLayout"
    CDC_SAMPLE_LAYOUT = "CdcSampleLayout"
    CDC_PRIMER_LAYOUT = "CdcPrimerLayout"

    @property
    def snake_name(self) -> str:
        """'sample_layout'-style name."""
        return self.name.lower()

    @classmethod
    def parse(cls, value) -> "LayoutStrategy":
        """
        Resolve a strategy from a member, its value ('SampleLayout'), its
        snake-case name ('sample_layout') or its member name ('SAMPLE_LAYOUT').
        None selects SampleLayout.
        """
        if value is None:
            return cls.SAMPLE_LAYOUT
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value in (member.value, member.name, member.snake_name):
                    return member
        raise UnknownStrategy(value, [m.value for m in cls])


# ── Start offsets ────────────────────────────────────────────────────────────

def make_start_offsets(rows: int, group_size: int) -> List[int]:
    """
    First row of each group-sized block of rows.

    The block count is rounded up when rows is not a multiple of group_size,
    so the last block may run past the plate edge. No block starts at `rows`.
    """
    if group_size < 1:
        raise ValueError(f"Group size must be ≥ 1, got {group_size}")
    n_blocks = -(-rows // group_size)
    return [k * group_size for k in range(n_blocks)]


# ── Strategy functions ───────────────────────────────────────────────────────

def sample_layout(rows: int, columns: int, group_size: int,
                  start_offsets: List[int]) -> List[Well]:
    lyt = []
    for start in start_offsets:
        for col in range(columns):
            for i in range(group_size):
                # clip the overrunning last block
                if start + i < rows:
                    lyt.append((start + i, col))
    return lyt


def primer_layout(rows: int, columns: int, group_size: int,
                  start_offsets: List[int]) -> List[Well]:
    lyt = []
    for i in range(group_size):
        for start in start_offsets:
            if start + i >= rows:
                continue
            for col in range(columns):
                lyt.append((start + i, col))
    return lyt


def cdc_sample_layout(rows: int, columns: int, group_size: int,
                      start_offsets: List[int]) -> List[Well]:
    """Ignores rows, columns and start_offsets."""
    return [(i + j, col)
            for j in CDC_BLOCK_STARTS
            for col in range(CDC_COLUMNS)
            for i in range(group_size)]


# TODO: make the replicate count follow group_size once the CDC primer plate
# map supports more than 3 primer rows per super-block.
def cdc_primer_layout(rows: int, columns: int, group_size: int,
                      start_offsets: List[int]) -> List[Well]:
    """Ignores every argument; always 3 replicate rows."""
    return [(i + j, col)
            for i in range(CDC_PRIMER_REPLICATES)
            for j in CDC_BLOCK_STARTS
            for col in range(CDC_COLUMNS)]


# ── Lookup table ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StrategyInfo:
    func: StrategyFunc
    fixed_group_size: Optional[int] = None   # overrides the configured group size
    max_group_size: Optional[int] = None     # larger groups would overlap blocks
    description: str = ""

    def effective_group_size(self, group_size: int) -> int:
        return self.fixed_group_size or group_size


STRATEGIES: Dict[LayoutStrategy, StrategyInfo] = {
    LayoutStrategy.SAMPLE_LAYOUT: StrategyInfo(
        sample_layout,
        description="Row-blocks, then columns, then replicate rows"),
    LayoutStrategy.PRIMER_LAYOUT: StrategyInfo(
        primer_layout,
        description="Replicate rows, then row-blocks, then columns"),
    LayoutStrategy.CDC_SAMPLE_LAYOUT: StrategyInfo(
        cdc_sample_layout,
        max_group_size=CDC_BLOCK_HEIGHT,
        description="12-column CDC plate, two 4-row super-blocks, sample order"),
    LayoutStrategy.CDC_PRIMER_LAYOUT: StrategyInfo(
        cdc_primer_layout,
        fixed_group_size=CDC_PRIMER_REPLICATES,
        description="12-column CDC plate, two 4-row super-blocks, 3 primer rows"),
}


def build_layout(strategy: LayoutStrategy, rows: int, columns: int,
                 group_size: int, start_offsets: List[int]) -> List[Well]:
    """Dispatch to the strategy function and return a fresh layout list."""
    info = STRATEGIES[strategy]
    if info.max_group_size is not None and group_size > info.max_group_size:
        raise ValueError(
            f"{strategy.value} supports group sizes up to {info.max_group_size}, "
            f"got {group_size}")
    return info.func(rows, columns, group_size, start_offsets)


def list_strategies() -> List[dict]:
    return [
        {
            "name": s.value,
            "alias": s.snake_name,
            "description": info.description,
            "fixed_group_size": info.fixed_group_size,
            "max_group_size": info.max_group_size,
        }
        for s, info in STRATEGIES.items()
    ]
