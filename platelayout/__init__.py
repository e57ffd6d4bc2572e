# Plate Layout Generator — Three-Layer Architecture
# Layer 1: plate.py      — plate shape & well naming
# Layer 2: strategies.py — traversal strategies & start offsets
# Layer 3: generator.py  — stateful well sequencer (take next / take next group)

from platelayout.generator import PlateLayoutGenerator
from platelayout.plate import PlateShape, well_name, parse_well_name
from platelayout.strategies import LayoutStrategy, UnknownStrategy, make_start_offsets

__all__ = [
    "PlateLayoutGenerator",
    "PlateShape",
    "well_name",
    "parse_well_name",
    "LayoutStrategy",
    "UnknownStrategy",
    "make_start_offsets",
]
