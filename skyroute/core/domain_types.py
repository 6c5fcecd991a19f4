"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Point is a closed enumeration (A..F)
    - Weight is a non-negative distance between two points
    - UNREACHABLE is distinct from every finite distance, including 0

Design Decisions:
    - str Enum for Point: serializes to JSON without custom encoders and
      orders by label, which gives the engine a natural tie-break
    - UNREACHABLE as math.inf over None: comparisons in the relaxation step
      stay arithmetic, and JSON presentation maps it to null at the edge
"""

import math
from enum import Enum
from collections.abc import Hashable, Mapping
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

class Point(str, Enum):
    """Valid points on the S1 map."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"


# ─── Value Types ─────────────────────────────────────────────────

Weight = NewType("Weight", float)    # >= 0

UNREACHABLE: float = math.inf

# node -> (neighbor -> weight)
Adjacency = Mapping[Hashable, Mapping[Hashable, Weight]]


def is_reachable(distance: float) -> bool:
    """True for any finite distance (0 included)."""
    return not math.isinf(distance)
