"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Graph supply accessed through a Protocol type
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - Async in Protocol: a provider may do IO (file, network), but the engine
      that consumes its snapshot is never async itself
"""

from typing import Protocol

from skyroute.core.graph_model import PathGraph


class GraphProvider(Protocol):
    """Supplies the complete adjacency snapshot before each query."""
    async def get_paths(self) -> PathGraph: ...
