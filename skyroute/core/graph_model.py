"""Graph Model — immutable snapshot of directed, weighted edges between points.

Invariants:
    - Directed: an edge A -> B never implies B -> A
    - Node domain = every key plus every neighbor referenced by an edge
    - A PathGraph never changes after construction (MappingProxyType over copies)
    - Weights are real, finite-range, non-NaN floats; non-negative when built with check_weights

Design Decisions:
    - Negative weights are rejected here, at the supply boundary, and nowhere
      else; the engine trusts its input
    - Copy-on-build: later mutation of the caller's dict is invisible to any
      in-flight computation holding the snapshot
"""

import math
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType

from skyroute.core.domain_types import Adjacency, Weight
from skyroute.core.errors import MalformedGraphError, NegativeWeightError

_EMPTY: Mapping[Hashable, Weight] = MappingProxyType({})


@dataclass(frozen=True)
class PathGraph:
    """Read-only node -> (neighbor -> weight) adjacency."""

    adjacency: Adjacency
    domain: tuple[Hashable, ...]

    @classmethod
    def from_mapping(
        cls, graph: Adjacency, *, check_weights: bool = True,
    ) -> "PathGraph":
        """Copy and validate a nested mapping into a snapshot.

        Raises MalformedGraphError for structural problems and, when
        check_weights is set, NegativeWeightError for any weight below 0.
        """
        if isinstance(graph, PathGraph):
            return graph
        if not isinstance(graph, Mapping):
            raise MalformedGraphError(
                f"expected a mapping of node -> edges, got {type(graph).__name__}",
            )

        adjacency: dict[Hashable, Mapping[Hashable, Weight]] = {}
        seen: dict[Hashable, None] = {}
        for node, edges in graph.items():
            if not isinstance(edges, Mapping):
                raise MalformedGraphError(
                    f"edges of {node!s} must be a mapping of neighbor -> weight",
                )
            seen.setdefault(node)
            normalized: dict[Hashable, Weight] = {}
            for neighbor, weight in edges.items():
                normalized[neighbor] = _normalize_weight(
                    node, neighbor, weight, check_weights,
                )
                seen.setdefault(neighbor)
            adjacency[node] = MappingProxyType(normalized)

        return cls(adjacency=MappingProxyType(adjacency), domain=tuple(seen))

    def neighbors(self, node: Hashable) -> Mapping[Hashable, Weight]:
        """Outgoing neighbors and weights. Empty for sinks and unknown nodes."""
        return self.adjacency.get(node, _EMPTY)

    def nodes(self) -> Iterator[Hashable]:
        return iter(self.domain)

    def edges(self) -> Iterator[tuple[Hashable, Hashable, Weight]]:
        for node, edges in self.adjacency.items():
            for neighbor, weight in edges.items():
                yield node, neighbor, weight

    def to_dict(self) -> dict:
        """Plain nested dict copy for presentation."""
        return {node: dict(edges) for node, edges in self.adjacency.items()}

    def __contains__(self, node: object) -> bool:
        return node in self.domain

    def __len__(self) -> int:
        return len(self.domain)


def _normalize_weight(
    node: Hashable, neighbor: Hashable, weight: object, check_weights: bool,
) -> Weight:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise MalformedGraphError(
            f"weight of {node!s} -> {neighbor!s} must be a number",
        )
    try:
        value = float(weight)
    except OverflowError as e:
        raise MalformedGraphError(
            f"weight of {node!s} -> {neighbor!s} is out of range",
        ) from e
    if math.isnan(value):
        raise MalformedGraphError(f"weight of {node!s} -> {neighbor!s} is NaN")
    if check_weights and value < 0:
        raise NegativeWeightError(node, neighbor, value)
    return Weight(value)
