"""Shortest-Path Engine — label-setting (Dijkstra) search from start to end.

Invariants:
    - Pure: tables are local to one call, the supplied graph is never mutated
    - Distances only decrease; a visited node's distance is final
    - Relaxation uses strict < so ties keep the first-found predecessor
    - Frontier tie-break is the lowest node identifier (deterministic)
    - Unreachable end → PathResult(UNREACHABLE, ()), never an exception
    - start == end → PathResult(0.0, (start,)), even if start is not in the graph

Design Decisions:
    - O(V²) frontier scan over a heap: the map has a handful of points and
      the scan keeps the selection a plain function of (distances, visited)
    - Negative weights are NOT checked here. Results are undefined for them;
      PathGraph.from_mapping rejects them at the supply boundary
"""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass

from skyroute.core.domain_types import UNREACHABLE, is_reachable
from skyroute.core.graph_model import PathGraph


@dataclass(frozen=True)
class PathResult:
    """Outcome of one query: total distance plus the ordered route."""

    distance: float
    path: tuple[Hashable, ...] = ()

    @property
    def reachable(self) -> bool:
        return is_reachable(self.distance)


def find_shortest_path(
    graph: PathGraph | Mapping, start: Hashable, end: Hashable,
) -> PathResult:
    """Minimum-total-weight path from start to end.

    A raw nested mapping is accepted and snapshotted without the weight
    sign check; pass a validated PathGraph to get that guarantee. Nodes
    absent from the graph are treated as isolated.
    """
    snapshot = PathGraph.from_mapping(graph, check_weights=False)

    domain = dict.fromkeys(snapshot.domain)
    domain.setdefault(start)
    domain.setdefault(end)

    distances: dict[Hashable, float] = {node: UNREACHABLE for node in domain}
    distances[start] = 0.0

    predecessors: dict[Hashable, Hashable | None] = {end: None}
    for neighbor in snapshot.neighbors(start):
        predecessors[neighbor] = start

    visited: set[Hashable] = set()
    node = select_frontier_minimum(distances, visited)
    while node is not None:
        _relax(snapshot, node, distances, predecessors)
        visited.add(node)
        node = select_frontier_minimum(distances, visited)

    if not is_reachable(distances[end]):
        return PathResult(UNREACHABLE, ())
    return PathResult(
        distances[end], reconstruct_path(predecessors, start, end),
    )


def select_frontier_minimum(
    distances: Mapping[Hashable, float], visited: set[Hashable],
) -> Hashable | None:
    """Unvisited node with the smallest finite distance, lowest id on ties.

    Returns None once every remaining node is visited or unreachable.
    """
    best: Hashable | None = None
    best_distance = UNREACHABLE
    for node, distance in distances.items():
        if node in visited or not is_reachable(distance):
            continue
        if best is None or (distance, node) < (best_distance, best):
            best, best_distance = node, distance
    return best


def reconstruct_path(
    predecessors: Mapping[Hashable, Hashable | None],
    start: Hashable,
    end: Hashable,
) -> tuple[Hashable, ...]:
    """Walk predecessor links back from end; stop at start or a missing link."""
    path = [end]
    on_path = {end}
    node = end
    while node != start:
        parent = predecessors.get(node)
        # cycle only possible with negative weights
        if parent is None or parent in on_path:
            break
        path.append(parent)
        on_path.add(parent)
        node = parent
    path.reverse()
    return tuple(path)


def _relax(
    graph: PathGraph,
    node: Hashable,
    distances: dict[Hashable, float],
    predecessors: dict[Hashable, Hashable | None],
) -> None:
    base = distances[node]
    for neighbor, weight in graph.neighbors(node).items():
        candidate = base + weight
        if candidate < distances[neighbor]:
            distances[neighbor] = candidate
            predecessors[neighbor] = node
