"""Route Planner — imperative shell around the shortest-path engine.

Invariants:
    - start/end coerced to Point before the engine runs (UnknownPointError otherwise)
    - Graph size checked against max_graph_nodes before the engine runs
    - Unreachable results are returned, not raised

Design Decisions:
    - Fetch snapshot (IO) → pure engine → log: the engine never sees the provider
"""

import logging

from skyroute.core.domain_types import Point
from skyroute.core.errors import (
    ErrorContext, GraphTooLargeError, SkyRouteError, UnknownPointError,
)
from skyroute.core.provider_protocols import GraphProvider
from skyroute.core.shortest_path import PathResult, find_shortest_path

logger = logging.getLogger(__name__)


async def plan_route(
    provider: GraphProvider,
    start: Point | str,
    end: Point | str,
    max_graph_nodes: int,
) -> PathResult:
    """Shortest route between two map points using the provider's snapshot."""
    start_point = _as_point(start)
    end_point = _as_point(end)
    try:
        graph = await provider.get_paths()
    except SkyRouteError as e:
        e.context.start = start_point.value
        e.context.end = end_point.value
        raise

    if len(graph) > max_graph_nodes:
        raise GraphTooLargeError(
            len(graph), max_graph_nodes,
            ErrorContext(start=start_point.value, end=end_point.value),
        )

    result = find_shortest_path(graph, start_point, end_point)
    logger.info(
        f"Route {start_point.value} -> {end_point.value} planned",
        extra={
            "start": start_point.value,
            "end": end_point.value,
            "distance": result.distance if result.reachable else None,
            "route": [Point(p).value for p in result.path],
        },
    )
    return result


def _as_point(value: Point | str) -> Point:
    try:
        return Point(value)
    except ValueError as e:
        raise UnknownPointError(str(value)) from e
