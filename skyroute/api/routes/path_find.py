"""Path-Find Routes — help text, shortest path query, and current path map.

Invariants:
    - POST body validated by PathFindRequest before the planner runs (400 otherwise)
    - Planner failures propagate to the global SkyRouteError handler (5xx envelope)
    - GET returns plain text, never JSON

Design Decisions:
    - Provider and settings injected via Depends: tests override, no globals patched
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from skyroute.config import Settings, get_settings
from skyroute.core.domain_types import Point
from skyroute.infrastructure.graph_provider import (
    StaticGraphProvider, get_graph_provider,
)
from skyroute.schemas.path_find import (
    PathFindRequest, PathFindResponse, PathMapResponse,
)
from skyroute.services.route_planner import plan_route

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/path-find", tags=["path-find"])

HELP_TEXT = """Once the landing zone is known, {drone} has to get there by the shortest route.

Satellite S1 guides {drone}: it reports every path between points on the map and the distance of each.

POST a JSON body with a start and an end point, both one of {points}.
The response holds the path as an ordered list of points {drone} should follow, and the total distance.
When the end point cannot be reached from the start, distance is null and the path is empty."""


@router.get("", response_class=PlainTextResponse)
async def describe_path_find(settings: Settings = Depends(get_settings)):
    """Plain-text description of the path-find task."""
    return HELP_TEXT.format(
        drone=settings.drone_name,
        points=", ".join(p.value for p in Point),
    )


@router.post("", response_model=PathFindResponse)
async def find_path(
    body: PathFindRequest,
    provider: StaticGraphProvider = Depends(get_graph_provider),
    settings: Settings = Depends(get_settings),
):
    """Shortest path and total distance from start to end."""
    result = await plan_route(
        provider, body.start, body.end, settings.max_graph_nodes,
    )
    return PathFindResponse.from_result(result)


@router.get("/points", response_model=PathMapResponse)
async def get_path_map(
    provider: StaticGraphProvider = Depends(get_graph_provider),
):
    """Valid points and the directed distances S1 currently reports."""
    graph = await provider.get_paths()
    return PathMapResponse(points=list(Point), paths=graph.to_dict())
