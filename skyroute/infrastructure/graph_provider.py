"""Graph Provider — supplies the S1 path map as an immutable PathGraph snapshot.

Invariants:
    - Every node label in the map is a Point (A..F); anything else is malformed
    - Weights validated once at load time (negative → NegativeWeightError)
    - get_paths() returns the same snapshot object until reload() swaps it
    - A snapshot handed to an in-flight query is never mutated

Design Decisions:
    - Built-in map unless SKYROUTE_GRAPH_FILE points at a JSON file of the
      shape {"A": {"B": 2, ...}, ...}
    - File read off the event loop (asyncio.to_thread): one blocking read per load
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from skyroute.config import get_settings
from skyroute.core.domain_types import Point
from skyroute.core.errors import GraphUnavailableError, MalformedGraphError
from skyroute.core.graph_model import PathGraph

logger = logging.getLogger(__name__)

# Distances satellite S1 reports between points on the map
S1_PATHS: dict[str, dict[str, float]] = {
    "A": {"B": 2, "C": 5, "E": 9},
    "B": {"C": 1, "D": 4},
    "C": {"D": 1, "E": 6},
    "D": {"E": 2, "F": 7},
    "E": {"F": 3},
    "F": {"A": 10},
}


class StaticGraphProvider:
    """GraphProvider backed by the built-in map or a JSON file."""

    def __init__(self, graph_file: Path | None = None):
        self._graph_file = graph_file
        self._snapshot: PathGraph | None = None

    async def get_paths(self) -> PathGraph:
        if self._snapshot is None:
            self._snapshot = await self._load()
        return self._snapshot

    async def reload(self) -> PathGraph:
        """Build a fresh snapshot and swap it in; old holders keep theirs."""
        self._snapshot = await self._load()
        return self._snapshot

    async def _load(self) -> PathGraph:
        raw = S1_PATHS if self._graph_file is None else await self._read_file()
        graph = PathGraph.from_mapping(to_point_graph(raw))
        logger.info(
            "Path map loaded",
            extra={"node_count": len(graph), "path": str(self._graph_file or "builtin")},
        )
        return graph

    async def _read_file(self) -> object:
        try:
            text = await asyncio.to_thread(self._graph_file.read_text, "utf-8")
            return json.loads(text)
        except OSError as e:
            raise GraphUnavailableError(f"cannot read {self._graph_file}: {e}") from e
        except json.JSONDecodeError as e:
            raise MalformedGraphError(f"{self._graph_file} is not valid JSON: {e}") from e


def to_point_graph(raw: object) -> dict:
    """Re-key a label-keyed nested mapping by Point. Weights pass through."""
    if not isinstance(raw, Mapping):
        raise MalformedGraphError("path map must be an object of point -> edges")
    graph: dict[Point, object] = {}
    for label, edges in raw.items():
        if not isinstance(edges, Mapping):
            raise MalformedGraphError(f"edges of {label!s} must be an object")
        graph[_to_point(label)] = {
            _to_point(neighbor): weight for neighbor, weight in edges.items()
        }
    return graph


def _to_point(label: object) -> Point:
    try:
        return Point(label)
    except ValueError as e:
        raise MalformedGraphError(f"{label!r} is not a point on the map") from e


@lru_cache
def get_graph_provider() -> StaticGraphProvider:
    """Process-wide provider (FastAPI dependency)."""
    return StaticGraphProvider(get_settings().graph_file)
