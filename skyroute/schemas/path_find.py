"""Path-Find Schemas — Pydantic models for the path-find API boundary.

Invariants:
    - start/end must be Points; anything else fails with "Not a valid point"
    - distance is null exactly when the end point is unreachable
    - whole distances go out as JSON integers (4, not 4.0)
    - path is empty exactly when distance is null

Design Decisions:
    - Infinity never reaches JSON: it maps to null here, at presentation
"""

from pydantic import BaseModel, field_validator

from skyroute.core.domain_types import Point
from skyroute.core.shortest_path import PathResult


class PathFindRequest(BaseModel):
    """Shortest path query between two map points."""
    start: Point
    end: Point

    @field_validator("start", "end", mode="before")
    @classmethod
    def check_point(cls, v: object) -> Point:
        try:
            return Point(v)
        except (ValueError, TypeError):
            raise ValueError("Not a valid point")


class PathFindResponse(BaseModel):
    """Total distance and ordered points of the shortest path."""
    distance: int | float | None
    path: list[Point] = []

    @classmethod
    def from_result(cls, result: PathResult) -> "PathFindResponse":
        if not result.reachable:
            return cls(distance=None, path=[])
        distance = result.distance
        if distance.is_integer():
            distance = int(distance)
        return cls(distance=distance, path=[Point(p) for p in result.path])


class PathMapResponse(BaseModel):
    """Valid points plus the current directed distances between them."""
    points: list[Point]
    paths: dict[Point, dict[Point, float]]
