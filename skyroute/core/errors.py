"""Error Hierarchy — typed, categorized exceptions for all SkyRoute failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; graph supply errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - Unreachable end points are NOT errors; they are a normal PathResult

Design Decisions:
    - Single hierarchy with SkyRouteError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    GRAPH_SUPPLY = "graph_supply"
    RESOURCE_LIMIT = "resource_limit"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    start: str | None = None
    end: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class SkyRouteError(Exception):
    """Base exception for all SkyRoute errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response.

        Graph supply failures answer with the user-facing message only, so
        edge weights and file paths never reach the client.
        """
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "start": self.context.start,
                    "end": self.context.end,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class UnknownPointError(SkyRouteError):
    """Start or end is not a point on the map."""
    def __init__(self, point: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{point}' is not a valid point",
            "UNKNOWN_POINT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.point = point


# ─── Graph Supply Errors (500-level) ────────────────────────────

class MalformedGraphError(SkyRouteError):
    """Adjacency structure is not a node -> (neighbor -> weight) mapping."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "The path map is malformed"
        super().__init__(
            f"Malformed graph: {message}",
            "MALFORMED_GRAPH", ErrorCategory.GRAPH_SUPPLY,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class NegativeWeightError(SkyRouteError):
    """Edge with a negative weight; shortest distances would be garbage."""
    def __init__(
        self, source: Any, target: Any, weight: float,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "The path map is malformed"
        super().__init__(
            f"Negative weight {weight} on edge {source!s} -> {target!s}",
            "NEGATIVE_WEIGHT", ErrorCategory.GRAPH_SUPPLY,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.source = source
        self.target = target
        self.weight = weight


class GraphTooLargeError(SkyRouteError):
    """Graph exceeds the configured node bound for a single query."""
    def __init__(self, node_count: int, limit: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "The path map is too large to route"
        super().__init__(
            f"Graph has {node_count} nodes, limit is {limit}",
            "GRAPH_TOO_LARGE", ErrorCategory.RESOURCE_LIMIT,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.node_count = node_count
        self.limit = limit


class GraphUnavailableError(SkyRouteError):
    """Graph provider could not produce a snapshot."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "The path map is unavailable"
        super().__init__(
            f"Graph unavailable: {message}",
            "GRAPH_UNAVAILABLE", ErrorCategory.GRAPH_SUPPLY,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
