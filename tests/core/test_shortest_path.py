"""Shortest-Path Engine — verifies distances, routes, and degenerate inputs.

Tests:
    - Concrete scenarios (A -> D, A -> A, isolated E)
    - Distance equals exhaustive minimum over simple paths on seeded random graphs
    - Returned path starts at start, ends at end, and sums to the distance
    - Strict relaxation keeps the first-found predecessor; frontier ties pick lowest id
    - Input graph never mutated; repeated and concurrent calls agree
"""

import copy
import math
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from skyroute.core.domain_types import UNREACHABLE, Point
from skyroute.core.errors import MalformedGraphError
from skyroute.core.graph_model import PathGraph
from skyroute.core.shortest_path import (
    PathResult, find_shortest_path, reconstruct_path, select_frontier_minimum,
)


def path_weight(graph: dict, path: tuple) -> float:
    return sum(graph[a][b] for a, b in zip(path, path[1:]))


def brute_force_distance(graph: dict, start, end) -> float:
    """Minimum weight over every simple directed path start -> end."""
    if start == end:
        return 0.0
    best = math.inf

    def walk(node, total, seen):
        nonlocal best
        for neighbor, weight in graph.get(node, {}).items():
            if neighbor in seen:
                continue
            if neighbor == end:
                best = min(best, total + weight)
                continue
            walk(neighbor, total + weight, seen | {neighbor})

    walk(start, 0.0, {start})
    return best


def random_graph(seed: int, labels: str = "ABCDE") -> dict:
    rng = random.Random(seed)
    return {
        node: {
            other: rng.randint(0, 9)
            for other in labels
            if other != node and rng.random() < 0.4
        }
        for node in labels
    }


# ─── Concrete scenarios ─────────────────────────────────────────

def test_scenario_a_to_d(scenario_paths):
    result = find_shortest_path(scenario_paths, "A", "D")
    assert result.distance == 4
    assert result.path == ("A", "B", "C", "D")
    assert result.reachable


def test_same_start_and_end_is_zero():
    result = find_shortest_path({"A": {"B": 2}, "B": {}}, "A", "A")
    assert result == PathResult(0.0, ("A",))


def test_isolated_end_is_unreachable(scenario_paths):
    scenario_paths["E"] = {}
    result = find_shortest_path(scenario_paths, "A", "E")
    assert result.distance == UNREACHABLE
    assert result.path == ()
    assert not result.reachable


def test_end_absent_from_graph_is_unreachable(scenario_paths):
    result = find_shortest_path(scenario_paths, "A", "E")
    assert result == PathResult(UNREACHABLE, ())


def test_start_absent_from_graph_routes_only_to_itself(scenario_paths):
    assert find_shortest_path(scenario_paths, "E", "E") == PathResult(0.0, ("E",))
    assert find_shortest_path(scenario_paths, "E", "A") == PathResult(UNREACHABLE, ())


def test_direction_matters(scenario_paths):
    assert not find_shortest_path(scenario_paths, "D", "A").reachable


def test_end_without_incoming_edges():
    graph = {"A": {"B": 1}, "B": {}, "C": {"A": 1}}
    assert find_shortest_path(graph, "A", "C") == PathResult(UNREACHABLE, ())


def test_zero_weight_edges_and_self_loop():
    graph = {"A": {"A": 0, "B": 0}, "B": {"C": 0}, "C": {}}
    result = find_shortest_path(graph, "A", "C")
    assert result.distance == 0
    assert result.path == ("A", "B", "C")
    assert find_shortest_path(graph, "A", "A").path == ("A",)


def test_point_identifiers(scenario_paths):
    graph = {
        Point(node): {Point(n): w for n, w in edges.items()}
        for node, edges in scenario_paths.items()
    }
    result = find_shortest_path(graph, Point.A, Point.D)
    assert result.path == (Point.A, Point.B, Point.C, Point.D)


# ─── Optimality ─────────────────────────────────────────────────

@pytest.mark.parametrize("seed", range(30))
def test_distance_matches_exhaustive_minimum(seed):
    graph = random_graph(seed)
    for start in graph:
        for end in graph:
            expected = brute_force_distance(graph, start, end)
            result = find_shortest_path(graph, start, end)
            assert result.distance == expected
            if math.isinf(expected):
                assert result.path == ()
            else:
                assert result.path[0] == start
                assert result.path[-1] == end
                assert path_weight(graph, result.path) == result.distance


def test_repeated_calls_agree():
    graph = random_graph(7)
    first = find_shortest_path(graph, "A", "E")
    second = find_shortest_path(graph, "A", "E")
    assert first == second


def test_concurrent_calls_share_a_snapshot():
    graph = PathGraph.from_mapping(random_graph(11))
    expected = find_shortest_path(graph, "A", "D")
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(
            lambda _: find_shortest_path(graph, "A", "D"), range(64),
        ))
    assert all(r == expected for r in results)


# ─── Ties ───────────────────────────────────────────────────────

def test_equal_cost_keeps_first_found_predecessor():
    # A -> D directly (2) is found before A -> B -> D (1 + 1)
    graph = {"A": {"B": 1, "D": 2}, "B": {"D": 1}, "D": {}}
    result = find_shortest_path(graph, "A", "D")
    assert result.distance == 2
    assert result.path == ("A", "D")


def test_frontier_tie_expands_lowest_identifier_first():
    graph = {"A": {"C": 1, "B": 1}, "B": {"D": 1}, "C": {"D": 1}, "D": {}}
    assert find_shortest_path(graph, "A", "D").path == ("A", "B", "D")


# ─── Graph handling ─────────────────────────────────────────────

def test_input_graph_not_mutated(scenario_paths):
    before = copy.deepcopy(scenario_paths)
    find_shortest_path(scenario_paths, "A", "D")
    find_shortest_path(scenario_paths, "A", "Z")
    assert scenario_paths == before


def test_negative_weights_are_not_detected_by_engine():
    # results are undefined here; the engine must still terminate
    graph = {"A": {"B": 1}, "B": {"C": 1}, "C": {"B": -5}}
    result = find_shortest_path(graph, "A", "C")
    assert isinstance(result, PathResult)


@pytest.mark.parametrize("graph", [None, ["A", "B"], {"A": ["B"]}, {"A": {"B": "far"}}])
def test_malformed_graph_raises_labelled_error(graph):
    with pytest.raises(MalformedGraphError):
        find_shortest_path(graph, "A", "B")


# ─── Helpers ────────────────────────────────────────────────────

def test_select_frontier_minimum_skips_visited_and_unreachable():
    distances = {"A": 0.0, "B": 3.0, "C": UNREACHABLE, "D": 1.0}
    assert select_frontier_minimum(distances, {"A"}) == "D"
    assert select_frontier_minimum(distances, {"A", "B", "D"}) is None


def test_select_frontier_minimum_breaks_ties_by_identifier():
    distances = {"C": 2.0, "B": 2.0, "D": 2.0}
    assert select_frontier_minimum(distances, set()) == "B"


def test_select_frontier_minimum_empty():
    assert select_frontier_minimum({}, set()) is None


def test_reconstruct_path_follows_links_to_start():
    predecessors = {"D": "C", "C": "B", "B": "A"}
    assert reconstruct_path(predecessors, "A", "D") == ("A", "B", "C", "D")


def test_reconstruct_path_stops_at_missing_link():
    assert reconstruct_path({"D": None}, "A", "D") == ("D",)
    assert reconstruct_path({"D": "C"}, "A", "D") == ("C", "D")


def test_weight_beyond_float_range_is_malformed():
    with pytest.raises(MalformedGraphError):
        find_shortest_path({"A": {"B": 10**400}, "B": {}}, "A", "B")
