"""Shortest-path computation using Dijkstra's algorithm."""

import heapq
from typing import Dict, List, Optional, Set, Tuple

from ..ports.graph import Graph


def dijkstra(graph: Graph, start: str, end: str) -> List[str]:
    """Compute the shortest path between two locations.

    Frontier entries are ``(distance, node)`` tuples, so when several
    nodes share the smallest tentative distance the one with the lowest
    id is settled first. Predecessors only change on a strict
    improvement, which keeps results reproducible.

    Parameters
    ----------
    graph:
        Walking graph as produced by ``build_graph``.
    start:
        Identifier of the start location.
    end:
        Identifier of the destination location.

    Returns
    -------
    list[str]
        The sequence of location ids from ``start`` to ``end``
        (inclusive). ``[start]`` when both are the same node, ``[]`` when
        ``end`` is unreachable or either id is not in the graph.
    """
    if start not in graph or end not in graph:
        return []

    distances: Dict[str, float] = {node: float("inf") for node in graph}
    previous: Dict[str, Optional[str]] = {node: None for node in graph}
    distances[start] = 0.0

    heap: List[Tuple[float, str]] = [(0.0, start)]
    visited: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        if u == end:
            break

        visited.add(u)

        for v, weight in graph.get(u, []):
            if v in visited:
                continue
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    path: List[str] = []
    node: Optional[str] = end
    while node is not None:
        path.append(node)
        node = previous.get(node)
    path.reverse()

    return path if path[0] == start else []
