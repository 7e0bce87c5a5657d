"""Graph ports - Abstractions for routing.

These protocols define the contract for shortest-path computation over
the campus walking graph.
"""

from __future__ import annotations

from typing import Dict, List, Protocol, Tuple

# Maps location id -> list of (neighbor_id, distance_m)
Graph = Dict[str, List[Tuple[str, float]]]


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py

    The solver computes the minimum-weight path through the walking
    graph. It never touches location metadata.
    """

    def solve(self, graph: Graph, start: str, end: str) -> List[str]:
        """Find the shortest path between two nodes.

        Args:
            graph: The campus walking graph.
            start: Start location id.
            end: End location id.

        Returns:
            Ordered location ids from start to end, or an empty list
            if the end cannot be reached.
        """
        ...
