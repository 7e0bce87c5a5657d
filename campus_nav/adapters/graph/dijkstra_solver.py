"""Dijkstra Route Solver adapter.

This adapter wraps the Dijkstra implementation in graph/dijkstra.py
and adds:
- Endpoint validation
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...domain.errors import LocationNotFoundError
from ...graph.dijkstra import dijkstra
from ...ports.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, start: str, end: str) -> List[str]:
        """Find the shortest path between two locations.

        Args:
            graph: The campus walking graph.
            start: Start location id.
            end: End location id.

        Returns:
            Ordered location ids from start to end, ``[start]`` when both
            are the same, or an empty list if ``end`` is unreachable.

        Raises:
            LocationNotFoundError: If start or end is not a graph node.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": start, "end": end, "nodes": len(graph)},
        )

        if start not in graph:
            raise LocationNotFoundError(
                f"Start location not in graph: {start}",
                query=start,
                role="source",
            )
        if end not in graph:
            raise LocationNotFoundError(
                f"End location not in graph: {end}",
                query=end,
                role="destination",
            )

        path = dijkstra(graph, start, end)

        if not path:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
        else:
            self._logger.debug(
                "Route found",
                extra={"start": start, "end": end, "stops": len(path)},
            )

        return path
