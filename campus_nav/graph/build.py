"""Graph construction from location and pathway records.

The graph is rebuilt for every routing request from the collections the
host supplies, so nothing here keeps state between calls.
"""

import logging
from typing import Sequence

from ..domain.models import Location, Pathway
from ..ports.graph import Graph

logger = logging.getLogger(__name__)


def build_graph(locations: Sequence[Location], pathways: Sequence[Pathway]) -> Graph:
    """Build an undirected weighted adjacency list.

    Every location becomes a node, even without pathways. Each pathway
    whose two endpoints exist adds an edge in both directions, weighted
    by its declared distance. Pathways pointing at unknown locations are
    skipped.
    """
    graph: Graph = {location.id: [] for location in locations}

    skipped = 0
    for pathway in pathways:
        if pathway.source not in graph or pathway.target not in graph:
            skipped += 1
            logger.debug(
                "Skipping pathway with unknown endpoint",
                extra={
                    "pathway_id": pathway.id,
                    "from": pathway.source,
                    "to": pathway.target,
                },
            )
            continue

        graph[pathway.source].append((pathway.target, pathway.distance))
        graph[pathway.target].append((pathway.source, pathway.distance))

    logger.debug(
        "Graph built",
        extra={
            "nodes": len(graph),
            "edges": len(pathways) - skipped,
            "skipped": skipped,
        },
    )
    return graph
