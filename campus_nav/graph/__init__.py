"""Graph-related utilities for the campus walking network.

This subpackage builds an in-memory graph from location and pathway
records, runs Dijkstra on top of it and measures the resulting path.
"""

from .build import build_graph
from .dijkstra import dijkstra
from .distance import METERS_PER_UNIT, accumulate_distance, straight_line_distance

__all__ = [
    "build_graph",
    "dijkstra",
    "accumulate_distance",
    "straight_line_distance",
    "METERS_PER_UNIT",
]
