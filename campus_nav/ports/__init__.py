"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing core and external
adapters. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (services)
- Output ports: How the application drives external systems (adapters)
"""

from .data import CampusDataPort
from .graph import Graph, RouteSolverPort
from .matching import LocationMatcherPort

__all__ = [
    # Data
    "CampusDataPort",
    # Matching
    "LocationMatcherPort",
    # Graph
    "Graph",
    "RouteSolverPort",
]
