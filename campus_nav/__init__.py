"""Top-level package for the Campus Navigator routing engine.

This package turns two read-only collections supplied by a host
application (campus locations and the pathways between them) into
walking routes: free-text location resolution, graph construction,
shortest-path search, distance/time estimates and step-by-step
directions.

The public entry point is ``RouteFinderService.find_path``.
"""

from .formatting import format_distance, format_duration
from .services import RouteFinderService

__all__ = ["RouteFinderService", "format_distance", "format_duration"]
