"""Route finder service - Main orchestrator.

This service resolves two free-text queries to campus locations,
computes the shortest walking route between them and describes it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..config import RoutingConfig, get_config
from ..directions import generate_directions
from ..domain.errors import LocationNotFoundError, NoRouteFoundError
from ..domain.models import Location, RouteResult
from ..graph import accumulate_distance, build_graph
from ..ports.data import CampusDataPort
from ..ports.graph import RouteSolverPort
from ..ports.matching import LocationMatcherPort


@dataclass
class RouteFinderService:
    """Main service for campus walking directions.

    This service orchestrates the full flow:
    1. Fetch locations and (optionally accessible-only) pathways
    2. Resolve the source and destination queries
    3. Build the walking graph and solve the shortest path
    4. Measure the path and estimate walking time
    5. Generate step-by-step directions

    Attributes:
        data: Supplies location and pathway collections
        matcher: Resolves free text to a location
        route_solver: Computes shortest paths
        config: Routing constants (walking speed, fallback scale)
    """

    data: CampusDataPort
    matcher: LocationMatcherPort
    route_solver: RouteSolverPort
    config: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_route(
        self,
        source_query: str,
        destination_query: str,
        accessible_only: bool = False,
    ) -> RouteResult:
        """Compute a walking route between two free-text locations.

        Args:
            source_query: Where the user starts (e.g., 'library').
            destination_query: Where the user wants to go.
            accessible_only: Only use wheelchair-accessible pathways.

        Returns:
            RouteResult with path, distance, duration and directions.

        Raises:
            LocationNotFoundError: If either query matches no location.
            NoRouteFoundError: If no path connects the two locations.
            DataSourceError: If the data provider fails (not handled here).
        """
        locations = self.data.get_locations()
        pathways = self.data.get_pathways(accessible_only)

        source = self._resolve(source_query, locations, "source")
        destination = self._resolve(destination_query, locations, "destination")

        self._logger.info(
            "Locations resolved",
            extra={
                "source": source.id,
                "destination": destination.id,
                "accessible_only": accessible_only,
            },
        )

        graph = build_graph(locations, pathways)
        self._logger.debug(
            "Graph built",
            extra={"nodes": len(graph), "pathways": len(pathways)},
        )

        path = self.route_solver.solve(graph, source.id, destination.id)

        if not path:
            raise NoRouteFoundError(
                f"No path from {source.name} to {destination.name}",
                source=source.id,
                destination=destination.id,
            )
        if len(path) < 2:
            raise NoRouteFoundError(
                f"{source.name} is already the destination",
                source=source.id,
                destination=destination.id,
            )

        distance = accumulate_distance(
            path,
            locations,
            pathways,
            meters_per_unit=self.config.fallback_meters_per_unit,
        )
        duration = math.ceil(distance / self.config.walking_speed_mps / 60)
        directions = generate_directions(path, locations)

        self._logger.info(
            "Route computed",
            extra={
                "stops": len(path),
                "distance_m": distance,
                "duration_min": duration,
            },
        )

        return RouteResult(
            path=tuple(path),
            total_distance=distance,
            duration_minutes=duration,
            directions=tuple(directions),
        )

    def find_path(
        self,
        source_query: str,
        destination_query: str,
        accessible_only: bool = False,
    ) -> Optional[RouteResult]:
        """Compute a route, returning None when it cannot be found.

        Unknown locations and disconnected endpoints are normal outcomes
        for user input, so they yield None instead of raising. Data source
        errors still propagate.

        Args:
            source_query: Where the user starts.
            destination_query: Where the user wants to go.
            accessible_only: Only use wheelchair-accessible pathways.

        Returns:
            RouteResult, or None if either location or the route is missing.
        """
        route, _ = self.find_path_with_reason(
            source_query, destination_query, accessible_only
        )
        return route

    def find_path_with_reason(
        self,
        source_query: str,
        destination_query: str,
        accessible_only: bool = False,
    ) -> Tuple[Optional[RouteResult], Optional[str]]:
        """Compute a route, returning a user-facing message on failure.

        Returns:
            Tuple of (RouteResult or None, error message or None).
        """
        try:
            return self.find_route(source_query, destination_query, accessible_only), None
        except LocationNotFoundError as e:
            self._logger.warning(
                "Location not found",
                extra={"query": e.query, "role": e.role},
            )
            return None, f"Could not find a {e.role} location matching {e.query!r}."
        except NoRouteFoundError as e:
            self._logger.warning(
                "No route found",
                extra={"source": e.source, "destination": e.destination},
            )
            if e.is_self_route:
                return None, "You are already at your destination."
            if accessible_only:
                return None, "No accessible route found between these locations."
            return None, "No route found between these locations."

    def suggest_locations(self, text: str, limit: Optional[int] = None) -> List[Location]:
        """Suggest locations for autocompletion.

        Args:
            text: Partially typed query.
            limit: Maximum number of suggestions (defaults to config).

        Returns:
            Locations whose name or description contains ``text``, in
            storage order. Empty for blank text.
        """
        if not text.strip():
            return []
        needle = text.lower()
        limit = limit if limit is not None else self.config.suggestion_limit
        matches = [
            loc
            for loc in self.data.get_locations()
            if needle in loc.name.lower() or needle in loc.description.lower()
        ]
        return matches[:limit]

    def search_locations(self, query: str) -> List[Location]:
        """Find locations by name, description or amenity.

        Args:
            query: Search text (e.g., 'wifi').

        Returns:
            All matching locations, in storage order.
        """
        needle = query.lower()
        return [
            loc
            for loc in self.data.get_locations()
            if needle in loc.name.lower()
            or needle in loc.description.lower()
            or any(needle in amenity.lower() for amenity in loc.amenities)
        ]

    def format_result(self, route: RouteResult) -> str:
        """Format a route as human-readable text.

        Args:
            route: The computed route.

        Returns:
            Multi-line summary with the path, distance, time and steps.
        """
        names = []
        for location_id in route.path:
            location = self.data.get_location(location_id)
            names.append(location.name if location else location_id)

        lines = [
            f"Route: {' -> '.join(names)}",
            f"Distance: {route.formatted_distance}",
            f"Walking time: {route.formatted_duration}",
            "Directions:",
        ]
        lines.extend(f"  {i}. {step}" for i, step in enumerate(route.directions, 1))
        return "\n".join(lines)

    def _resolve(
        self, query: str, locations: Sequence[Location], role: str
    ) -> Location:
        if not query.strip():
            raise LocationNotFoundError(
                f"Empty {role} query", query=query, role=role
            )

        location = self.matcher.match(query, locations)
        if location is None:
            raise LocationNotFoundError(
                f"No location matches {query!r}",
                query=query,
                role=role,
            )
        return location
