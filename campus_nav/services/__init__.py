"""Services layer - Application orchestration.

This module contains the application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- RouteFinderService: Walking routes between campus locations
"""

from .route_finder import RouteFinderService

__all__ = ["RouteFinderService"]
