"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CampusNavError,
    DataSourceError,
    LocationNotFoundError,
    NoRouteFoundError,
)
from .models import Location, LocationCategory, Pathway, RouteResult

__all__ = [
    # Models
    "Location",
    "LocationCategory",
    "Pathway",
    "RouteResult",
    # Errors
    "CampusNavError",
    "LocationNotFoundError",
    "NoRouteFoundError",
    "DataSourceError",
]
