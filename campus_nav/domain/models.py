"""Immutable domain models for the Campus Navigator.

All models are frozen dataclasses with slots. The routing core never
mutates them; locations and pathways are owned by the host application
and handed over as read-only collections.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

from ..formatting import format_distance, format_duration


class LocationCategory(str, Enum):
    """Kind of place a location represents on the campus map."""

    BUILDING = "building"
    LANDMARK = "landmark"
    PARKING = "parking"
    ENTRANCE = "entrance"


@dataclass(frozen=True, slots=True)
class Location:
    """A named point on the campus map.

    Attributes:
        id: Unique location identifier (e.g., 'main-library')
        name: Human-readable display name
        x: Horizontal position as a percentage of the map width
        y: Vertical position as a percentage of the map height (grows south)
        category: Kind of place
        description: Free-text description
        amenities: Amenity labels (e.g., 'WiFi', 'Restrooms')
        accessible: Whether the location is wheelchair accessible
    """

    id: str
    name: str
    x: float
    y: float
    category: LocationCategory = LocationCategory.BUILDING
    description: str = ""
    amenities: tuple[str, ...] = field(default_factory=tuple)
    accessible: bool = True

    def __post_init__(self) -> None:
        """Validate percentage coordinates."""
        if not 0 <= self.x <= 100:
            raise ValueError(f"x must be between 0 and 100, got {self.x}")
        if not 0 <= self.y <= 100:
            raise ValueError(f"y must be between 0 and 100, got {self.y}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Location:
        """Build a location from its JSON representation."""
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            x=float(data["x"]),
            y=float(data["y"]),
            category=LocationCategory(data.get("type", "building")),
            description=str(data.get("description", "")),
            amenities=tuple(data.get("amenities", ())),
            accessible=bool(data.get("accessibility", True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "type": self.category.value,
            "description": self.description,
            "amenities": list(self.amenities),
            "accessibility": self.accessible,
        }


@dataclass(frozen=True, slots=True)
class Pathway:
    """An undirected walkway between two locations.

    Attributes:
        id: Unique pathway identifier
        source: Location id at one end (``from`` in JSON)
        target: Location id at the other end (``to`` in JSON)
        distance: Walking distance in meters
        surface: Surface label (e.g., 'paved', 'gravel')
        accessible: Whether the pathway is wheelchair accessible
        lit: Whether the pathway is lit at night
    """

    id: str
    source: str
    target: str
    distance: float
    surface: str = "paved"
    accessible: bool = True
    lit: bool = True

    def __post_init__(self) -> None:
        if self.distance <= 0:
            raise ValueError(f"Pathway distance must be positive, got {self.distance}")

    def connects(self, a: str, b: str) -> bool:
        """Check whether the pathway links ``a`` and ``b`` in either direction."""
        return (self.source == a and self.target == b) or (
            self.source == b and self.target == a
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Pathway:
        """Build a pathway from its JSON representation."""
        return cls(
            id=str(data["id"]),
            source=str(data["from"]),
            target=str(data["to"]),
            distance=float(data["distance"]),
            surface=str(data.get("surface", "paved")),
            accessible=bool(data.get("accessibility", True)),
            lit=bool(data.get("lighting", True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "from": self.source,
            "to": self.target,
            "distance": self.distance,
            "surface": self.surface,
            "accessibility": self.accessible,
            "lighting": self.lit,
        }


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a walking route computation.

    Attributes:
        path: Ordered tuple of location ids, start and end included
        total_distance: Total walking distance in meters
        duration_minutes: Estimated walking time, rounded up to the minute
        directions: One human-readable step per path element
    """

    path: tuple[str, ...]
    total_distance: float
    duration_minutes: int
    directions: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.path) < 2:
            raise ValueError(f"Route needs at least 2 stops, got {len(self.path)}")

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the route."""
        return len(self.path)

    @property
    def formatted_distance(self) -> str:
        return format_distance(self.total_distance)

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration_minutes)
