"""In-memory campus data adapter.

For hosts that already hold the location and pathway collections
(e.g., loaded from their own database) and for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ...domain.models import Location, Pathway


@dataclass
class InMemoryCampusRepository:
    """Campus data provider backed by plain lists.

    This adapter implements CampusDataPort. The lists are copied on
    construction so later changes to the caller's lists are not seen.

    Attributes:
        locations: Known locations, in priority order for matching
        pathways: Known pathways
    """

    locations: Sequence[Location] = field(default_factory=list)
    pathways: Sequence[Pathway] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.locations = list(self.locations)
        self.pathways = list(self.pathways)

    def get_locations(self) -> List[Location]:
        return list(self.locations)

    def get_pathways(self, accessible_only: bool = False) -> List[Pathway]:
        if accessible_only:
            return [p for p in self.pathways if p.accessible]
        return list(self.pathways)

    def get_location(self, location_id: str) -> Optional[Location]:
        return next((loc for loc in self.locations if loc.id == location_id), None)

    def invalidate(self) -> None:
        """Nothing is cached."""
