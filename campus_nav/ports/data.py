"""Data port - Abstraction over the host's campus data collaborator.

The routing core never reads files or talks to a database. It receives
the location and pathway collections through this protocol, which the
host implements (or picks one of the bundled adapters).

The provider is passed explicitly to the service, so there is no
process-wide cache: a host that writes new data calls ``invalidate()``
on the provider it owns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location, Pathway


class CampusDataPort(Protocol):
    """Port for read access to campus locations and pathways.

    Implementations:
    - adapters/data/memory_repository.py (InMemoryCampusRepository)
    - adapters/data/json_repository.py (JsonCampusRepository)

    Failures to read the underlying store are raised as DataSourceError
    and are not interpreted by the routing core.
    """

    def get_locations(self) -> Sequence[Location]:
        """Return every known location, in storage order."""
        ...

    def get_pathways(self, accessible_only: bool = False) -> Sequence[Pathway]:
        """Return pathways, optionally only the wheelchair-accessible ones.

        Args:
            accessible_only: If True, drop pathways flagged inaccessible.

        Returns:
            Sequence of pathways in storage order.
        """
        ...

    def get_location(self, location_id: str) -> Optional[Location]:
        """Look up a single location by its exact id.

        Args:
            location_id: The location id.

        Returns:
            The location, or None if not found.
        """
        ...

    def invalidate(self) -> None:
        """Drop any cached collections so the next read sees fresh data."""
        ...
