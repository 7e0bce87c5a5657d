"""Matching port - Abstraction for free-text location resolution.

Keeping the matcher behind a protocol lets a stricter strategy
(token-based, edit distance) replace the default one without touching
the solver or the route service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location


class LocationMatcherPort(Protocol):
    """Port for resolving a query string to a single location.

    Implementation: adapters/matching/substring_matcher.py
    """

    def match(self, query: str, locations: Sequence[Location]) -> Optional[Location]:
        """Return the best-matching location for ``query``.

        Args:
            query: Free text typed by the user (e.g., 'library').
            locations: Candidate locations, in priority order.

        Returns:
            The matching location, or None if nothing matches.
        """
        ...
