"""Substring location matcher adapter.

Resolves a free-text query with a permissive, order-dependent set of
case-insensitive substring rules. The first location (in input order)
satisfying any rule wins; there is no scoring across candidates, no
token matching and no edit distance, so "sci bldg" does not resolve to
"Science Building".
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...domain.models import Location

_WHITESPACE = re.compile(r"\s+")


@dataclass
class SubstringLocationMatcher:
    """Location matcher using case-insensitive substring rules.

    This adapter implements LocationMatcherPort. For each candidate the
    rules below are tried in order:

    1. the location name contains the query;
    2. the query contains the location name;
    3. the name without whitespace contains the query without whitespace;
    4. the location id contains the query with whitespace runs turned
       into hyphens.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def match(self, query: str, locations: Sequence[Location]) -> Optional[Location]:
        """Return the first location matching ``query``.

        Args:
            query: Free text typed by the user.
            locations: Candidate locations, in priority order.

        Returns:
            The matching location, or None if nothing matches.
        """
        needle = query.lower()
        compact_needle = _WHITESPACE.sub("", needle)
        slug_needle = _WHITESPACE.sub("-", needle)

        for location in locations:
            name = location.name.lower()
            if (
                needle in name
                or name in needle
                or compact_needle in _WHITESPACE.sub("", name)
                or slug_needle in location.id.lower()
            ):
                self._logger.debug(
                    "Query matched",
                    extra={"query": query, "location_id": location.id},
                )
                return location

        self._logger.debug("Query matched nothing", extra={"query": query})
        return None
