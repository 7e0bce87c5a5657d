"""Walking distance along a computed path."""

import math
from typing import Dict, Sequence

from ..domain.models import Location, Pathway

# Map coordinates are percentages; 100% is roughly one kilometer.
METERS_PER_UNIT = 10.0


def straight_line_distance(
    a: Location, b: Location, meters_per_unit: float = METERS_PER_UNIT
) -> float:
    """Euclidean distance between two locations, scaled to meters."""
    return math.hypot(a.x - b.x, a.y - b.y) * meters_per_unit


def accumulate_distance(
    path: Sequence[str],
    locations: Sequence[Location],
    pathways: Sequence[Pathway],
    meters_per_unit: float = METERS_PER_UNIT,
) -> float:
    """Sum the walking distance of each hop along ``path``.

    Each hop uses the declared distance of the first pathway connecting
    the pair in either direction. Hops with no such pathway fall back to
    the straight-line estimate.
    """
    by_id: Dict[str, Location] = {location.id: location for location in locations}
    total = 0.0

    for current_id, next_id in zip(path, path[1:]):
        pathway = next((p for p in pathways if p.connects(current_id, next_id)), None)
        if pathway is not None:
            total += pathway.distance
            continue

        current = by_id.get(current_id)
        following = by_id.get(next_id)
        if current is not None and following is not None:
            total += straight_line_distance(current, following, meters_per_unit)

    return total
