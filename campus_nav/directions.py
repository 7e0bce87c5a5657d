"""Turn a path of location ids into walking directions."""

from typing import Dict, List, Sequence

from .domain.models import Location


def _heading(current: Location, following: Location) -> str:
    # Map y grows downwards, so a positive dy points south.
    dx = following.x - current.x
    dy = following.y - current.y
    if abs(dx) > abs(dy):
        return "Head east" if dx > 0 else "Head west"
    return "Head south" if dy > 0 else "Head north"


def generate_directions(path: Sequence[str], locations: Sequence[Location]) -> List[str]:
    """Produce one direction string per element of ``path``.

    The first element starts the walk, the last one ends it, and every
    stop in between gets a compass heading toward the next stop.
    Paths shorter than two elements yield no directions.
    """
    if len(path) < 2:
        return []

    by_id: Dict[str, Location] = {location.id: location for location in locations}
    directions: List[str] = []

    for i, location_id in enumerate(path):
        current = by_id.get(location_id)
        if current is None:
            continue

        if i == 0:
            directions.append(f"Start at {current.name}")
        elif i == len(path) - 1:
            directions.append(f"Arrive at {current.name}")
        else:
            previous = by_id.get(path[i - 1])
            following = by_id.get(path[i + 1])
            if previous is None or following is None:
                continue
            directions.append(f"{_heading(current, following)} toward {current.name}")

    return directions
