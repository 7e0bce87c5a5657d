"""Display helpers for route distances and durations."""

import math


def format_distance(meters: float) -> str:
    """Format a distance in meters for display.

    Distances under a kilometer are shown as whole meters ("42m"),
    longer ones in kilometers with one decimal ("1.3km").
    """
    if meters < 1000:
        # Half-up rounding, round() would give "0m" for 0.5.
        return f"{math.floor(meters + 0.5)}m"
    return f"{meters / 1000:.1f}km"


def format_duration(minutes: int) -> str:
    """Format a duration in minutes as "12 min" or "2h 5m"."""
    if minutes < 60:
        return f"{minutes} min"
    hours, remaining = divmod(minutes, 60)
    return f"{hours}h {remaining}m"
