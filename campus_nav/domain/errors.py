"""Typed domain errors for the Campus Navigator.

Location and route failures are expected, user-facing outcomes: the
service layer raises them internally and converts them to a ``None``
result or a friendly message at the public boundary. Data source errors
belong to the I/O category and are propagated untouched.

All errors inherit from CampusNavError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CampusNavError(Exception):
    """Base error for the campus navigation domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class LocationNotFoundError(CampusNavError):
    """A free-text query matched no location.

    Attributes:
        query: The query text as typed by the user
        role: Either "source" or "destination"
    """

    query: str = ""
    role: str = ""


@dataclass
class NoRouteFoundError(CampusNavError):
    """Both endpoints resolved but no connecting path exists.

    Attributes:
        source: Source location id
        destination: Destination location id
    """

    source: str = ""
    destination: str = ""

    @property
    def is_self_route(self) -> bool:
        """True when source and destination are the same location."""
        return bool(self.source) and self.source == self.destination


@dataclass
class DataSourceError(CampusNavError):
    """The data collaborator failed to load or persist campus data.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None

