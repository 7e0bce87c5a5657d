"""Data adapters - Implementations of CampusDataPort.

Available implementations:
- InMemoryCampusRepository: Serves collections held by the host
- JsonCampusRepository: Loads and saves locations.json / pathways.json
"""

from .json_repository import CampusSnapshot, JsonCampusRepository
from .memory_repository import InMemoryCampusRepository

__all__ = ["CampusSnapshot", "InMemoryCampusRepository", "JsonCampusRepository"]
