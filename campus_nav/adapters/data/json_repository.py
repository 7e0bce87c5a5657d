"""JSON campus data adapter.

Reads the host's ``locations.json`` and ``pathways.json`` files and adds:
- Configuration injection (paths from config)
- Caching until explicitly invalidated
- An atomic load-all / mutate / persist-all transaction
- Typed errors for unreadable or malformed files
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, TypeVar

from ...config import DataConfig, get_config
from ...domain.errors import DataSourceError
from ...domain.models import Location, Pathway

T = TypeVar("T")


@dataclass
class CampusSnapshot:
    """Mutable copy of the campus data handed out by a transaction.

    Attributes:
        locations: All locations; add, replace or remove entries freely
        pathways: All pathways
    """

    locations: List[Location]
    pathways: List[Pathway]


@dataclass
class JsonCampusRepository:
    """Campus data provider that loads from JSON files.

    This adapter implements CampusDataPort. Both collections are read
    lazily and cached until ``invalidate()`` is called or a transaction
    commits.

    Attributes:
        config: Data configuration (directory, file names)
    """

    config: DataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    # Cached data
    _locations: Optional[List[Location]] = field(default=None, repr=False)
    _pathways: Optional[List[Pathway]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def get_locations(self) -> List[Location]:
        """Load all locations.

        Returns:
            Locations in file order.

        Raises:
            DataSourceError: If the file cannot be read or parsed.
        """
        with self._lock:
            if self._locations is None:
                self._locations = self._read(self.config.locations_path, Location.from_dict)
            return list(self._locations)

    def get_pathways(self, accessible_only: bool = False) -> List[Pathway]:
        """Load pathways, optionally only the accessible ones.

        Args:
            accessible_only: If True, drop pathways flagged inaccessible.

        Returns:
            Pathways in file order.

        Raises:
            DataSourceError: If the file cannot be read or parsed.
        """
        with self._lock:
            if self._pathways is None:
                self._pathways = self._read(self.config.pathways_path, Pathway.from_dict)
            pathways = list(self._pathways)

        if accessible_only:
            return [p for p in pathways if p.accessible]
        return pathways

    def get_location(self, location_id: str) -> Optional[Location]:
        """Get location details by id.

        Args:
            location_id: The location id to look up.

        Returns:
            The location, or None if not found.
        """
        return next(
            (loc for loc in self.get_locations() if loc.id == location_id), None
        )

    def invalidate(self) -> None:
        """Clear cached location and pathway data."""
        with self._lock:
            self._locations = None
            self._pathways = None
        self._logger.debug("Campus data cache cleared")

    @contextmanager
    def transaction(self) -> Iterator[CampusSnapshot]:
        """Read-modify-write both collections atomically.

        Usage:
            with repository.transaction() as snapshot:
                snapshot.pathways.append(new_pathway)

        Nothing is written if the block raises. On success each file is
        replaced in one step, so readers never observe a partial write.
        The cache is cleared once writing starts, even if a write fails,
        so the next read reflects whatever reached disk.

        Raises:
            DataSourceError: If the data cannot be read or written.
        """
        with self._lock:
            snapshot = CampusSnapshot(
                locations=self.get_locations(),
                pathways=self.get_pathways(),
            )
            yield snapshot

            try:
                self._write(
                    self.config.locations_path,
                    [location.to_dict() for location in snapshot.locations],
                )
                self._write(
                    self.config.pathways_path,
                    [pathway.to_dict() for pathway in snapshot.pathways],
                )
            finally:
                self.invalidate()
            self._logger.info(
                "Campus data saved",
                extra={
                    "locations": len(snapshot.locations),
                    "pathways": len(snapshot.pathways),
                },
            )

    def _read(self, path: Path, parse: Callable[[Any], T]) -> List[T]:
        self._logger.debug("Loading campus data", extra={"path": str(path)})
        try:
            with path.open(encoding="utf-8") as f:
                records = json.load(f)
            if not isinstance(records, list):
                raise ValueError(f"expected a JSON array, got {type(records).__name__}")
            items = [parse(record) for record in records]
        except (OSError, KeyError, TypeError, ValueError) as e:
            raise DataSourceError(
                f"Failed to load campus data from {path.name}",
                file_path=str(path),
                cause=e,
            )

        self._logger.info(
            "Campus data loaded",
            extra={"path": str(path), "records": len(items)},
        )
        return items

    def _write(self, path: Path, records: List[Any]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError as e:
            raise DataSourceError(
                f"Failed to save campus data to {path.name}",
                file_path=str(path),
                cause=e,
            )
