"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

There is no module-level default container. The host
creates one, keeps it, and calls ``invalidate()`` on the resolved
CampusDataPort after it writes new data.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Holds one shared instance per port for a running host.

    Usage:
        container = Container.create_default()
        finder = container.resolve(RouteFinderService)

        # Swap the data source, e.g. in tests
        container.register(CampusDataPort, lambda: InMemoryCampusRepository(...))

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind a port type to the factory that builds its single instance.

        Rebinding drops every instance built so far, so services resolved
        afterwards pick up the new collaborator.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._instances.clear()

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the shared instance for a port type, building it on first use.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._instances:
                try:
                    factory = self._factories[port_type]
                except KeyError:
                    raise KeyError(f"Type not registered: {port_type}") from None
                self._instances[port_type] = factory()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.data import JsonCampusRepository
        from .adapters.graph import DijkstraRouteSolver
        from .adapters.matching import SubstringLocationMatcher
        from .ports.data import CampusDataPort
        from .ports.graph import RouteSolverPort
        from .ports.matching import LocationMatcherPort
        from .services import RouteFinderService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            CampusDataPort,
            lambda: JsonCampusRepository(config.data),
        )
        container.register(
            LocationMatcherPort,
            lambda: SubstringLocationMatcher(),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(),
        )

        def create_route_finder() -> RouteFinderService:
            return RouteFinderService(
                data=container.resolve(CampusDataPort),
                matcher=container.resolve(LocationMatcherPort),
                route_solver=container.resolve(RouteSolverPort),
                config=config.routing,
            )

        container.register(RouteFinderService, create_route_finder)

        return container
