# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ServiceRegistry`, a minimal type-keyed factory lookup used by the
binding layer as a fallback when no parsed symbol supplies a value.

Factories are stored at registration time and invoked only when a value is
looked up. No instance is cached: every lookup calls the factory again.

Usage:
    registry = ServiceRegistry()
    registry.add(Database, lambda: Database(url))
    if Database in registry.available_types:
        database = registry.get_service(Database)
"""
from __future__ import annotations

from typing import Any, Callable

from bindery.logger import logger

ServiceFactory = Callable[[], Any]


class ServiceRegistry:
    """
    Maps a value type to a zero-argument factory that produces it.

    Methods:
        add(service_type, factory): Register or overwrite the factory for a type.
        available_types: The set of types with a registered factory.
        get_service(service_type, default): Invoke the factory for a type.
    """

    def __init__(self) -> None:
        self._factories: dict[Any, ServiceFactory] = {}

    def add(self, service_type: Any, factory: ServiceFactory) -> None:
        if service_type in self._factories:
            logger.debug("Replacing service factory for %s", service_type)
        self._factories[service_type] = factory

    @property
    def available_types(self) -> frozenset[Any]:
        return frozenset(self._factories)

    def get_service(self, service_type: Any, default: Any = None) -> Any:
        """Invoke the registered factory for `service_type`, or return `default`."""
        factory = self._factories.get(service_type)
        if factory is None:
            return default
        return factory()

    def __contains__(self, service_type: object) -> bool:
        return service_type in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        names = ", ".join(
            getattr(service_type, "__name__", str(service_type))
            for service_type in self._factories
        )
        return f"ServiceRegistry({names})"
