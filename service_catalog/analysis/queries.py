"""Point lookups over a service collection.

These scan the collection directly; no index is kept between calls.
"""

from __future__ import annotations

from typing import Sequence

from service_catalog.models.service import Service


def find_service(name: str, services: Sequence[Service]) -> Service | None:
    """Return the first service with this name, or None."""
    for service in services:
        if service.name == name:
            return service
    return None


def get_dependencies(name: str, services: Sequence[Service]) -> list[str]:
    """Return the declared dependencies of a service.

    Order and duplicates are kept as declared. An unknown service and a
    service without dependencies both give an empty list.

    Args:
        name: Service to look up (case-sensitive).
        services: The collection to search.

    Returns:
        New list of dependency names.
    """
    service = find_service(name, services)
    if service is None:
        return []
    return list(service.dependencies)


def get_dependents(name: str, services: Sequence[Service]) -> list[str]:
    """Return the services that declare a dependency on ``name``.

    Results follow collection order. A service naming the target several
    times is listed once.

    Args:
        name: Service whose dependents are wanted (case-sensitive).
        services: The collection to search.

    Returns:
        New list of dependent service names.
    """
    return [service.name for service in services if name in service.dependencies]
