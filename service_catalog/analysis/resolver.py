"""Reference resolution for service dependency names.

Builds the name -> record lookup shared by cycle detection and search,
and classifies declared dependencies as resolved or dangling.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from service_catalog.models.service import Service


def build_service_index(services: Iterable[Service]) -> dict[str, Service]:
    """Map each service name to its record.

    Duplicate names overwrite earlier entries, so the last record with a
    given name wins.

    Args:
        services: The collection to index. Not modified.

    Returns:
        A new dict keyed by service name.
    """
    index: dict[str, Service] = {}
    for service in services:
        index[service.name] = service
    return index


def resolve_reference(name: str, index: Mapping[str, Service]) -> bool:
    """Return True if a dependency name matches a known service."""
    return name in index


def partition_references(
    service: Service,
    index: Mapping[str, Service],
) -> tuple[list[str], list[str]]:
    """Split a service's dependencies into resolved and dangling names.

    Declared order and duplicates are kept in both lists.

    Args:
        service: The service whose dependencies are classified.
        index: Lookup built by build_service_index.

    Returns:
        (resolved, dangling) lists of dependency names.
    """
    resolved: list[str] = []
    dangling: list[str] = []
    for dep in service.dependencies:
        if resolve_reference(dep, index):
            resolved.append(dep)
        else:
            dangling.append(dep)
    return resolved, dangling
