"""Free-text service search with one-hop highlight expansion.

A match pulls in its direct dependencies and its direct dependents so
the graph view can show the immediate neighborhood. Expansion never
goes past one hop.
"""

from __future__ import annotations

import logging
from typing import Sequence

from service_catalog.config import SEARCH_FIELDS
from service_catalog.models.service import SearchResult, Service

logger = logging.getLogger(__name__)


def _matches(service: Service, needle: str) -> bool:
    return any(needle in getattr(service, field).lower() for field in SEARCH_FIELDS)


def search_services(query: str, services: Sequence[Service]) -> SearchResult:
    """Match services by name, description or owner and expand by one hop.

    Matching is a case-insensitive substring test. The highlighted set
    is the matched names, plus every dependency a matched service
    declares (taken as written, dangling names included), plus every
    service that declares a matched service as a dependency.

    A blank query returns an inactive result with empty sets. Callers
    treat that as "show everything", not "hide everything".

    Args:
        query: Free text typed by the user.
        services: The collection to search. Not modified.

    Returns:
        SearchResult with matched and highlighted names.
    """
    if not query.strip():
        return SearchResult(query=query)

    needle = query.lower()
    matched_services = [service for service in services if _matches(service, needle)]
    matched = {service.name for service in matched_services}

    highlighted = set(matched)
    for service in matched_services:
        highlighted.update(service.dependencies)

    # Inbound hop: anyone declaring a matched service as a dependency
    for service in services:
        if any(dep in matched for dep in service.dependencies):
            highlighted.add(service.name)

    result = SearchResult(
        query=query,
        matched=frozenset(matched),
        highlighted=frozenset(highlighted),
    )
    logger.debug(
        "search_complete query=%r matched=%d related=%d",
        query,
        result.matched_count,
        result.related_count,
    )
    return result
