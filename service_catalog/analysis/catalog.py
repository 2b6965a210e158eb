"""ServiceCatalog: analysis facade over one snapshot of service records.

The catalog copies the collection into a tuple on construction and
recomputes every answer from that snapshot. Nothing is cached between
calls, so two catalogs over equal records always agree.
"""

from __future__ import annotations

from typing import Iterable

import networkx as nx

from service_catalog.analysis.cycles import detect_cycles, find_cycle_groups, find_cycle_members
from service_catalog.analysis.edges import dependencies_to_edges, to_digraph
from service_catalog.analysis.missing import detect_missing_references, detect_warnings
from service_catalog.analysis.queries import find_service, get_dependencies, get_dependents
from service_catalog.analysis.resolver import build_service_index
from service_catalog.analysis.search import search_services
from service_catalog.config import DEFAULT_CYCLE_REPORT_MODE
from service_catalog.models.service import (
    DependencyEdge,
    GraphWarning,
    SearchResult,
    Service,
)
from service_catalog.models.types import CycleReportMode


class ServiceCatalog:
    """Read-only dependency analysis over a fixed set of services.

    Wraps the module-level analysis functions so a caller rendering one
    snapshot does not have to pass the collection around.
    """

    def __init__(self, services: Iterable[Service]) -> None:
        """Snapshot the given services.

        Args:
            services: Service records. The iterable is consumed once.
        """
        self._services: tuple[Service, ...] = tuple(services)

    @property
    def services(self) -> tuple[Service, ...]:
        """Return the snapshot in collection order."""
        return self._services

    @property
    def index(self) -> dict[str, Service]:
        """Return a fresh name -> record lookup (last duplicate wins)."""
        return build_service_index(self._services)

    def get(self, name: str) -> Service | None:
        return find_service(name, self._services)

    def warnings(
        self,
        mode: CycleReportMode = DEFAULT_CYCLE_REPORT_MODE,
    ) -> list[GraphWarning]:
        """Return cycle warnings followed by missing-reference warnings."""
        return detect_warnings(self._services, mode=mode)

    def cycle_warnings(
        self,
        mode: CycleReportMode = DEFAULT_CYCLE_REPORT_MODE,
    ) -> list[GraphWarning]:
        return detect_cycles(self._services, mode=mode)

    def missing_warnings(self) -> list[GraphWarning]:
        return detect_missing_references(self._services)

    def cycle_members(self) -> frozenset[str]:
        return find_cycle_members(self._services)

    def dependencies_of(self, name: str) -> list[str]:
        """Return declared dependencies, empty for unknown services."""
        return get_dependencies(name, self._services)

    def dependents_of(self, name: str) -> list[str]:
        """Return services that declare a dependency on this one."""
        return get_dependents(name, self._services)

    def search(self, query: str) -> SearchResult:
        return search_services(query, self._services)

    def edges(self) -> list[DependencyEdge]:
        """Return one edge per declared dependency.

        Edges inside a strongly connected cycle group are animated, including
        groups the merged sweep stops short of.
        """
        return dependencies_to_edges(self._services, find_cycle_groups(self._services))

    @property
    def graph(self) -> nx.DiGraph:
        """Return a new networkx DiGraph of resolved dependencies."""
        return to_digraph(self._services)

    @property
    def node_count(self) -> int:
        """Return the number of distinct service names."""
        return len(self.index)

    @property
    def edge_count(self) -> int:
        """Return the number of declared dependencies, dangling included."""
        return sum(len(service.dependencies) for service in self._services)

    def __len__(self) -> int:
        return len(self._services)

    def __contains__(self, name: object) -> bool:
        return any(service.name == name for service in self._services)
