"""Dependency graph analysis: cycles, dangling references, queries, search."""

from service_catalog.analysis.catalog import ServiceCatalog
from service_catalog.analysis.cycles import detect_cycles, find_cycle_groups, find_cycle_members
from service_catalog.analysis.edges import dependencies_to_edges, to_digraph
from service_catalog.analysis.missing import (
    detect_missing_references,
    detect_warnings,
    group_warnings,
)
from service_catalog.analysis.queries import find_service, get_dependencies, get_dependents
from service_catalog.analysis.resolver import (
    build_service_index,
    partition_references,
    resolve_reference,
)
from service_catalog.analysis.search import search_services

__all__ = [
    "ServiceCatalog",
    "build_service_index",
    "dependencies_to_edges",
    "detect_cycles",
    "detect_missing_references",
    "detect_warnings",
    "find_cycle_groups",
    "find_cycle_members",
    "find_service",
    "get_dependencies",
    "get_dependents",
    "group_warnings",
    "partition_references",
    "resolve_reference",
    "search_services",
    "to_digraph",
]
