"""Edge derivation and networkx export for rendering surfaces."""

from __future__ import annotations

from typing import Collection, Iterable, Sequence

import networkx as nx

from service_catalog.analysis.resolver import build_service_index
from service_catalog.config import EDGE_ID_SEPARATOR
from service_catalog.models.service import DependencyEdge, Service


def dependencies_to_edges(
    services: Sequence[Service],
    cycle_groups: Iterable[Collection[str]] | None = None,
) -> list[DependencyEdge]:
    """Build one edge per declared dependency.

    Edges follow collection order, then dependency order. Duplicate and
    dangling dependencies each still produce an edge; the layout step
    decides what it can draw.

    Args:
        services: The collection to convert. Not modified.
        cycle_groups: Groups of services that form cycles together. An
            edge whose endpoints fall in the same group is marked animated.

    Returns:
        List of DependencyEdge.
    """
    group_of: dict[str, int] = {}
    for pos, group in enumerate(cycle_groups or ()):
        for name in group:
            group_of[name] = pos

    edges: list[DependencyEdge] = []
    for service in services:
        for dep in service.dependencies:
            edges.append(
                DependencyEdge(
                    source=service.name,
                    target=dep,
                    id=f"{service.name}{EDGE_ID_SEPARATOR}{dep}",
                    animated=(
                        service.name in group_of
                        and group_of[service.name] == group_of.get(dep)
                    ),
                )
            )
    return edges


def to_digraph(services: Sequence[Service]) -> nx.DiGraph:
    """Export the collection as a networkx DiGraph.

    Nodes carry the display metadata. Only resolved dependencies become
    edges, so dangling names never appear as nodes. Duplicate names resolve
    to the last record, as in build_service_index.

    Args:
        services: The collection to export. Not modified.

    Returns:
        A new DiGraph.
    """
    index = build_service_index(services)
    graph: nx.DiGraph = nx.DiGraph()
    for service in index.values():
        graph.add_node(
            service.name,
            description=service.description,
            owner=service.owner,
            github=service.github,
        )

    for service in index.values():
        for dep in service.dependencies:
            if dep in graph:
                graph.add_edge(service.name, dep)
    return graph
