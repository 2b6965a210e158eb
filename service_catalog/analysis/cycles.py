"""Cycle detection over declared service dependencies.

Depth-first sweep with an explicit frame stack, so arbitrarily deep
dependency chains never hit the interpreter recursion limit. Dangling
references are skipped here; they are reported by the missing-reference
check instead.
"""

from __future__ import annotations

import logging
from typing import Iterator, Mapping, Sequence

import networkx as nx

from service_catalog.analysis.edges import to_digraph
from service_catalog.analysis.resolver import build_service_index
from service_catalog.config import CYCLE_MEMBER_SEPARATOR, DEFAULT_CYCLE_REPORT_MODE
from service_catalog.models.service import GraphWarning, Service
from service_catalog.models.types import CycleReportMode, WarningKind

logger = logging.getLogger(__name__)


class _CycleSweep:
    """State for one full sweep over a collection.

    ``visited`` spans the whole sweep. The path and its position index
    belong to the traversal from the current root; a name is on the
    current path exactly when it has a position.
    """

    def __init__(self, index: Mapping[str, Service]) -> None:
        self._index = index
        self.visited: set[str] = set()
        # dict keeps first-seen order for stable warning messages
        self.members: dict[str, None] = {}

    def run(self, services: Sequence[Service]) -> list[str]:
        for service in services:
            if service.name not in self.visited:
                self._traverse(service.name)
        return list(self.members)

    def _traverse(self, root: str) -> bool:
        """Explore from root until exhausted or a cycle is found.

        Returns True when a cycle was found. The path is discarded either
        way, so later roots only see fully explored names as visited.
        """
        path: list[str] = []
        position: dict[str, int] = {}
        frames: list[tuple[str, Iterator[str]]] = []

        def enter(name: str) -> None:
            self.visited.add(name)
            position[name] = len(path)
            path.append(name)
            service = self._index.get(name)
            frames.append((name, iter(service.dependencies if service else ())))

        enter(root)
        while frames:
            name, deps = frames[-1]
            for dep in deps:
                if dep not in self._index:
                    continue
                if dep not in self.visited:
                    enter(dep)
                    break
                if dep in position:
                    # path ends with name, so the slice closes the loop
                    for member in path[position[dep]:]:
                        self.members.setdefault(member, None)
                    logger.info(
                        "cycle_detected root=%s via=%s->%s members=%d",
                        root,
                        name,
                        dep,
                        len(self.members),
                    )
                    return True
            else:
                frames.pop()
                path.pop()
                del position[name]
        return False


def find_cycle_members(
    services: Sequence[Service],
    index: Mapping[str, Service] | None = None,
) -> frozenset[str]:
    """Return every service flagged as a cycle participant in one sweep.

    Args:
        services: The collection to analyze. Not modified.
        index: Optional lookup from build_service_index, built if omitted.

    Returns:
        Frozen set of participating service names, empty for no cycles.
    """
    if index is None:
        index = build_service_index(services)
    return frozenset(_CycleSweep(index).run(services))


def _cycle_warning(members: Sequence[str]) -> GraphWarning:
    return GraphWarning(
        kind=WarningKind.CYCLE,
        message=f"Circular dependency detected: {CYCLE_MEMBER_SEPARATOR.join(members)}",
        services=tuple(members),
    )


def find_cycle_groups(services: Sequence[Service]) -> list[list[str]]:
    """Group cycle participants by strongly connected component.

    Unlike the merged sweep this never stops early, so every service on
    some cycle lands in exactly one group. A single service only forms a
    group when it depends on itself. Groups and their members follow
    collection order.
    """
    graph = to_digraph(services)
    order: dict[str, int] = {}
    for pos, service in enumerate(services):
        order.setdefault(service.name, pos)

    groups: list[list[str]] = []
    for component in nx.strongly_connected_components(graph):
        if len(component) == 1:
            (only,) = component
            if not graph.has_edge(only, only):
                continue
        groups.append(sorted(component, key=order.__getitem__))

    groups.sort(key=lambda group: order[group[0]])
    return groups


def detect_cycles(
    services: Sequence[Service],
    mode: CycleReportMode = DEFAULT_CYCLE_REPORT_MODE,
) -> list[GraphWarning]:
    """Report dependency cycles as warnings.

    In MERGED mode (the default) every cycle found during the sweep is
    folded into a single warning, so the result holds zero or one
    warning. PER_CYCLE mode emits one warning per strongly connected
    component that contains a cycle, ordered by collection position.

    A service listing itself as a dependency is a cycle of size one.

    Args:
        services: The collection to analyze. Not modified.
        mode: How cycle participants are grouped into warnings.

    Returns:
        List of CYCLE warnings, empty if the graph is acyclic.
    """
    if not services:
        return []

    if mode is CycleReportMode.PER_CYCLE:
        warnings = [_cycle_warning(group) for group in find_cycle_groups(services)]
    else:
        members = _CycleSweep(build_service_index(services)).run(services)
        warnings = [_cycle_warning(members)] if members else []

    logger.debug(
        "cycle_sweep_complete services=%d mode=%s warnings=%d",
        len(services),
        mode.value,
        len(warnings),
    )
    return warnings
