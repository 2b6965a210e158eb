"""Dangling reference detection and the combined warning sweep."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from service_catalog.analysis.cycles import detect_cycles
from service_catalog.config import DEFAULT_CYCLE_REPORT_MODE
from service_catalog.models.service import GraphWarning, Service
from service_catalog.models.types import CycleReportMode, WarningKind

logger = logging.getLogger(__name__)


def detect_missing_references(services: Sequence[Service]) -> list[GraphWarning]:
    """Report every dependency that names no service in the collection.

    One warning per (service, missing target) pair, in collection order
    then dependency order. Nothing is deduplicated: two services naming
    the same missing target yield two warnings.

    Args:
        services: The collection to analyze. Not modified.

    Returns:
        List of MISSING warnings.
    """
    known = {service.name for service in services}
    warnings: list[GraphWarning] = []

    for service in services:
        for dep in service.dependencies:
            if dep in known:
                continue
            warnings.append(
                GraphWarning(
                    kind=WarningKind.MISSING,
                    message=f"{service.name} references {dep}, which does not exist",
                    services=(dep,),
                    source=service.name,
                )
            )
            logger.info("missing_reference source=%s target=%s", service.name, dep)

    return warnings


def detect_warnings(
    services: Sequence[Service],
    mode: CycleReportMode = DEFAULT_CYCLE_REPORT_MODE,
) -> list[GraphWarning]:
    """Run both checks: cycle warnings first, then missing references."""
    if not services:
        return []
    return detect_cycles(services, mode=mode) + detect_missing_references(services)


def group_warnings(
    warnings: Iterable[GraphWarning],
) -> dict[WarningKind, list[GraphWarning]]:
    """Split warnings by kind, keeping their relative order.

    Every kind is present in the result, possibly with an empty list.
    """
    grouped: dict[WarningKind, list[GraphWarning]] = {kind: [] for kind in WarningKind}
    for warning in warnings:
        grouped[warning.kind].append(warning)
    return grouped
