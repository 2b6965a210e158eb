"""Graph model types for the service catalog."""

from service_catalog.models.service import DependencyEdge, GraphWarning, SearchResult, Service
from service_catalog.models.types import CycleReportMode, WarningKind

__all__ = [
    "CycleReportMode",
    "DependencyEdge",
    "GraphWarning",
    "SearchResult",
    "Service",
    "WarningKind",
]
