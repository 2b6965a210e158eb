"""Engine constants for dependency graph analysis.

Searchable fields, warning presentation and the default cycle report
mode. Nothing here is read from the environment.
"""

from __future__ import annotations

from service_catalog.models.types import CycleReportMode

# Service fields scanned by free-text search (case-insensitive substring)
SEARCH_FIELDS: tuple[str, ...] = ("name", "description", "owner")

# Merged mode folds every cycle in one sweep into a single warning
DEFAULT_CYCLE_REPORT_MODE: CycleReportMode = CycleReportMode.MERGED

# Edge ids look like "api-gateway->user-service"
EDGE_ID_SEPARATOR: str = "->"

# Joins cycle members in warning messages
CYCLE_MEMBER_SEPARATOR: str = " → "
