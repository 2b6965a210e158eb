"""Enums shared by the analysis modules."""

from __future__ import annotations

from enum import Enum


class WarningKind(Enum):
    """Kind of analysis finding surfaced to the catalog UI."""

    CYCLE = "cycle"
    MISSING = "missing"


class CycleReportMode(Enum):
    """How cycle participants are grouped into warnings.

    MERGED is the default contract: every cycle found in one sweep is
    reported through a single warning. PER_CYCLE emits one warning per
    strongly connected component instead.
    """

    MERGED = "merged"
    PER_CYCLE = "per_cycle"
