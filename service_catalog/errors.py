"""Error hierarchy for the service catalog.

Analysis operations never raise: cycles and dangling references are
reported as Warning values. Errors here only cover records that do not
match the Service shape when they are handed over by a loader.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base error for the service catalog.

    All catalog-specific errors inherit from this.
    """

    pass


# =============================================================================
# Record Errors
# =============================================================================


class ServiceShapeError(CatalogError):
    """A service mapping does not match the Service record shape.

    Attributes:
        field_name: The offending field
        reason: Human-readable error description
        name: The service name, if it could be read

    Retry: Never retryable - fix the service definition.
    """

    def __init__(self, field_name: str, reason: str, name: str | None = None) -> None:
        self.field_name = field_name
        self.reason = reason
        self.name = name
        where = f" in service {name!r}" if name else ""
        super().__init__(f"Invalid field {field_name!r}{where}: {reason}")
