"""Graph model: service records, edges, warnings and search results.

Every type here is frozen. Analysis functions build fresh instances per
call and never hand back references into the caller's collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from service_catalog.errors import ServiceShapeError
from service_catalog.models.types import WarningKind

_METADATA_FIELDS = ("description", "owner", "github")


@dataclass(frozen=True)
class Service:
    """A named node in the dependency graph.

    Identity is the name, matched case-sensitively. The dependency list
    keeps its declared order and may contain duplicates, self-references
    and names that no record in the collection carries.
    """

    name: str
    description: str = ""
    owner: str = ""
    github: str = ""
    dependencies: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Service:
        """Build a Service from a loader-provided mapping.

        Only the shape is checked here. Field contents (URL format, name
        charset, lengths) are the loader's job.

        Args:
            data: Mapping with "name", optional metadata and "dependencies".

        Returns:
            New Service record.

        Raises:
            ServiceShapeError: If a field has the wrong type.
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ServiceShapeError("name", "must be a non-empty string")

        metadata: dict[str, str] = {}
        for key in _METADATA_FIELDS:
            value = data.get(key, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ServiceShapeError(key, "must be a string", name=name)
            metadata[key] = value

        deps = data.get("dependencies")
        if deps is None:
            deps = []
        if isinstance(deps, str) or not isinstance(deps, (list, tuple)):
            raise ServiceShapeError("dependencies", "must be a list of names", name=name)
        for dep in deps:
            if not isinstance(dep, str):
                raise ServiceShapeError(
                    "dependencies", f"entry {dep!r} is not a string", name=name
                )

        return cls(name=name, dependencies=tuple(deps), **metadata)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict copy of this record."""
        return {
            "name": self.name,
            "description": self.description,
            "owner": self.owner,
            "github": self.github,
            "dependencies": list(self.dependencies),
        }


@dataclass(frozen=True)
class DependencyEdge:
    """A directed edge from a service to one of its declared dependencies."""

    source: str  # depending service
    target: str  # declared dependency, may be dangling
    id: str
    animated: bool = False  # both endpoints take part in a cycle


@dataclass(frozen=True)
class GraphWarning:
    """An analysis finding.

    For CYCLE warnings ``services`` holds the cycle membership, whose
    order carries no meaning. For MISSING warnings it holds exactly one
    name, the unresolved target, and ``source`` names the referencing
    service.
    """

    kind: WarningKind
    message: str
    services: tuple[str, ...]
    source: str | None = None

    @property
    def members(self) -> frozenset[str]:
        """Order-free view of the services this warning concerns."""
        return frozenset(self.services)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a free-text search with one-hop highlight expansion.

    An inactive result (blank query) means "no filtering": nothing is
    dimmed and every service renders as usual.
    """

    query: str
    matched: frozenset[str] = field(default_factory=frozenset)
    highlighted: frozenset[str] = field(default_factory=frozenset)

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def related_count(self) -> int:
        """Services highlighted only because they neighbor a match."""
        return len(self.highlighted - self.matched)

    @property
    def is_active(self) -> bool:
        return bool(self.query.strip())

    def is_dimmed(self, name: str) -> bool:
        """Whether a service should render dimmed for this result."""
        return bool(self.highlighted) and name not in self.highlighted
