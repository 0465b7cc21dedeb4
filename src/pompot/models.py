"""
pompot.models - Parsed project records.

Provides ParsedProject (one scanned pom.xml) and ParsedProjectCollection
(the published result of one scan).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pompot.graph.text_graph import TextGraph

if TYPE_CHECKING:
    from pompot.common_values import CommonValue
    from pompot.parsers.pom import PomModel


@dataclass(frozen=True)
class ParsedProject:
    """
    Snapshot of a parsed pom.xml.

    The graph is only reachable through ``graph``, which returns a
    structural copy on each access; text updates on a copy are still
    visible here.

    Attributes:
        pom_path: Absolute path to the pom file
        relative_path: Path of the pom file relative to the scan root
        group_id: Resolved groupId (None when blank)
        artifact_id: Resolved artifactId (None when blank)
        model: Raw parsed model
    """

    pom_path: str
    relative_path: str
    group_id: str | None
    artifact_id: str | None
    model: PomModel
    _graph: TextGraph = field(repr=False, compare=False)

    @property
    def graph(self) -> TextGraph:
        """Return a structural copy of the project's graph."""
        return self._graph.copy()

    @property
    def coordinates(self) -> str:
        """Display form ``groupId:artifactId`` (``?`` for missing parts)."""
        return f"{self.group_id or '?'}:{self.artifact_id or '?'}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "pomPath": self.pom_path,
            "relativePath": self.relative_path,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "model": self.model.to_dict(),
        }


def _sort_key(project: ParsedProject) -> tuple:
    """Sort by groupId, artifactId (case-insensitive, None last), then relative path."""
    return (
        project.group_id is None,
        (project.group_id or "").lower(),
        project.artifact_id is None,
        (project.artifact_id or "").lower(),
        project.relative_path,
    )


def sort_projects(projects: list[ParsedProject]) -> list[ParsedProject]:
    """Return projects in report order.

    The relative path is unique within one scan, so the order is total
    and independent of the order projects were parsed in.
    """
    return sorted(projects, key=_sort_key)


@dataclass(frozen=True)
class ParsedProjectCollection:
    """
    Result of one scan, published as a single unit.

    Attributes:
        scanned_root: Absolute path of the scanned directory
        entries: Parsed projects in report order
        common_values: Repeated values found across the entries
    """

    scanned_root: str
    entries: tuple[ParsedProject, ...] = ()
    common_values: tuple[CommonValue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "common_values", tuple(self.common_values))

    def find_by_relative_path(self, relative_path: str) -> ParsedProject | None:
        for entry in self.entries:
            if entry.relative_path == relative_path:
                return entry
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "scannedRoot": self.scanned_root,
            "entries": [entry.to_dict() for entry in self.entries],
            "commonValues": [value.to_dict() for value in self.common_values],
        }
