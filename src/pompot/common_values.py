"""
pompot.common_values - Detect values repeated across parsed poms.

Only property, dependency, and managed dependency edges take part:
- property: identifier is the property name, value is its text
- dependency / managed dependency: identifier is the coordinates
  (``groupId:artifactId[:type][:classifier][ [scope]]``), value is the
  declared version

Every matching edge counts once, including repeats inside one pom.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from pompot.graph.builder import PROPERTY_PREFIX, dependency_type
from pompot.graph.relations import Relationship
from pompot.graph.values import Composite, Textual

if TYPE_CHECKING:
    from pompot.graph.GraphNode import GraphNode
    from pompot.graph.relations import GraphEdge
    from pompot.graph.text_graph import TextGraph
    from pompot.models import ParsedProject

PROPERTY_CATEGORY = "property"
DEPENDENCY_CATEGORY = "dependency"
MANAGED_DEPENDENCY_CATEGORY = "managed dependency"

MIN_OCCURRENCES = 2

# Relationship -> report category
CATEGORIES: dict[Relationship, str] = {
    Relationship.PROPERTY: PROPERTY_CATEGORY,
    Relationship.DEPENDENCY: DEPENDENCY_CATEGORY,
    Relationship.MANAGED_DEPENDENCY: MANAGED_DEPENDENCY_CATEGORY,
}


@dataclass(frozen=True)
class CommonValue:
    """A value repeated across parsed poms.

    Attributes:
        category: Logical group (property, dependency, managed dependency).
        identifier: Human readable name of what the value refers to.
        value: The repeated value.
        occurrences: How many times the value appeared (at least 2).
    """

    category: str
    identifier: str
    value: str
    occurrences: int

    def __post_init__(self) -> None:
        for name in ("category", "identifier", "value"):
            raw = getattr(self, name)
            if raw is None:
                raise ValueError(f"CommonValue requires a {name}")
            trimmed = str(raw).strip()
            if not trimmed:
                raise ValueError(f"CommonValue {name} must not be blank")
            object.__setattr__(self, name, trimmed)
        if self.occurrences < MIN_OCCURRENCES:
            raise ValueError(
                f"occurrences must be at least {MIN_OCCURRENCES}, got {self.occurrences}"
            )

    def sort_key(self) -> tuple[str, str, str]:
        return (self.category.lower(), self.identifier.lower(), self.value.lower())

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "identifier": self.identifier,
            "value": self.value,
            "occurrences": self.occurrences,
        }


def sort_common_values(values: Iterable[CommonValue]) -> list[CommonValue]:
    """Order by category, identifier, then value (all case-insensitive)."""
    return sorted(values, key=CommonValue.sort_key)


def property_identifier(target: GraphNode | None) -> str:
    """Property name from a ``property:<name>`` node id."""
    node_id = target.id if target is not None else ""
    if node_id.startswith(PROPERTY_PREFIX):
        return node_id[len(PROPERTY_PREFIX):]
    return node_id


def dependency_identifier(payload: Composite, target: GraphNode) -> str:
    """Build ``groupId:artifactId[:type][:classifier][ [scope]]`` for a dependency.

    Falls back to the target node id when neither groupId nor artifactId
    is present. The default ``jar`` type is never appended.
    """
    group_id = payload.child_text("groupId")
    artifact_id = payload.child_text("artifactId")
    identifier = ":".join(part for part in (group_id, artifact_id) if part)
    if not identifier:
        identifier = target.id
    for part in (dependency_type(payload.child_text("type")), payload.child_text("classifier")):
        if part:
            identifier += f":{part}"
    scope = payload.child_text("scope")
    if scope:
        identifier += f" [{scope}]"
    return identifier


def _property_key(edge: GraphEdge) -> tuple[str, str, str] | None:
    if not isinstance(edge.value, Textual):
        return None
    value = edge.value.reference.text
    if not value.strip():
        return None
    return (PROPERTY_CATEGORY, property_identifier(edge.target), value)


def _dependency_key(category: str, edge: GraphEdge) -> tuple[str, str, str] | None:
    payload = edge.value
    if not isinstance(payload, Composite):
        return None
    version = payload.children().get("version")
    if not isinstance(version, Textual):
        return None
    value = version.reference.text
    if not value.strip():
        return None
    return (category, dependency_identifier(payload, edge.target), value)


def iter_value_keys(graph: TextGraph) -> Iterator[tuple[str, str, str]]:
    """Yield a (category, identifier, value) key for every eligible edge."""
    for node in graph.iter_nodes():
        for edge in node.edges(Relationship.PROPERTY):
            key = _property_key(edge)
            if key is not None:
                yield key
        for relationship in (Relationship.DEPENDENCY, Relationship.MANAGED_DEPENDENCY):
            for edge in node.edges(relationship):
                key = _dependency_key(CATEGORIES[relationship], edge)
                if key is not None:
                    yield key


def extract_common_values(projects: Iterable[ParsedProject] | None) -> list[CommonValue]:
    """Find values repeated across the given projects.

    Args:
        projects: Parsed projects, normally in scan order.

    Returns:
        CommonValue entries with at least two occurrences, sorted by
        category, identifier, and value.
    """
    if not projects:
        return []

    counts: dict[tuple[str, str, str], int] = {}
    for project in projects:
        if project is None:
            continue
        for key in iter_value_keys(project.graph):
            counts[key] = counts.get(key, 0) + 1

    repeated = [
        CommonValue(category, identifier, value, count)
        for (category, identifier, value), count in counts.items()
        if count >= MIN_OCCURRENCES
    ]
    return sort_common_values(repeated)
