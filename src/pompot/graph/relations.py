"""Relations - Edge record and relationship names.

This module defines the typed edges between graph nodes:
- Relationship: Enum of the relationship names the builder emits
- GraphEdge: An edge between two nodes carrying a GraphValue payload
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pompot.graph.GraphNode import GraphNode
    from pompot.graph.values import GraphValue


class Relationship(Enum):
    """Relationship names used by the pom graph builder.

    Attribute relationships reuse the descriptor field name:
    - GROUP_ID, ARTIFACT_ID, VERSION, PACKAGING: Coordinates of the pom
    - PARENT: Parent pom reference (payload is the parent version)
    - PROPERTY: Declared <properties> entry
    - DEPENDENCY / MANAGED_DEPENDENCY: Composite dependency payloads
    - MODULE: Declared <modules> entry
    """

    GROUP_ID = "groupId"
    ARTIFACT_ID = "artifactId"
    VERSION = "version"
    PACKAGING = "packaging"
    PARENT = "parent"
    PROPERTY = "property"
    DEPENDENCY = "dependency"
    MANAGED_DEPENDENCY = "managedDependency"
    MODULE = "module"

    def is_attribute(self) -> bool:
        """Check if this relationship points at a dedicated attribute node."""
        return self in (
            Relationship.GROUP_ID,
            Relationship.ARTIFACT_ID,
            Relationship.VERSION,
            Relationship.PACKAGING,
        )


def relationship_name(relationship: Relationship | str) -> str:
    """Return the trimmed string form of a relationship."""
    if isinstance(relationship, Relationship):
        return relationship.value
    if relationship is None:
        raise ValueError("relationship is required")
    return relationship.strip()


@dataclass(frozen=True, eq=False)
class GraphEdge:
    """A connection between two graph nodes.

    Edges compare by identity: two edges with the same endpoints and
    relationship are still distinct records, since a pom may declare the
    same coordinates more than once.

    Attributes:
        source: The node owning the edge.
        target: The node the edge points at.
        relationship: Relationship name (trimmed).
        value: Payload shared with any copies of the graph.
    """

    source: GraphNode
    target: GraphNode
    relationship: str
    value: GraphValue

    def __post_init__(self) -> None:
        if self.source is None or self.target is None:
            raise ValueError("GraphEdge requires both source and target")
        if self.value is None:
            raise ValueError("GraphEdge requires a value")
        name = relationship_name(self.relationship)
        if not name:
            raise ValueError("GraphEdge requires a non-blank relationship")
        object.__setattr__(self, "relationship", name)

    def __repr__(self) -> str:
        return f"GraphEdge({self.source.id!r} -[{self.relationship}]-> {self.target.id!r})"
