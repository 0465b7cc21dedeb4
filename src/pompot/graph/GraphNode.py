"""GraphNode - Node representation for the pom graph.

A node owns its outgoing edges, grouped by relationship name. Groups
are kept in first-seen order and each group in insertion order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from pompot.graph.relations import GraphEdge, Relationship, relationship_name

if TYPE_CHECKING:
    from pompot.graph.values import GraphValue


class GraphNode:
    """A node in the pom graph.

    Nodes are created through TextGraph.add_node(), which guarantees a
    single node per id within one graph.

    Attributes:
        id: Identifier of the node, unique within its graph.
    """

    __slots__ = ("_id", "_edges")

    def __init__(self, node_id: str) -> None:
        if node_id is None:
            raise ValueError("GraphNode requires an id")
        self._id = node_id.strip()
        self._edges: dict[str, list[GraphEdge]] = {}

    @property
    def id(self) -> str:
        return self._id

    def connect(
        self,
        relationship: Relationship | str,
        target: GraphNode,
        value: GraphValue,
    ) -> GraphEdge:
        """Create an outgoing edge toward a target node.

        Args:
            relationship: Name of the relationship represented by the edge.
            target: Node that receives the connection.
            value: Payload carried by the edge (shared, never copied).

        Returns:
            The created GraphEdge.
        """
        edge = GraphEdge(source=self, target=target, relationship=relationship, value=value)
        self._edges.setdefault(edge.relationship, []).append(edge)
        return edge

    def _disconnect(self, target: GraphNode) -> None:
        """Drop every outgoing edge pointing at target."""
        for name in list(self._edges):
            kept = [edge for edge in self._edges[name] if edge.target is not target]
            if kept:
                self._edges[name] = kept
            else:
                del self._edges[name]

    def edges(self, relationship: Relationship | str | None = None) -> tuple[GraphEdge, ...]:
        """Return outgoing edges.

        Args:
            relationship: When given, only the edges of that relationship.

        Returns:
            Snapshot of edges; all groups concatenated in first-seen order
            when no relationship is given.
        """
        if relationship is None:
            return tuple(edge for group in self._edges.values() for edge in group)
        return tuple(self._edges.get(relationship_name(relationship), ()))

    def iter_edges(self) -> Iterator[GraphEdge]:
        """Iterate over outgoing edges in group order."""
        for group in self._edges.values():
            yield from group

    def relationships(self) -> tuple[str, ...]:
        """Return the relationship names in first-seen order."""
        return tuple(self._edges)

    def edge_count(self) -> int:
        """Return number of outgoing edges."""
        return sum(len(group) for group in self._edges.values())

    def __repr__(self) -> str:
        return f"GraphNode(id={self._id!r}, edges={self.edge_count()})"
