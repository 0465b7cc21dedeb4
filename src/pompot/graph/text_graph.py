"""TextGraph - Container for the nodes and texts of one parsed pom.

Provides indexed access to nodes, a registry of the TextReference cells
created while building, and copy() for handing out views that cannot
alter the stored structure.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping
from uuid import uuid4

from pompot.graph.GraphNode import GraphNode
from pompot.graph.values import Text, TextReference


class TextGraph:
    """Directed graph whose edges carry textual payloads.

    Nodes and texts are kept in insertion order.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}
        self._texts: dict[str, TextReference] = {}

    def add_node(self, node_id: str) -> GraphNode:
        """Create or return the node with the given id.

        Args:
            node_id: Identifier of the node.

        Returns:
            The existing node, or a newly registered one.
        """
        if node_id is None:
            raise ValueError("node id is required")
        key = node_id.strip()
        node = self._nodes.get(key)
        if node is None:
            node = GraphNode(key)
            self._nodes[key] = node
        return node

    def find_node(self, node_id: str | None) -> GraphNode | None:
        """Find a node by id, or None when absent."""
        if node_id is None:
            return None
        return self._nodes.get(node_id.strip())

    def remove_node(self, node_id: str) -> GraphNode | None:
        """Remove a node and every edge pointing at it.

        Returns:
            The removed node, or None when the id is unknown.
        """
        node = self.find_node(node_id)
        if node is None:
            return None
        del self._nodes[node.id]
        for other in self._nodes.values():
            other._disconnect(node)
        return node

    def nodes(self) -> tuple[GraphNode, ...]:
        """Return the nodes in insertion order."""
        return tuple(self._nodes.values())

    def iter_nodes(self) -> Iterator[GraphNode]:
        yield from self._nodes.values()

    def node_count(self) -> int:
        return len(self._nodes)

    def create_text(self, value: str | None) -> TextReference:
        """Allocate and register a TextReference wrapping the trimmed value."""
        reference = TextReference(uuid4().hex, Text((value or "").strip()))
        self._texts[reference.id] = reference
        return reference

    def texts(self) -> tuple[TextReference, ...]:
        """Return every registered TextReference in creation order."""
        return tuple(self._texts.values())

    def text_index(self) -> Mapping[str, TextReference]:
        """Read-only view of texts keyed by reference id."""
        return MappingProxyType(self._texts)

    def copy(self) -> TextGraph:
        """Create a structural clone sharing payloads with this graph.

        Nodes and edges are fresh objects, so the copy can be altered
        without touching this graph. Payloads (and the TextReference
        cells inside them) are reused, so text updates stay visible on
        both sides.

        Returns:
            A new TextGraph with the same ids and edge order.
        """
        clone = TextGraph()
        for node in self._nodes.values():
            clone.add_node(node.id)
        clone._texts.update(self._texts)
        for node in self._nodes.values():
            cloned_source = clone._nodes[node.id]
            for edge in node.iter_edges():
                cloned_source.connect(edge.relationship, clone._nodes[edge.target.id], edge.value)
        return clone

    def __repr__(self) -> str:
        return f"TextGraph(nodes={len(self._nodes)}, texts={len(self._texts)})"
