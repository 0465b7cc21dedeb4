"""Graph Serialization - Export TextGraph to JSON-compatible dicts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pompot.graph.values import Composite, Textual

if TYPE_CHECKING:
    from pompot.graph.GraphNode import GraphNode
    from pompot.graph.text_graph import TextGraph
    from pompot.graph.values import GraphValue


def serialize_value(value: GraphValue) -> Any:
    """Serialize an edge payload.

    Textual payloads become ``{"textId", "text"}``; composite payloads
    become a dict of their serialized children.
    """
    if isinstance(value, Textual):
        return {"textId": value.reference.id, "text": value.reference.text}
    if isinstance(value, Composite):
        return {name: serialize_value(child) for name, child in value.children().items()}
    raise TypeError(f"Unsupported graph value: {type(value).__name__}")


def serialize_node(node: GraphNode) -> dict[str, Any]:
    """Serialize a GraphNode with its outgoing edges."""
    result: dict[str, Any] = {"id": node.id}
    edges = node.edges()
    if edges:
        result["edges"] = [
            {
                "relationship": edge.relationship,
                "target": edge.target.id,
                "value": serialize_value(edge.value),
            }
            for edge in edges
        ]
    return result


def serialize_graph(graph: TextGraph) -> dict[str, Any]:
    """Serialize a TextGraph to a JSON-compatible dict.

    Args:
        graph: The graph to serialize.

    Returns:
        Dict with nodes (in insertion order) and metadata.
    """
    nodes = [serialize_node(node) for node in graph.iter_nodes()]
    return {
        "nodes": nodes,
        "metadata": {
            "node_count": len(nodes),
            "edge_count": sum(node.edge_count() for node in graph.iter_nodes()),
            "text_count": len(graph.texts()),
        },
    }
