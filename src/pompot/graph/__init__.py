"""Graph module - Core graph data structures.

Exports:
- Text: Immutable textual value
- TextReference: Shared mutable text cell
- Textual / Composite / GraphValue: Edge payload shapes
- GraphNode: Node with relationship-grouped outgoing edges
- GraphEdge: Edge between two nodes
- Relationship: Enum of relationship names
- TextGraph: Node and text registry with structural copy()

Note: PomGraphBuilder is in pompot.graph.builder
"""

from pompot.graph.GraphNode import GraphNode
from pompot.graph.relations import GraphEdge, Relationship
from pompot.graph.text_graph import TextGraph
from pompot.graph.values import (
    Composite,
    GraphValue,
    Text,
    Textual,
    TextReference,
    composite_value,
    text_value,
)

__all__ = [
    "Text",
    "TextReference",
    "Textual",
    "Composite",
    "GraphValue",
    "text_value",
    "composite_value",
    "GraphNode",
    "GraphEdge",
    "Relationship",
    "TextGraph",
]
