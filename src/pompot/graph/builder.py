"""Graph Builder - Constructs a TextGraph from one parsed pom.

Every value is trimmed before it enters the graph. A blank or absent
value produces no edge at all, never an edge with an empty payload.

Node ids:
- ``pom:<absolute project directory>`` for the root node
- ``attribute:<field>`` for groupId/artifactId/version/packaging
- ``parent:<groupId>:<artifactId>``
- ``property:<name>``
- ``dependency:<groupId>:<artifactId>:<type>:<classifier>``
  (the default ``jar`` type is left out)
- ``module:<module>``
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from pompot.graph.GraphNode import GraphNode
from pompot.graph.relations import Relationship
from pompot.graph.text_graph import TextGraph
from pompot.graph.values import Composite, GraphValue, Textual
from pompot.parsers.pom import DEFAULT_DEPENDENCY_TYPE, PomDependency, PomModel

ROOT_PREFIX = "pom:"
ATTRIBUTE_PREFIX = "attribute:"
PARENT_PREFIX = "parent:"
PROPERTY_PREFIX = "property:"
DEPENDENCY_PREFIX = "dependency:"
MODULE_PREFIX = "module:"


def normalize(value: str | None) -> str:
    """Trim a value, mapping None to ""."""
    if value is None:
        return ""
    return value.strip()


def node_id(prefix: str, *parts: str | None) -> str:
    """Build a node id by colon-joining the non-blank parts.

    Falls back to the bare prefix name (without its trailing colon)
    when every part is blank.
    """
    joined = ":".join(p for p in (normalize(part) for part in parts) if p)
    if not joined:
        return prefix[:-1]
    return prefix + joined


def dependency_type(value: str | None) -> str:
    """Trimmed dependency type, with the Maven default ``jar`` mapped to ""."""
    normalized = normalize(value)
    if normalized == DEFAULT_DEPENDENCY_TYPE:
        return ""
    return normalized


def root_node_id(project_root: Path) -> str:
    """Derive the root node id from the absolute project directory."""
    return ROOT_PREFIX + os.path.normpath(str(Path(project_root).absolute()))


class PomGraphBuilder:
    """Builder for constructing the TextGraph of one pom.

    Usage:
        builder = PomGraphBuilder(project_root)
        graph = builder.build(model)
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the builder.

        Args:
            project_root: Directory containing the pom.xml.
        """
        self.project_root = Path(project_root)
        self._graph = TextGraph()
        self._root: GraphNode | None = None

    def build(self, model: PomModel) -> TextGraph:
        """Build the graph for a parsed pom.

        Args:
            model: Parsed descriptor.

        Returns:
            TextGraph rooted at the ``pom:`` node.
        """
        self._graph = TextGraph()
        self._root = self._graph.add_node(root_node_id(self.project_root))

        self._add_attribute(Relationship.GROUP_ID, model.resolved_group_id())
        self._add_attribute(Relationship.ARTIFACT_ID, model.resolved_artifact_id())
        self._add_attribute(Relationship.VERSION, model.version)
        self._add_attribute(Relationship.PACKAGING, model.packaging)

        self._add_parent(model)
        self._add_properties(model.properties)
        self._add_dependencies(Relationship.DEPENDENCY, model.dependencies)
        self._add_dependencies(Relationship.MANAGED_DEPENDENCY, model.managed_dependencies)
        self._add_modules(model.modules)

        return self._graph

    def _textual(self, value: str | None) -> Textual | None:
        """Create a textual payload, or None for blank values."""
        normalized = normalize(value)
        if not normalized:
            return None
        return Textual(self._graph.create_text(normalized))

    def _attach(self, target: GraphNode, relationship: Relationship, value: str | None) -> None:
        payload = self._textual(value)
        if payload is None:
            return
        self._root.connect(relationship, target, payload)

    def _add_attribute(self, relationship: Relationship, value: str | None) -> None:
        if not normalize(value):
            return
        target = self._graph.add_node(ATTRIBUTE_PREFIX + relationship.value)
        self._attach(target, relationship, value)

    def _add_parent(self, model: PomModel) -> None:
        parent = model.parent
        if parent is None:
            return
        # A parent without a version yields no edge (its node is still registered)
        target = self._graph.add_node(node_id(PARENT_PREFIX, parent.group_id, parent.artifact_id))
        self._attach(target, Relationship.PARENT, parent.version)

    def _add_properties(self, properties: dict[str, str]) -> None:
        for name, value in properties.items():
            target = self._graph.add_node(PROPERTY_PREFIX + name)
            self._attach(target, Relationship.PROPERTY, value)

    def _add_dependencies(
        self, relationship: Relationship, dependencies: Iterable[PomDependency]
    ) -> None:
        for dependency in dependencies:
            if dependency is None:
                continue
            payload = self._dependency_payload(dependency)
            target = self._graph.add_node(
                node_id(
                    DEPENDENCY_PREFIX,
                    dependency.group_id,
                    dependency.artifact_id,
                    dependency_type(dependency.type),
                    dependency.classifier,
                )
            )
            if payload is None:
                continue
            self._root.connect(relationship, target, payload)

    def _dependency_payload(self, dependency: PomDependency) -> Composite | None:
        version = self._textual(dependency.version)
        if version is None:
            return None
        entries: dict[str, GraphValue] = {"version": version}
        for name, value in (
            ("groupId", dependency.group_id),
            ("artifactId", dependency.artifact_id),
            ("type", dependency_type(dependency.type)),
            ("classifier", dependency.classifier),
            ("scope", dependency.scope),
        ):
            child = self._textual(value)
            if child is not None:
                entries[name] = child
        return Composite(entries)

    def _add_modules(self, modules: Iterable[str]) -> None:
        for module in modules:
            if not normalize(module):
                continue
            target = self._graph.add_node(MODULE_PREFIX + normalize(module))
            self._attach(target, Relationship.MODULE, module)


def build_pom_graph(project_root: Path, model: PomModel) -> TextGraph:
    """Build the TextGraph of one pom (convenience wrapper)."""
    return PomGraphBuilder(project_root).build(model)
