"""Tests for PomGraphBuilder - pom model to TextGraph."""

import os
from pathlib import Path

import pytest

from pompot.graph import Composite, Relationship, Textual
from pompot.graph.builder import PomGraphBuilder, build_pom_graph, node_id, root_node_id
from pompot.parsers.pom import PomDependency, PomModel, PomParent

PROJECT_ROOT = Path("/work/platform/api")


def _root(graph):
    return graph.find_node(root_node_id(PROJECT_ROOT))


def _texts(edges):
    return [edge.value.reference.text for edge in edges]


@pytest.fixture
def full_model():
    return PomModel(
        group_id=" com.example ",
        artifact_id="api",
        version="1.0.0",
        packaging="jar",
        parent=PomParent(group_id="com.example", artifact_id="platform", version="1.0.0"),
        properties={"java.version": "17", "encoding": "UTF-8"},
        dependencies=[
            PomDependency(
                group_id="com.example", artifact_id="demo", version="1.2.3", scope="test"
            ),
        ],
        managed_dependencies=[
            PomDependency(group_id="org.junit", artifact_id="junit-bom", version="5.10.0",
                          type="pom", scope="import"),
        ],
        modules=["sub"],
    )


class TestNodeIds:
    def test_node_id_joins_non_blank_parts(self):
        assert node_id("dependency:", "g", None, " ", "a") == "dependency:g:a"

    def test_node_id_falls_back_to_bare_prefix(self):
        assert node_id("dependency:", None, "", "  ") == "dependency"
        assert node_id("parent:") == "parent"

    def test_root_node_id_is_absolute(self):
        assert root_node_id(PROJECT_ROOT) == "pom:" + os.path.normpath(str(PROJECT_ROOT))


class TestAttributes:
    def test_attribute_edges(self, full_model):
        graph = build_pom_graph(PROJECT_ROOT, full_model)
        root = _root(graph)

        for relationship, expected in (
            (Relationship.GROUP_ID, "com.example"),
            (Relationship.ARTIFACT_ID, "api"),
            (Relationship.VERSION, "1.0.0"),
            (Relationship.PACKAGING, "jar"),
        ):
            edges = root.edges(relationship)
            assert len(edges) == 1
            assert edges[0].target.id == f"attribute:{relationship.value}"
            assert _texts(edges) == [expected]

    def test_blank_attributes_produce_no_edge(self):
        graph = build_pom_graph(PROJECT_ROOT, PomModel(artifact_id="api", version="   "))
        root = _root(graph)

        assert root.edges(Relationship.VERSION) == ()
        assert root.edges(Relationship.GROUP_ID) == ()
        assert root.edges(Relationship.PACKAGING) == ()
        assert graph.find_node("attribute:version") is None

    def test_group_id_inherited_from_parent(self):
        model = PomModel(
            artifact_id="api",
            parent=PomParent(group_id="com.example", artifact_id="platform", version="1"),
        )
        root = _root(build_pom_graph(PROJECT_ROOT, model))
        assert _texts(root.edges(Relationship.GROUP_ID)) == ["com.example"]


class TestParent:
    def test_parent_edge(self, full_model):
        root = _root(build_pom_graph(PROJECT_ROOT, full_model))

        edges = root.edges(Relationship.PARENT)
        assert len(edges) == 1
        assert edges[0].target.id == "parent:com.example:platform"
        assert _texts(edges) == ["1.0.0"]

    def test_parent_without_version_has_no_edge(self):
        model = PomModel(parent=PomParent(group_id="g", artifact_id="p", version=" "))
        root = _root(build_pom_graph(PROJECT_ROOT, model))

        assert root.edges(Relationship.PARENT) == ()


class TestProperties:
    def test_declaration_order_preserved(self):
        model = PomModel(properties={"zeta": "1", "alpha": "2", "mid": "3"})
        root = _root(build_pom_graph(PROJECT_ROOT, model))

        targets = [edge.target.id for edge in root.edges(Relationship.PROPERTY)]
        assert targets == ["property:zeta", "property:alpha", "property:mid"]
        assert _texts(root.edges(Relationship.PROPERTY)) == ["1", "2", "3"]

    def test_blank_property_value_skipped(self):
        model = PomModel(properties={"empty": "", "set": "x"})
        root = _root(build_pom_graph(PROJECT_ROOT, model))

        assert [edge.target.id for edge in root.edges(Relationship.PROPERTY)] == ["property:set"]


class TestDependencies:
    def test_dependency_composite_payload(self, full_model):
        root = _root(build_pom_graph(PROJECT_ROOT, full_model))

        edges = root.edges(Relationship.DEPENDENCY)
        assert len(edges) == 1
        edge = edges[0]
        assert edge.target.id == "dependency:com.example:demo"
        assert isinstance(edge.value, Composite)
        assert list(edge.value.children()) == ["version", "groupId", "artifactId", "scope"]
        assert edge.value.child_text("version") == "1.2.3"
        assert edge.value.child_text("scope") == "test"

    def test_managed_dependency_relationship(self, full_model):
        root = _root(build_pom_graph(PROJECT_ROOT, full_model))

        edges = root.edges(Relationship.MANAGED_DEPENDENCY)
        assert len(edges) == 1
        assert edges[0].target.id == "dependency:org.junit:junit-bom:pom"
        assert edges[0].value.child_text("type") == "pom"

    def test_dependency_without_version_has_no_edge(self):
        model = PomModel(dependencies=[PomDependency(group_id="g", artifact_id="a")])
        graph = build_pom_graph(PROJECT_ROOT, model)

        assert _root(graph).edges(Relationship.DEPENDENCY) == ()

    def test_dependency_with_blank_coordinates_uses_synthetic_id(self):
        model = PomModel(dependencies=[PomDependency(version="1.0")])
        edges = _root(build_pom_graph(PROJECT_ROOT, model)).edges(Relationship.DEPENDENCY)

        assert edges[0].target.id == "dependency"
        assert list(edges[0].value.children()) == ["version"]

    def test_same_coordinates_share_one_node(self):
        model = PomModel(
            dependencies=[
                PomDependency(group_id="g", artifact_id="a", version="1"),
                PomDependency(group_id="g", artifact_id="a", version="2", scope="test"),
            ]
        )
        graph = build_pom_graph(PROJECT_ROOT, model)
        edges = _root(graph).edges(Relationship.DEPENDENCY)

        assert len(edges) == 2
        assert edges[0].target is edges[1].target

    def test_default_jar_type_shares_node_with_absent_type(self):
        model = PomModel(
            dependencies=[
                PomDependency(group_id="g", artifact_id="a", version="1", type="jar"),
                PomDependency(group_id="g", artifact_id="a", version="1"),
            ]
        )
        edges = _root(build_pom_graph(PROJECT_ROOT, model)).edges(Relationship.DEPENDENCY)

        assert [edge.target.id for edge in edges] == ["dependency:g:a", "dependency:g:a"]
        assert "type" not in edges[0].value.children()


class TestModules:
    def test_module_edges(self):
        model = PomModel(modules=["api", "core"])
        root = _root(build_pom_graph(PROJECT_ROOT, model))

        edges = root.edges(Relationship.MODULE)
        assert [edge.target.id for edge in edges] == ["module:api", "module:core"]
        assert all(isinstance(edge.value, Textual) for edge in edges)
        assert _texts(edges) == ["api", "core"]


class TestBuilderGraph:
    def test_relationship_group_order(self, full_model):
        root = _root(build_pom_graph(PROJECT_ROOT, full_model))

        assert root.relationships() == (
            "groupId",
            "artifactId",
            "version",
            "packaging",
            "parent",
            "property",
            "dependency",
            "managedDependency",
            "module",
        )

    def test_every_text_is_registered(self, full_model):
        graph = PomGraphBuilder(PROJECT_ROOT).build(full_model)
        registered = set(graph.texts())

        for node in graph.nodes():
            for edge in node.edges():
                if isinstance(edge.value, Textual):
                    assert edge.value.reference in registered
                else:
                    for child in edge.value.children().values():
                        assert child.reference in registered

    def test_empty_model_only_has_root(self):
        graph = build_pom_graph(PROJECT_ROOT, PomModel())

        assert graph.node_count() == 1
        assert graph.texts() == ()
