"""Tests for the pom.xml parser."""

import pytest

from pompot.parsers import PomParseError, PomParser, parse_pom_content
from tests.pom_helpers import pom_xml, write_pom


class TestParsePomContent:
    """Tests for parse_pom_content()."""

    def test_coordinates(self):
        model = parse_pom_content(
            pom_xml(group_id="com.example", artifact_id="app", version="1.0", packaging="jar")
        )
        assert model.group_id == "com.example"
        assert model.artifact_id == "app"
        assert model.version == "1.0"
        assert model.packaging == "jar"

    def test_without_namespace(self):
        model = parse_pom_content(pom_xml(artifact_id="bare", namespaced=False))
        assert model.artifact_id == "bare"

    def test_text_is_trimmed_and_empty_is_none(self):
        content = (
            '<project xmlns="http://maven.apache.org/POM/4.0.0">'
            "<artifactId>\n   app \n</artifactId><version>  </version></project>"
        )
        model = parse_pom_content(content)
        assert model.artifact_id == "app"
        assert model.version is None

    def test_parent(self):
        model = parse_pom_content(
            pom_xml(
                artifact_id="api",
                parent={"groupId": "com.example", "artifactId": "platform", "version": "2"},
            )
        )
        assert model.parent.group_id == "com.example"
        assert model.parent.artifact_id == "platform"
        assert model.parent.version == "2"
        assert model.resolved_group_id() == "com.example"

    def test_own_group_id_wins_over_parent(self):
        model = parse_pom_content(
            pom_xml(
                group_id="org.own",
                parent={"groupId": "com.example", "artifactId": "platform", "version": "2"},
            )
        )
        assert model.resolved_group_id() == "org.own"

    def test_properties_keep_document_order(self):
        model = parse_pom_content(
            pom_xml(properties={"zeta": "1", "alpha": "2", "project.build.sourceEncoding": "UTF-8"})
        )
        assert list(model.properties.items()) == [
            ("zeta", "1"),
            ("alpha", "2"),
            ("project.build.sourceEncoding", "UTF-8"),
        ]

    def test_dependencies_and_management(self):
        model = parse_pom_content(
            pom_xml(
                dependencies=[
                    {"groupId": "g", "artifactId": "a", "version": "1", "scope": "test"},
                    {"groupId": "g", "artifactId": "b", "classifier": "tests", "type": "test-jar"},
                ],
                managed=[{"groupId": "bom", "artifactId": "bom", "version": "3", "type": "pom"}],
            )
        )
        assert [dep.artifact_id for dep in model.dependencies] == ["a", "b"]
        assert model.dependencies[0].scope == "test"
        assert model.dependencies[1].version is None
        assert model.dependencies[1].classifier == "tests"
        assert model.dependencies[1].type == "test-jar"
        assert len(model.managed_dependencies) == 1
        assert model.managed_dependencies[0].type == "pom"

    def test_modules(self):
        model = parse_pom_content(pom_xml(modules=["api", "core"]))
        assert model.modules == ["api", "core"]

    def test_malformed_xml_raises(self):
        with pytest.raises(PomParseError):
            parse_pom_content("<project><artifactId>broken</project>")

    def test_wrong_root_element_raises(self):
        with pytest.raises(PomParseError, match="expected <project>"):
            parse_pom_content("<settings/>")

    def test_to_dict(self):
        model = parse_pom_content(
            pom_xml(
                group_id="g",
                artifact_id="a",
                properties={"p": "v"},
                managed=[{"groupId": "x", "artifactId": "y", "version": "1"}],
            )
        )
        data = model.to_dict()
        assert data["groupId"] == "g"
        assert data["properties"] == {"p": "v"}
        assert data["dependencyManagement"]["dependencies"] == [
            {"groupId": "x", "artifactId": "y", "version": "1"}
        ]
        assert "dependencies" not in data
        assert "version" not in data


class TestPomParser:
    """Tests for PomParser reading from disk."""

    def test_parse_project_root(self, tmp_path):
        write_pom(tmp_path, artifact_id="app")
        model = PomParser().parse(tmp_path)
        assert model.artifact_id == "app"

    def test_parse_case_insensitive_name(self, tmp_path):
        write_pom(tmp_path, name="POM.XML", artifact_id="upper")
        model = PomParser().parse(tmp_path)
        assert model.artifact_id == "upper"

    def test_missing_pom_raises(self, tmp_path):
        with pytest.raises(PomParseError, match="not found"):
            PomParser().parse(tmp_path)

    def test_parse_file_malformed(self, tmp_path):
        path = tmp_path / "pom.xml"
        path.write_text("<project>", encoding="utf-8")
        with pytest.raises(PomParseError) as excinfo:
            PomParser().parse_file(path)
        assert excinfo.value.path == path

    def test_parse_none_root(self):
        with pytest.raises(PomParseError):
            PomParser().parse(None)
