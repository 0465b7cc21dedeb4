"""Pytest fixtures shared across pompot tests."""

import pytest

from tests.pom_helpers import write_pom


@pytest.fixture
def multi_module_tree(tmp_path):
    """Parent pom with two modules sharing a property and a dependency version."""
    root = tmp_path / "platform"
    write_pom(
        root,
        group_id="com.example",
        artifact_id="platform",
        version="1.0.0",
        packaging="pom",
        properties={"java.version": "17"},
        modules=["api", "core"],
        managed=[{"groupId": "com.example", "artifactId": "demo", "version": "1.2.3"}],
    )
    write_pom(
        root / "api",
        parent={"groupId": "com.example", "artifactId": "platform", "version": "1.0.0"},
        artifact_id="api",
        properties={"java.version": "17", "only.here": "x"},
        dependencies=[{"groupId": "com.example", "artifactId": "demo", "version": "1.2.3"}],
    )
    write_pom(
        root / "core",
        parent={"groupId": "com.example", "artifactId": "platform", "version": "1.0.0"},
        artifact_id="core",
        properties={"java.version": "17"},
        dependencies=[{"groupId": "com.example", "artifactId": "demo", "version": "1.2.3"}],
    )
    return root


@pytest.fixture
def scanner():
    """Fresh PomDirectoryScanner instance."""
    from pompot.scanner import PomDirectoryScanner

    return PomDirectoryScanner()
