"""Helpers for building pom.xml documents in tests."""

from __future__ import annotations

from pathlib import Path

POM_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
    "  <modelVersion>4.0.0</modelVersion>\n"
)


def _dependency_xml(dep: dict[str, str]) -> str:
    fields = "".join(f"<{key}>{value}</{key}>" for key, value in dep.items())
    return f"<dependency>{fields}</dependency>"


def pom_xml(
    group_id: str | None = None,
    artifact_id: str | None = None,
    version: str | None = None,
    packaging: str | None = None,
    parent: dict[str, str] | None = None,
    properties: dict[str, str] | None = None,
    dependencies: list[dict[str, str]] | None = None,
    managed: list[dict[str, str]] | None = None,
    modules: list[str] | None = None,
    namespaced: bool = True,
) -> str:
    """Build a pom.xml document from keyword arguments."""
    parts = [POM_HEADER if namespaced else "<project>\n"]
    if parent is not None:
        fields = "".join(f"<{key}>{value}</{key}>" for key, value in parent.items())
        parts.append(f"  <parent>{fields}</parent>\n")
    for tag, value in (
        ("groupId", group_id),
        ("artifactId", artifact_id),
        ("version", version),
        ("packaging", packaging),
    ):
        if value is not None:
            parts.append(f"  <{tag}>{value}</{tag}>\n")
    if properties:
        props = "".join(f"<{name}>{value}</{name}>" for name, value in properties.items())
        parts.append(f"  <properties>{props}</properties>\n")
    if modules:
        mods = "".join(f"<module>{module}</module>" for module in modules)
        parts.append(f"  <modules>{mods}</modules>\n")
    if managed:
        deps = "".join(_dependency_xml(dep) for dep in managed)
        parts.append(
            f"  <dependencyManagement><dependencies>{deps}</dependencies></dependencyManagement>\n"
        )
    if dependencies:
        deps = "".join(_dependency_xml(dep) for dep in dependencies)
        parts.append(f"  <dependencies>{deps}</dependencies>\n")
    parts.append("</project>\n")
    return "".join(parts)


def write_pom(directory: Path, name: str = "pom.xml", **kwargs) -> Path:
    """Write a pom.xml into directory (created if needed) and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(pom_xml(**kwargs), encoding="utf-8")
    return path
