"""Maven pom.xml parser.

Reads the pom.xml of a project directory into a PomModel holding the
fields the graph builder consumes. Both namespaced (POM 4.0.0) and
bare documents are accepted.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

POM_FILE_NAME = "pom.xml"

# Maven applies this when a <dependency> declares no <type>.
DEFAULT_DEPENDENCY_TYPE = "jar"

# XML namespace used by Maven POM files (POM model version 4.0.0).
POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"


class PomParseError(ValueError):
    """Raised when a pom.xml is missing or cannot be read.

    Attributes:
        path: Location of the pom.xml that failed.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass
class PomParent:
    """Parent coordinates declared in <parent>."""

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    relative_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "groupId": self.group_id,
                "artifactId": self.artifact_id,
                "version": self.version,
                "relativePath": self.relative_path,
            }
        )


@dataclass
class PomDependency:
    """A <dependency> entry.

    Attributes:
        group_id: Dependency groupId.
        artifact_id: Dependency artifactId.
        version: Declared version (may be a ${property} expression).
        type: Packaging type, e.g. ``pom`` for BOM imports.
        classifier: Artifact classifier.
        scope: Maven scope (compile, provided, runtime, test, system, import).
        optional: Raw <optional> text.
    """

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    type: str | None = None
    classifier: str | None = None
    scope: str | None = None
    optional: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "groupId": self.group_id,
                "artifactId": self.artifact_id,
                "version": self.version,
                "type": self.type,
                "classifier": self.classifier,
                "scope": self.scope,
                "optional": self.optional,
            }
        )


@dataclass
class PomModel:
    """Fields read from one pom.xml.

    Property, dependency, and module order follows the document.
    """

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    packaging: str | None = None
    name: str | None = None
    description: str | None = None
    parent: PomParent | None = None
    properties: dict[str, str] = field(default_factory=dict)
    dependencies: list[PomDependency] = field(default_factory=list)
    managed_dependencies: list[PomDependency] = field(default_factory=list)
    modules: list[str] = field(default_factory=list)

    def resolved_group_id(self) -> str:
        """Own groupId, else the parent's groupId, else ""."""
        own = _normalize(self.group_id)
        if own:
            return own
        if self.parent is not None:
            return _normalize(self.parent.group_id)
        return ""

    def resolved_artifact_id(self) -> str:
        return _normalize(self.artifact_id)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict using Maven field names."""
        result = _compact(
            {
                "groupId": self.group_id,
                "artifactId": self.artifact_id,
                "version": self.version,
                "packaging": self.packaging,
                "name": self.name,
                "description": self.description,
            }
        )
        if self.parent is not None:
            result["parent"] = self.parent.to_dict()
        if self.properties:
            result["properties"] = dict(self.properties)
        if self.dependencies:
            result["dependencies"] = [dep.to_dict() for dep in self.dependencies]
        if self.managed_dependencies:
            result["dependencyManagement"] = {
                "dependencies": [dep.to_dict() for dep in self.managed_dependencies]
            }
        if self.modules:
            result["modules"] = list(self.modules)
        return result


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _normalize(value: str | None) -> str:
    return value.strip() if value else ""


def _local_name(tag: Any) -> str:
    """Strip the namespace from an element tag."""
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _find(element: ET.Element | None, tag: str) -> ET.Element | None:
    """Find a direct child element, trying with and without the Maven namespace."""
    if element is None:
        return None
    found = element.find(f"{{{POM_NAMESPACE}}}{tag}")
    if found is None:
        found = element.find(tag)
    return found


def _findall(element: ET.Element | None, tag: str) -> list[ET.Element]:
    if element is None:
        return []
    return [child for child in element if _local_name(child.tag) == tag]


def _text(element: ET.Element | None, tag: str) -> str | None:
    """Return trimmed text of a direct child, or None when absent or empty."""
    child = _find(element, tag)
    if child is None or child.text is None:
        return None
    stripped = child.text.strip()
    return stripped or None


def _parse_dependency(element: ET.Element) -> PomDependency:
    return PomDependency(
        group_id=_text(element, "groupId"),
        artifact_id=_text(element, "artifactId"),
        version=_text(element, "version"),
        type=_text(element, "type"),
        classifier=_text(element, "classifier"),
        scope=_text(element, "scope"),
        optional=_text(element, "optional"),
    )


def _parse_dependencies(container: ET.Element | None) -> list[PomDependency]:
    dependencies_el = _find(container, "dependencies")
    return [_parse_dependency(dep) for dep in _findall(dependencies_el, "dependency")]


def _parse_parent(root: ET.Element) -> PomParent | None:
    parent_el = _find(root, "parent")
    if parent_el is None:
        return None
    return PomParent(
        group_id=_text(parent_el, "groupId"),
        artifact_id=_text(parent_el, "artifactId"),
        version=_text(parent_el, "version"),
        relative_path=_text(parent_el, "relativePath"),
    )


def _parse_properties(root: ET.Element) -> dict[str, str]:
    properties: dict[str, str] = {}
    properties_el = _find(root, "properties")
    if properties_el is None:
        return properties
    for prop in properties_el:
        name = _local_name(prop.tag)
        if not name:
            # Comments and processing instructions
            continue
        properties[name] = (prop.text or "").strip()
    return properties


def _parse_modules(root: ET.Element) -> list[str]:
    modules_el = _find(root, "modules")
    modules = []
    for module_el in _findall(modules_el, "module"):
        if module_el.text and module_el.text.strip():
            modules.append(module_el.text.strip())
    return modules


def parse_pom_content(content: str | bytes, source_path: Path | None = None) -> PomModel:
    """Parse pom.xml content into a PomModel.

    Args:
        content: Raw XML document.
        source_path: Path used in error messages.

    Returns:
        The parsed PomModel.

    Raises:
        PomParseError: If the document is malformed or is not a <project>.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise PomParseError(f"Malformed pom.xml: {e}", source_path) from e

    if _local_name(root.tag) != "project":
        raise PomParseError(
            f"Unexpected root element <{_local_name(root.tag)}>, expected <project>",
            source_path,
        )

    return PomModel(
        group_id=_text(root, "groupId"),
        artifact_id=_text(root, "artifactId"),
        version=_text(root, "version"),
        packaging=_text(root, "packaging"),
        name=_text(root, "name"),
        description=_text(root, "description"),
        parent=_parse_parent(root),
        properties=_parse_properties(root),
        dependencies=_parse_dependencies(root),
        managed_dependencies=_parse_dependencies(_find(root, "dependencyManagement")),
        modules=_parse_modules(root),
    )


class PomParser:
    """Reads the pom.xml located inside a project directory."""

    def __init__(self, descriptor_name: str = POM_FILE_NAME) -> None:
        self.descriptor_name = descriptor_name

    def parse(self, project_root: Path) -> PomModel:
        """Parse ``<project_root>/pom.xml``.

        Args:
            project_root: Directory that contains the pom.xml file.

        Returns:
            The parsed PomModel.

        Raises:
            PomParseError: If the file is missing, unreadable, or malformed.
        """
        if project_root is None:
            raise PomParseError("No project root given")
        pom_path = self._locate(Path(project_root))
        if pom_path is None:
            raise PomParseError(
                f"{self.descriptor_name} not found at {Path(project_root).absolute()}",
                Path(project_root) / self.descriptor_name,
            )
        return self.parse_file(pom_path)

    def parse_file(self, pom_path: Path) -> PomModel:
        """Parse a descriptor file given by its own path.

        Raises:
            PomParseError: If the file is unreadable or malformed.
        """
        pom_path = Path(pom_path)
        try:
            content = pom_path.read_bytes()
        except OSError as e:
            raise PomParseError(f"Cannot read {pom_path}: {e}", pom_path) from e
        return parse_pom_content(content, pom_path)

    def _locate(self, project_root: Path) -> Path | None:
        """Find the descriptor file, matching its name case-insensitively."""
        exact = project_root / self.descriptor_name
        if exact.is_file():
            return exact
        if not project_root.is_dir():
            return None
        wanted = self.descriptor_name.lower()
        for candidate in sorted(project_root.iterdir()):
            if candidate.name.lower() == wanted and candidate.is_file():
                return candidate
        return None
