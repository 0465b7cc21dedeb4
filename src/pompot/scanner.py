"""
pompot.scanner - Directory scanner for pom.xml files.

Walks a root directory, parses every pom.xml found (case-insensitive
name match), builds one graph per pom, and returns the projects in
a deterministic order.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from pompot.graph.builder import PomGraphBuilder
from pompot.models import ParsedProject, sort_projects
from pompot.parsers.pom import POM_FILE_NAME, PomParseError, PomParser

logger = logging.getLogger(__name__)


class ScanOutcome(Enum):
    """Possible outcomes of a directory scan."""

    INVALID_ROOT = "invalid_root"
    TRAVERSAL_FAILURE = "traversal_failure"
    NO_DESCRIPTORS_FOUND = "no_descriptors_found"
    ALL_PARSES_FAILED = "all_parses_failed"
    SUCCESS = "success"

    @property
    def is_fatal(self) -> bool:
        """True for outcomes where the root itself could not be scanned."""
        return self in (ScanOutcome.INVALID_ROOT, ScanOutcome.TRAVERSAL_FAILURE)


@dataclass
class ScanResult:
    """
    Result of scanning a directory.

    Attributes:
        outcome: Which of the scan outcomes occurred
        root: Absolute, normalized scan root (None when no root was given)
        projects: Parsed projects in report order
        files_found: Number of pom.xml files discovered
        failed: Paths of pom.xml files that could not be parsed
        error: Description of a fatal failure
    """

    outcome: ScanOutcome
    root: Path | None
    projects: list[ParsedProject] = field(default_factory=list)
    files_found: int = 0
    failed: list[Path] = field(default_factory=list)
    error: str | None = None

    @property
    def found_pom_files(self) -> bool:
        return self.files_found > 0


def _absolute_path(root: Path | str) -> Path:
    return Path(os.path.normpath(str(Path(root).expanduser().absolute())))


def exclude_names(exclude_dirs: Iterable[str] | str | None) -> set[str]:
    """Normalize excluded directory names; a string is split on commas."""
    if not exclude_dirs:
        return set()
    if isinstance(exclude_dirs, str):
        exclude_dirs = exclude_dirs.split(",")
    return {str(name).strip() for name in exclude_dirs if str(name).strip()}


def _empty_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def relative_path(root: Path, pom_file: Path) -> str:
    """Path of pom_file relative to root, or the absolute path when unrelated."""
    try:
        return str(pom_file.relative_to(root))
    except ValueError:
        logger.warning("Could not relativize %s against %s", pom_file, root)
        return str(pom_file)


class PomDirectoryScanner:
    """
    Scans a directory tree for pom.xml files and parses each one.

    Args:
        parser: Parser used for each pom.xml (defaults to PomParser).
        descriptor_name: File name to look for, matched case-insensitively.
        exclude_dirs: Directory names never descended into
            (a comma-separated string is accepted).
    """

    def __init__(
        self,
        parser: PomParser | None = None,
        descriptor_name: str = POM_FILE_NAME,
        exclude_dirs: Iterable[str] | str | None = None,
    ) -> None:
        self.parser = parser or PomParser(descriptor_name)
        self.descriptor_name = descriptor_name
        self.exclude_dirs = exclude_names(exclude_dirs)

    def is_descriptor(self, path: Path) -> bool:
        return path.name.lower() == self.descriptor_name.lower()

    def find_descriptor_files(self, root: Path) -> list[Path]:
        """
        Recursively list regular files named like the descriptor.

        Raises:
            OSError: If part of the tree cannot be traversed.
        """

        def _raise(error: OSError) -> None:
            raise error

        found: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            dirnames[:] = sorted(d for d in dirnames if d not in self.exclude_dirs)
            for filename in sorted(filenames):
                candidate = Path(dirpath) / filename
                if self.is_descriptor(candidate) and candidate.is_file():
                    found.append(candidate)
        return found

    def parse_project(self, root: Path, pom_file: Path) -> ParsedProject:
        """
        Parse one pom.xml and build its graph.

        Raises:
            PomParseError: If the descriptor cannot be parsed.
        """
        project_root = pom_file.parent
        model = self.parser.parse_file(pom_file)
        graph = PomGraphBuilder(project_root).build(model)
        absolute_pom = _absolute_path(pom_file)
        return ParsedProject(
            pom_path=str(absolute_pom),
            relative_path=relative_path(root, absolute_pom),
            group_id=_empty_to_none(model.resolved_group_id()),
            artifact_id=_empty_to_none(model.resolved_artifact_id()),
            model=model,
            _graph=graph,
        )

    def scan(self, root: Path | str | None) -> ScanResult:
        """
        Scan a root directory.

        Args:
            root: Directory containing the pom files to parse.

        Returns:
            ScanResult describing the outcome and the parsed projects.
        """
        if root is None:
            return ScanResult(ScanOutcome.INVALID_ROOT, None, error="No directory given")

        normalized_root = _absolute_path(root)
        if not normalized_root.is_dir():
            logger.error("Provided path is not a directory: %s", normalized_root)
            return ScanResult(
                ScanOutcome.INVALID_ROOT,
                normalized_root,
                error=f"Directory not found: {normalized_root}",
            )

        try:
            pom_files = self.find_descriptor_files(normalized_root)
        except OSError as e:
            logger.error("Failed to traverse %s: %s", normalized_root, e)
            return ScanResult(
                ScanOutcome.TRAVERSAL_FAILURE,
                normalized_root,
                error=f"Failed to traverse {normalized_root}: {e}",
            )

        if not pom_files:
            return ScanResult(ScanOutcome.NO_DESCRIPTORS_FOUND, normalized_root)

        projects: list[ParsedProject] = []
        failed: list[Path] = []
        for pom_file in pom_files:
            try:
                projects.append(self.parse_project(normalized_root, pom_file))
            except PomParseError as e:
                logger.warning("Skipping %s: %s", pom_file, e)
                failed.append(pom_file)

        if not projects:
            logger.warning("Failed to parse pom.xml files under %s", normalized_root)
            return ScanResult(
                ScanOutcome.ALL_PARSES_FAILED,
                normalized_root,
                files_found=len(pom_files),
                failed=failed,
            )

        logger.debug(
            "Parsed %d of %d pom.xml files under %s",
            len(projects),
            len(pom_files),
            normalized_root,
        )
        return ScanResult(
            ScanOutcome.SUCCESS,
            normalized_root,
            projects=sort_projects(projects),
            files_found=len(pom_files),
            failed=failed,
        )
