"""
pompot.repository - In-memory holder for the latest scan result.

Writers replace the whole ParsedProjectCollection at once; readers see
either the previous collection or the next one, never a partial one.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from pompot.common_values import extract_common_values
from pompot.models import ParsedProjectCollection
from pompot.scanner import PomDirectoryScanner, ScanOutcome, ScanResult

logger = logging.getLogger(__name__)


class ParsedProjectRepository:
    """Stores the last published ParsedProjectCollection."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._collection: ParsedProjectCollection | None = None

    def fetch(self) -> ParsedProjectCollection | None:
        """Return the stored collection, or None when nothing is published."""
        with self._lock:
            return self._collection

    def store(self, collection: ParsedProjectCollection) -> None:
        """Replace the stored collection."""
        if collection is None:
            raise ValueError("collection is required; use clear() to remove it")
        with self._lock:
            self._collection = collection

    def clear(self) -> None:
        """Remove any stored collection."""
        with self._lock:
            self._collection = None

    def has_result(self) -> bool:
        return self.fetch() is not None


def collect(result: ScanResult) -> ParsedProjectCollection | None:
    """Build the publishable collection for a successful scan.

    Returns:
        The collection, or None when the scan did not succeed.
    """
    if result.outcome is not ScanOutcome.SUCCESS:
        return None
    common_values = extract_common_values(result.projects)
    return ParsedProjectCollection(
        scanned_root=str(result.root),
        entries=tuple(result.projects),
        common_values=tuple(common_values),
    )


def initialize(
    root: Path | str | None,
    scanner: PomDirectoryScanner,
    repository: ParsedProjectRepository,
) -> ScanResult:
    """Scan a root and publish the outcome.

    A successful scan replaces the stored collection; every other outcome
    clears it.

    Args:
        root: Directory to scan (None skips scanning).
        scanner: Scanner used to discover and parse poms.
        repository: Holder receiving the collection.

    Returns:
        The ScanResult of the scan.
    """
    if root is None:
        logger.info("No project directory supplied; pom parsing skipped.")
        repository.clear()
        return ScanResult(ScanOutcome.INVALID_ROOT, None, error="No directory given")

    result = scanner.scan(root)
    collection = collect(result)
    if collection is None:
        repository.clear()
        logger.info("Nothing published for %s (%s)", result.root, result.outcome.value)
        return result

    repository.store(collection)
    logger.info(
        "Parsed %d pom.xml file(s) under %s; %d repeated value(s)",
        len(collection.entries),
        collection.scanned_root,
        len(collection.common_values),
    )
    return result
