"""
pompot.commands.report - Report values repeated across pom.xml files.

Prints a plain-text table (or JSON with --json) of the values that
appear in two or more poms under a directory.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, TextIO

from pompot.common_values import CommonValue, extract_common_values
from pompot.scanner import PomDirectoryScanner, ScanOutcome

HEADERS = ("Category", "Identifier", "Value", "Occurrences")


def expand_leading_tilde(candidate: str | None) -> str:
    """Expand a leading ``~`` or ``~/`` to the user's home directory.

    Other ``~`` forms (``~user``) are returned unchanged.
    """
    trimmed = (candidate or "").strip()
    if not trimmed.startswith("~"):
        return trimmed
    home = os.path.expanduser("~")
    if not home or home == "~":
        return trimmed
    if len(trimmed) == 1:
        return home
    if trimmed[1] in ("/", "\\"):
        return home + trimmed[1:]
    return trimmed


def resolve_root(directory: str | None, config: dict[str, Any] | None = None) -> Path:
    """Resolve the scan root from an argument, the config, or the cwd."""
    candidate = directory
    if not candidate or not candidate.strip():
        candidate = str(((config or {}).get("scan", {}) or {}).get("root") or "")
    if not candidate.strip():
        return Path.cwd()
    return Path(os.path.normpath(str(Path(expand_leading_tilde(candidate)).absolute())))


def format_table(values: list[CommonValue]) -> list[str]:
    """Format common values as aligned table lines (header, rule, rows)."""
    rows = [
        (value.category, value.identifier, value.value, str(value.occurrences))
        for value in values
    ]
    widths = [
        max([len(HEADERS[column])] + [len(row[column]) for row in rows])
        for column in range(len(HEADERS))
    ]

    def _line(cells: tuple[str, ...]) -> str:
        category, identifier, value, occurrences = cells
        return (
            f"{category:<{widths[0]}}  {identifier:<{widths[1]}}  "
            f"{value:<{widths[2]}}  {occurrences:>{widths[3]}}"
        )

    lines = [_line(HEADERS), _line(tuple("-" * width for width in widths))]
    lines.extend(_line(row) for row in rows)
    return lines


def format_report(root: Path, values: list[CommonValue]) -> str:
    """Render the full report text for the given root."""
    lines = [f"Repeated values under {root}", ""]
    lines.extend(format_table(values))
    return "\n".join(lines) + "\n"


def run_report(
    directory: str | None,
    out: TextIO,
    err: TextIO,
    config: dict[str, Any] | None = None,
    as_json: bool = False,
    scanner: PomDirectoryScanner | None = None,
) -> int:
    """
    Scan a directory and print its repeated values.

    Returns:
        0 when the scan ran (including when nothing was found), 1 when the
        root is invalid or could not be traversed.
    """
    root = resolve_root(directory, config)
    if not root.is_dir():
        err.write(f"Directory not found: {root}\n")
        return 1

    scanner = scanner or scanner_from_config(config)
    result = scanner.scan(root)

    if result.outcome.is_fatal:
        err.write(f"{result.error or 'Scan failed'}\n")
        return 1

    message = None
    if result.outcome is ScanOutcome.NO_DESCRIPTORS_FOUND:
        message = f"No pom.xml files were found under {result.root}"
    elif result.outcome is ScanOutcome.ALL_PARSES_FAILED:
        message = f"pom.xml files were found under {result.root} but none could be parsed"
    if message is not None:
        if as_json:
            # stdout stays machine-readable
            err.write(message + "\n")
            out.write("[]\n")
        else:
            out.write(message + "\n")
        return 0

    values = extract_common_values(result.projects)
    if as_json:
        out.write(json.dumps([value.to_dict() for value in values], indent=2) + "\n")
        return 0

    if not values:
        out.write(f"No repeated values were detected under {result.root}\n")
        return 0

    out.write(format_report(result.root, values))
    return 0


def scanner_from_config(config: dict[str, Any] | None) -> PomDirectoryScanner:
    """Create a scanner honoring the [scan] config section."""
    scan_config = (config or {}).get("scan", {}) or {}
    return PomDirectoryScanner(
        descriptor_name=scan_config.get("descriptor_name") or "pom.xml",
        exclude_dirs=scan_config.get("exclude_dirs", []),
    )


def run(args: argparse.Namespace, config: dict[str, Any] | None = None) -> int:
    """Run the report command."""
    return run_report(
        getattr(args, "directory", None),
        out=sys.stdout,
        err=sys.stderr,
        config=config,
        as_json=getattr(args, "json", False),
    )
