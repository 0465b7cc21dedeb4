"""
pompot.commands.serve - Scan once and serve the result over HTTP.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pompot.commands.report import resolve_root, scanner_from_config
from pompot.repository import ParsedProjectRepository, initialize

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace, config: dict[str, Any] | None = None) -> int:
    """Run the serve command."""
    try:
        from pompot.server.app import create_app
    except ImportError:
        print("Error: server dependencies not installed.", file=sys.stderr)
        print("Install with: pip install pompot[server]", file=sys.stderr)
        return 1

    config = config or {}
    server_config = config.get("server", {}) or {}
    host = args.host or server_config.get("host", "127.0.0.1")
    port = args.port or int(server_config.get("port", 9754))

    root = resolve_root(getattr(args, "directory", None), config)
    scanner = scanner_from_config(config)
    repository = ParsedProjectRepository()

    result = initialize(root, scanner, repository)
    if result.outcome.is_fatal:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    app = create_app(repository, config=config, root=root, scanner=scanner)
    print(f"Serving {root} on http://{host}:{port}/api/pom")
    try:
        app.run(host=host, port=port)
    except KeyboardInterrupt:
        print("\nServer stopped.")
    return 0
