"""pompot.server.app - Flask app factory and REST API routes.

This is a THIN REST wrapper over the ParsedProjectRepository. Every
request reads the stored collection once, so a rescan running in
parallel is observed either entirely or not at all.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from flask import Flask, jsonify, request
from flask_cors import CORS

from pompot.graph.serialize import serialize_graph
from pompot.repository import ParsedProjectRepository, initialize
from pompot.scanner import PomDirectoryScanner

NOT_PARSED = {"error": "No pom.xml has been parsed yet"}


def create_app(
    repository: ParsedProjectRepository,
    config: dict[str, Any] | None = None,
    root: Path | None = None,
    scanner: PomDirectoryScanner | None = None,
) -> Flask:
    """Create the Flask application with REST API routes.

    Args:
        repository: Holder of the last published scan.
        config: pompot configuration dict.
        root: Directory rescanned by POST /api/rescan.
        scanner: Scanner used for rescans.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)
    CORS(app)

    _state: dict[str, Any] = {
        "repository": repository,
        "config": config or {},
        "root": root,
        "scanner": scanner or PomDirectoryScanner(),
    }

    @app.after_request
    def _no_cache(response):
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        return response

    def _status() -> dict[str, Any]:
        collection = _state["repository"].fetch()
        if collection is None:
            return {
                "parsed": False,
                "scannedRoot": None,
                "projectCount": 0,
                "commonValueCount": 0,
            }
        return {
            "parsed": True,
            "scannedRoot": collection.scanned_root,
            "projectCount": len(collection.entries),
            "commonValueCount": len(collection.common_values),
        }

    # ─────────────────────────────────────────────────────────────────
    # Read-only GET endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/status")
    def api_status():
        """GET /api/status - Whether a scan is published, with counts."""
        return jsonify(_status())

    @app.route("/api/pom")
    def api_pom():
        """GET /api/pom - The published collection, or 404."""
        collection = _state["repository"].fetch()
        if collection is None:
            return jsonify(NOT_PARSED), 404
        return jsonify(collection.to_dict())

    @app.route("/api/common-values")
    def api_common_values():
        """GET /api/common-values - Repeated values of the published scan."""
        collection = _state["repository"].fetch()
        if collection is None:
            return jsonify(NOT_PARSED), 404
        return jsonify([value.to_dict() for value in collection.common_values])

    @app.route("/api/pom/graph")
    def api_pom_graph():
        """GET /api/pom/graph?path=<relativePath> - Graph of one project."""
        collection = _state["repository"].fetch()
        if collection is None:
            return jsonify(NOT_PARSED), 404
        relative_path = request.args.get("path", "")
        project = collection.find_by_relative_path(relative_path)
        if project is None:
            return jsonify({"error": f"No project at '{relative_path}'"}), 404
        result = serialize_graph(project.graph)
        result["relativePath"] = project.relative_path
        return jsonify(result)

    # ─────────────────────────────────────────────────────────────────
    # Mutation endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/rescan", methods=["POST"])
    def api_rescan():
        """POST /api/rescan - Rescan the configured root and republish."""
        if _state["root"] is None:
            _state["repository"].clear()
            return jsonify({"error": "No project directory configured"}), 400
        result = initialize(_state["root"], _state["scanner"], _state["repository"])
        payload = _status()
        payload["outcome"] = result.outcome.value
        if result.outcome.is_fatal:
            payload["error"] = result.error
            return jsonify(payload), 400
        return jsonify(payload)

    return app
