"""pompot.server - Flask REST API server.

Exposes the last published scan over HTTP.
"""

from pompot.server.app import create_app

__all__ = ["create_app"]
