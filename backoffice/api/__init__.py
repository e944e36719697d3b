"""HTTP API for the back office."""

from backoffice.api.server import create_app

__all__ = ["create_app"]
