"""HTTP API for the course server."""

from .app import create_app
from .routes import router

__all__ = ["create_app", "router"]
