"""Course server: serves course content over a read-only HTTP API."""

__version__ = "0.1.0"
