"""Utility modules for the course server."""

from .errors import (
    ConfigurationError,
    ContentError,
    CourseAssemblyError,
    DescriptorDecodeError,
    DescriptorNotFoundError,
    InvalidReferenceError,
)

__all__ = [
    "ConfigurationError",
    "ContentError",
    "CourseAssemblyError",
    "DescriptorDecodeError",
    "DescriptorNotFoundError",
    "InvalidReferenceError",
]
