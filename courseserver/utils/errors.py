"""Custom exceptions for course content loading and serving."""

from typing import Optional


class ContentError(Exception):
    """Base exception for course content errors."""

    pass


class DescriptorNotFoundError(ContentError):
    """Raised when a descriptor file is missing, unreadable or outside the content root."""

    def __init__(self, path: str, reason: str = "file not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Descriptor {path}: {reason}")


class DescriptorDecodeError(ContentError):
    """Raised when a descriptor file contains malformed content."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not decode descriptor {path}: {reason}")


class InvalidReferenceError(ContentError):
    """Raised when a task reference cannot be mapped to a descriptor path."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Invalid task reference: {reference!r}")


class CourseAssemblyError(ContentError):
    """Raised when the course cannot be assembled at startup."""

    def __init__(self, message: str, reference: Optional[str] = None):
        self.reference = reference
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised when the server configuration is invalid."""

    pass
