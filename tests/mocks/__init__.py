"""Mock utilities for testing."""

from .content_tree import build_course, write_descriptor, write_task
from .loader_mocks import CountingDescriptorLoader

__all__ = [
    "CountingDescriptorLoader",
    "build_course",
    "write_descriptor",
    "write_task",
]
