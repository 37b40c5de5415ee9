"""Content management for the course server."""

from .assembler import ContentState, CourseAssembler
from .course import (
    AchievementRecord,
    CourseView,
    TaskGroupView,
    TaskRecord,
    TaskSummary,
)
from .loader import DescriptorLoader
from .resolver import TaskCache, TaskResolver, reference_to_path

__all__ = [
    "AchievementRecord",
    "ContentState",
    "CourseAssembler",
    "CourseView",
    "DescriptorLoader",
    "TaskCache",
    "TaskGroupView",
    "TaskRecord",
    "TaskResolver",
    "TaskSummary",
    "reference_to_path",
]
