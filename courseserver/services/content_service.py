"""Read-only access to the assembled course content."""

import logging
from typing import Any, Dict, List

from ..content.assembler import ContentState
from ..content.course import TaskRecord
from ..content.resolver import TaskResolver

logger = logging.getLogger(__name__)


class ContentService:
    """Service exposing the published course state to the HTTP layer.

    Never mutates the course view; task lookups go through the resolver,
    which may extend the task cache for references not seen at startup.
    """

    def __init__(self, state: ContentState, resolver: TaskResolver):
        """Initialize the content service.

        Args:
            state: Content assembled at startup
            resolver: Task resolver sharing the startup cache
        """
        self.state = state
        self.resolver = resolver

    def get_course_summary(self) -> Dict[str, str]:
        course = self.state.course
        return {"title": course.title, "description": course.description}

    def list_task_groups(self) -> List[Dict[str, Any]]:
        return [group.to_dict() for group in self.state.course.task_groups]

    async def get_task_by_id(self, task_id: str) -> TaskRecord:
        """Resolve a task by its reference.

        Raises:
            InvalidReferenceError, DescriptorNotFoundError, DescriptorDecodeError
        """
        return await self.resolver.resolve(task_id)

    def list_achievements(self) -> List[Dict[str, str]]:
        return [achievement.to_dict() for achievement in self.state.achievements]
