"""Course assembly: loads the root descriptor and resolves every task group."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Tuple

from ..constants import ROOT_DESCRIPTOR
from ..utils.errors import ContentError, CourseAssemblyError
from .course import AchievementRecord, CourseView, TaskGroupView, parse_course
from .loader import DescriptorLoader
from .resolver import TaskResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentState:
    """The published, read-only content of a running server."""

    course: CourseView
    achievements: Tuple[AchievementRecord, ...]


class CourseAssembler:
    """Builds the immutable course view once at startup."""

    def __init__(self, loader: DescriptorLoader, resolver: TaskResolver):
        self.loader = loader
        self.resolver = resolver

    async def assemble(self) -> ContentState:
        """Load the root descriptor and resolve every referenced task.

        Any failure aborts assembly; no partial course is ever returned.

        Returns:
            ContentState with the course view and achievements in declaration order

        Raises:
            CourseAssemblyError: If the root descriptor or any task cannot be loaded
        """
        try:
            descriptor = await asyncio.to_thread(self.loader.load, ROOT_DESCRIPTOR, parse_course)
        except ContentError as e:
            raise CourseAssemblyError(f"While loading course info: {e}") from e

        task_groups = []
        for group in descriptor.task_groups:
            tasks = []
            for reference in group.references:
                try:
                    task = await self.resolver.resolve(reference)
                except ContentError as e:
                    raise CourseAssemblyError(
                        f"While loading task info {reference}: {e}",
                        reference=reference,
                    ) from e
                tasks.append(task.summary)
            task_groups.append(TaskGroupView(title=group.title, tasks=tuple(tasks)))

        course = CourseView(
            title=descriptor.title,
            description=descriptor.description,
            task_groups=tuple(task_groups),
        )

        logger.info(
            f"Course info loaded successfully: {course.title} "
            f"with {len(course.task_groups)} task groups"
        )
        logger.info(f"Tasks loaded: {len(self.resolver.cache)}")

        return ContentState(course=course, achievements=descriptor.achievements)
