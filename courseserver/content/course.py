"""Course, task group, task and achievement data models."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class TaskSummary:
    """The externally visible identity of a task."""

    id: str
    title: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title}


@dataclass(frozen=True)
class TaskRecord:
    """A fully materialized task, identified by its reference."""

    id: str
    title: str
    body: str = ""

    @property
    def summary(self) -> TaskSummary:
        """Get the summary view of this task."""
        return TaskSummary(id=self.id, title=self.title)

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title, "body": self.body}


@dataclass(frozen=True)
class AchievementRecord:
    """An achievement declared in the root course descriptor."""

    title: str
    description: str = ""
    icon: str = ""
    type: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "type": self.type,
        }


@dataclass(frozen=True)
class TaskGroupView:
    """A titled, ordered group of task summaries."""

    title: str
    tasks: Tuple[TaskSummary, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "tasks": [task.to_dict() for task in self.tasks]}


@dataclass(frozen=True)
class CourseView:
    """The fully resolved course, immutable once published."""

    title: str
    description: str = ""
    task_groups: Tuple[TaskGroupView, ...] = ()

    def get_group(self, title: str) -> Optional[TaskGroupView]:
        """Get a task group by title."""
        for group in self.task_groups:
            if group.title == title:
                return group
        return None

    def task_references(self) -> List[str]:
        """Get every task reference in declaration order."""
        return [task.id for group in self.task_groups for task in group.tasks]


@dataclass(frozen=True)
class TaskGroupEntry:
    """A task group as declared in the root descriptor, before resolution."""

    title: str
    references: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CourseDescriptor:
    """The decoded root course descriptor."""

    title: str
    description: str = ""
    achievements: Tuple[AchievementRecord, ...] = ()
    task_groups: Tuple[TaskGroupEntry, ...] = ()


def _text(data: Dict[str, Any], key: str) -> str:
    """Read an optional scalar field as a string."""
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"field '{key}' must be a scalar, got {type(value).__name__}")
    return str(value)


def _mapping(data: Any, what: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _sequence(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field '{key}' must be a list, got {type(value).__name__}")
    return value


def parse_task(reference: str, data: Any) -> TaskRecord:
    """Build a task record from a decoded task descriptor.

    The record id is always the reference it was resolved from.

    Args:
        reference: Dotted task reference
        data: Decoded YAML document

    Returns:
        TaskRecord for the reference

    Raises:
        ValueError: If the document does not have the task shape
    """
    task_data = _mapping(data, "task descriptor")
    return TaskRecord(
        id=reference,
        title=_text(task_data, "title"),
        body=_text(task_data, "body"),
    )


def parse_course(data: Any) -> CourseDescriptor:
    """Build a course descriptor from the decoded root document.

    Args:
        data: Decoded YAML document

    Returns:
        CourseDescriptor with unresolved task references

    Raises:
        ValueError: If the document does not have the course shape
    """
    course_data = _mapping(data, "course descriptor")

    achievements = []
    for achievement_data in _sequence(course_data, "achievements"):
        achievement_data = _mapping(achievement_data, "achievement")
        achievements.append(
            AchievementRecord(
                title=_text(achievement_data, "title"),
                description=_text(achievement_data, "description"),
                icon=_text(achievement_data, "icon"),
                type=_text(achievement_data, "type"),
            )
        )

    task_groups = []
    for group_data in _sequence(course_data, "task-groups"):
        group_data = _mapping(group_data, "task group")
        references = []
        for reference in _sequence(group_data, "tasks"):
            if not isinstance(reference, str):
                raise ValueError(
                    f"task reference must be a string, got {type(reference).__name__}"
                )
            references.append(reference)
        task_groups.append(
            TaskGroupEntry(title=_text(group_data, "title"), references=tuple(references))
        )

    return CourseDescriptor(
        title=_text(course_data, "title"),
        description=_text(course_data, "description"),
        achievements=tuple(achievements),
        task_groups=tuple(task_groups),
    )
