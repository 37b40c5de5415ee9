"""Helpers for writing course content trees in tests."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def write_descriptor(root: Path, relative_path: str, data: Any) -> Path:
    """Write a YAML descriptor below a content root.

    Strings are written verbatim so tests can supply malformed YAML.
    """
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    else:
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


def write_task(root: Path, reference: str, title: str, body: str = "") -> Path:
    """Write a task descriptor at the path its reference maps to."""
    *dirs, stem = reference.split(".")
    relative_path = "/".join(["tasks", *dirs, f"{stem}.yml"])
    return write_descriptor(root, relative_path, {"title": title, "body": body})


def build_course(
    root: Path,
    task_groups: Dict[str, Dict[str, str]],
    title: str = "Test Course",
    description: str = "A course used in tests",
    achievements: Optional[list] = None,
) -> Path:
    """Write a root descriptor and one task file per reference.

    Args:
        root: Content root directory
        task_groups: Group title -> {reference: task title}, in declaration order
    """
    course = {
        "title": title,
        "description": description,
        "achievements": achievements or [],
        "task-groups": [
            {"title": group_title, "tasks": list(tasks)}
            for group_title, tasks in task_groups.items()
        ],
    }
    write_descriptor(root, "course.yml", course)
    for tasks in task_groups.values():
        for reference, task_title in tasks.items():
            write_task(root, reference, task_title, body=f"Body of {reference}")
    return root
