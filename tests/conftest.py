"""Pytest configuration and shared fixtures for course server tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tests.mocks import CountingDescriptorLoader, build_course


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def content_root(tmp_path):
    """Create an empty content root."""
    root = tmp_path / "course"
    root.mkdir()
    return root


@pytest.fixture
def sample_achievements():
    """Achievement entries for the sample course."""
    return [
        {
            "title": "First Steps",
            "description": "Complete your first task",
            "icon": "first.png",
            "type": "task-complete",
        },
        {
            "title": "Finisher",
            "description": "Complete the course",
            "icon": "finish.png",
            "type": "course-complete",
        },
    ]


@pytest.fixture
def sample_course_root(content_root, sample_achievements):
    """Create a content root with two groups of two tasks each."""
    build_course(
        content_root,
        {
            "intro": {"intro.hello": "Hello", "intro.bye": "Bye"},
            "basics": {
                "basics.strings.concat": "Joining strings",
                "basics.loops": "Loops",
            },
        },
        achievements=sample_achievements,
    )
    (content_root / "resources").mkdir()
    (content_root / "resources" / "logo.txt").write_text("logo", encoding="utf-8")
    return content_root


@pytest.fixture
def counting_loader(sample_course_root):
    """Create a descriptor loader that records every load."""
    return CountingDescriptorLoader(sample_course_root)


@pytest.fixture
def task_cache():
    """Create an empty task cache."""
    from courseserver.content import TaskCache

    return TaskCache()


@pytest.fixture
def resolver(counting_loader, task_cache):
    """Create a task resolver over the sample course."""
    from courseserver.content import TaskResolver

    return TaskResolver(counting_loader, task_cache)


@pytest.fixture
def assembler(counting_loader, resolver):
    """Create a course assembler over the sample course."""
    from courseserver.content import CourseAssembler

    return CourseAssembler(counting_loader, resolver)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch):
    """Remove course server variables from the environment."""
    for name in ("COURSE_HOST", "COURSE_PORT", "COURSE_PATH", "COURSE_LOG_LEVEL", "COURSE_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the tests
    monkeypatch.setattr("courseserver.config.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def server_config(sample_course_root):
    """Create a configuration pointing at the sample course."""
    from courseserver.config import Config, ContentConfig

    return Config(content=ContentConfig(path=str(sample_course_root)))
