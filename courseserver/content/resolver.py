"""Task reference resolution and the shared task cache."""

import asyncio
import logging
import re
from functools import partial
from typing import Dict, List, Optional

from ..constants import DESCRIPTOR_EXTENSION, REFERENCE_SEPARATOR, TASKS_DIR
from ..utils.errors import InvalidReferenceError
from .course import TaskRecord, parse_task
from .loader import DescriptorLoader

logger = logging.getLogger(__name__)

_SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def reference_to_path(reference: str) -> str:
    """Map a dotted task reference to its descriptor path.

    `a.b.c` maps to `tasks/a/b/c.yml`: every segment but the last is a
    directory, the last one is the file stem. Segments may hold ASCII
    letters and digits, plus `_` and `-` for names like `getting-started`;
    nothing else, including whitespace.

    Raises:
        InvalidReferenceError: If the reference is empty or has an illegal segment
    """
    if not isinstance(reference, str) or not reference:
        raise InvalidReferenceError(reference)

    segments = reference.split(REFERENCE_SEPARATOR)
    for segment in segments:
        if not _SEGMENT_PATTERN.fullmatch(segment):
            raise InvalidReferenceError(reference)

    segments[-1] += DESCRIPTOR_EXTENSION
    return "/".join([TASKS_DIR, *segments])


class TaskCache:
    """Unbounded, write-once table of resolved tasks keyed by reference.

    Entries are never evicted; content is assumed immutable for the
    process lifetime.
    """

    def __init__(self):
        self._records: Dict[str, TaskRecord] = {}

    def get(self, reference: str) -> Optional[TaskRecord]:
        """Get a cached task, or None if the reference was never resolved."""
        return self._records.get(reference)

    def put(self, reference: str, record: TaskRecord) -> TaskRecord:
        """Store a task unless one is already cached.

        Returns:
            The record held by the cache for this reference
        """
        return self._records.setdefault(reference, record)

    def references(self) -> List[str]:
        """Get all cached references."""
        return list(self._records)

    def __contains__(self, reference: object) -> bool:
        return reference in self._records

    def __len__(self) -> int:
        return len(self._records)


class TaskResolver:
    """Resolves task references into records, memoizing them in a TaskCache.

    Concurrent resolutions of the same uncached reference are serialized on a
    per-reference asyncio lock, so each reference is loaded at most once.
    Locks are discarded as soon as no caller needs them. Failed resolutions
    are not cached and may be retried.
    """

    def __init__(self, loader: DescriptorLoader, cache: TaskCache):
        self.loader = loader
        self.cache = cache
        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}
        self._load_count = 0

    @property
    def load_count(self) -> int:
        """Number of descriptor loads performed so far."""
        return self._load_count

    @property
    def active_locks(self) -> int:
        """Number of references with a load in flight or waiting."""
        return len(self._locks)

    async def resolve(self, reference: str) -> TaskRecord:
        """Resolve a task reference.

        Args:
            reference: Dotted task reference, e.g. `intro.hello`

        Returns:
            The cached or freshly loaded TaskRecord

        Raises:
            InvalidReferenceError: If the reference cannot be mapped to a path
            DescriptorNotFoundError: If the task file does not exist
            DescriptorDecodeError: If the task file is malformed
        """
        record = self.cache.get(reference)
        if record is not None:
            return record

        path = reference_to_path(reference)

        lock = self._locks.setdefault(reference, asyncio.Lock())
        self._lock_users[reference] = self._lock_users.get(reference, 0) + 1
        try:
            async with lock:
                record = self.cache.get(reference)
                if record is not None:
                    return record

                self._load_count += 1
                record = await asyncio.to_thread(
                    self.loader.load, path, partial(parse_task, reference)
                )
                record = self.cache.put(reference, record)
        finally:
            # Drop the lock once no caller holds or waits on it
            self._lock_users[reference] -= 1
            if not self._lock_users[reference]:
                del self._lock_users[reference]
                self._locks.pop(reference, None)

        logger.debug(f"Cached task {reference}")
        return record
