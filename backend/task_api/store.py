"""In-memory task storage."""

from __future__ import annotations

import logging
from itertools import count
from threading import Lock
from typing import Dict, Iterable, List, Optional

from .models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASK_TITLES = (
    "Fix Docker configuration",
    "Configure API service",
    "Connect frontend to backend",
)


class TaskStore:
    """In-memory store that owns the task list.

    Every read and write goes through the store so that request handlers
    never share the underlying list directly. Identifiers are handed out by
    a counter and are never reused, even after a task has been deleted.
    """

    def __init__(self, titles: Iterable[str] = ()) -> None:
        self._lock = Lock()
        self._tasks: Dict[int, Task] = {}
        self._ids = count(1)
        self._seed = tuple(titles)
        for title in self._seed:
            self._insert(title)

    def _insert(self, title: str) -> Task:
        task = Task(id=next(self._ids), title=title, completed=False)
        self._tasks[task.id] = task
        return task

    def list(self) -> List[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    def create(self, title: str) -> Task:
        with self._lock:
            task = self._insert(title)
        logger.info("Task created: id=%d title=%r", task.id, task.title)
        return task.model_copy()

    def toggle(self, task_id: int) -> Optional[Task]:
        """Flip the ``completed`` flag; return ``None`` for unknown ids."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            updated = task.model_copy(update={"completed": not task.completed})
            self._tasks[task_id] = updated
        logger.info("Task toggled: id=%d completed=%s", task_id, updated.completed)
        return updated.model_copy()

    def delete(self, task_id: int) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            return False
        logger.info("Task deleted: id=%d", task_id)
        return True

    def reset(self) -> None:
        """Restore the seed tasks and restart the id counter."""
        with self._lock:
            self._tasks.clear()
            self._ids = count(1)
            for title in self._seed:
                self._insert(title)


TASK_STORE = TaskStore(DEFAULT_TASK_TITLES)
