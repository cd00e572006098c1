"""In-memory task store.

The store owns every task. Callers get frozen ``Task`` snapshots back, so the
only way to change a task is through ``add``, ``complete`` or ``delete``.
Nothing is persisted; the contents are lost when the process exits.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from quicktodo.models import Task

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when a task cannot be created from the given input."""


class TaskStore:
    """Authoritative collection of tasks in insertion order."""

    def __init__(
        self,
        seed: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._tasks: list[Task] = []
        self._clock = clock
        # Highest ID ever handed out; IDs are never reused after deletion
        self._last_id = 0
        if seed:
            self.initialize()

    def __len__(self) -> int:
        return len(self._tasks)

    def initialize(self) -> None:
        """Replace the contents with the fixed sample tasks."""
        now = self._clock()
        self._tasks = [
            Task(
                id=1,
                title="Buy milk",
                category="Shopping",
                created_date=now - timedelta(days=1),
            ),
            Task(
                id=2,
                title="Call mom",
                category="Personal",
                created_date=now - timedelta(days=2),
            ),
            Task(
                id=3,
                title="Finish report",
                is_completed=True,
                category="Work",
                created_date=now - timedelta(days=3),
            ),
        ]
        self._last_id = 3
        logger.debug("Store seeded with %d sample tasks", len(self._tasks))

    # -------------------- queries --------------------

    def list_all(self) -> list[Task]:
        """Return all tasks in insertion order."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        """Get a task by ID."""
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def tasks_by_category(self, category: str | None) -> list[Task]:
        """Return tasks in the given category.

        A blank category means no filter. Matching is exact and
        case-sensitive.
        """
        if not category or not category.strip():
            return self.list_all()
        return [task for task in self._tasks if task.category == category]

    def unique_categories(self) -> list[str]:
        """Return distinct non-empty categories in first-seen order."""
        seen: dict[str, None] = {}
        for task in self._tasks:
            if task.category:
                seen.setdefault(task.category, None)
        return list(seen)

    # -------------------- mutations --------------------

    def add(
        self,
        title: str,
        category: str | None = "",
        tags: Iterable[str] | None = None,
    ) -> Task:
        """Create a task and append it to the store.

        Raises:
            ValidationError: If the title is empty or whitespace-only.
        """
        if not title or not title.strip():
            raise ValidationError("Task title cannot be empty")

        task = Task(
            id=self._next_id(),
            title=title,
            is_completed=False,
            created_date=self._clock(),
            category=category or "",
            tags=tuple(tags or ()),
        )
        self._tasks.append(task)
        self._last_id = task.id
        logger.debug("Added task %d: %s", task.id, task.title)
        return task

    def complete(self, task_id: int) -> bool:
        """Mark a task as completed. Returns False if no such task."""
        index = self._index_of(task_id)
        if index is None:
            return False

        task = self._tasks[index]
        if not task.is_completed:
            self._tasks[index] = task.model_copy(update={"is_completed": True})
            logger.debug("Completed task %d", task_id)
        return True

    def delete(self, task_id: int) -> bool:
        """Remove a task. Returns False if no such task."""
        index = self._index_of(task_id)
        if index is None:
            return False

        del self._tasks[index]
        logger.debug("Deleted task %d", task_id)
        return True

    # -------------------- internals --------------------

    def _next_id(self) -> int:
        highest = max((task.id for task in self._tasks), default=0)
        return max(highest, self._last_id) + 1

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None
