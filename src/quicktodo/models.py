"""Data models for quicktodo."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Predefined pick lists offered when adding a task
CATEGORIES: list[str] = ["Work", "Personal", "Shopping", "Health", "Finance"]
TAGS: list[str] = ["urgent", "important", "can-wait", "delegated", "in-progress"]


class Task(BaseModel):
    """A single to-do item.

    Instances are frozen snapshots. The store is the only place a task
    changes, and it does so by replacing the snapshot it holds.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    title: str
    is_completed: bool = False
    created_date: datetime = Field(default_factory=datetime.now)
    category: str = ""
    tags: tuple[str, ...] = ()

    def format(self, date_format: str = "%Y-%m-%d") -> str:
        """Render the task as a single display line."""
        status = "[X]" if self.is_completed else "[ ]"
        category = f"- {self.category} " if self.category else ""
        tags = f"[{', '.join(self.tags)}]" if self.tags else ""
        return (
            f"{self.id}. {status} {self.title} "
            f"({self.created_date.strftime(date_format)}) {category}{tags}"
        ).rstrip()

    def __str__(self) -> str:
        return self.format()
