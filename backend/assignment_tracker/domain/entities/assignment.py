"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Assignment:
    """Core domain entity representing a tracked assignment.

    ``name``, ``due_date`` and ``submitted`` are nullable because an update
    overwrites all three from the request, including fields the caller omitted.
    """

    id: int
    name: str | None
    due_date: str | None
    submitted: bool | None = False

    def update(self, name: str | None, due_date: str | None, submitted: bool | None) -> None:
        """Overwrite every mutable field. Absent values become ``None``."""
        self.name = name
        self.due_date = due_date
        self.submitted = submitted

    def to_record(self) -> dict[str, Any]:
        """Serialize to the on-disk / wire layout (camelCase keys)."""
        return {
            "id": self.id,
            "name": self.name,
            "dueDate": self.due_date,
            "submitted": self.submitted,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Assignment":
        """Build an entity from one element of the backing JSON array."""
        return cls(
            id=int(record["id"]),
            name=record.get("name"),
            due_date=record.get("dueDate"),
            submitted=record.get("submitted", False),
        )
