"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from assignment_tracker.domain.entities import Assignment


class AssignmentRepository(ABC):
    """Port for assignment persistence — implemented in the infrastructure layer.

    Implementations keep records in insertion order and own id assignment.
    """

    @abstractmethod
    async def get_by_id(self, assignment_id: int) -> Assignment | None:
        """Retrieve a single assignment by its ID."""
        ...

    @abstractmethod
    async def get_slice(self, start: int, end: int) -> list[Assignment]:
        """Return the records in ``[start, end)`` using sequence slice semantics."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored assignments."""
        ...

    @abstractmethod
    async def create(self, name: str, due_date: str, submitted: bool) -> Assignment:
        """Append a new assignment, persist it and return it with its new ID."""
        ...

    @abstractmethod
    async def update(self, assignment: Assignment) -> Assignment:
        """Replace the stored fields of an existing assignment."""
        ...

    @abstractmethod
    async def delete(self, assignment_id: int) -> bool:
        """Delete an assignment. Returns True if deleted, False if not found."""
        ...
