"""JSON file-backed assignment store — the in-memory sequence plus its backing file.

Storage layout:
    <data_file>           — JSON array of ``{id, name, dueDate, submitted}``
    <data_file>.tmp       — scratch file replaced atomically onto <data_file>

The file is read once by :meth:`JsonAssignmentStore.load`. Afterwards the
in-memory list is authoritative. Only ``create`` writes the file back;
``update`` and ``delete`` change memory only and are lost on restart.
"""

import asyncio
import json
import logging
import os
from pathlib import Path

from assignment_tracker.application.interfaces import AssignmentRepository
from assignment_tracker.domain.entities import Assignment
from assignment_tracker.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonAssignmentStore(AssignmentRepository):
    """Infrastructure adapter that owns the assignment sequence and its JSON file.

    Ids come from a monotonic counter seeded with ``max(id) + 1`` at load
    time, so an id is never handed out twice within a process lifetime.
    Mutations run under a single ``asyncio.Lock``; the create path awaits
    the file write before returning.
    """

    def __init__(self, data_file: str | Path, assignments: list[Assignment] | None = None):
        self._path = Path(data_file)
        self._assignments: list[Assignment] = list(assignments or [])
        self._next_id = max((a.id for a in self._assignments), default=0) + 1
        self._lock = asyncio.Lock()

    @classmethod
    def load(cls, data_file: str | Path) -> "JsonAssignmentStore":
        """Read the backing file and build a store from its contents.

        A missing file yields an empty store; the file is created on the
        first create. Anything other than a JSON array raises ``ValueError``.
        """
        path = Path(data_file)
        if not path.exists():
            logger.warning("Store file %s does not exist, starting empty", path)
            return cls(path)

        raw = json.loads(path.read_text("utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"Store file {path} must contain a JSON array, got {type(raw).__name__}")

        assignments = [Assignment.from_record(item) for item in raw]
        logger.info("Loaded %d assignments from %s", len(assignments), path)
        return cls(path, assignments)

    @property
    def path(self) -> Path:
        return self._path

    # ── Reads ───────────────────────────────────────────────────────

    async def get_by_id(self, assignment_id: int) -> Assignment | None:
        for assignment in self._assignments:
            if assignment.id == assignment_id:
                return assignment
        return None

    async def get_slice(self, start: int, end: int) -> list[Assignment]:
        return self._assignments[start:end]

    async def count(self) -> int:
        return len(self._assignments)

    # ── Writes ──────────────────────────────────────────────────────

    async def create(self, name: str, due_date: str, submitted: bool) -> Assignment:
        async with self._lock:
            assignment = Assignment(
                id=self._next_id,
                name=name,
                due_date=due_date,
                submitted=submitted,
            )
            self._assignments.append(assignment)
            try:
                self._write()
            except PersistenceError:
                self._assignments.pop()
                raise
            self._next_id += 1
            logger.info("New assignment %d written to %s", assignment.id, self._path)
            return assignment

    async def update(self, assignment: Assignment) -> Assignment:
        async with self._lock:
            stored = await self.get_by_id(assignment.id)
            if stored is None:
                raise ValueError(f"Assignment {assignment.id} not found in store")
            if stored is not assignment:
                stored.update(assignment.name, assignment.due_date, assignment.submitted)
            return stored

    async def delete(self, assignment_id: int) -> bool:
        async with self._lock:
            for index, assignment in enumerate(self._assignments):
                if assignment.id == assignment_id:
                    del self._assignments[index]
                    logger.debug("Deleted assignment %d (memory only)", assignment_id)
                    return True
            return False

    # ── File I/O ────────────────────────────────────────────────────

    def _write(self) -> None:
        """Serialize the full sequence and atomically replace the backing file."""
        payload = json.dumps([a.to_record() for a in self._assignments])
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            logger.critical("Failed to write store file %s: %s", self._path, exc)
            raise PersistenceError(str(self._path), exc) from exc
