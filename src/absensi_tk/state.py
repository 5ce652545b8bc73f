"""In-memory application state.

The store is the durable source of truth; ``AppState`` holds a full copy of
the three tables, rebuilt wholesale by ``SyncService.sync()`` and patched
optimistically by the feature services after each successful store call.
Controllers only read from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .attendance.model import AttendanceRecord
from .attendance.repository import AttendanceRepository
from .classes.model import ClassRoom
from .classes.repository import ClassRepository
from .students.model import Student
from .students.repository import StudentRepository


@dataclass
class AppState:
    classes: list[ClassRoom] = field(default_factory=list)
    students: list[Student] = field(default_factory=list)
    attendance: list[AttendanceRecord] = field(default_factory=list)
    loaded: bool = False

    def get_class(self, class_id: str) -> Optional[ClassRoom]:
        return next((c for c in self.classes if c.class_id == class_id), None)

    def get_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self.students if s.student_id == student_id), None)

    def roster(self, class_id: str) -> list[Student]:
        return [s for s in self.students if s.class_id == class_id]

    def replace_all(
        self,
        *,
        classes: Iterable[ClassRoom],
        students: Iterable[Student],
        attendance: Iterable[AttendanceRecord],
    ) -> None:
        self.classes = list(classes)
        self.students = list(students)
        self.attendance = list(attendance)
        self.loaded = True

    def apply_attendance(self, saved: list[AttendanceRecord]) -> None:
        """Drop existing records with the same (student, date) pairs, then append ``saved``."""
        keys = {(r.student_id, r.date) for r in saved}
        others = [r for r in self.attendance if (r.student_id, r.date) not in keys]
        self.attendance = others + list(saved)


class SyncService:
    """Use case: manual full resync (select * on the three tables)."""

    def __init__(
        self,
        state: AppState,
        classes: ClassRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
    ):
        self._state = state
        self._classes = classes
        self._students = students
        self._attendance = attendance

    def sync(self) -> AppState:
        # Fetch everything first so a failing table leaves the old state intact.
        classes = self._classes.list_all()
        students = self._students.list_all()
        attendance = self._attendance.list_all()
        self._state.replace_all(classes=classes, students=students, attendance=attendance)
        return self._state

    def ensure_loaded(self) -> AppState:
        if not self._state.loaded:
            self.sync()
        return self._state
