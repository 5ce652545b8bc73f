from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import NO_CLASS_LABEL
from ..core.exceptions import NotFoundError, ValidationError
from ..state import AppState
from .model import Student
from .repository import StudentRepository


class StudentService:
    """Use case: manage the student list and class rosters."""

    def __init__(self, students: StudentRepository, state: AppState):
        self._students = students
        self._state = state

    def list_students(self) -> list[Student]:
        return list(self._state.students)

    def search(self, term: Optional[str]) -> list[Student]:
        """Case-insensitive name match or NIS substring match."""
        if not term:
            return self.list_students()
        lowered = term.lower()
        return [s for s in self._state.students if lowered in s.name.lower() or term in s.nis]

    def roster(self, class_id: str, *, sort_by_name: bool = False) -> list[Student]:
        students = self._state.roster(class_id)
        if sort_by_name:
            students.sort(key=lambda s: s.name.lower())
        return students

    def class_name_for(self, student: Student) -> str:
        room = self._state.get_class(student.class_id)
        return room.name if room else NO_CLASS_LABEL

    def save_student(
        self,
        *,
        nis: Optional[str],
        name: Optional[str],
        class_id: Optional[str],
        student_id: Optional[str] = None,
    ) -> Student:
        try:
            nis = require_non_empty(nis, "NIS")
            name = require_non_empty(name, "Nama siswa")
            class_id = require_non_empty(class_id, "Kelas")
        except ValidationError:
            raise ValidationError("Mohon lengkapi semua data.")

        if student_id is None:
            student = self._students.insert(nis=nis, name=name, class_id=class_id)
            self._state.students = self._state.students + [student]
            return student

        current = self._state.get_student(student_id)
        if not current:
            raise NotFoundError("Siswa tidak ditemukan")

        self._students.update(student_id, {"nis": nis, "name": name, "class_id": class_id})
        updated = replace(current, nis=nis, name=name, class_id=class_id)
        self._state.students = [updated if s.student_id == student_id else s for s in self._state.students]
        return updated

    def delete_student(self, student_id: str) -> None:
        if not self._state.get_student(student_id):
            raise NotFoundError("Siswa tidak ditemukan")
        self._students.delete(student_id)
        self._state.students = [s for s in self._state.students if s.student_id != student_id]
