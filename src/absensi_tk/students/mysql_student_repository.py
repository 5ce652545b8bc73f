from __future__ import annotations

import uuid
from typing import Sequence

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import StudentRepository

_PATCH_FIELDS = ("nis", "name", "class_id")


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, nis, name, class_id FROM students")
            return [
                Student(
                    student_id=str(r["id"]),
                    nis=str(r["nis"]),
                    name=r["name"],
                    class_id=str(r["class_id"]),
                )
                for r in fetchall(cur)
            ]

    def insert(self, *, nis: str, name: str, class_id: str) -> Student:
        student = Student(student_id=str(uuid.uuid4()), nis=nis, name=name, class_id=class_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students(id, nis, name, class_id) VALUES(%s,%s,%s,%s)",
                (student.student_id, student.nis, student.name, student.class_id),
            )
        return student

    def update(self, student_id: str, patch: dict) -> bool:
        unknown = set(patch) - set(_PATCH_FIELDS)
        if unknown:
            raise ValidationError(f"Kolom siswa tidak dikenal: {', '.join(sorted(unknown))}")
        if not patch:
            return True

        columns = [c for c in _PATCH_FIELDS if c in patch]
        assignments = ", ".join(f"{c}=%s" for c in columns)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE students SET {assignments} WHERE id=%s",
                tuple(patch[c] for c in columns) + (student_id,),
            )
            return cur.rowcount > 0

    def delete(self, student_id: str) -> bool:
        # Attendance rows are left as they are.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=%s", (student_id,))
            return cur.rowcount > 0
