from __future__ import annotations

import os
from typing import Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")

from absensi_tk.attendance.model import AttendanceRecord
from absensi_tk.classes.model import ClassRoom
from absensi_tk.container import wire_container
from absensi_tk.core.exceptions import StoreError
from absensi_tk.students.model import Student


class InMemoryClasses:
    def __init__(self, rows: Optional[list[ClassRoom]] = None):
        self.rows: dict[str, ClassRoom] = {c.class_id: c for c in rows or []}
        self.calls: list[str] = []
        self.fail = False
        self._next_id = 100

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if self.fail:
            raise StoreError(f"{op} failed")

    def list_all(self):
        self._check("select")
        return list(self.rows.values())

    def insert(self, *, name, teacher_name=None, teacher_nip=None, headmaster_name=None, headmaster_nip=None):
        self._check("insert")
        self._next_id += 1
        room = ClassRoom(
            class_id=f"C{self._next_id}",
            name=name,
            teacher_name=teacher_name,
            teacher_nip=teacher_nip,
            headmaster_name=headmaster_name,
            headmaster_nip=headmaster_nip,
        )
        self.rows[room.class_id] = room
        return room

    def update(self, class_id, patch):
        self._check("update")
        current = self.rows.get(class_id)
        if not current:
            return False
        self.rows[class_id] = ClassRoom(**{**current.__dict__, **patch})
        return True

    def delete(self, class_id):
        self._check("delete")
        return self.rows.pop(class_id, None) is not None


class InMemoryStudents:
    def __init__(self, rows: Optional[list[Student]] = None):
        self.rows: dict[str, Student] = {s.student_id: s for s in rows or []}
        self.calls: list[str] = []
        self.fail = False
        self._next_id = 100

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if self.fail:
            raise StoreError(f"{op} failed")

    def list_all(self):
        self._check("select")
        return list(self.rows.values())

    def insert(self, *, nis, name, class_id):
        self._check("insert")
        self._next_id += 1
        s = Student(student_id=f"S{self._next_id}", nis=nis, name=name, class_id=class_id)
        self.rows[s.student_id] = s
        return s

    def update(self, student_id, patch):
        self._check("update")
        current = self.rows.get(student_id)
        if not current:
            return False
        self.rows[student_id] = Student(**{**current.__dict__, **patch})
        return True

    def delete(self, student_id):
        self._check("delete")
        return self.rows.pop(student_id, None) is not None


class InMemoryAttendance:
    def __init__(self, rows: Optional[list[AttendanceRecord]] = None):
        self.rows: dict[str, AttendanceRecord] = {r.record_id: r for r in rows or []}
        self.calls: list[str] = []
        self.fail = False

    def list_all(self):
        self.calls.append("select")
        if self.fail:
            raise StoreError("select failed")
        return list(self.rows.values())

    def upsert(self, records):
        self.calls.append("upsert")
        if self.fail:
            raise StoreError("upsert failed")
        for r in records:
            self.rows[r.record_id] = r


@pytest.fixture
def classes_repo():
    return InMemoryClasses(
        [
            ClassRoom(
                class_id="K1",
                name="TK A",
                teacher_name="Bu Sari",
                teacher_nip="1987",
                headmaster_name="Pak Budi",
                headmaster_nip="1970",
            ),
            ClassRoom(class_id="K2", name="TK B"),
        ]
    )


@pytest.fixture
def students_repo():
    return InMemoryStudents(
        [
            Student(student_id="S1", nis="001", name="Citra", class_id="K1"),
            Student(student_id="S2", nis="002", name="Andi", class_id="K1"),
            Student(student_id="S3", nis="003", name="Bayu", class_id="K2"),
        ]
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(classes_repo, students_repo, attendance_repo):
    c = wire_container(classes_repo=classes_repo, students_repo=students_repo, attendance_repo=attendance_repo)
    c.sync_service.sync()
    return c
