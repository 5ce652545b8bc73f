from __future__ import annotations

import logging
from datetime import date

import mysql.connector
import pytest

from absensi_tk.attendance.model import AttendanceRecord
from absensi_tk.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from absensi_tk.classes.mysql_class_repository import MySQLClassRepository
from absensi_tk.core.enums import AttendanceStatus
from absensi_tk.core.exceptions import StoreError, ValidationError
from absensi_tk.students.mysql_student_repository import MySQLStudentRepository


class FakeCursor:
    def __init__(self, rows=None, rowcount=1, error=None):
        self.rows = rows or []
        self.rowcount = rowcount
        self.error = error
        self.executed: list[tuple] = []
        self.closed = False

    def execute(self, sql, params=None):
        if self.error:
            raise self.error
        self.executed.append((" ".join(sql.split()), params))

    def executemany(self, sql, seq):
        if self.error:
            raise self.error
        self.executed.append((" ".join(sql.split()), list(seq)))

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, cursor: FakeCursor):
        self.cursor = cursor
        self.conn = FakeConnection(cursor)

    def connect(self):
        return self.conn


def test_attendance_list_all_parses_and_skips_unknown(caplog):
    factory = FakeFactory(
        FakeCursor(
            rows=[
                {"id": "2024-05-01-S1", "student_id": "S1", "date": date(2024, 5, 1), "status": "hadir ", "note": None},
                {"id": "2024-05-01-S2", "student_id": "S2", "date": "2024-05-01", "status": "Bolos", "note": ""},
            ]
        )
    )

    with caplog.at_level(logging.WARNING):
        records = MySQLAttendanceRepository(factory).list_all()

    assert records == [
        AttendanceRecord(
            record_id="2024-05-01-S1", student_id="S1", date="2024-05-01", status=AttendanceStatus.HADIR, note=""
        )
    ]
    assert "Bolos" in caplog.text
    assert factory.conn.committed and factory.conn.closed


def test_attendance_upsert_uses_on_duplicate_key():
    factory = FakeFactory(FakeCursor())
    rec = AttendanceRecord.build(student_id="S1", date="2024-05-01", status=AttendanceStatus.SAKIT, note="demam")

    MySQLAttendanceRepository(factory).upsert([rec])

    sql, params = factory.cursor.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params == [("2024-05-01-S1", "S1", "2024-05-01", "Sakit", "demam")]


def test_attendance_upsert_empty_batch_skips_connection():
    factory = FakeFactory(FakeCursor())
    MySQLAttendanceRepository(factory).upsert([])
    assert factory.cursor.executed == []
    assert not factory.conn.closed


def test_driver_error_becomes_store_error_and_rolls_back():
    factory = FakeFactory(FakeCursor(error=mysql.connector.Error("connection lost")))

    with pytest.raises(StoreError):
        MySQLClassRepository(factory).list_all()

    assert factory.conn.rolled_back
    assert factory.conn.closed
    assert factory.cursor.closed


def test_class_update_builds_whitelisted_assignments():
    factory = FakeFactory(FakeCursor(rowcount=0))

    changed = MySQLClassRepository(factory).update("K1", {"teacher_nip": "1987", "name": "TK A"})

    sql, params = factory.cursor.executed[0]
    assert sql == "UPDATE classes SET name=%s, teacher_nip=%s WHERE id=%s"
    assert params == ("TK A", "1987", "K1")
    assert changed is False


def test_class_update_rejects_unknown_column():
    factory = FakeFactory(FakeCursor())
    with pytest.raises(ValidationError):
        MySQLClassRepository(factory).update("K1", {"id": "x"})
    assert factory.cursor.executed == []


def test_student_insert_assigns_uuid():
    factory = FakeFactory(FakeCursor())

    s = MySQLStudentRepository(factory).insert(nis="001", name="Citra", class_id="K1")

    assert len(s.student_id) == 36
    _, params = factory.cursor.executed[0]
    assert params == (s.student_id, "001", "Citra", "K1")
