from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import CLASS_PATCH_FIELDS, ClassRoom
from .repository import ClassRepository


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ClassRoom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, teacher_name, teacher_nip, headmaster_name, headmaster_nip
                FROM classes
                """
            )
            return [
                ClassRoom(
                    class_id=str(r["id"]),
                    name=r["name"],
                    teacher_name=r.get("teacher_name"),
                    teacher_nip=r.get("teacher_nip"),
                    headmaster_name=r.get("headmaster_name"),
                    headmaster_nip=r.get("headmaster_nip"),
                )
                for r in fetchall(cur)
            ]

    def insert(
        self,
        *,
        name: str,
        teacher_name: Optional[str] = None,
        teacher_nip: Optional[str] = None,
        headmaster_name: Optional[str] = None,
        headmaster_nip: Optional[str] = None,
    ) -> ClassRoom:
        room = ClassRoom(
            class_id=str(uuid.uuid4()),
            name=name,
            teacher_name=teacher_name,
            teacher_nip=teacher_nip,
            headmaster_name=headmaster_name,
            headmaster_nip=headmaster_nip,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO classes(id, name, teacher_name, teacher_nip, headmaster_name, headmaster_nip)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    room.class_id,
                    room.name,
                    room.teacher_name,
                    room.teacher_nip,
                    room.headmaster_name,
                    room.headmaster_nip,
                ),
            )
        return room

    def update(self, class_id: str, patch: dict) -> bool:
        unknown = set(patch) - set(CLASS_PATCH_FIELDS)
        if unknown:
            raise ValidationError(f"Kolom kelas tidak dikenal: {', '.join(sorted(unknown))}")
        if not patch:
            return True

        columns = [c for c in CLASS_PATCH_FIELDS if c in patch]
        assignments = ", ".join(f"{c}=%s" for c in columns)
        params = [patch[c] for c in columns] + [class_id]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE classes SET {assignments} WHERE id=%s", tuple(params))
            return cur.rowcount > 0

    def delete(self, class_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classes WHERE id=%s", (class_id,))
            return cur.rowcount > 0
