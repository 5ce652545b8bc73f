from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, records: Sequence[AttendanceRecord]) -> None:
        """Insert-or-overwrite keyed by ``record_id`` (``date-student_id``)."""

        raise NotImplementedError
