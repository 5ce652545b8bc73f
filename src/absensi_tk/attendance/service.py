from __future__ import annotations

from typing import Mapping, Optional

from ..common.datetime_utils import require_iso_date
from ..common.validators import require_non_empty, require_note_for, require_status
from ..core.exceptions import NotFoundError, ValidationError
from ..state import AppState
from . import aggregator
from .model import AttendanceRecord, DailyStatus
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: fill in and save the daily roster of one class."""

    def __init__(self, attendance: AttendanceRepository, state: AppState):
        self._attendance = attendance
        self._state = state

    def _roster_for(self, class_id: str):
        class_id = require_non_empty(class_id, "Kelas")
        if not self._state.get_class(class_id):
            raise NotFoundError("Kelas tidak ditemukan")
        return self._state.roster(class_id)

    def daily_status(self, student_id: str, date: str) -> DailyStatus:
        return aggregator.daily_status(self._state.attendance, student_id, date)

    def load_session(self, class_id: str, date: str) -> dict[str, dict]:
        """Existing entries of the class on ``date``, keyed by student id (form pre-fill)."""
        date = require_iso_date(date)
        session: dict[str, dict] = {}
        for s in self._roster_for(class_id):
            current = self.daily_status(s.student_id, date)
            if current.is_marked:
                session[s.student_id] = {"status": current.status.value, "note": current.note}
        return session

    def save_roster(self, class_id: str, date: str, entries: Mapping[str, Mapping[str, Optional[str]]]) -> list[AttendanceRecord]:
        """Validate the whole roster, upsert it in one batch, then patch the in-memory state.

        Nothing is sent to the store unless every student of the class has a
        status and every Sakit/Izin entry carries a note.
        """
        date = require_iso_date(date)
        roster = self._roster_for(class_id)
        if not roster:
            raise ValidationError("Belum ada siswa di kelas ini.")

        if not isinstance(entries, Mapping) or not all(isinstance(e, Mapping) for e in entries.values()):
            raise ValidationError("Format data absensi tidak valid.")

        unselected = [s for s in roster if not (entries.get(s.student_id) or {}).get("status")]
        if unselected:
            raise ValidationError(f"Ada {len(unselected)} anak yang belum diabsen.")

        records: list[AttendanceRecord] = []
        for s in roster:
            entry = entries[s.student_id]
            status = require_status(entry.get("status"))
            note = require_note_for(status, entry.get("note"))
            records.append(AttendanceRecord.build(student_id=s.student_id, date=date, status=status, note=note))

        self._attendance.upsert(records)
        self._state.apply_attendance(records)
        return records
