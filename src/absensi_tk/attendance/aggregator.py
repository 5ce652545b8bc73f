"""Read-only views over attendance history for display and export.

Everything here is pure: no I/O, no caching, cheap enough to recompute on
every request. Records are expected to carry parsed ``AttendanceStatus``
values (parsing happens once when rows enter the system).
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from ..common.datetime_utils import days_in_month, iso_day
from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import UNMARKED, AttendanceRecord, DailyStatus, MonthlyRow, PresentRates, StatusTally


def month_prefix(month: int, year: int) -> str:
    return f"{int(year):04d}-{int(month):02d}-"


def in_month(record: AttendanceRecord, month: int, year: int) -> bool:
    return record.date.startswith(month_prefix(month, year))


def daily_status(records: Iterable[AttendanceRecord], student_id: str, date: str) -> DailyStatus:
    """Status/note of ``student_id`` on ``date`` (string equality), or ``UNMARKED``."""
    for r in records:
        if r.student_id == student_id and r.date == date:
            return DailyStatus(status=r.status, note=r.note or "")
    return UNMARKED


def tally(records: Iterable[AttendanceRecord]) -> StatusTally:
    counts = Counter(r.status for r in records)
    return StatusTally(
        hadir=counts[AttendanceStatus.HADIR],
        sakit=counts[AttendanceStatus.SAKIT],
        izin=counts[AttendanceStatus.IZIN],
        alpha=counts[AttendanceStatus.ALPHA],
    )


def monthly_matrix(
    records: Sequence[AttendanceRecord],
    students: Sequence[Student],
    month: int,
    year: int,
) -> list[MonthlyRow]:
    """One row per student (roster order kept), one mark per day of the month."""
    n_days = days_in_month(month, year)
    month_records = [r for r in records if in_month(r, month, year)]

    rows: list[MonthlyRow] = []
    for s in students:
        own = [r for r in month_records if r.student_id == s.student_id]
        by_date: dict[str, AttendanceRecord] = {}
        for r in own:
            by_date.setdefault(r.date, r)

        marks = []
        for day in range(1, n_days + 1):
            rec = by_date.get(iso_day(year, month, day))
            marks.append(rec.status.mark if rec else "")

        rows.append(
            MonthlyRow(
                student_id=s.student_id,
                nis=s.nis,
                name=s.name,
                marks=marks,
                tally=tally(own),
            )
        )
    return rows


def percent(part: int, whole: int) -> int:
    """Integer percentage rounded half up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def present_rates(records: Sequence[AttendanceRecord], today: str, month: int, year: int) -> PresentRates:
    today_records = [r for r in records if r.date == today]
    month_records = [r for r in records if in_month(r, month, year)]

    hadir_today = sum(1 for r in today_records if r.status == AttendanceStatus.HADIR)
    hadir_month = sum(1 for r in month_records if r.status == AttendanceStatus.HADIR)

    return PresentRates(
        daily_rate=percent(hadir_today, len(today_records)),
        monthly_rate=percent(hadir_month, len(month_records)),
        today_count=len(today_records),
        month_count=len(month_records),
    )
