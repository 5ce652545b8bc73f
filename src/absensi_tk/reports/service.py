from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance import aggregator
from ..attendance.model import MonthlyRow
from ..classes.model import ClassRoom
from ..common.datetime_utils import days_in_month, format_date_id, month_name_id, require_iso_date
from ..core.constants import DEFAULT_SCHOOL_CITY, NO_CLASS_LABEL, REPORT_TITLE
from ..core.exceptions import ValidationError
from ..state import AppState


@dataclass(frozen=True)
class Signatory:
    role: str
    name: Optional[str]
    nip: Optional[str]

    @property
    def name_line(self) -> str:
        return f"( {self.name} )" if self.name else "( __________________________ )"

    @property
    def nip_line(self) -> str:
        return f"NIP. {self.nip}" if self.nip else "NIP. ........................................"


@dataclass(frozen=True)
class ReportHeader:
    title: str
    class_name: str
    period_label: str
    place: str
    printed_on: str
    headmaster: Signatory
    teacher: Signatory


@dataclass(frozen=True)
class DailyReportRow:
    no: int
    nis: str
    name: str
    status: str
    note: str


@dataclass(frozen=True)
class DailyReport:
    header: ReportHeader
    date: str
    rows: list[DailyReportRow] = field(default_factory=list)


@dataclass(frozen=True)
class MonthlyReport:
    header: ReportHeader
    month: int
    year: int
    days: int
    rows: list[MonthlyRow] = field(default_factory=list)


class ReportService:
    """Build the daily and monthly attendance sheets of one class."""

    def __init__(self, state: AppState, *, city: str = DEFAULT_SCHOOL_CITY):
        self._state = state
        self._city = city

    def _header(self, room: Optional[ClassRoom], period_label: str, printed_on: date) -> ReportHeader:
        return ReportHeader(
            title=REPORT_TITLE,
            class_name=room.name if room else NO_CLASS_LABEL,
            period_label=period_label,
            place=self._city,
            printed_on=format_date_id(printed_on),
            headmaster=Signatory(
                role="Kepala Sekolah",
                name=room.headmaster_name if room else None,
                nip=room.headmaster_nip if room else None,
            ),
            teacher=Signatory(
                role="Wali Kelas",
                name=room.teacher_name if room else None,
                nip=room.teacher_nip if room else None,
            ),
        )

    def _sorted_roster(self, class_id: str):
        return sorted(self._state.roster(class_id), key=lambda s: s.name.lower())

    def daily_report(self, class_id: str, report_date: str, *, printed_on: date) -> DailyReport:
        report_date = require_iso_date(report_date)
        room = self._state.get_class(class_id)

        rows = []
        for idx, s in enumerate(self._sorted_roster(class_id), start=1):
            current = aggregator.daily_status(self._state.attendance, s.student_id, report_date)
            rows.append(DailyReportRow(no=idx, nis=s.nis, name=s.name, status=current.label, note=current.note))

        return DailyReport(
            header=self._header(room, f"Tanggal: {report_date}", printed_on),
            date=report_date,
            rows=rows,
        )

    def monthly_report(self, class_id: str, month: int, year: int, *, printed_on: date) -> MonthlyReport:
        try:
            month, year = int(month), int(year)
        except (TypeError, ValueError):
            raise ValidationError("Bulan/tahun tidak valid")
        if year < 1:
            raise ValidationError("Bulan/tahun tidak valid")
        label = f"Periode: {month_name_id(month)} {year}"
        room = self._state.get_class(class_id)

        rows = aggregator.monthly_matrix(self._state.attendance, self._sorted_roster(class_id), month, year)
        return MonthlyReport(
            header=self._header(room, label, printed_on),
            month=month,
            year=year,
            days=days_in_month(month, year),
            rows=rows,
        )
