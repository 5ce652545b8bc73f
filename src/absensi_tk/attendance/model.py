from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import UNMARKED_LABEL
from ..core.enums import AttendanceStatus


def record_id(date: str, student_id: str) -> str:
    """Deterministic record id: re-saving a student on a date overwrites the row."""
    return f"{date}-{student_id}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Satu baris absensi: tepat satu per (student_id, date)."""

    record_id: str
    student_id: str
    date: str
    status: AttendanceStatus
    note: str = ""

    @classmethod
    def build(cls, *, student_id: str, date: str, status: AttendanceStatus, note: Optional[str] = None) -> "AttendanceRecord":
        return cls(
            record_id=record_id(date, student_id),
            student_id=student_id,
            date=date,
            status=status,
            note=note or "",
        )


@dataclass(frozen=True)
class DailyStatus:
    """Status of one student on one date; ``status is None`` means unmarked."""

    status: Optional[AttendanceStatus] = None
    note: str = ""

    @property
    def is_marked(self) -> bool:
        return self.status is not None

    @property
    def label(self) -> str:
        return self.status.value if self.status else UNMARKED_LABEL


UNMARKED = DailyStatus()


@dataclass(frozen=True)
class StatusTally:
    hadir: int = 0
    sakit: int = 0
    izin: int = 0
    alpha: int = 0

    def as_list(self) -> list[int]:
        return [self.hadir, self.sakit, self.izin, self.alpha]


@dataclass(frozen=True)
class MonthlyRow:
    """Read-model: one student row of the monthly matrix."""

    student_id: str
    nis: str
    name: str
    marks: list[str] = field(default_factory=list)
    tally: StatusTally = field(default_factory=StatusTally)

    def mark_for(self, day: int) -> str:
        return self.marks[day - 1]


@dataclass(frozen=True)
class PresentRates:
    daily_rate: int
    monthly_rate: int
    today_count: int
    month_count: int
