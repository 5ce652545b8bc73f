from __future__ import annotations

from enum import Enum
from typing import Optional


def normalize_status(value: object) -> str:
    """Lower-case and trim a raw status value coming from the store or a form."""
    if value is None:
        return ""
    return str(value).strip().lower()


class AttendanceStatus(str, Enum):
    """Status absensi harian siswa, sesuai nilai yang disimpan di tabel attendance."""

    HADIR = "Hadir"
    SAKIT = "Sakit"
    IZIN = "Izin"
    ALPHA = "Alpha"

    @property
    def mark(self) -> str:
        """Single-letter mark used in the monthly matrix (H/S/I/A)."""
        return self.value[0].upper()

    @property
    def requires_note(self) -> bool:
        return self in (AttendanceStatus.SAKIT, AttendanceStatus.IZIN)

    @classmethod
    def parse(cls, value: object) -> Optional["AttendanceStatus"]:
        """Single ingest point for status strings.

        Tolerates inconsistent casing and surrounding whitespace
        (``"hadir"``, ``"Hadir "``). Returns ``None`` for unknown values.
        """
        if isinstance(value, cls):
            return value
        key = normalize_status(value)
        for status in cls:
            if status.value.lower() == key:
                return status
        return None
