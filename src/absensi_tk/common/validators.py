from __future__ import annotations

from typing import Optional

from ..core.constants import MAX_NOTE_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return str(value).strip()


def require_status(value: object) -> AttendanceStatus:
    status = AttendanceStatus.parse(value)
    if status is None:
        raise ValidationError(f"Status absensi tidak valid: {value!r}")
    return status


def require_note_for(status: AttendanceStatus, note: Optional[str]) -> str:
    """Sakit/Izin need a reason for the report; other statuses may leave it blank."""
    if note is not None and not isinstance(note, str):
        raise ValidationError("Keterangan harus berupa teks.")
    note = (note or "").strip()
    if len(note) > MAX_NOTE_LENGTH:
        raise ValidationError(f"Keterangan maksimal {MAX_NOTE_LENGTH} karakter.")
    if status.requires_note and not note:
        raise ValidationError("Alasan Sakit atau Izin tidak boleh kosong untuk keperluan laporan.")
    return note
