from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClassRoom:
    """Entitas kelas (rombongan belajar) beserta data tanda tangan laporan."""

    class_id: str
    name: str
    teacher_name: Optional[str] = None
    teacher_nip: Optional[str] = None
    headmaster_name: Optional[str] = None
    headmaster_nip: Optional[str] = None


# Columns a class update may patch.
CLASS_PATCH_FIELDS = ("name", "teacher_name", "teacher_nip", "headmaster_name", "headmaster_nip")
