from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Entitas siswa.

    ``class_id`` is a weak reference: it may point at a class that was deleted.
    """

    student_id: str
    nis: str
    name: str
    class_id: str
