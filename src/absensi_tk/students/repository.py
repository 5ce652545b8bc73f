from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def insert(self, *, nis: str, name: str, class_id: str) -> Student:
        raise NotImplementedError

    def update(self, student_id: str, patch: dict) -> bool:
        raise NotImplementedError

    def delete(self, student_id: str) -> bool:
        raise NotImplementedError
