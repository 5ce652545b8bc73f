from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..state import AppState
from .model import CLASS_PATCH_FIELDS, ClassRoom
from .repository import ClassRepository


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class ClassService:
    """Use case: manage classes (rombongan belajar)."""

    def __init__(self, classes: ClassRepository, state: AppState):
        self._classes = classes
        self._state = state

    def list_classes(self) -> list[ClassRoom]:
        return list(self._state.classes)

    def get_class(self, class_id: str) -> ClassRoom:
        room = self._state.get_class(class_id)
        if not room:
            raise NotFoundError("Kelas tidak ditemukan")
        return room

    def add_class(
        self,
        *,
        name: str,
        teacher_name: Optional[str] = None,
        teacher_nip: Optional[str] = None,
        headmaster_name: Optional[str] = None,
        headmaster_nip: Optional[str] = None,
    ) -> ClassRoom:
        name = require_non_empty(name, "Nama kelas")
        room = self._classes.insert(
            name=name,
            teacher_name=_clean_optional(teacher_name),
            teacher_nip=_clean_optional(teacher_nip),
            headmaster_name=_clean_optional(headmaster_name),
            headmaster_nip=_clean_optional(headmaster_nip),
        )
        self._state.classes = self._state.classes + [room]
        return room

    def update_class(self, class_id: str, **changes) -> ClassRoom:
        current = self.get_class(class_id)

        patch: dict = {}
        for key in CLASS_PATCH_FIELDS:
            if key not in changes:
                continue
            if key == "name":
                patch[key] = require_non_empty(changes[key], "Nama kelas")
            else:
                patch[key] = _clean_optional(changes[key])

        if not patch:
            return current

        # rowcount is 0 when nothing changed, so the result is not an existence check.
        self._classes.update(class_id, patch)

        updated = replace(current, **patch)
        self._state.classes = [updated if c.class_id == class_id else c for c in self._state.classes]
        return updated

    def delete_class(self, class_id: str) -> None:
        """Delete a class; its students keep the dangling ``class_id``."""
        self.get_class(class_id)
        self._classes.delete(class_id)
        self._state.classes = [c for c in self._state.classes if c.class_id != class_id]

    def student_counts(self) -> list[dict]:
        return [
            {"class_id": c.class_id, "name": c.name, "students": len(self._state.roster(c.class_id))}
            for c in self._state.classes
        ]
