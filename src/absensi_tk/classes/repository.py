from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassRoom


class ClassRepository(Protocol):
    """Store interface for the ``classes`` table.

    Services depend on this interface, never on a concrete database.
    """

    def list_all(self) -> Sequence[ClassRoom]:
        raise NotImplementedError

    def insert(
        self,
        *,
        name: str,
        teacher_name: Optional[str] = None,
        teacher_nip: Optional[str] = None,
        headmaster_name: Optional[str] = None,
        headmaster_nip: Optional[str] = None,
    ) -> ClassRoom:
        """Insert a class and return it with its store-assigned id."""

        raise NotImplementedError

    def update(self, class_id: str, patch: dict) -> bool:
        raise NotImplementedError

    def delete(self, class_id: str) -> bool:
        raise NotImplementedError
