"""Owner-scoped keyed-record CRUD shared by the sql and local backends.

Records are plain dicts carrying ``id`` and ``created_at`` plus the
collection's own fields. ``where`` filters are field equality matches.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class Collection(str, Enum):
    NAMES = "names"
    PHONES = "phones"
    EMAILS = "emails"
    EXPERIENCE_TEMPLATES = "experience_templates"
    HIGHLIGHTS = "highlights"
    EDUCATION_ITEMS = "education_items"
    RESUMES = "resumes"
    RESUME_EXPERIENCE_INSTANCES = "resume_experience_instances"
    RESUME_EDUCATION = "resume_education"
    DEFAULTS = "defaults"


Record = dict[str, Any]


class EntityStore(ABC):
    @abstractmethod
    def select(self, owner_id: str, collection: Collection, **where: Any) -> list[Record]:
        """All of the owner's records in insertion order, optionally filtered."""

    @abstractmethod
    def insert(self, owner_id: str, collection: Collection, fields: dict[str, Any]) -> Record:
        """Assign the next id and a creation timestamp, persist, return the record."""

    @abstractmethod
    def update(self, owner_id: str, collection: Collection, record_id: int, fields: dict[str, Any]) -> Record | None:
        """Merge fields and stamp ``updated_at``. None if no record has that id."""

    @abstractmethod
    def delete(self, owner_id: str, collection: Collection, record_id: int) -> bool:
        ...

    @abstractmethod
    def delete_where(self, owner_id: str, collection: Collection, **where: Any) -> int:
        """Remove every matching record; returns how many were removed."""

    @abstractmethod
    def clear_all(self, owner_id: str) -> None:
        ...

    def get(self, owner_id: str, collection: Collection, record_id: int) -> Record | None:
        rows = self.select(owner_id, collection, id=record_id)
        return rows[0] if rows else None

    def count(self, owner_id: str, collection: Collection) -> int:
        return len(self.select(owner_id, collection))

    def ping(self) -> None:
        """Raise if the backing storage is unreachable."""


def matches(record: Record, where: dict[str, Any]) -> bool:
    return all(record.get(key) == value for key, value in where.items())
