import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from rayzum.core.errors import ConflictError
from rayzum.models import (
    Name,
    Phone,
    Email,
    ExperienceTemplate,
    Highlight,
    EducationItem,
    Resume,
    ResumeExperienceInstance,
    ResumeEducation,
    Default,
)
from rayzum.store.base import Collection, EntityStore, Record

logger = logging.getLogger(__name__)

MODELS = {
    Collection.NAMES: Name,
    Collection.PHONES: Phone,
    Collection.EMAILS: Email,
    Collection.EXPERIENCE_TEMPLATES: ExperienceTemplate,
    Collection.HIGHLIGHTS: Highlight,
    Collection.EDUCATION_ITEMS: EducationItem,
    Collection.RESUMES: Resume,
    Collection.RESUME_EXPERIENCE_INSTANCES: ResumeExperienceInstance,
    Collection.RESUME_EDUCATION: ResumeEducation,
    Collection.DEFAULTS: Default,
}

# Children before parents so foreign keys never block clear_all.
_CLEAR_ORDER = [
    Collection.RESUME_EXPERIENCE_INSTANCES,
    Collection.RESUME_EDUCATION,
    Collection.HIGHLIGHTS,
    Collection.RESUMES,
    Collection.EXPERIENCE_TEMPLATES,
    Collection.EDUCATION_ITEMS,
    Collection.NAMES,
    Collection.PHONES,
    Collection.EMAILS,
    Collection.DEFAULTS,
]


def _to_record(obj) -> Record:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns if c.name != "user_id"}


class SqlEntityStore(EntityStore):
    """Entity store over a SQLAlchemy session. Every mutating call commits."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self, owner_id: str, collection: Collection, where: dict[str, Any]):
        model = MODELS[collection]
        q = self.db.query(model).filter(model.user_id == owner_id)
        for key, value in where.items():
            q = q.filter(getattr(model, key) == value)
        return q

    def _commit(self, collection: Collection) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Unique constraint violated in %s: %s", collection.value, e.orig)
            raise ConflictError(f"A matching {collection.value} record already exists") from e

    def select(self, owner_id: str, collection: Collection, **where: Any) -> list[Record]:
        model = MODELS[collection]
        rows = self._query(owner_id, collection, where).order_by(model.id).all()
        return [_to_record(r) for r in rows]

    def insert(self, owner_id: str, collection: Collection, fields: dict[str, Any]) -> Record:
        obj = MODELS[collection](user_id=owner_id, **fields)
        self.db.add(obj)
        self._commit(collection)
        self.db.refresh(obj)
        return _to_record(obj)

    def update(self, owner_id: str, collection: Collection, record_id: int, fields: dict[str, Any]) -> Record | None:
        obj = self._query(owner_id, collection, {"id": record_id}).first()
        if not obj:
            return None
        for key, value in fields.items():
            setattr(obj, key, value)
        if "updated_at" in obj.__table__.columns:
            obj.updated_at = datetime.now(timezone.utc)
        self._commit(collection)
        self.db.refresh(obj)
        return _to_record(obj)

    def delete(self, owner_id: str, collection: Collection, record_id: int) -> bool:
        obj = self._query(owner_id, collection, {"id": record_id}).first()
        if not obj:
            return False
        self.db.delete(obj)
        self.db.commit()
        return True

    def delete_where(self, owner_id: str, collection: Collection, **where: Any) -> int:
        count = self._query(owner_id, collection, where).delete(synchronize_session=False)
        self.db.commit()
        return count or 0

    def clear_all(self, owner_id: str) -> None:
        for collection in _CLEAR_ORDER:
            self._query(owner_id, collection, {}).delete(synchronize_session=False)
        self.db.commit()
        logger.info("Cleared all data for owner %s", owner_id)

    def count(self, owner_id: str, collection: Collection) -> int:
        model = MODELS[collection]
        return self.db.query(func.count(model.id)).filter(model.user_id == owner_id).scalar() or 0

    def ping(self) -> None:
        self.db.execute(text("SELECT 1"))
