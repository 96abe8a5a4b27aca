import logging
from typing import Any

from rayzum.core.errors import ConflictError
from rayzum.core.validation import require_text
from rayzum.services.default_service import DefaultCategory, mark_defaults
from rayzum.store.base import Collection, EntityStore, Record

logger = logging.getLogger(__name__)

_FIELDS = {"school": "School", "degree": "Degree", "year": "Year"}


def _find_entry(store: EntityStore, owner_id: str, school: str, degree: str, year: str) -> Record | None:
    rows = store.select(owner_id, Collection.EDUCATION_ITEMS, school=school, degree=degree, year=year)
    return rows[0] if rows else None


def list_education_items(store: EntityStore, owner_id: str) -> list[Record]:
    """Most recent year first; ties newest first."""
    rows = store.select(owner_id, Collection.EDUCATION_ITEMS)
    rows.sort(key=lambda r: (r["year"], r["id"]), reverse=True)
    return mark_defaults(store, owner_id, DefaultCategory.EDUCATION_ITEM, rows)


def get_education_item(store: EntityStore, owner_id: str, item_id: int) -> Record | None:
    record = store.get(owner_id, Collection.EDUCATION_ITEMS, item_id)
    if not record:
        return None
    return mark_defaults(store, owner_id, DefaultCategory.EDUCATION_ITEM, [record])[0]


def create_education_item(store: EntityStore, owner_id: str, school: str, degree: str, year: str) -> Record:
    fields = {
        "school": require_text(school, "School"),
        "degree": require_text(degree, "Degree"),
        "year": require_text(year, "Year"),
    }
    if _find_entry(store, owner_id, **fields):
        raise ConflictError("This education entry already exists")
    record = store.insert(owner_id, Collection.EDUCATION_ITEMS, fields)
    logger.info("Education item %s created for owner %s", record["id"], owner_id)
    return {**record, "is_default": False}


def update_education_item(store: EntityStore, owner_id: str, item_id: int, changes: dict[str, Any]) -> Record | None:
    """Partial update of school/degree/year; the merged entry must stay unique."""
    current = store.get(owner_id, Collection.EDUCATION_ITEMS, item_id)
    if not current:
        return None
    fields = {key: require_text(changes[key], label) for key, label in _FIELDS.items() if key in changes}
    merged = {key: fields.get(key, current[key]) for key in _FIELDS}
    clash = _find_entry(store, owner_id, **merged)
    if clash and clash["id"] != item_id:
        raise ConflictError("This education entry already exists")
    record = store.update(owner_id, Collection.EDUCATION_ITEMS, item_id, fields)
    logger.info("Education item %s updated for owner %s", item_id, owner_id)
    return mark_defaults(store, owner_id, DefaultCategory.EDUCATION_ITEM, [record])[0]
