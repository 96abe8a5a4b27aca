"""
Single default per category (name, phone, email, education item).

Defaults live in the ``defaults`` collection, one row per (owner, entity_type),
so at most one record per category can ever be the default.
"""
import logging
from enum import Enum

from rayzum.store.base import Collection, EntityStore, Record

logger = logging.getLogger(__name__)


class DefaultCategory(str, Enum):
    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    EDUCATION_ITEM = "education_item"


CATEGORY_COLLECTIONS = {
    DefaultCategory.NAME: Collection.NAMES,
    DefaultCategory.PHONE: Collection.PHONES,
    DefaultCategory.EMAIL: Collection.EMAILS,
    DefaultCategory.EDUCATION_ITEM: Collection.EDUCATION_ITEMS,
}


def get_default_id(store: EntityStore, owner_id: str, category: DefaultCategory) -> int | None:
    rows = store.select(owner_id, Collection.DEFAULTS, entity_type=category.value)
    return rows[0]["entity_id"] if rows else None


def get_default(store: EntityStore, owner_id: str, category: DefaultCategory) -> Record | None:
    default_id = get_default_id(store, owner_id, category)
    if default_id is None:
        return None
    record = store.get(owner_id, CATEGORY_COLLECTIONS[category], default_id)
    if not record:
        return None
    return {**record, "is_default": True}


def set_default(store: EntityStore, owner_id: str, category: DefaultCategory, entity_id: int) -> Record | None:
    """
    Make ``entity_id`` the category default, replacing any previous one.
    Idempotent: repeating the call keeps the same default.
    Returns None if the entity does not exist.
    """
    record = store.get(owner_id, CATEGORY_COLLECTIONS[category], entity_id)
    if not record:
        return None
    rows = store.select(owner_id, Collection.DEFAULTS, entity_type=category.value)
    if rows:
        store.update(owner_id, Collection.DEFAULTS, rows[0]["id"], {"entity_id": entity_id})
        for extra in rows[1:]:
            store.delete(owner_id, Collection.DEFAULTS, extra["id"])
    else:
        store.insert(owner_id, Collection.DEFAULTS, {"entity_type": category.value, "entity_id": entity_id})
    logger.info("Default %s set to %s for owner %s", category.value, entity_id, owner_id)
    return {**record, "is_default": True}


def clear_default(store: EntityStore, owner_id: str, category: DefaultCategory, entity_id: int) -> int:
    return store.delete_where(owner_id, Collection.DEFAULTS, entity_type=category.value, entity_id=entity_id)


def mark_defaults(
    store: EntityStore, owner_id: str, category: DefaultCategory, records: list[Record]
) -> list[Record]:
    default_id = get_default_id(store, owner_id, category)
    return [{**r, "is_default": r["id"] == default_id} for r in records]
