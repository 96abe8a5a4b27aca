import logging

from rayzum.core.errors import ConflictError
from rayzum.core.validation import require_text
from rayzum.services.default_service import CATEGORY_COLLECTIONS, DefaultCategory, mark_defaults
from rayzum.store.base import EntityStore, Record

logger = logging.getLogger(__name__)

CONTACT_CATEGORIES = (DefaultCategory.NAME, DefaultCategory.PHONE, DefaultCategory.EMAIL)

_LABELS = {
    DefaultCategory.NAME: "Name",
    DefaultCategory.PHONE: "Phone",
    DefaultCategory.EMAIL: "Email",
}


def _find_by_value(store: EntityStore, owner_id: str, category: DefaultCategory, value: str) -> Record | None:
    rows = store.select(owner_id, CATEGORY_COLLECTIONS[category], value=value)
    return rows[0] if rows else None


def list_contacts(store: EntityStore, owner_id: str, category: DefaultCategory) -> list[Record]:
    """Newest first, each flagged with ``is_default``."""
    rows = store.select(owner_id, CATEGORY_COLLECTIONS[category])
    rows.sort(key=lambda r: r["id"], reverse=True)
    return mark_defaults(store, owner_id, category, rows)


def get_contact(store: EntityStore, owner_id: str, category: DefaultCategory, contact_id: int) -> Record | None:
    record = store.get(owner_id, CATEGORY_COLLECTIONS[category], contact_id)
    if not record:
        return None
    return mark_defaults(store, owner_id, category, [record])[0]


def create_contact(store: EntityStore, owner_id: str, category: DefaultCategory, value: str) -> Record:
    label = _LABELS[category]
    value = require_text(value, label)
    if _find_by_value(store, owner_id, category, value):
        raise ConflictError(f"A {label.lower()} with this value already exists")
    record = store.insert(owner_id, CATEGORY_COLLECTIONS[category], {"value": value})
    logger.info("%s %s created for owner %s", label, record["id"], owner_id)
    return {**record, "is_default": False}


def update_contact(
    store: EntityStore, owner_id: str, category: DefaultCategory, contact_id: int, value: str
) -> Record | None:
    label = _LABELS[category]
    value = require_text(value, label)
    if not store.get(owner_id, CATEGORY_COLLECTIONS[category], contact_id):
        return None
    clash = _find_by_value(store, owner_id, category, value)
    if clash and clash["id"] != contact_id:
        raise ConflictError(f"A {label.lower()} with this value already exists")
    record = store.update(owner_id, CATEGORY_COLLECTIONS[category], contact_id, {"value": value})
    logger.info("%s %s updated for owner %s", label, contact_id, owner_id)
    return mark_defaults(store, owner_id, category, [record])[0]
