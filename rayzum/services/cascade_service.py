"""
Deletes for parent entities, removing dependent rows first.

Child deletes run even when the parent turns out to be absent; against a
missing parent id they match nothing, so nothing needs rolling back.
"""
import logging

from rayzum.services.default_service import CATEGORY_COLLECTIONS, DefaultCategory, clear_default
from rayzum.store.base import Collection, EntityStore

logger = logging.getLogger(__name__)


def delete_experience_template(store: EntityStore, owner_id: str, template_id: int) -> bool:
    highlights = store.delete_where(owner_id, Collection.HIGHLIGHTS, experience_template_id=template_id)
    instances = store.delete_where(owner_id, Collection.RESUME_EXPERIENCE_INSTANCES, experience_template_id=template_id)
    deleted = store.delete(owner_id, Collection.EXPERIENCE_TEMPLATES, template_id)
    if deleted:
        logger.info(
            "Experience template %s deleted for owner %s (%d highlights, %d resume links)",
            template_id,
            owner_id,
            highlights,
            instances,
        )
    return deleted


def delete_education_item(store: EntityStore, owner_id: str, item_id: int) -> bool:
    links = store.delete_where(owner_id, Collection.RESUME_EDUCATION, education_item_id=item_id)
    clear_default(store, owner_id, DefaultCategory.EDUCATION_ITEM, item_id)
    deleted = store.delete(owner_id, Collection.EDUCATION_ITEMS, item_id)
    if deleted:
        logger.info("Education item %s deleted for owner %s (%d resume links)", item_id, owner_id, links)
    return deleted


def delete_resume(store: EntityStore, owner_id: str, resume_id: int) -> bool:
    store.delete_where(owner_id, Collection.RESUME_EXPERIENCE_INSTANCES, resume_id=resume_id)
    store.delete_where(owner_id, Collection.RESUME_EDUCATION, resume_id=resume_id)
    deleted = store.delete(owner_id, Collection.RESUMES, resume_id)
    if deleted:
        logger.info("Resume %s deleted for owner %s", resume_id, owner_id)
    return deleted


def delete_contact(store: EntityStore, owner_id: str, category: DefaultCategory, contact_id: int) -> bool:
    """Resumes that reference the contact keep the (now dangling) id."""
    clear_default(store, owner_id, category, contact_id)
    deleted = store.delete(owner_id, CATEGORY_COLLECTIONS[category], contact_id)
    if deleted:
        logger.info("%s %s deleted for owner %s", category.value, contact_id, owner_id)
    return deleted
