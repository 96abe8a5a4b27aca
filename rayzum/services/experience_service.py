import logging
from typing import Any

from rayzum.core.validation import date_text, optional_text, require_text
from rayzum.store.base import Collection, EntityStore, Record

logger = logging.getLogger(__name__)

_REQUIRED = {"job_title": "Job title", "company_name": "Company name", "start_date": "Start date"}


def _highlights_for(store: EntityStore, owner_id: str, template_id: int) -> list[dict]:
    rows = store.select(owner_id, Collection.HIGHLIGHTS, experience_template_id=template_id)
    return [{"id": h["id"], "text": h["text"]} for h in rows]


def _insert_highlights(store: EntityStore, owner_id: str, template_id: int, texts: list[str]) -> None:
    for text in texts:
        if isinstance(text, str) and text.strip():
            store.insert(
                owner_id,
                Collection.HIGHLIGHTS,
                {"experience_template_id": template_id, "text": text.strip()},
            )


def get_experience_with_highlights(store: EntityStore, owner_id: str, template_id: int) -> Record | None:
    template = store.get(owner_id, Collection.EXPERIENCE_TEMPLATES, template_id)
    if not template:
        return None
    return {**template, "highlights": _highlights_for(store, owner_id, template_id)}


def get_all_experiences_with_highlights(store: EntityStore, owner_id: str) -> list[Record]:
    """Every template paired with its own highlights, in store order."""
    templates = store.select(owner_id, Collection.EXPERIENCE_TEMPLATES)
    return [{**t, "highlights": _highlights_for(store, owner_id, t["id"])} for t in templates]


def list_experiences(store: EntityStore, owner_id: str) -> list[Record]:
    """Latest start date first, ties newest first."""
    experiences = get_all_experiences_with_highlights(store, owner_id)
    experiences.sort(key=lambda e: (e["start_date"] or "", e["id"]), reverse=True)
    return experiences


def create_experience(
    store: EntityStore,
    owner_id: str,
    job_title: str,
    company_name: str,
    start_date: Any,
    end_date: Any = None,
    highlights: list[str] | None = None,
) -> Record:
    fields = {
        "job_title": require_text(job_title, "Job title"),
        "company_name": require_text(company_name, "Company name"),
        "start_date": date_text(start_date, "Start date"),
        "end_date": optional_text(end_date),
    }
    template = store.insert(owner_id, Collection.EXPERIENCE_TEMPLATES, fields)
    _insert_highlights(store, owner_id, template["id"], highlights or [])
    logger.info("Experience template %s created for owner %s", template["id"], owner_id)
    return get_experience_with_highlights(store, owner_id, template["id"])


def update_experience(
    store: EntityStore,
    owner_id: str,
    template_id: int,
    changes: dict[str, Any],
    highlights: list[str] | None = None,
) -> Record | None:
    """
    Partial update. When ``highlights`` is given it replaces every existing
    highlight (new ids are assigned), so resumes that selected the old ids
    lose them until re-selected.
    """
    if not store.get(owner_id, Collection.EXPERIENCE_TEMPLATES, template_id):
        return None
    fields: dict[str, Any] = {}
    for key, label in _REQUIRED.items():
        if key in changes:
            fields[key] = date_text(changes[key], label) if key == "start_date" else require_text(changes[key], label)
    if "end_date" in changes:
        fields["end_date"] = optional_text(changes["end_date"])
    store.update(owner_id, Collection.EXPERIENCE_TEMPLATES, template_id, fields)

    if highlights is not None:
        store.delete_where(owner_id, Collection.HIGHLIGHTS, experience_template_id=template_id)
        _insert_highlights(store, owner_id, template_id, highlights)
    logger.info("Experience template %s updated for owner %s", template_id, owner_id)
    return get_experience_with_highlights(store, owner_id, template_id)


def add_highlight(store: EntityStore, owner_id: str, template_id: int, text: str) -> Record | None:
    text = require_text(text, "Highlight text")
    if not store.get(owner_id, Collection.EXPERIENCE_TEMPLATES, template_id):
        return None
    highlight = store.insert(
        owner_id,
        Collection.HIGHLIGHTS,
        {"experience_template_id": template_id, "text": text},
    )
    logger.info("Highlight %s added to experience template %s", highlight["id"], template_id)
    return {"id": highlight["id"], "text": highlight["text"]}
