"""
Resume CRUD and the resume view.

A resume view is the resume row plus its resolved contact values and the
ordered experience / education references stored in the two join collections.
"""
import logging
from collections.abc import Mapping
from typing import Any

from rayzum.core.errors import ConflictError, NotFoundError, ValidationError
from rayzum.core.validation import require_text
from rayzum.services.default_service import DefaultCategory, get_default_id
from rayzum.store.base import Collection, EntityStore, Record

logger = logging.getLogger(__name__)

# resume field -> (default category, referenced collection, view field)
_CONTACT_REFS = {
    "name_id": (DefaultCategory.NAME, Collection.NAMES, "name_value"),
    "phone_id": (DefaultCategory.PHONE, Collection.PHONES, "phone_value"),
    "email_id": (DefaultCategory.EMAIL, Collection.EMAILS, "email_value"),
}


def _resolve_value(store: EntityStore, owner_id: str, collection: Collection, ref_id: int | None) -> str | None:
    if ref_id is None:
        return None
    record = store.get(owner_id, collection, ref_id)
    return record["value"] if record else None


def get_resume_with_details(store: EntityStore, owner_id: str, resume_id: int) -> Record | None:
    resume = store.get(owner_id, Collection.RESUMES, resume_id)
    if not resume:
        return None

    view = dict(resume)
    for key, (_, collection, view_field) in _CONTACT_REFS.items():
        view[view_field] = _resolve_value(store, owner_id, collection, resume.get(key))

    instances = store.select(owner_id, Collection.RESUME_EXPERIENCE_INSTANCES, resume_id=resume_id)
    view["experience_ids"] = [
        {
            "id": inst["id"],
            "template_id": inst["experience_template_id"],
            "selected_highlight_ids": list(inst.get("selected_highlight_ids") or []),
            "display_order": inst["display_order"],
        }
        for inst in instances
    ]

    links = store.select(owner_id, Collection.RESUME_EDUCATION, resume_id=resume_id)
    view["education_ids"] = [
        {"id": link["education_item_id"], "display_order": link["display_order"]} for link in links
    ]
    return view


def get_all_resumes_with_details(store: EntityStore, owner_id: str) -> list[Record]:
    views = (get_resume_with_details(store, owner_id, r["id"]) for r in store.select(owner_id, Collection.RESUMES))
    return [v for v in views if v is not None]


def list_resumes(store: EntityStore, owner_id: str) -> list[Record]:
    """Most recently updated first."""
    views = get_all_resumes_with_details(store, owner_id)
    views.sort(key=lambda v: (str(v.get("updated_at") or v.get("created_at") or ""), v["id"]), reverse=True)
    return views


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _normalize_experience_refs(refs: list[Any]) -> list[tuple[int, int, list[int]]]:
    """
    Returns (display_order, template_id, selected_highlight_ids) per entry.
    A bare integer means a template with no highlights selected; a repeated
    template keeps its first occurrence.
    """
    seen: set[int] = set()
    out = []
    for position, ref in enumerate(refs):
        if isinstance(ref, Mapping):
            template_id = ref.get("template_id")
            highlight_ids = ref.get("selected_highlight_ids") or []
        else:
            template_id, highlight_ids = ref, []
        if not _is_int(template_id):
            raise ValidationError("Each experience entry needs an integer template_id")
        if not all(_is_int(h) for h in highlight_ids):
            raise ValidationError("selected_highlight_ids must be integers")
        if template_id in seen:
            continue
        seen.add(template_id)
        out.append((position, template_id, list(highlight_ids)))
    return out


def _normalize_education_ids(ids: list[Any]) -> list[tuple[int, int]]:
    seen: set[int] = set()
    out = []
    for position, item_id in enumerate(ids):
        if not _is_int(item_id):
            raise ValidationError("education_ids must be integers")
        if item_id in seen:
            continue
        seen.add(item_id)
        out.append((position, item_id))
    return out


def _check_references(
    store: EntityStore,
    owner_id: str,
    experience_refs: list[tuple[int, int, list[int]]] | None,
    education_refs: list[tuple[int, int]] | None,
) -> None:
    for _, template_id, _ in experience_refs or []:
        if not store.get(owner_id, Collection.EXPERIENCE_TEMPLATES, template_id):
            raise NotFoundError(f"Experience template {template_id} not found")
    for _, item_id in education_refs or []:
        if not store.get(owner_id, Collection.EDUCATION_ITEMS, item_id):
            raise NotFoundError(f"Education item {item_id} not found")


def _write_experience_instances(
    store: EntityStore, owner_id: str, resume_id: int, refs: list[tuple[int, int, list[int]]]
) -> None:
    for display_order, template_id, highlight_ids in refs:
        store.insert(
            owner_id,
            Collection.RESUME_EXPERIENCE_INSTANCES,
            {
                "resume_id": resume_id,
                "experience_template_id": template_id,
                "selected_highlight_ids": highlight_ids,
                "display_order": display_order,
            },
        )


def _write_education_links(store: EntityStore, owner_id: str, resume_id: int, refs: list[tuple[int, int]]) -> None:
    for display_order, item_id in refs:
        store.insert(
            owner_id,
            Collection.RESUME_EDUCATION,
            {"resume_id": resume_id, "education_item_id": item_id, "display_order": display_order},
        )


def _check_title_free(store: EntityStore, owner_id: str, title: str, resume_id: int | None = None) -> None:
    clash = store.select(owner_id, Collection.RESUMES, title=title)
    if clash and clash[0]["id"] != resume_id:
        raise ConflictError("A resume with this title already exists")


def create_resume(store: EntityStore, owner_id: str, data: dict[str, Any]) -> Record:
    """
    Create a resume from request-shaped ``data``.
    Contact ids and ``education_ids`` left out of ``data`` fall back to the
    owner's defaults; an explicit None keeps the reference empty.
    """
    title = require_text(data.get("title"), "Title")
    _check_title_free(store, owner_id, title)

    experience_refs = _normalize_experience_refs(data.get("experience_ids") or [])
    if "education_ids" in data:
        education_refs = _normalize_education_ids(data.get("education_ids") or [])
    else:
        default_edu = get_default_id(store, owner_id, DefaultCategory.EDUCATION_ITEM)
        education_refs = [(0, default_edu)] if default_edu is not None else []
    _check_references(store, owner_id, experience_refs, education_refs)

    fields: dict[str, Any] = {"title": title}
    for key, (category, _, _) in _CONTACT_REFS.items():
        fields[key] = data[key] if key in data else get_default_id(store, owner_id, category)

    resume = store.insert(owner_id, Collection.RESUMES, fields)
    _write_experience_instances(store, owner_id, resume["id"], experience_refs)
    _write_education_links(store, owner_id, resume["id"], education_refs)
    logger.info(
        "Resume %s created for owner %s: %d experience, %d education",
        resume["id"],
        owner_id,
        len(experience_refs),
        len(education_refs),
    )
    return get_resume_with_details(store, owner_id, resume["id"])


def update_resume(store: EntityStore, owner_id: str, resume_id: int, data: dict[str, Any]) -> Record | None:
    """
    Partial update. A provided ``experience_ids`` / ``education_ids`` list
    replaces the previous associations entirely (delete, then reinsert).
    """
    if not store.get(owner_id, Collection.RESUMES, resume_id):
        return None

    fields: dict[str, Any] = {}
    if data.get("title") is not None:
        fields["title"] = require_text(data["title"], "Title")
        _check_title_free(store, owner_id, fields["title"], resume_id)
    for key in _CONTACT_REFS:
        if key in data:
            fields[key] = data[key]

    experience_refs = None
    if data.get("experience_ids") is not None:
        experience_refs = _normalize_experience_refs(data["experience_ids"])
    education_refs = None
    if data.get("education_ids") is not None:
        education_refs = _normalize_education_ids(data["education_ids"])
    _check_references(store, owner_id, experience_refs, education_refs)

    store.update(owner_id, Collection.RESUMES, resume_id, fields)
    if experience_refs is not None:
        store.delete_where(owner_id, Collection.RESUME_EXPERIENCE_INSTANCES, resume_id=resume_id)
        _write_experience_instances(store, owner_id, resume_id, experience_refs)
    if education_refs is not None:
        store.delete_where(owner_id, Collection.RESUME_EDUCATION, resume_id=resume_id)
        _write_education_links(store, owner_id, resume_id, education_refs)
    logger.info("Resume %s updated for owner %s", resume_id, owner_id)
    return get_resume_with_details(store, owner_id, resume_id)
