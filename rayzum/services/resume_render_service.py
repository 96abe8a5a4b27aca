"""Join a resume view with live experience and education data for display/export."""
import logging
from datetime import date

from rayzum.services.experience_service import get_all_experiences_with_highlights
from rayzum.services.resume_service import get_resume_with_details
from rayzum.store.base import Collection, EntityStore, Record

logger = logging.getLogger(__name__)


def format_month_year(value: str | None) -> str:
    """'2020-01-15' -> 'January 2020'. Unparseable values are returned unchanged."""
    if not value:
        return ""
    try:
        parsed = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return parsed.strftime("%B %Y")


def format_period(start_date: str | None, end_date: str | None) -> str:
    end = format_month_year(end_date) if end_date else "Present"
    return f"{format_month_year(start_date)} – {end}"


def build_printable_resume(store: EntityStore, owner_id: str, resume_id: int) -> Record | None:
    """
    Experience references whose template was deleted are dropped. Highlights
    are the template's live highlights restricted to the selected ids, so
    stale ids simply vanish. Both sections come out in display order.
    """
    resume = get_resume_with_details(store, owner_id, resume_id)
    if not resume:
        return None

    templates = {t["id"]: t for t in get_all_experiences_with_highlights(store, owner_id)}
    experiences = []
    for ref in sorted(resume["experience_ids"], key=lambda r: r["display_order"]):
        template = templates.get(ref["template_id"])
        if not template:
            continue
        selected = set(ref["selected_highlight_ids"])
        experiences.append(
            {
                "id": template["id"],
                "job_title": template["job_title"],
                "company_name": template["company_name"],
                "start_date": template["start_date"],
                "end_date": template["end_date"],
                "period": format_period(template["start_date"], template["end_date"]),
                "highlights": [h for h in template["highlights"] if h["id"] in selected],
            }
        )

    items = {e["id"]: e for e in store.select(owner_id, Collection.EDUCATION_ITEMS)}
    education = []
    for ref in sorted(resume["education_ids"], key=lambda r: r["display_order"]):
        item = items.get(ref["id"])
        if not item:
            continue
        education.append({"id": item["id"], "school": item["school"], "degree": item["degree"], "year": item["year"]})

    logger.debug(
        "Printable resume %s: %d/%d experience, %d/%d education",
        resume_id,
        len(experiences),
        len(resume["experience_ids"]),
        len(education),
        len(resume["education_ids"]),
    )
    return {
        "id": resume["id"],
        "title": resume["title"],
        "name": resume["name_value"],
        "phone": resume["phone_value"],
        "email": resume["email_value"],
        "experiences": experiences,
        "education": education,
    }
