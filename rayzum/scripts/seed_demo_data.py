"""
Seed sample personal info, one experience template and one resume for an owner.
Usage: python -m rayzum.scripts.seed_demo_data [owner_id]
Does nothing if the owner already has names.
"""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from rayzum.config import settings
from rayzum.database import ensure_tables_exist
from rayzum.dependencies import open_store
from rayzum.logging_config import setup_logging
from rayzum.services.contact_service import create_contact
from rayzum.services.default_service import DefaultCategory, set_default
from rayzum.services.education_service import create_education_item
from rayzum.services.experience_service import create_experience
from rayzum.services.resume_service import create_resume
from rayzum.store import Collection, EntityStore

logger = logging.getLogger(__name__)

SAMPLE_HIGHLIGHTS = [
    "Led development of scalable web applications using React and Node.js",
    "Improved application performance by 40% through code optimization",
    "Mentored junior developers and conducted code reviews",
]


def seed_demo(store: EntityStore, owner_id: str) -> dict:
    """Returns counts of what was created; all zeros when the owner already has data."""
    if store.select(owner_id, Collection.NAMES):
        logger.info("Owner %s already has data; skipping seed", owner_id)
        return {"names": 0, "experiences": 0, "resumes": 0}

    john = create_contact(store, owner_id, DefaultCategory.NAME, "John Doe")
    create_contact(store, owner_id, DefaultCategory.NAME, "Jane Smith")
    set_default(store, owner_id, DefaultCategory.NAME, john["id"])

    phone = create_contact(store, owner_id, DefaultCategory.PHONE, "(555) 010-0000")
    set_default(store, owner_id, DefaultCategory.PHONE, phone["id"])
    email = create_contact(store, owner_id, DefaultCategory.EMAIL, "john.doe@example.com")
    set_default(store, owner_id, DefaultCategory.EMAIL, email["id"])

    school = create_education_item(store, owner_id, "State University", "B.S. Computer Science", "2019")
    set_default(store, owner_id, DefaultCategory.EDUCATION_ITEM, school["id"])

    experience = create_experience(
        store,
        owner_id,
        job_title="Senior Software Engineer",
        company_name="Tech Company",
        start_date="2022-01-01",
        highlights=SAMPLE_HIGHLIGHTS,
    )
    selected = [h["id"] for h in experience["highlights"][:2]]
    create_resume(
        store,
        owner_id,
        {
            "title": "Software Engineer Resume",
            "experience_ids": [{"template_id": experience["id"], "selected_highlight_ids": selected}],
        },
    )
    logger.info("Seeded sample resume data for owner %s", owner_id)
    return {"names": 2, "experiences": 1, "resumes": 1}


def main():
    setup_logging()
    owner_id = sys.argv[1].strip() if len(sys.argv) > 1 else settings.default_owner_id
    if settings.storage_backend.lower() == "sql":
        ensure_tables_exist()
    with open_store() as store:
        result = seed_demo(store, owner_id)
    print(f"Seed complete for {owner_id}: {result}")


if __name__ == "__main__":
    main()
