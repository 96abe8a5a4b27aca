from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from rayzum.database import Base


class Resume(Base):
    __tablename__ = "resumes"
    __table_args__ = (UniqueConstraint("user_id", "title", name="uq_resumes_user_title"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    # Lookup-only references; the referenced contact may be deleted later.
    name_id = Column(Integer)
    phone_id = Column(Integer)
    email_id = Column(Integer)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True))


class ResumeExperienceInstance(Base):
    """One experience template included in a resume, with the chosen highlight ids."""

    __tablename__ = "resume_experience_instances"
    __table_args__ = (
        UniqueConstraint("resume_id", "experience_template_id", name="uq_resume_experience_instance"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    resume_id = Column(Integer, ForeignKey("resumes.id", ondelete="CASCADE"), nullable=False, index=True)
    experience_template_id = Column(
        Integer, ForeignKey("experience_templates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    selected_highlight_ids = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True))


class ResumeEducation(Base):
    __tablename__ = "resume_education"
    __table_args__ = (UniqueConstraint("resume_id", "education_item_id", name="uq_resume_education"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    resume_id = Column(Integer, ForeignKey("resumes.id", ondelete="CASCADE"), nullable=False, index=True)
    education_item_id = Column(
        Integer, ForeignKey("education_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
