from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from rayzum.database import Base


class ExperienceTemplate(Base):
    """Reusable work-history entry; resumes pick a subset of its highlights."""

    __tablename__ = "experience_templates"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    job_title = Column(String, nullable=False)
    company_name = Column(String, nullable=False)
    start_date = Column(String, nullable=False)  # ISO date, e.g. 2020-01-01
    end_date = Column(String)  # null while current
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True))


class Highlight(Base):
    __tablename__ = "highlights"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    experience_template_id = Column(
        Integer, ForeignKey("experience_templates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
