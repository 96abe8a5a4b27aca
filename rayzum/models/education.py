from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.sql import func

from rayzum.database import Base


class EducationItem(Base):
    __tablename__ = "education_items"
    __table_args__ = (
        UniqueConstraint("user_id", "school", "degree", "year", name="uq_education_items_user_entry"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    school = Column(String, nullable=False)
    degree = Column(String, nullable=False)
    year = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True))
