from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.sql import func

from rayzum.database import Base


class Default(Base):
    """Owner's chosen default per category (name, phone, email, education_item)."""

    __tablename__ = "defaults"
    __table_args__ = (UniqueConstraint("user_id", "entity_type", name="uq_defaults_user_type"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
