from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.sql import func

from rayzum.database import Base


class _ContactColumns:
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    value = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True))


class Name(_ContactColumns, Base):
    __tablename__ = "names"
    __table_args__ = (UniqueConstraint("user_id", "value", name="uq_names_user_value"),)


class Phone(_ContactColumns, Base):
    __tablename__ = "phones"
    __table_args__ = (UniqueConstraint("user_id", "value", name="uq_phones_user_value"),)


class Email(_ContactColumns, Base):
    __tablename__ = "emails"
    __table_args__ = (UniqueConstraint("user_id", "value", name="uq_emails_user_value"),)
