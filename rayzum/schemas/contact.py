from datetime import datetime

from pydantic import BaseModel, field_validator


class ContactCreate(BaseModel):
    value: str

    @field_validator("value")
    @classmethod
    def value_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value is required")
        return v.strip()


class ContactUpdate(ContactCreate):
    pass


class ContactResponse(BaseModel):
    id: int
    value: str
    is_default: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
