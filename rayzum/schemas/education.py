from datetime import datetime

from pydantic import BaseModel, field_validator


def _not_blank(v: str | None) -> str | None:
    if v is not None and not v.strip():
        raise ValueError("School, degree, and year are required")
    return v.strip() if v is not None else None


class EducationItemCreate(BaseModel):
    school: str
    degree: str
    year: str

    @field_validator("school", "degree", "year")
    @classmethod
    def fields_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class EducationItemUpdate(BaseModel):
    school: str | None = None
    degree: str | None = None
    year: str | None = None

    @field_validator("school", "degree", "year")
    @classmethod
    def fields_not_blank(cls, v: str | None) -> str | None:
        return _not_blank(v)


class EducationItemResponse(BaseModel):
    id: int
    school: str
    degree: str
    year: str
    is_default: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
