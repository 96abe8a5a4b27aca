from datetime import date, datetime

from pydantic import BaseModel, field_validator


class HighlightIn(BaseModel):
    text: str


class HighlightCreate(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Highlight text is required")
        return v.strip()


class HighlightResponse(BaseModel):
    id: int
    text: str


class ExperienceCreate(BaseModel):
    job_title: str
    company_name: str
    start_date: date
    end_date: date | None = None
    highlights: list[HighlightIn] = []

    @field_validator("job_title", "company_name")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Job title, company name, and start date are required")
        return v.strip()


class ExperienceUpdate(BaseModel):
    job_title: str | None = None
    company_name: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    # When present, replaces every existing highlight.
    highlights: list[HighlightIn] | None = None


class ExperienceResponse(BaseModel):
    id: int
    job_title: str
    company_name: str
    start_date: str
    end_date: str | None = None
    highlights: list[HighlightResponse] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None
