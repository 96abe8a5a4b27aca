from datetime import datetime

from pydantic import BaseModel, field_validator


class ExperienceRef(BaseModel):
    template_id: int
    selected_highlight_ids: list[int] = []


class ResumeCreate(BaseModel):
    title: str
    # Leave a field out to use the owner's default; send null for none.
    name_id: int | None = None
    phone_id: int | None = None
    email_id: int | None = None
    experience_ids: list[ExperienceRef | int] = []
    education_ids: list[int] = []

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v.strip()


class ResumeUpdate(BaseModel):
    title: str | None = None
    name_id: int | None = None
    phone_id: int | None = None
    email_id: int | None = None
    experience_ids: list[ExperienceRef | int] | None = None
    education_ids: list[int] | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Title is required")
        return v.strip() if v is not None else None


class ExperienceRefView(BaseModel):
    id: int
    template_id: int
    selected_highlight_ids: list[int]
    display_order: int


class EducationRefView(BaseModel):
    id: int
    display_order: int


class ResumeResponse(BaseModel):
    id: int
    title: str
    name_id: int | None = None
    phone_id: int | None = None
    email_id: int | None = None
    name_value: str | None = None
    phone_value: str | None = None
    email_value: str | None = None
    experience_ids: list[ExperienceRefView] = []
    education_ids: list[EducationRefView] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PrintableHighlight(BaseModel):
    id: int
    text: str


class PrintableExperience(BaseModel):
    id: int
    job_title: str
    company_name: str
    start_date: str
    end_date: str | None = None
    period: str
    highlights: list[PrintableHighlight]


class PrintableEducation(BaseModel):
    id: int
    school: str
    degree: str
    year: str


class PrintableResume(BaseModel):
    id: int
    title: str
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    experiences: list[PrintableExperience]
    education: list[PrintableEducation]
