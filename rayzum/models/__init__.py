from rayzum.models.contact import Name, Phone, Email
from rayzum.models.experience import ExperienceTemplate, Highlight
from rayzum.models.education import EducationItem
from rayzum.models.resume import Resume, ResumeExperienceInstance, ResumeEducation
from rayzum.models.default import Default

__all__ = [
    "Name",
    "Phone",
    "Email",
    "ExperienceTemplate",
    "Highlight",
    "EducationItem",
    "Resume",
    "ResumeExperienceInstance",
    "ResumeEducation",
    "Default",
]
