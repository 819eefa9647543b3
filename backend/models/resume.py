"""Canonical résumé record shared by the parser, scorer and AI enhancer.

Attributes are snake_case in Python; the JSON form uses camelCase
(``fullName``, ``startDate``...) and either spelling is accepted on input.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return str(uuid.uuid4())


class ResumeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(ResumeModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""
    summary: str = ""


class EducationEntry(ResumeModel):
    id: str = Field(default_factory=new_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""
    highlights: list[str] = []


class ExperienceEntry(ResumeModel):
    id: str = Field(default_factory=new_id)
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: list[str] = []


class SkillGroup(ResumeModel):
    id: str = Field(default_factory=new_id)
    category: str = ""
    items: list[str] = []


class ProjectEntry(ResumeModel):
    id: str = Field(default_factory=new_id)
    name: str = ""
    description: str = ""
    technologies: list[str] = []
    highlights: list[str] = []
    link: str = ""


class CertificationEntry(ResumeModel):
    id: str = Field(default_factory=new_id)
    name: str = ""
    issuer: str = ""
    date: str = ""
    link: str = ""


class ResumeData(ResumeModel):
    """Root aggregate. Never persisted; re-derivable from text or form edits."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: list[EducationEntry] = []
    experience: list[ExperienceEntry] = []
    skills: list[SkillGroup] = []
    projects: list[ProjectEntry] = []
    certifications: list[CertificationEntry] = []
