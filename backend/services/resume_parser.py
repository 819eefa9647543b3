"""Assemble a ResumeData record from raw document text."""

import logging

from models.resume import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeData,
    SkillGroup,
)
from services.entry_extractors import (
    extract_education,
    extract_experience,
    extract_projects,
    extract_skills,
)
from services.section_parser import extract_personal_info, parse_sections

logger = logging.getLogger(__name__)


def parse_resume_text(raw_text: str) -> ResumeData:
    """Segment raw text and run every field extractor over its section.

    Never raises; anything that cannot be identified is left empty.
    """
    sections = parse_sections(raw_text)

    personal_info = extract_personal_info(
        sections.get("header") or sections.get("contact", ""), raw_text
    )
    if sections.get("summary"):
        personal_info.summary = sections["summary"]

    resume = ResumeData(
        personal_info=personal_info,
        education=extract_education(sections.get("education", "")),
        experience=extract_experience(sections.get("experience", "")),
        skills=extract_skills(sections.get("skills", "")),
        projects=extract_projects(sections.get("projects", "")),
        certifications=[],
    )
    logger.debug(
        "Parsed resume: %d education, %d experience, %d skill groups, %d projects",
        len(resume.education),
        len(resume.experience),
        len(resume.skills),
        len(resume.projects),
    )
    return resume


def create_empty_resume() -> ResumeData:
    """Blank record for manual entry: one editable row per list, no certifications."""
    return ResumeData(
        personal_info=PersonalInfo(),
        education=[EducationEntry()],
        experience=[ExperienceEntry(description=[""])],
        skills=[SkillGroup()],
        projects=[ProjectEntry()],
        certifications=[],
    )
