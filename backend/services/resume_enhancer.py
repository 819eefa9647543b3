"""Gemini-backed resume rewriting and coaching chat.

Every model response is untrusted text: it is shape-checked before it is
merged, and a section whose response is missing or malformed keeps its
original content.
"""

import logging

from models.resume import ExperienceEntry, ProjectEntry, ResumeData, SkillGroup
from models.responses import EnhancementChange, EnhancementResult
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

CHAT_FALLBACK = "I apologize, but I encountered an error. Please try again."


class AIUnavailableError(RuntimeError):
    """Raised when no Gemini API key is configured."""


def _is_str_list(value: object) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(v, str) for v in value)


def _valid_skill_groups(value: object) -> list[SkillGroup] | None:
    if not isinstance(value, list) or not value:
        return None
    groups = []
    for raw in value:
        if not isinstance(raw, dict):
            return None
        category, items = raw.get("category"), raw.get("items")
        if not isinstance(category, str) or not _is_str_list(items):
            return None
        groups.append(SkillGroup(category=category.strip(), items=[i.strip() for i in items]))
    return groups


def _format_skills(groups: list[SkillGroup]) -> str:
    return " | ".join(f"{g.category}: {', '.join(g.items)}" for g in groups)


async def _enhance_summary(summary: str, job_description: str) -> tuple[str, EnhancementChange | None]:
    if not summary.strip():
        return summary, None

    enhanced = await gemini_client.generate_text(
        prompt_builder.build_summary_prompt(summary, job_description)
    )
    if not enhanced:
        logger.warning("Summary enhancement unavailable, keeping original")
        return summary, None

    return enhanced, EnhancementChange(
        section="Professional Summary",
        original=summary,
        enhanced=enhanced,
        reason="Improved clarity, impact, and keyword optimization",
    )


async def _enhance_experience(
    experience: ExperienceEntry, job_description: str
) -> tuple[ExperienceEntry, EnhancementChange | None]:
    bullets = await gemini_client.generate_json(
        prompt_builder.build_experience_prompt(experience, job_description)
    )
    if not _is_str_list(bullets):
        logger.warning("Discarding malformed bullets for %r", experience.company)
        return experience, None

    change = EnhancementChange(
        section=f"Experience - {experience.company}",
        original=" | ".join(experience.description),
        enhanced=" | ".join(bullets),
        reason="Action verbs, quantified achievements, and keyword optimization",
    )
    return experience.model_copy(update={"description": bullets}), change


async def _enhance_skills(
    skills: list[SkillGroup], job_description: str
) -> tuple[list[SkillGroup], EnhancementChange | None, list[str]]:
    groups = _valid_skill_groups(
        await gemini_client.generate_json(prompt_builder.build_skills_prompt(skills, job_description))
    )
    if groups is None:
        logger.warning("Discarding malformed skills response")
        return skills, None, []

    original = {item.lower() for g in skills for item in g.items}
    added: list[str] = []
    for item in (item for g in groups for item in g.items):
        if item.lower() not in original and item not in added:
            added.append(item)

    change = EnhancementChange(
        section="Skills",
        original=_format_skills(skills),
        enhanced=_format_skills(groups),
        reason="Better categorization and additional relevant keywords",
    )
    return groups, change, added


async def _enhance_project(project: ProjectEntry) -> tuple[ProjectEntry, EnhancementChange | None]:
    improved = await gemini_client.generate_json(prompt_builder.build_project_prompt(project))
    if (
        not isinstance(improved, dict)
        or not isinstance(improved.get("description"), str)
        or not _is_str_list(improved.get("highlights"))
    ):
        logger.warning("Discarding malformed project response for %r", project.name)
        return project, None

    description, highlights = improved["description"], improved["highlights"]
    change = EnhancementChange(
        section=f"Project - {project.name}",
        original=" | ".join([project.description, *project.highlights]),
        enhanced=" | ".join([description, *highlights]),
        reason="Improved technical impact and clarity",
    )
    return project.model_copy(update={"description": description, "highlights": highlights}), change


async def enhance_resume(resume: ResumeData, job_description: str = "") -> EnhancementResult:
    """Rewrite summary, experience bullets, skills and projects with Gemini.

    The input is left untouched; the returned record is a deep copy.
    """
    if gemini_client.get_client() is None:
        raise AIUnavailableError("Gemini API key is not configured. Set GEMINI_API_KEY.")

    enhanced = resume.model_copy(deep=True)
    changes: list[EnhancementChange] = []

    summary, change = await _enhance_summary(enhanced.personal_info.summary, job_description)
    enhanced.personal_info.summary = summary
    if change:
        changes.append(change)

    experience = []
    for entry in enhanced.experience:
        entry, change = await _enhance_experience(entry, job_description)
        experience.append(entry)
        if change:
            changes.append(change)
    enhanced.experience = experience

    enhanced.skills, change, keywords_added = await _enhance_skills(enhanced.skills, job_description)
    if change:
        changes.append(change)

    projects = []
    for project in enhanced.projects:
        project, change = await _enhance_project(project)
        projects.append(project)
        if change:
            changes.append(change)
    enhanced.projects = projects

    logger.info("Resume enhanced with %d changes", len(changes))
    return EnhancementResult(enhanced_data=enhanced, changes=changes, keywords_added=keywords_added)


async def chat_with_resume(message: str, resume: ResumeData) -> str:
    """Answer a coaching question about the resume."""
    if gemini_client.get_client() is None:
        raise AIUnavailableError("Gemini API key is not configured. Set GEMINI_API_KEY.")

    reply = await gemini_client.generate_text(prompt_builder.build_chat_prompt(message, resume))
    return reply or CHAT_FALLBACK
