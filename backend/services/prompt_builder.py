"""All prompt templates for Gemini API calls."""

import json

from models.resume import ExperienceEntry, ProjectEntry, ResumeData, SkillGroup


def _job_context(job_description: str, fallback: str) -> str:
    return job_description.strip() or fallback


def build_summary_prompt(summary: str, job_description: str = "") -> str:
    """Rewrite the professional summary. Plain-text response."""
    return f"""You are an expert resume writer and ATS optimization specialist.
Improve the following professional summary to be more impactful, ATS-friendly, and concise.
Use strong action-oriented language and include relevant industry keywords.
Keep it to 2-3 sentences maximum.

CURRENT SUMMARY:
---
{summary}
---

TARGET ROLE / INDUSTRY CONTEXT:
---
{_job_context(job_description, "General professional")}
---

Return ONLY the improved summary text, nothing else."""


def build_experience_prompt(experience: ExperienceEntry, job_description: str = "") -> str:
    """Rewrite one role's bullets. JSON array response."""
    bullets_text = "\n".join(
        f"{i}. {bullet}" for i, bullet in enumerate(experience.description, 1)
    )

    return f"""You are an expert resume writer and ATS optimization specialist.
Improve the following work experience bullet points to be more impactful and ATS-optimized.

RULES:
1. Start each bullet with a strong action verb
2. Include quantified achievements where the original supports them
3. Use industry keywords naturally
4. Keep each bullet to 1-2 lines (15-25 words)
5. Focus on impact and results, not just responsibilities

Company: {experience.company}
Position: {experience.position}
Current bullets:
{bullets_text}

JOB DESCRIPTION CONTEXT:
---
{_job_context(job_description, "Not provided")}
---

Respond with ONLY a JSON array of strings (no markdown, no code fences), e.g.
["Improved bullet 1", "Improved bullet 2"]"""


def build_skills_prompt(skills: list[SkillGroup], job_description: str = "") -> str:
    """Re-categorize skills and add a few relevant ones. JSON array response."""
    skills_json = json.dumps(
        [{"category": g.category, "items": g.items} for g in skills], ensure_ascii=False
    )

    return f"""You are an expert resume writer and ATS optimization specialist.
Analyze the following skills and suggest additional relevant skills and better categorization for ATS optimization.

CURRENT SKILLS:
{skills_json}

JOB DESCRIPTION CONTEXT:
---
{_job_context(job_description, "General technology role")}
---

Keep existing skills and add 3-5 additional relevant ones.
Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
[{{"category": "<category name>", "items": ["<skill>", "<skill>"]}}]"""


def build_project_prompt(project: ProjectEntry) -> str:
    """Rewrite one project's description and highlights. JSON object response."""
    highlights_text = "\n".join(f"- {h}" for h in project.highlights)

    return f"""You are an expert resume writer. Improve the following project description to be more impactful.

RULES:
1. Highlight technical complexity and impact
2. Use action verbs and quantify where possible
3. Keep highlights to 1-2 lines each

Project: {project.name}
Description: {project.description}
Technologies: {", ".join(project.technologies)}
Current highlights:
{highlights_text}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "description": "<improved one-sentence description>",
  "highlights": ["<improved highlight>", "<improved highlight>"]
}}"""


def build_chat_prompt(message: str, resume: ResumeData) -> str:
    """Resume-coach chat turn grounded in the user's resume."""
    info = resume.personal_info
    experience = ", ".join(
        f"{e.position} at {e.company}" for e in resume.experience if e.position or e.company
    )
    skills = ", ".join(item for g in resume.skills for item in g.items)
    education = ", ".join(
        f"{e.degree} in {e.field} from {e.institution}"
        for e in resume.education
        if e.degree or e.institution
    )

    return f"""You are an expert resume coach and career advisor. You have access to the user's resume data and can provide personalized suggestions for improvement.

RESUME CONTEXT:
- Name: {info.full_name or "Not provided"}
- Summary: {info.summary or "Not provided"}
- Experience: {experience or "Not provided"}
- Skills: {skills or "Not provided"}
- Education: {education or "Not provided"}

Provide specific, actionable advice. Be concise but helpful. Focus on ATS optimization, keyword improvement, and professional presentation.

USER QUESTION:
{message}"""
