"""Shared test fixtures."""

import pytest

from models.resume import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeData,
    SkillGroup,
)

SAMPLE_RESUME = """Jane Smith
jane.smith@email.com | (555) 123-4567 | San Francisco, CA
linkedin.com/in/janesmith | github.com/janesmith

Summary
Backend engineer with 6 years of experience building data platforms and APIs.

Experience
Senior Software Engineer | 2021 - Present
TechCorp
• Built REST APIs serving 1M requests/day
• Led team of 5 engineers
Software Engineer | Jun 2018 - Dec 2020
StartupXYZ
- Developed React frontend components
- Reduced deploy time by 40% with CI/CD pipelines

Education
B.S. Computer Science
State University
GPA: 3.8/4.0

Skills
Languages: Python, Go, SQL
Tools: Docker, Kubernetes, AWS

Projects
Resume Parser | Python, FastAPI
- Parsed 10,000 resumes with 95% accuracy
"""


def _role(company: str, bullets: list[str]) -> ExperienceEntry:
    return ExperienceEntry(
        company=company,
        position="Software Engineer",
        start_date="Jan 2020",
        end_date="Present",
        current=True,
        description=bullets,
    )


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def strong_resume() -> ResumeData:
    """Three fully quantified roles, complete contact info, two projects."""
    return ResumeData(
        personal_info=PersonalInfo(
            full_name="Jane Smith",
            email="jane.smith@email.com",
            phone="(555) 123-4567",
            location="San Francisco, CA",
            linkedin="https://www.linkedin.com/in/janesmith",
            summary=(
                "Backend engineer known for leadership and clear communication "
                "across platform teams."
            ),
        ),
        education=[
            EducationEntry(institution="State University", degree="B.S.", field="Computer Science"),
            EducationEntry(institution="Tech Institute", degree="M.S.", field="Data Science"),
        ],
        experience=[
            _role("TechCorp", [
                "Increased checkout conversion by 25% through a redesigned payment flow",
                "Reduced infrastructure spend by $40,000 per year with autoscaling policies",
                "Led a team of 6 engineers delivering the new billing platform",
            ]),
            _role("DataCo", [
                "Built ingestion pipelines processing 2 million events every single day",
                "Designed a caching layer that cut median API latency by 60%",
                "Launched 3 internal developer tools adopted by every product team",
            ]),
            _role("WebWorks", [
                "Optimized database queries to speed up nightly reports by 4x overall",
                "Managed migration of 12 services to containers with zero downtime",
                "Developed onboarding documentation used by 30 new hires each year",
            ]),
        ],
        skills=[
            SkillGroup(category="Languages", items=["Python", "SQL", "Java"]),
            SkillGroup(category="Platforms", items=["Docker", "Kubernetes", "AWS", "PostgreSQL"]),
        ],
        projects=[
            ProjectEntry(name="Resume Parser", highlights=[]),
            ProjectEntry(name="Budget Tracker", highlights=[]),
        ],
    )
