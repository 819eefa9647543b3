"""Heuristic ATS scoring of a structured resume.

Five independent sub-scores (0-100) are blended into an overall score:

    keyword      30%   action verbs, tech terms, soft skills, metrics, JD overlap
    formatting   10%   bullets, dates, skill categories, summary
    section      20%   contact fields and presence of each section
    readability  15%   bullet length, jargon, action-verb openers
    experience   25%   bullets, metrics and dates per role

Scoring is a pure function of its inputs.
"""

import logging
import math
import re

from models.ats import ATSBreakdown, ATSScore, ATSSuggestion
from models.resume import ResumeData
from services.ats_keywords import DEFAULT_LEXICON, ScoringLexicon

logger = logging.getLogger(__name__)

# Weights for the overall score
W_KEYWORD = 0.30
W_FORMATTING = 0.10
W_SECTION = 0.20
W_READABILITY = 0.15
W_EXPERIENCE = 0.25

# Keyword bucket caps (sum to 100) and the hit counts that saturate them
ACTION_VERB_POINTS, ACTION_VERB_TARGET = 25, 10
TECH_POINTS, TECH_TARGET = 25, 8
SOFT_SKILL_POINTS, SOFT_SKILL_TARGET = 15, 4
QUANTIFIED_POINTS = 20
JOB_MATCH_POINTS = 15
NO_JOB_DESCRIPTION_POINTS = 8

MAX_SUGGESTIONS = 10

QUANTIFIER_RE = re.compile(r"\d+[%+]?|\$[\d,]+")
_JD_TOKEN_STRIP = "\"'`.,;:!?()[]{}<>*"


def _round(value: float) -> int:
    """Round half up, so 62.5 -> 63 rather than banker's rounding."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, _round(value)))


def is_quantified(text: str) -> bool:
    return bool(QUANTIFIER_RE.search(text))


def get_full_text(resume: ResumeData) -> str:
    """All résumé content joined with spaces, used for keyword lookups."""
    info = resume.personal_info
    parts = [info.full_name, info.summary]
    parts += [
        f"{e.institution} {e.degree} {e.field} {' '.join(e.highlights)}"
        for e in resume.education
    ]
    parts += [
        f"{e.company} {e.position} {' '.join(e.description)}" for e in resume.experience
    ]
    parts += [item for group in resume.skills for item in group.items]
    parts += [
        f"{p.name} {p.description} {' '.join(p.technologies)} {' '.join(p.highlights)}"
        for p in resume.projects
    ]
    parts += [f"{c.name} {c.issuer}" for c in resume.certifications]
    return " ".join(parts)


def _experience_text(resume: ResumeData) -> str:
    return " ".join(" ".join(e.description) for e in resume.experience).lower()


def _found_action_verbs(resume: ResumeData, lexicon: ScoringLexicon) -> list[str]:
    text = _experience_text(resume)
    return [verb for verb in lexicon.action_verbs if verb in text]


def job_description_tokens(job_description: str) -> list[str]:
    """Unique lower-cased JD words longer than three characters.

    Short all-caps acronyms (AWS, SQL, GCP) are kept as well.
    """
    tokens: list[str] = []
    seen: set[str] = set()
    for raw in job_description.split():
        word = raw.strip(_JD_TOKEN_STRIP)
        is_acronym = 2 <= len(word) <= 3 and word.isalpha() and word.isupper()
        if len(word) <= 3 and not is_acronym:
            continue
        lowered = word.lower()
        if lowered not in seen:
            seen.add(lowered)
            tokens.append(lowered)
    return tokens


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------

def keyword_points(
    resume: ResumeData,
    job_description: str | None = None,
    lexicon: ScoringLexicon = DEFAULT_LEXICON,
) -> dict[str, float]:
    """Points earned in each keyword bucket (bucket maxima sum to 100)."""
    all_text = get_full_text(resume).lower()
    skills_text = " ".join(item for g in resume.skills for item in g.items).lower()

    verb_hits = len(_found_action_verbs(resume, lexicon))
    tech_hits = sum(
        1 for kw in lexicon.tech_keywords if kw in all_text or kw in skills_text
    )
    soft_hits = sum(1 for skill in lexicon.soft_skills if skill in all_text)

    bullets = [d for e in resume.experience for d in e.description]
    quantified = sum(1 for d in bullets if is_quantified(d))

    if job_description and job_description.strip():
        tokens = job_description_tokens(job_description)
        matches = sum(1 for token in tokens if token in all_text)
        job_match = min(matches / max(len(tokens), 1) * JOB_MATCH_POINTS, JOB_MATCH_POINTS)
    else:
        job_match = NO_JOB_DESCRIPTION_POINTS

    return {
        "action_verbs": min(verb_hits / ACTION_VERB_TARGET * ACTION_VERB_POINTS, ACTION_VERB_POINTS),
        "tech_keywords": min(tech_hits / TECH_TARGET * TECH_POINTS, TECH_POINTS),
        "soft_skills": min(soft_hits / SOFT_SKILL_TARGET * SOFT_SKILL_POINTS, SOFT_SKILL_POINTS),
        "quantified": min(quantified / max(len(bullets), 1) * QUANTIFIED_POINTS, QUANTIFIED_POINTS),
        "job_match": job_match,
    }


def calculate_keyword_score(
    resume: ResumeData,
    job_description: str | None = None,
    lexicon: ScoringLexicon = DEFAULT_LEXICON,
) -> int:
    points = keyword_points(resume, job_description, lexicon)
    possible = (
        ACTION_VERB_POINTS + TECH_POINTS + SOFT_SKILL_POINTS + QUANTIFIED_POINTS + JOB_MATCH_POINTS
    )
    return _clamp(sum(points.values()) / possible * 100)


def calculate_formatting_score(resume: ResumeData) -> int:
    score = 0

    with_bullets = [len(e.description) >= 2 for e in resume.experience]
    if all(with_bullets):
        score += 30
    elif any(with_bullets):
        score += 15

    dates = [
        d
        for entries in (resume.experience, resume.education)
        for e in entries
        for d in (e.start_date, e.end_date)
        if d
    ]
    if dates:
        score += 25

    if len(resume.skills) >= 2:
        score += 25
    elif len(resume.skills) == 1:
        score += 15

    summary = resume.personal_info.summary
    if len(summary) >= 50:
        score += 20
    elif summary:
        score += 10

    return _clamp(score)


def calculate_section_score(resume: ResumeData) -> int:
    info = resume.personal_info
    score = 4 * sum(
        1 for value in (info.full_name, info.email, info.phone, info.location, info.linkedin)
        if value
    )

    if resume.education:
        score += 20

    if len(resume.experience) >= 3:
        score += 25
    elif len(resume.experience) >= 2:
        score += 20
    elif resume.experience:
        score += 15

    skill_items = [item for g in resume.skills for item in g.items]
    if resume.skills and len(skill_items) >= 5:
        score += 20
    elif resume.skills:
        score += 12

    if len(resume.projects) >= 2:
        score += 15
    elif resume.projects:
        score += 10

    return _clamp(score)


def calculate_readability_score(
    resume: ResumeData, lexicon: ScoringLexicon = DEFAULT_LEXICON
) -> int:
    descriptions = [
        d
        for d in (
            [d for e in resume.experience for d in e.description]
            + [h for p in resume.projects for h in p.highlights]
        )
        if d.strip()
    ]
    if not descriptions:
        return 50

    score = 70.0
    avg_words = sum(len(d.split()) for d in descriptions) / len(descriptions)
    if 8 <= avg_words <= 25:
        score += 15
    elif avg_words < 8:
        score -= 5
    else:
        score -= 10

    if lexicon.jargon_terms:
        jargon_re = re.compile("|".join(map(re.escape, lexicon.jargon_terms)), re.IGNORECASE)
        score -= 3 * sum(1 for d in descriptions if jargon_re.search(d))

    verbs = set(lexicon.action_verbs)
    verb_starts = sum(1 for d in descriptions if d.split()[0].lower() in verbs)
    score += min(verb_starts / len(descriptions) * 15, 15)

    return _clamp(score)


def calculate_experience_score(resume: ResumeData) -> int:
    if not resume.experience:
        return 50

    score = 0
    for exp in resume.experience:
        if len(exp.description) >= 3:
            score += 10
        elif len(exp.description) >= 2:
            score += 7
        else:
            score += 3

        if any(is_quantified(d) for d in exp.description):
            score += 10

        if exp.start_date and exp.end_date:
            score += 5

    return _clamp(score / (len(resume.experience) * 25) * 100)


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------

def generate_suggestions(
    resume: ResumeData,
    breakdown: ATSBreakdown,
    lexicon: ScoringLexicon = DEFAULT_LEXICON,
) -> list[ATSSuggestion]:
    """Independent improvement rules, in priority order, capped at ten."""
    suggestions: list[ATSSuggestion] = []

    if breakdown.keyword_score < 60:
        suggestions.append(ATSSuggestion(
            category="keyword",
            message="Add more industry-specific keywords and technical skills relevant to your target role.",
            priority="high",
        ))

    if len(_found_action_verbs(resume, lexicon)) < 5:
        examples = ", ".join(lexicon.action_verbs[:8])
        suggestions.append(ATSSuggestion(
            category="keyword",
            message=f"Start bullet points with strong action verbs like: {examples}",
            priority="high",
        ))

    if breakdown.formatting_score < 60:
        if not resume.personal_info.summary:
            suggestions.append(ATSSuggestion(
                category="formatting",
                message="Add a professional summary at the top of your resume to quickly convey your value.",
                priority="high",
            ))
        if len(resume.skills) < 2:
            suggestions.append(ATSSuggestion(
                category="formatting",
                message=(
                    'Organize your skills into categories (e.g., "Programming Languages", '
                    '"Tools & Frameworks") for better ATS parsing.'
                ),
                priority="medium",
            ))

    if breakdown.experience_score < 60:
        unquantified = [
            exp for exp in resume.experience
            if not any(is_quantified(d) for d in exp.description)
        ]
        if unquantified:
            companies = ", ".join(exp.company or exp.position or "an unnamed role" for exp in unquantified)
            suggestions.append(ATSSuggestion(
                category="content",
                message=(
                    f"Quantify achievements in your experience at {companies}. "
                    "Use numbers, percentages, or dollar amounts."
                ),
                priority="high",
            ))
        for exp in resume.experience:
            if len(exp.description) < 3:
                suggestions.append(ATSSuggestion(
                    category="content",
                    message=f"Add more bullet points (at least 3) for your role at {exp.company or exp.position or 'this company'}.",
                    priority="medium",
                ))

    if breakdown.section_score < 70:
        if not resume.personal_info.linkedin:
            suggestions.append(ATSSuggestion(
                category="structure",
                message="Add your LinkedIn profile URL to improve discoverability.",
                priority="low",
            ))
        if not resume.projects:
            suggestions.append(ATSSuggestion(
                category="structure",
                message="Add a Projects section to showcase relevant work and technical skills.",
                priority="medium",
            ))

    if breakdown.readability_score < 60:
        suggestions.append(ATSSuggestion(
            category="content",
            message='Keep bullet points concise (10-25 words) and avoid jargon like "synergy" or "leverage".',
            priority="medium",
        ))

    return suggestions[:MAX_SUGGESTIONS]


def calculate_ats_score(
    resume: ResumeData,
    job_description: str | None = None,
    lexicon: ScoringLexicon = DEFAULT_LEXICON,
) -> ATSScore:
    """Score a resume for ATS compatibility, optionally against a job description."""
    breakdown = ATSBreakdown(
        keyword_score=calculate_keyword_score(resume, job_description, lexicon),
        formatting_score=calculate_formatting_score(resume),
        section_score=calculate_section_score(resume),
        readability_score=calculate_readability_score(resume, lexicon),
        experience_score=calculate_experience_score(resume),
    )

    overall = _clamp(
        breakdown.keyword_score * W_KEYWORD
        + breakdown.formatting_score * W_FORMATTING
        + breakdown.section_score * W_SECTION
        + breakdown.readability_score * W_READABILITY
        + breakdown.experience_score * W_EXPERIENCE
    )
    logger.debug("ATS breakdown %s -> %d", breakdown.model_dump(), overall)

    return ATSScore(
        overall_score=overall,
        breakdown=breakdown,
        suggestions=generate_suggestions(resume, breakdown, lexicon),
    )
