"""Keyword lists used by the ATS scorer.

Bundled into a ScoringLexicon so callers can swap in their own lists
(tests, other locales) without touching the scoring formulas.
"""

from dataclasses import dataclass

ACTION_VERBS: tuple[str, ...] = (
    "achieved", "administered", "analyzed", "built", "collaborated",
    "communicated", "conducted", "coordinated", "created", "delivered",
    "demonstrated", "designed", "developed", "directed", "engineered",
    "established", "executed", "facilitated", "generated", "implemented",
    "improved", "increased", "initiated", "innovated", "integrated",
    "launched", "led", "managed", "mentored", "monitored",
    "negotiated", "optimized", "organized", "oversaw", "performed",
    "planned", "presented", "produced", "programmed", "reduced",
    "researched", "resolved", "restructured", "reviewed", "scaled",
    "spearheaded", "streamlined", "supervised", "trained", "transformed",
    "accelerated",
)

TECH_KEYWORDS: tuple[str, ...] = (
    "python", "javascript", "typescript", "react", "node.js", "angular",
    "vue", "java", "c++", "sql", "nosql", "mongodb", "postgresql",
    "aws", "azure", "gcp", "docker", "kubernetes", "ci/cd", "git",
    "agile", "scrum", "rest api", "graphql", "machine learning",
    "deep learning", "data analysis", "tensorflow", "pytorch",
    "html", "css", "sass", "webpack", "next.js", "express",
    "django", "flask", "spring", "microservices", "redis",
)

SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "problem-solving",
    "analytical", "strategic", "collaborative", "innovative",
    "adaptable", "detail-oriented", "self-motivated", "proactive",
)

JARGON_TERMS: tuple[str, ...] = ("synergy", "leverage", "paradigm", "utilize")


@dataclass(frozen=True)
class ScoringLexicon:
    action_verbs: tuple[str, ...] = ACTION_VERBS
    tech_keywords: tuple[str, ...] = TECH_KEYWORDS
    soft_skills: tuple[str, ...] = SOFT_SKILLS
    jargon_terms: tuple[str, ...] = JARGON_TERMS


DEFAULT_LEXICON = ScoringLexicon()
