from typing import Literal

from models.resume import ResumeModel

SuggestionCategory = Literal["keyword", "formatting", "content", "structure"]
SuggestionPriority = Literal["high", "medium", "low"]


class ATSBreakdown(ResumeModel):
    keyword_score: int = 0
    formatting_score: int = 0
    section_score: int = 0
    readability_score: int = 0
    experience_score: int = 0


class ATSSuggestion(ResumeModel):
    category: SuggestionCategory
    message: str
    priority: SuggestionPriority


class ATSScore(ResumeModel):
    overall_score: int = 0
    breakdown: ATSBreakdown = ATSBreakdown()
    suggestions: list[ATSSuggestion] = []
