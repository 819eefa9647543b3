from typing import Literal

from models.ats import ATSScore
from models.resume import ResumeData, ResumeModel


class EnhancementChange(ResumeModel):
    section: str
    original: str
    enhanced: str
    reason: str


class EnhancementResult(ResumeModel):
    enhanced_data: ResumeData
    changes: list[EnhancementChange] = []
    keywords_added: list[str] = []


class HealthResponse(ResumeModel):
    status: Literal["ok"] = "ok"
    gemini_configured: bool = False


class ParseResponse(ResumeModel):
    success: bool = True
    data: ResumeData
    raw_text: str = ""


class ScoreResponse(ResumeModel):
    success: bool = True
    score: ATSScore


class EnhanceResponse(EnhancementResult):
    success: bool = True
    score: ATSScore


class ChatResponse(ResumeModel):
    success: bool = True
    response: str


class ErrorResponse(ResumeModel):
    error: str
