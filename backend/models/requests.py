from pydantic import Field

from config import settings
from models.resume import ResumeData, ResumeModel


class ParseTextRequest(ResumeModel):
    raw_text: str = Field(
        ..., max_length=settings.max_raw_text_chars, description="Plain text resume content"
    )


class ScoreRequest(ResumeModel):
    resume_data: ResumeData
    job_description: str | None = Field(
        None, max_length=settings.max_job_description_chars, description="Optional job description text"
    )


class EnhanceRequest(ScoreRequest):
    pass


class ChatRequest(ResumeModel):
    message: str = Field(..., max_length=4000)
    resume_data: ResumeData = Field(default_factory=ResumeData)
