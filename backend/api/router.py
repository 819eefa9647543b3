import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import ChatRequest, EnhanceRequest, ParseTextRequest, ScoreRequest
from models.responses import (
    ChatResponse,
    EnhanceResponse,
    HealthResponse,
    ParseResponse,
    ScoreResponse,
)
from services import pdf_parser, resume_enhancer
from services.ats_scorer import calculate_ats_score
from services.resume_parser import create_empty_resume, parse_resume_text

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(gemini_configured=bool(settings.gemini_api_key))


@router.post("/parse", response_model=ParseResponse)
@limiter.limit(settings.rate_limit)
async def parse(request: Request, file: UploadFile | None = File(None)):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    if not file.filename.lower().endswith(pdf_parser.SUPPORTED_EXTENSIONS):
        raise HTTPException(
            status_code=400,
            detail="Unsupported file type. Please upload a PDF or Word document.",
        )

    content = await file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        raw_text = pdf_parser.extract_document_text(file.filename, content)
    except Exception as e:
        logger.warning("Could not read %s: %s", file.filename, e)
        raw_text = ""

    if not raw_text.strip():
        raise HTTPException(
            status_code=422,
            detail=(
                "Could not extract text from the uploaded file. "
                "Please try a different file or enter details manually."
            ),
        )

    return ParseResponse(data=parse_resume_text(raw_text), raw_text=raw_text[:2000])


@router.post("/parse/text", response_model=ParseResponse)
async def parse_text(body: ParseTextRequest):
    return ParseResponse(data=parse_resume_text(body.raw_text))


@router.get("/resume/empty", response_model=ParseResponse)
async def empty_resume():
    return ParseResponse(data=create_empty_resume())


@router.post("/ats-score", response_model=ScoreResponse)
async def ats_score(body: ScoreRequest):
    return ScoreResponse(score=calculate_ats_score(body.resume_data, body.job_description))


@router.post("/enhance", response_model=EnhanceResponse)
@limiter.limit(settings.rate_limit)
async def enhance(request: Request, body: EnhanceRequest):
    try:
        result = await resume_enhancer.enhance_resume(body.resume_data, body.job_description or "")
    except resume_enhancer.AIUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return EnhanceResponse(
        enhanced_data=result.enhanced_data,
        changes=result.changes,
        keywords_added=result.keywords_added,
        score=calculate_ats_score(result.enhanced_data, body.job_description),
    )


@router.post("/chat", response_model=ChatResponse)
@limiter.limit(settings.rate_limit)
async def chat(request: Request, body: ChatRequest):
    if not body.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    try:
        reply = await resume_enhancer.chat_with_resume(body.message, body.resume_data)
    except resume_enhancer.AIUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ChatResponse(response=reply)
