import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_backend_status
from config import settings
from models.requests import (
    InterviewCreate,
    ManualResumeRequest,
    ParseTextRequest,
    PerformanceRequest,
    QuestionRequest,
)
from models.responses import (
    InterviewListResponse,
    InterviewRecord,
    InterviewStats,
    ManualResumeResponse,
    ParseResumeResponse,
    PerformanceReport,
    QuestionsResponse,
    SaveInterviewResponse,
)
from services import interview_store, pdf_parser, performance_service, question_service, resume_parser
from services.errors import EmptyInputError, ExtractionError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _parse_text(text: str) -> tuple:
    try:
        return resume_parser.parse_resume_with_report(text)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/health")
async def health(backends: dict[str, bool] = Depends(get_backend_status)):
    return {
        "status": "ok",
        "backends": backends,
        "gemini_configured": backends.get("gemini", False),
    }


@router.post("/resume/parse", response_model=ParseResumeResponse)
@limiter.limit(settings.rate_limit)
async def parse_resume(request: Request, resume: UploadFile = File(...)):
    # Validate file type
    is_pdf = (resume.filename or "").lower().endswith(".pdf") or resume.content_type == "application/pdf"
    if not is_pdf:
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")

    # Read and validate size
    content = await resume.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )
    logger.info("PDF file received: %s, size: %d", resume.filename, len(content))

    # Extract text from PDF
    try:
        text = pdf_parser.extract_text(content)
    except ExtractionError as e:
        raise HTTPException(status_code=400, detail=f"Could not parse PDF file ({e.reason})")

    if not text.strip():
        raise HTTPException(
            status_code=400,
            detail="No text could be extracted from the PDF. It might be image-based or encrypted.",
        )

    parsed, failures = _parse_text(text)
    return ParseResumeResponse(
        raw_text=text,
        parsed_resume=parsed,
        file_name=resume.filename,
        file_size=len(content),
        extraction_mode=resume_parser.resolve_mode(text).value,
        failed_fields=[f.field for f in failures],
    )


@router.post("/resume/parse-text", response_model=ParseResumeResponse)
@limiter.limit(settings.rate_limit)
async def parse_resume_text(request: Request, body: ParseTextRequest):
    parsed, failures = _parse_text(body.text)
    return ParseResumeResponse(
        raw_text=body.text,
        parsed_resume=parsed,
        extraction_mode=resume_parser.resolve_mode(body.text).value,
        failed_fields=[f.field for f in failures],
    )


@router.post("/resume/manual", response_model=ManualResumeResponse)
async def manual_resume(body: ManualResumeRequest):
    parsed = resume_parser.build_manual_resume(
        personal_info=body.personal_info,
        skills=body.skills,
        experience=body.experience,
        projects=body.projects,
        education=body.education,
    )
    logger.info(
        "Manual resume received: %d skills, %d experience, %d projects, %d education",
        len(parsed.skills), len(parsed.experience), len(parsed.projects), len(parsed.education),
    )
    return ManualResumeResponse(parsed_resume=parsed)


@router.post("/questions/generate", response_model=QuestionsResponse)
@limiter.limit(settings.rate_limit)
async def generate_questions(request: Request, body: QuestionRequest):
    return await question_service.generate_questions(body.job_details, body.parsed_resume)


@router.post("/performance/analyze", response_model=PerformanceReport)
@limiter.limit(settings.rate_limit)
async def analyze_performance(request: Request, body: PerformanceRequest):
    return await performance_service.analyze_performance(body.questions, body.answers, body.job_details)


@router.post("/interviews", response_model=SaveInterviewResponse, status_code=201)
def save_interview(body: InterviewCreate):
    interview_id = interview_store.save_interview(body)
    return SaveInterviewResponse(interview_id=interview_id)


@router.get("/interviews/stats", response_model=InterviewStats)
def interview_stats():
    return interview_store.get_stats()


@router.get("/interviews/phone/{mobile_number}", response_model=InterviewListResponse)
def interviews_by_phone(mobile_number: str):
    interviews = interview_store.list_interviews_by_phone(mobile_number)
    if not interviews:
        raise HTTPException(status_code=404, detail="No interviews found for this mobile number")
    return InterviewListResponse(interviews=interviews, total_interviews=len(interviews))


@router.get("/interviews/{interview_id}", response_model=InterviewRecord)
def get_interview(interview_id: str):
    interview = interview_store.get_interview(interview_id)
    if interview is None:
        raise HTTPException(status_code=404, detail="Interview not found")
    return interview
