from datetime import datetime

from models.base import CamelModel
from models.schemas.interview import InterviewAnswer, Question
from models.schemas.parsed_resume import ParsedResume


class ParseResumeResponse(CamelModel):
    success: bool = True
    raw_text: str = ""
    parsed_resume: ParsedResume = ParsedResume()
    file_name: str | None = None
    file_size: int | None = None
    extraction_mode: str = ""
    failed_fields: list[str] = []  # extractors that raised; those fields are empty


class ManualResumeResponse(CamelModel):
    success: bool = True
    parsed_resume: ParsedResume = ParsedResume()
    source: str = "manual"


class QuestionsResponse(CamelModel):
    success: bool = True
    questions: list[Question] = []
    total_questions: int = 0
    source: str = ""  # backend name, or "smart" for the template generator


class PerformanceReport(CamelModel):
    overall_score: int = 0
    technical_score: int = 0
    behavioral_score: int = 0
    communication_score: int = 0
    strengths: list[str] = []
    weaknesses: list[str] = []
    suggestions: list[str] = []
    detailed_feedback: dict[str, str] = {}
    source: str = ""


class InterviewRecord(CamelModel):
    id: str
    name: str
    mobile_number: str
    email: str | None = None
    overall_score: int = 0
    technical_score: int = 0
    behavioral_score: int = 0
    communication_score: int = 0
    job_title: str = ""
    company: str = ""
    interview_date: datetime
    strengths: list[str] = []
    weaknesses: list[str] = []
    suggestions: list[str] = []
    questions: list[Question] = []
    answers: list[InterviewAnswer] = []
    created_at: datetime


class InterviewSummary(CamelModel):
    id: str
    name: str
    overall_score: int = 0
    job_title: str = ""
    company: str = ""
    interview_date: datetime


class InterviewStats(CamelModel):
    total_interviews: int = 0
    average_overall_score: float = 0.0
    top_performers: list[InterviewSummary] = []
    recent_interviews: list[InterviewSummary] = []


class SaveInterviewResponse(CamelModel):
    success: bool = True
    message: str = "Interview results saved successfully"
    interview_id: str


class InterviewListResponse(CamelModel):
    success: bool = True
    interviews: list[InterviewRecord] = []
    total_interviews: int = 0
