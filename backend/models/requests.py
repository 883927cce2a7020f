from pydantic import Field, field_validator

from models.base import CamelModel
from models.schemas.interview import Answer, InterviewAnswer, JobDetails, Question
from models.schemas.parsed_resume import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    PersonalInfo,
    ProjectEntry,
)


class ParseTextRequest(CamelModel):
    text: str = Field(..., max_length=100000, description="Plain text resume content")


class ManualResumeRequest(CamelModel):
    personal_info: PersonalInfo = PersonalInfo()
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    projects: list[ProjectEntry] = []
    education: list[EducationEntry] = []


class QuestionRequest(CamelModel):
    parsed_resume: ParsedResume | None = None
    job_details: JobDetails = JobDetails()


class PerformanceRequest(CamelModel):
    questions: list[Question] = Field(default=[], max_length=50)
    answers: list[Answer] = Field(default=[], max_length=50)
    job_details: JobDetails = JobDetails()


class InterviewCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    mobile_number: str = Field(..., min_length=1, max_length=32)
    email: str | None = None
    overall_score: int = Field(..., ge=0, le=100)
    technical_score: int = Field(default=0, ge=0, le=100)
    behavioral_score: int = Field(default=0, ge=0, le=100)
    communication_score: int = Field(default=0, ge=0, le=100)
    job_title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    strengths: list[str] = []
    weaknesses: list[str] = []
    suggestions: list[str] = []
    questions: list[Question] = []
    answers: list[InterviewAnswer] = []

    @field_validator("name", "mobile_number", "job_title", "company")
    @classmethod
    def _strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().lower() or None
