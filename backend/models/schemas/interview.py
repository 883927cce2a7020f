"""Interview questions, answers, and job metadata."""

from datetime import datetime

from pydantic import AliasChoices, Field

from models.base import CamelModel


class Question(CamelModel):
    id: int = 0
    text: str = Field(default="", validation_alias=AliasChoices("text", "question"))
    category: str = Field(default="General", validation_alias=AliasChoices("category", "type"))


class Answer(CamelModel):
    question_index: int = Field(..., ge=0)
    answer: str = ""


class JobDetails(CamelModel):
    title: str = ""
    company: str = ""
    description: str = ""
    requirements: str = ""


class InterviewAnswer(CamelModel):
    """An answer as stored with an interview record."""
    question_id: int
    answer: str
    timestamp: datetime | None = None
