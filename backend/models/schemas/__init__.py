"""Typed records shared between the extractor, scoring engines, and the API."""

from models.schemas.answer_analysis import AnswerAnalysis, RoundedScores, ScoreSet
from models.schemas.interview import Answer, InterviewAnswer, JobDetails, Question
from models.schemas.parsed_resume import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    PersonalInfo,
    ProjectEntry,
)

__all__ = [
    "Answer",
    "InterviewAnswer",
    "AnswerAnalysis",
    "EducationEntry",
    "ExperienceEntry",
    "JobDetails",
    "ParsedResume",
    "PersonalInfo",
    "ProjectEntry",
    "Question",
    "RoundedScores",
    "ScoreSet",
]
