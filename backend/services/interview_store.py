"""SQLite persistence for completed interviews."""

import json
import logging
import sqlite3
import uuid
from contextlib import closing
from datetime import datetime, timezone
from pathlib import Path

from config import settings
from models.requests import InterviewCreate
from models.responses import InterviewRecord, InterviewStats, InterviewSummary

logger = logging.getLogger(__name__)

TOP_PERFORMERS_LIMIT = 5
RECENT_INTERVIEWS_LIMIT = 10

_LIST_FIELDS = ("strengths", "weaknesses", "suggestions", "questions", "answers")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get_db_path() -> Path:
    return Path(settings.interview_db_path)


def _connect() -> sqlite3.Connection:
    db_path = _get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    with closing(_connect()) as conn, conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS interviews (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                mobile_number TEXT NOT NULL,
                email TEXT,
                overall_score INTEGER NOT NULL,
                technical_score INTEGER NOT NULL,
                behavioral_score INTEGER NOT NULL,
                communication_score INTEGER NOT NULL,
                job_title TEXT NOT NULL,
                company TEXT NOT NULL,
                interview_date TEXT NOT NULL,
                strengths_json TEXT NOT NULL,
                weaknesses_json TEXT NOT NULL,
                suggestions_json TEXT NOT NULL,
                questions_json TEXT NOT NULL,
                answers_json TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        conn.execute("CREATE INDEX IF NOT EXISTS idx_interviews_mobile_number ON interviews (mobile_number)")
        conn.execute("CREATE INDEX IF NOT EXISTS idx_interviews_interview_date ON interviews (interview_date)")


def _row_to_record(row: sqlite3.Row) -> InterviewRecord:
    data = {key: row[key] for key in row.keys() if not key.endswith("_json")}
    for field in _LIST_FIELDS:
        data[field] = json.loads(row[f"{field}_json"])
    return InterviewRecord.model_validate(data)


def _row_to_summary(row: sqlite3.Row) -> InterviewSummary:
    return InterviewSummary.model_validate({key: row[key] for key in row.keys()})


def save_interview(interview: InterviewCreate) -> str:
    """Store an interview and return its id."""
    init_db()
    interview_id = uuid.uuid4().hex
    now = _utc_now()
    answers = [
        {**a.model_dump(by_alias=True, mode="json"), "timestamp": a.timestamp.isoformat() if a.timestamp else now}
        for a in interview.answers
    ]
    questions = [q.model_dump(by_alias=True) for q in interview.questions]

    with closing(_connect()) as conn, conn:
        conn.execute(
            """
            INSERT INTO interviews (
                id, name, mobile_number, email, overall_score, technical_score,
                behavioral_score, communication_score, job_title, company,
                interview_date, strengths_json, weaknesses_json, suggestions_json,
                questions_json, answers_json, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                interview_id,
                interview.name,
                interview.mobile_number,
                interview.email,
                interview.overall_score,
                interview.technical_score,
                interview.behavioral_score,
                interview.communication_score,
                interview.job_title,
                interview.company,
                now,
                json.dumps(interview.strengths, ensure_ascii=False),
                json.dumps(interview.weaknesses, ensure_ascii=False),
                json.dumps(interview.suggestions, ensure_ascii=False),
                json.dumps(questions, ensure_ascii=False),
                json.dumps(answers, ensure_ascii=False),
                now,
            ),
        )
    logger.info("Interview results saved: %s", interview_id)
    return interview_id


def get_interview(interview_id: str) -> InterviewRecord | None:
    init_db()
    with closing(_connect()) as conn:
        row = conn.execute("SELECT * FROM interviews WHERE id = ?", (interview_id,)).fetchone()
    return _row_to_record(row) if row else None


def list_interviews_by_phone(mobile_number: str) -> list[InterviewRecord]:
    """All interviews for a mobile number, newest first."""
    init_db()
    with closing(_connect()) as conn:
        rows = conn.execute(
            "SELECT * FROM interviews WHERE mobile_number = ? ORDER BY interview_date DESC, rowid DESC",
            (mobile_number.strip(),),
        ).fetchall()
    return [_row_to_record(row) for row in rows]


def get_stats() -> InterviewStats:
    init_db()
    summary_columns = "id, name, overall_score, job_title, company, interview_date"
    with closing(_connect()) as conn:
        total, average = conn.execute("SELECT COUNT(*), AVG(overall_score) FROM interviews").fetchone()
        top = conn.execute(
            f"SELECT {summary_columns} FROM interviews ORDER BY overall_score DESC, interview_date DESC LIMIT ?",
            (TOP_PERFORMERS_LIMIT,),
        ).fetchall()
        recent = conn.execute(
            f"SELECT {summary_columns} FROM interviews ORDER BY interview_date DESC, rowid DESC LIMIT ?",
            (RECENT_INTERVIEWS_LIMIT,),
        ).fetchall()

    return InterviewStats(
        total_interviews=total,
        average_overall_score=float(average or 0.0),
        top_performers=[_row_to_summary(r) for r in top],
        recent_interviews=[_row_to_summary(r) for r in recent],
    )
