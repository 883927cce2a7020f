"""All prompt templates for generative backend calls."""

from collections.abc import Sequence

from models.schemas.interview import Answer, JobDetails, Question
from models.schemas.parsed_resume import ParsedResume

QUESTION_SYSTEM_PREAMBLE = (
    "You are an expert HR interviewer. Generate relevant interview questions based on job details."
)
PERFORMANCE_SYSTEM_PREAMBLE = (
    "You are an expert HR interviewer and technical recruiter with 10+ years of experience. "
    "Analyze the interview performance and provide detailed, constructive feedback."
)


def _resume_section(resume: ParsedResume) -> str:
    parts = ["Based on the candidate's resume information:"]
    if resume.skills:
        parts.append(f"Skills: {', '.join(resume.skills)}.")

    experience = [
        f"{e.title or 'Role'} at {e.company or 'Company'}"
        for e in resume.experience
        if e.title or e.company
    ]
    if experience:
        parts.append(f"Experience: {', '.join(experience)}.")

    projects = [p.name for p in resume.projects if p.name]
    if projects:
        parts.append(f"Projects: {', '.join(projects)}.")

    education = [
        f"{e.degree or 'Degree'} from {e.institution or 'Institution'}"
        for e in resume.education
        if e.degree or e.institution
    ]
    if education:
        parts.append(f"Education: {', '.join(education)}.")
    return " ".join(parts)


def build_question_prompt(job: JobDetails, resume: ParsedResume | None = None, count: int = 5) -> str:
    """Question generation: job details plus resume highlights, JSON array out."""
    prompt = f"Generate {count} interview questions for a {job.title} position at {job.company}."
    if job.description:
        prompt += f" Job description: {job.description}."
    if job.requirements:
        prompt += f" Job requirements: {job.requirements}."
    if resume is not None:
        prompt += " " + _resume_section(resume)

    prompt += (
        " Questions should cover: 1. Technical skills (especially those mentioned in resume)"
        " 2. Behavioral situations 3. Motivation 4. Problem solving 5. Experience-based scenarios."
        " Tailor questions to the candidate's background."
        " Format as JSON array with id, text, and category fields."
    )
    return f"{QUESTION_SYSTEM_PREAMBLE} {prompt}"


def build_qa_section(questions: Sequence[Question], answers: Sequence[Answer]) -> str:
    """One block per question with its answer and answer length."""
    by_index = {}
    for answer in answers:
        by_index.setdefault(answer.question_index, answer)

    blocks = []
    for index, question in enumerate(questions):
        lines = [f"Question {index + 1}: {question.text}", f"Type: {question.category or 'General'}"]
        answer = by_index.get(index)
        if answer is not None:
            lines.append(f"Answer: {answer.answer}")
            lines.append(f"Answer Length: {len(answer.answer.split())} words")
        else:
            lines.append("Answer: [No answer provided]")
        lines.append("---")
        blocks.append("\n".join(lines))
    return "\n" + "\n".join(blocks) + "\n" if blocks else ""


def build_performance_prompt(
    questions: Sequence[Question], answers: Sequence[Answer], job: JobDetails
) -> str:
    """Performance analysis: Q&A transcript, strict rubric, JSON object out."""
    qa_section = build_qa_section(questions, answers)

    return f"""{PERFORMANCE_SYSTEM_PREAMBLE} Analyze interview performance for {job.title} position at {job.company}.

Job Requirements: {job.requirements}

Interview Questions and Answers:
{qa_section}

Questions answered: {len(answers)}/{len(questions)}

You are an expert interviewer analyzing interview performance. CRITICALLY evaluate each answer for relevance, substance, and quality. Generate ONLY valid JSON with this exact structure:

{{
  "overallScore": 75,
  "technicalScore": 80,
  "behavioralScore": 70,
  "communicationScore": 75,
  "strengths": ["Good technical knowledge", "Clear communication"],
  "weaknesses": ["Could provide more details", "Needs specific examples"],
  "suggestions": ["Practice technical questions", "Use STAR method"],
  "detailedFeedback": {{
    "question1": "Good technical knowledge demonstrated",
    "question2": "Could provide more specific examples"
  }}
}}

STRICT SCORING RULES - BE HARSH WITH POOR ANSWERS:

FOR IRRELEVANT/NONSENSICAL ANSWERS (like "yup", "tyu", "cyu", "opo", "bji"):
- overallScore: 5-15 (NEVER above 20)
- technicalScore: 0-10 (NEVER above 15)
- behavioralScore: 0-10 (NEVER above 15)
- communicationScore: 5-15 (NEVER above 20)

FOR VERY SHORT/INSUFFICIENT ANSWERS (under 20 words, no substance):
- overallScore: 10-25 (NEVER above 30)
- technicalScore: 5-20 (NEVER above 25)
- behavioralScore: 5-20 (NEVER above 25)
- communicationScore: 10-25 (NEVER above 30)

FOR MEDIOCRE ANSWERS (some content but lacks depth):
- all scores: 25-60

FOR GOOD ANSWERS (relevant, detailed, specific):
- all scores: 70-90

FOR EXCELLENT ANSWERS (comprehensive, specific examples, clear structure):
- all scores: 85-100

MANDATORY PENALTIES:
- Single word answers: MAX 15 points total
- Nonsensical responses: MAX 20 points total
- Irrelevant responses: MAX 25 points total
- No technical content for technical questions: technicalScore MAX 20
- No examples for behavioral questions: behavioralScore MAX 25
- Unclear communication: communicationScore MAX 30

CRITICAL: Return ONLY the JSON object (no markdown, no code fences). Be extremely strict - poor answers MUST get low scores!

Focus on:
1. Technical knowledge and skills demonstrated
2. Problem-solving approach and examples
3. Communication clarity and structure
4. Relevance to the job requirements
5. Specific strengths and areas for improvement"""
