"""Heuristic extractors for the list-valued resume sections.

Each extractor scans the lines of one section (see ``SectionScanner``) and
builds entries from plain dict drafts. ``strict=True`` selects the
bullet-aware variant used for resumes laid out with bullet points.
"""

import re
from collections.abc import Sequence

from models.schemas.parsed_resume import EducationEntry, ExperienceEntry, ProjectEntry
from services.pdf_parser import is_bullet, strip_bullet
from services.section_parser import (
    CERTIFICATION_EXIT,
    CERTIFICATION_KEYWORDS,
    EDUCATION_EXIT,
    EDUCATION_KEYWORDS,
    EXPERIENCE_EXIT,
    EXPERIENCE_KEYWORDS,
    LANGUAGE_EXIT,
    LANGUAGE_KEYWORDS,
    PROJECTS_EXIT,
    PROJECTS_KEYWORDS,
    YEAR_RE,
    find_date_range,
    is_date_range_line,
    mentions_location,
    section_lines,
)
from services.skill_extractor import dedupe_casefold, find_vocabulary_skills

# "Title at Company", "Title - Company", "Title | Company"
_ENTRY_SPLIT_RE = re.compile(r"\s+at\s+|\s+-\s+|\|")

JOB_TITLE_KEYWORDS = (
    "developer", "engineer", "manager", "analyst", "designer", "consultant",
    "architect", "intern", "lead", "director", "specialist", "administrator",
    "scientist", "officer", "coordinator", "associate", "programmer",
    "technician", "executive", "head", "founder", "trainee",
)
_JOB_TITLE_RE = re.compile(r"\b(?:" + "|".join(JOB_TITLE_KEYWORDS) + r")s?\b", re.IGNORECASE)

INSTITUTION_KEYWORDS = ("university", "college", "institute", "school", "academy", "foundation")
DEGREE_KEYWORDS = (
    "bachelor", "master", "phd", "ph.d", "doctorate", "b.tech", "m.tech",
    "b.e", "m.e", "b.s", "m.s", "b.a", "m.a", "b.sc", "m.sc", "bsc", "msc",
    "mba", "bca", "mca", "diploma", "associate degree", "high school", "gpa", "cgpa",
)

CERTIFICATION_PROVIDERS = (
    "certified", "certification", "certificate", "aws", "azure", "coursera",
    "udemy", "edx", "google", "microsoft", "oracle", "cisco", "comptia",
    "linkedin learning", "pmp", "scrum",
)

LANGUAGE_VOCABULARY = (
    "english", "spanish", "french", "german", "chinese", "mandarin", "japanese",
    "korean", "hindi", "arabic", "portuguese", "italian", "russian", "bengali",
    "tamil", "telugu", "marathi", "urdu", "dutch",
)
_LANGUAGE_RE = re.compile(r"\b(" + "|".join(LANGUAGE_VOCABULARY) + r")\b", re.IGNORECASE)


def _push(entries: list[dict], draft: dict) -> None:
    if any(v for k, v in draft.items() if not k.startswith("_")):
        entries.append(draft)


def _public(draft: dict) -> dict:
    return {k: v for k, v in draft.items() if not k.startswith("_")}


def _split_entry_line(line: str) -> dict:
    """Boundary line -> draft with title/company (and duration when present)."""
    draft: dict = {}
    parts = _ENTRY_SPLIT_RE.split(line)
    if len(parts) >= 2:
        draft["title"] = parts[0].strip() or None
        draft["company"] = parts[1].strip() or None
    duration = find_date_range(line)
    if duration:
        draft["duration"] = duration
    return draft


def _strict_entry_line(line: str) -> dict:
    draft = _split_entry_line(line)
    if draft.get("company") and YEAR_RE.search(draft["company"]):
        draft.pop("company")
    return draft


def _is_entry_boundary(line: str) -> bool:
    return " at " in line.lower() or " - " in line or "|" in line


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

def _is_title_case(line: str) -> bool:
    words = [w for w in line.split() if w[0].isalpha()]
    return bool(words) and all(w[0].isupper() for w in words)


def looks_like_company(line: str, next_line: str | None) -> bool:
    """Title-case or all-caps name followed by a location line."""
    if not 10 <= len(line) <= 100:
        return False
    if not (_is_title_case(line) or line.isupper()):
        return False
    if _JOB_TITLE_RE.search(line):
        return False
    return next_line is not None and mentions_location(next_line)


def looks_like_job_title(line: str, next_line: str | None) -> bool:
    if not _JOB_TITLE_RE.search(line) or mentions_location(line):
        return False
    short = len(line.split()) <= 6
    followed_by_year = next_line is not None and bool(YEAR_RE.search(next_line))
    return short or followed_by_year


def _experience_simple(lines: Sequence[str]) -> list[dict]:
    entries: list[dict] = []
    current: dict = {}
    for line in lines:
        if is_date_range_line(line):
            current["duration"] = find_date_range(line)
        elif _is_entry_boundary(line):
            _push(entries, current)
            current = _split_entry_line(line)
        elif len(line) > 10 and not current.get("description"):
            current["description"] = line
    _push(entries, current)
    return entries


def _experience_strict(lines: Sequence[str]) -> list[dict]:
    entries: list[dict] = []
    current: dict = {}
    i = 0
    while i < len(lines):
        line = lines[i]
        next_line = lines[i + 1] if i + 1 < len(lines) else None

        if is_bullet(line):
            text = strip_bullet(line)
            if text:
                current["description"] = " ".join(filter(None, [current.get("description"), text]))
                current["_bullets"] = True
        elif looks_like_company(line, next_line):
            if current.get("company"):
                _push(entries, current)
                current = {}
            current["company"] = line
            # the location line belongs to the company
            i += 1
        elif looks_like_job_title(line, next_line):
            if current.get("title"):
                carried = None if current.get("_bullets") else current.get("company")
                _push(entries, current)
                current = {"company": carried} if carried else {}
            parsed = _strict_entry_line(line) if _is_entry_boundary(line) else {}
            current["title"] = parsed.get("title") or line
            if parsed.get("company"):
                current["company"] = parsed["company"]
            duration = parsed.get("duration") or find_date_range(line)
            if duration:
                current["duration"] = duration
        elif _is_entry_boundary(line) and not is_date_range_line(line):
            _push(entries, current)
            current = _strict_entry_line(line)
        elif find_date_range(line) or YEAR_RE.search(line):
            if not current.get("duration"):
                current["duration"] = find_date_range(line) or line
        elif len(line) > 10 and not current.get("description"):
            current["description"] = line
        i += 1
    _push(entries, current)

    seen: set[tuple[str, str]] = set()
    unique = []
    for entry in entries:
        key = ((entry.get("title") or "").lower(), (entry.get("company") or "").lower())
        if key not in seen:
            seen.add(key)
            unique.append(entry)
    return unique


def extract_experience(lines: Sequence[str], strict: bool = False) -> list[ExperienceEntry]:
    content = section_lines(lines, EXPERIENCE_KEYWORDS, EXPERIENCE_EXIT)
    drafts = _experience_strict(content) if strict else _experience_simple(content)
    return [ExperienceEntry(**_public(d)) for d in drafts]


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

def _projects_simple(lines: Sequence[str]) -> list[dict]:
    projects: list[dict] = []
    current: dict = {}
    for line in lines:
        if len(line) < 50 and (not current.get("name") or current.get("description")):
            _push(projects, current)
            current = {"name": line}
        elif len(line) > 10 and current.get("name") and not current.get("description"):
            current["description"] = line
    _push(projects, current)
    return projects


def _projects_strict(lines: Sequence[str]) -> list[dict]:
    projects: list[dict] = []
    current: dict = {}
    for line in lines:
        bullet = is_bullet(line)
        text = strip_bullet(line) if bullet else line
        if not bullet and ":" in line and 10 <= len(line) <= 100:
            _push(projects, current)
            name, _, rest = line.partition(":")
            current = {"name": name.strip() or None}
            if rest.strip():
                current["description"] = rest.strip()
        elif not bullet and len(line) < 50 and not current.get("name"):
            _push(projects, current)
            current = {"name": line}
        elif text:
            current["description"] = " ".join(filter(None, [current.get("description"), text]))
    _push(projects, current)
    return projects


def extract_projects(lines: Sequence[str], strict: bool = False) -> list[ProjectEntry]:
    """Projects from the projects section, first occurrence of each name kept."""
    content = section_lines(lines, PROJECTS_KEYWORDS, PROJECTS_EXIT)
    drafts = _projects_strict(content) if strict else _projects_simple(content)
    seen: set[str] = set()
    result = []
    for draft in drafts:
        key = (draft.get("name") or "").lower()
        if key in seen:
            continue
        seen.add(key)
        scan_text = " ".join(filter(None, [draft.get("name"), draft.get("description")]))
        result.append(ProjectEntry(**draft, technologies=find_vocabulary_skills(scan_text)))
    return result


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

def _year_of(line: str) -> str | None:
    date_range = find_date_range(line)
    if date_range:
        return date_range
    years = YEAR_RE.findall(line)
    return years[-1] if years else None


def _is_degree(lower: str) -> bool:
    return any(k in lower for k in DEGREE_KEYWORDS) or "%" in lower


def extract_education(lines: Sequence[str], strict: bool = False) -> list[EducationEntry]:
    """Pair institutions with degrees.

    A second institution or a second degree closes the current entry. The
    strict variant also fills ``year`` from year/location lines and from
    years found on institution or degree lines.
    """
    entries: list[dict] = []
    current: dict = {}
    for line in section_lines(lines, EDUCATION_KEYWORDS, EDUCATION_EXIT):
        if len(line) <= 5 and not (strict and YEAR_RE.search(line)):
            continue
        lower = line.lower()
        year = _year_of(line) if strict else None

        if any(k in lower for k in INSTITUTION_KEYWORDS):
            field = "institution"
        elif _is_degree(lower):
            field = "degree"
        elif strict and (year or mentions_location(line)):
            if year and not current.get("year"):
                current["year"] = year
            continue
        else:
            continue

        if current.get(field):
            _push(entries, current)
            current = {}
        current[field] = line
        if year and not current.get("year"):
            current["year"] = year
    _push(entries, current)
    return [EducationEntry(**d) for d in entries]


# ---------------------------------------------------------------------------
# Certifications & languages
# ---------------------------------------------------------------------------

def extract_certifications(lines: Sequence[str], strict: bool = False) -> list[str]:
    certifications = []
    for line in section_lines(lines, CERTIFICATION_KEYWORDS, CERTIFICATION_EXIT):
        if len(line) <= 5:
            continue
        if strict and not (is_bullet(line) or any(p in line.lower() for p in CERTIFICATION_PROVIDERS)):
            continue
        text = strip_bullet(line)
        if text:
            certifications.append(text)
    return dedupe_casefold(certifications)


def extract_languages(lines: Sequence[str]) -> list[str]:
    found = []
    for line in section_lines(lines, LANGUAGE_KEYWORDS, LANGUAGE_EXIT):
        found.extend(match.title() for match in _LANGUAGE_RE.findall(line))
    return dedupe_casefold(found)
