"""Resume line segmentation, section scanning, and contact extraction."""

import re
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

from models.schemas.parsed_resume import PersonalInfo

# ---------------------------------------------------------------------------
# Section header keywords (substring, case-insensitive)
# ---------------------------------------------------------------------------

SKILLS_KEYWORDS = ("skills", "technical skills", "technologies", "expertise", "competencies")
EXPERIENCE_KEYWORDS = ("experience", "work history", "employment", "professional experience")
PROJECTS_KEYWORDS = ("projects", "personal projects", "key projects", "notable projects")
EDUCATION_KEYWORDS = ("education", "academic background", "qualifications")
CERTIFICATION_KEYWORDS = ("certifications", "certificates", "licenses & certifications")
LANGUAGE_KEYWORDS = ("languages", "language skills")

# Headers of *other* sections that close each section
SKILLS_EXIT = ("experience", "education", "projects", "work history", "employment")
EXPERIENCE_EXIT = ("education", "projects", "skills")
PROJECTS_EXIT = ("education", "experience", "skills")
EDUCATION_EXIT = ("experience", "projects", "skills")
CERTIFICATION_EXIT = ("education", "experience", "skills")
LANGUAGE_EXIT = ("education", "experience", "skills")


def split_lines(text: str) -> list[str]:
    """Split raw text into non-empty, trimmed lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


class ScanState(str, Enum):
    BEFORE = "before"
    IN_SECTION = "in_section"
    DONE = "done"


class SectionScanner:
    """Single forward pass over lines for one resume section.

    BEFORE -> IN_SECTION on an entry-keyword line, IN_SECTION -> DONE on an
    exit-keyword line. DONE is terminal, so a repeated header later in the
    document never re-opens the section. Header lines inside the section
    are skipped. Entry is tested before exit.
    """

    def __init__(self, entry_keywords: Iterable[str], exit_keywords: Iterable[str]) -> None:
        self.entry_keywords = tuple(k.lower() for k in entry_keywords)
        self.exit_keywords = tuple(k.lower() for k in exit_keywords)
        self.state = ScanState.BEFORE

    def _is_header(self, lower: str) -> bool:
        return any(k in lower for k in self.entry_keywords)

    def _is_exit(self, lower: str) -> bool:
        return any(k in lower for k in self.exit_keywords)

    def feed(self, line: str) -> bool:
        """Advance on one line. Returns True if the line is section content."""
        if self.state is ScanState.DONE:
            return False
        lower = line.lower()
        if self._is_header(lower):
            self.state = ScanState.IN_SECTION
            return False
        if self.state is ScanState.IN_SECTION and self._is_exit(lower):
            self.state = ScanState.DONE
            return False
        return self.state is ScanState.IN_SECTION

    def scan(self, lines: Sequence[str]) -> Iterator[tuple[int, str]]:
        """Yield (index, line) for every content line of the section."""
        for i, line in enumerate(lines):
            if self.feed(line):
                yield i, line
            elif self.state is ScanState.DONE:
                return


def section_lines(
    lines: Sequence[str], entry_keywords: Iterable[str], exit_keywords: Iterable[str]
) -> list[str]:
    """Content lines of the first section introduced by entry_keywords."""
    return [line for _, line in SectionScanner(entry_keywords, exit_keywords).scan(lines)]


# ---------------------------------------------------------------------------
# Contact info
# ---------------------------------------------------------------------------

EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
PHONE_RE = re.compile(r"\+?[\d\s\-()]{10,}")
CITY_STATE_RE = re.compile(r"^[A-Z][A-Za-z .'-]+,\s*[A-Z]{2}$")

KNOWN_LOCATIONS: frozenset[str] = frozenset({
    # Cities
    "new york", "san francisco", "los angeles", "seattle", "austin", "boston",
    "chicago", "denver", "atlanta", "dallas", "houston", "san jose", "portland",
    "toronto", "vancouver", "london", "berlin", "paris", "amsterdam", "dublin",
    "bangalore", "bengaluru", "hyderabad", "pune", "chennai", "mumbai", "delhi",
    "new delhi", "noida", "gurgaon", "gurugram", "kolkata", "singapore",
    "sydney", "melbourne", "tokyo", "dubai",
    # Countries
    "usa", "united states", "canada", "india", "germany", "france",
    "united kingdom", "uk", "australia", "netherlands", "ireland", "japan",
    # US states
    "california", "texas", "washington", "massachusetts", "illinois",
    "colorado", "georgia", "florida", "oregon", "virginia", "new jersey",
    # Work arrangement
    "remote",
})

_LOCATION_WORD_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(loc) for loc in sorted(KNOWN_LOCATIONS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)
_SEGMENT_SPLIT_RE = re.compile(r"[|•·]")


def _first_phone(line: str) -> str | None:
    for match in PHONE_RE.finditer(line):
        if len(re.sub(r"\D", "", match.group())) >= 10:
            return match.group().strip()
    return None


def mentions_location(text: str) -> bool:
    """True if text names a known city/country/state or looks like 'City, ST'."""
    stripped = text.strip()
    return bool(_LOCATION_WORD_RE.search(stripped) or CITY_STATE_RE.match(stripped))


def _location_in(line: str) -> str | None:
    for segment in _SEGMENT_SPLIT_RE.split(line):
        segment = segment.strip()
        if not segment or len(segment.split()) > 5:
            continue
        if "@" in segment or re.search(r"\d", segment):
            continue
        if mentions_location(segment):
            return segment
    return None


def _looks_like_name(line: str) -> bool:
    lower = line.lower()
    return (
        len(line) > 2
        and not EMAIL_RE.search(line)
        and not PHONE_RE.search(line)
        and "resume" not in lower
        and "cv" not in lower
        and len(line.split(" ")) <= 4
    )


def extract_personal_info(lines: Sequence[str]) -> PersonalInfo:
    """First email, phone, name-like line and location over the whole document."""
    email = next((m.group() for m in map(EMAIL_RE.search, lines) if m), None)
    phone = next((p for p in map(_first_phone, lines) if p), None)
    name = next((line for line in lines if _looks_like_name(line)), None)
    location = next((loc for loc in map(_location_in, lines) if loc), None)
    return PersonalInfo(name=name, email=email, phone=phone, location=location)


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "March 2018 – Nov 2022"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_RANGE_RE = re.compile(
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}})"
    r"\s*(?:[-–—]|to)\s*"
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}}|[Pp]resent|[Cc]urrent)",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def find_date_range(line: str) -> str | None:
    match = DATE_RANGE_RE.search(line)
    return match.group().strip() if match else None


def is_date_range_line(line: str) -> bool:
    """True when the whole line is a date range, e.g. 'Jan 2020 - Present'."""
    match = DATE_RANGE_RE.search(line)
    return bool(match) and not DATE_RANGE_RE.sub("", line).strip(" ()|,")
