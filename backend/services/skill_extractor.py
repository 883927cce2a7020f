"""Vocabulary-based technical skill extraction.

Two passes, merged:
1. Tokens inside the skills section that exactly match the vocabulary
   (original casing kept).
2. A whole-document substring scan against the same vocabulary, so skills
   mentioned only in body text are still found.
"""

import re
from collections.abc import Iterable, Sequence

from services.section_parser import SKILLS_EXIT, SKILLS_KEYWORDS, section_lines

# Scan order is significant: document-scan hits are appended in this order.
TECH_SKILLS: tuple[str, ...] = (
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "php", "ruby",
    "go", "rust", "kotlin", "swift",
    # Frameworks
    "react", "angular", "vue", "node.js", "next.js", "express", "django",
    "flask", "fastapi", "spring", "laravel", "flutter",
    # Frontend
    "html", "css", "sass", "scss", "tailwind", "bootstrap",
    # Data stores
    "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "sqlite",
    "firebase", "kafka", "graphql",
    # Cloud & DevOps
    "aws", "azure", "google cloud", "docker", "kubernetes", "jenkins",
    "terraform", "linux",
    # Version control
    "git", "github", "gitlab", "svn",
    # Data & ML
    "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy", "tableau",
    "power bi",
    # Testing & tools
    "selenium", "pytest", "jira",
    # Design
    "figma", "sketch", "photoshop", "illustrator",
)
_TECH_SKILL_SET: frozenset[str] = frozenset(TECH_SKILLS)

# Comma, bullets, dash, pipe, tab, newline
_SKILL_SEPARATORS_RE = re.compile(r"[,•·\-|\n\t]+")


def extract_skills_from_line(line: str) -> list[str]:
    """Tokens of one line that are exact (case-insensitive) vocabulary hits."""
    tokens = (t.strip() for t in _SKILL_SEPARATORS_RE.split(line))
    return [t for t in tokens if t and t.lower() in _TECH_SKILL_SET]


def find_vocabulary_skills(text: str) -> list[str]:
    """Vocabulary entries occurring anywhere in text (substring match)."""
    lower = text.lower()
    return [skill for skill in TECH_SKILLS if skill in lower]


def dedupe_casefold(items: Iterable[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first spelling."""
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def extract_skills(text: str, lines: Sequence[str]) -> list[str]:
    """Skills from the skills section plus any vocabulary hit in the whole text."""
    section_skills: list[str] = []
    for line in section_lines(lines, SKILLS_KEYWORDS, SKILLS_EXIT):
        section_skills.extend(extract_skills_from_line(line))

    return dedupe_casefold(section_skills + find_vocabulary_skills(text))
