import io
import logging
import re

import pdfplumber
from pdfminer.pdfdocument import PDFEncryptionError, PDFPasswordIncorrect
from pdfminer.pdfparser import PDFSyntaxError

from services.errors import ExtractionError, ExtractionFailureReason

logger = logging.getLogger(__name__)

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")
_BULLET_CHARS = "".join(BULLET_MARKERS)
_NUMBERED_RE = re.compile(r"^\d{1,2}[.)]\s")


def _classify(exc: BaseException) -> ExtractionFailureReason:
    """Map a pdfplumber/pdfminer failure onto an extraction reason."""
    # pdfplumber wraps pdfminer errors; look at the wrapped exception as well
    candidates = [exc, exc.__cause__, *(a for a in exc.args if isinstance(a, BaseException))]
    for candidate in candidates:
        if isinstance(candidate, (PDFPasswordIncorrect, PDFEncryptionError)):
            return "encrypted"
        if isinstance(candidate, PDFSyntaxError):
            return "invalid-format"

    message = str(exc).lower()
    if "encrypt" in message or "password" in message:
        return "encrypted"
    if "invalid pdf" in message or "no /root" in message or "eof" in message:
        return "invalid-format"
    return "unknown"


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file.

    Raises ExtractionError with reason invalid-format, encrypted or unknown.
    """
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        reason = _classify(e)
        logger.warning("PDF text extraction failed (%s): %s", reason, e)
        raise ExtractionError(reason, f"PDF parsing failed: {e}") from e

    text = "\n".join(pages).strip()
    logger.info("PDF parsed successfully, text length: %d", len(text))
    return text


def is_bullet(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and stripped[0] in BULLET_MARKERS


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker (and following spaces) from a line."""
    return line.strip().lstrip(_BULLET_CHARS + " ").strip()


def extract_bullets(text: str) -> list[str]:
    """Extract bullet-point lines from resume text."""
    bullets = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        # Match lines starting with bullet markers
        if stripped[0] in BULLET_MARKERS:
            cleaned = strip_bullet(stripped)
            if cleaned:
                bullets.append(cleaned)
        # Numbered bullets: "1.", "12.", "1)", "12)"
        elif _NUMBERED_RE.match(stripped):
            cleaned = re.sub(r"^\d{1,2}[.)]\s*", "", stripped).strip()
            if cleaned:
                bullets.append(cleaned)
    return bullets
