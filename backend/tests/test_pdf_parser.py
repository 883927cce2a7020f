import pytest
from pdfminer.pdfdocument import PDFPasswordIncorrect
from pdfminer.pdfparser import PDFSyntaxError

from services import pdf_parser
from services.errors import ExtractionError
from services.pdf_parser import _classify, extract_bullets, extract_text, is_bullet, strip_bullet


def test_extract_bullets():
    text = """John Doe
Software Engineer

Experience:
• Built REST APIs serving 1M requests/day
- Led team of 5 engineers
* Improved test coverage from 40% to 90%
1. Deployed microservices on Kubernetes

Skills:
Python, JavaScript, Docker
"""
    bullets = extract_bullets(text)
    assert len(bullets) == 4
    assert "Built REST APIs serving 1M requests/day" in bullets
    assert "Led team of 5 engineers" in bullets


def test_extract_bullets_empty():
    assert extract_bullets("") == []
    assert extract_bullets("No bullets here\nJust plain text") == []


def test_extract_bullets_unicode_markers():
    text = "◆ Designed CI/CD pipeline\n■ Automated testing process\n→ Reduced deploy time"
    bullets = extract_bullets(text)
    assert len(bullets) == 3
    assert "Designed CI/CD pipeline" in bullets


def test_extract_bullets_two_digit_numbered():
    text = "10. Managed Kubernetes cluster\n12. Wrote integration tests"
    bullets = extract_bullets(text)
    assert len(bullets) == 2


def test_bullet_helpers():
    assert is_bullet("  • Shipped it")
    assert not is_bullet("Shipped it")
    assert not is_bullet("   ")
    assert strip_bullet("▪  Shipped it ") == "Shipped it"


# --- Text extraction ---


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakePdf:
    def __init__(self, texts):
        self.pages = [_FakePage(t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_extract_text_joins_pages(monkeypatch):
    monkeypatch.setattr(pdf_parser.pdfplumber, "open", lambda stream: _FakePdf(["Page one", None, "Page two\n"]))
    assert extract_text(b"%PDF-fake") == "Page one\n\nPage two"


def test_extract_text_image_only_pdf(monkeypatch):
    monkeypatch.setattr(pdf_parser.pdfplumber, "open", lambda stream: _FakePdf([None, ""]))
    assert extract_text(b"%PDF-fake") == ""


def test_extract_text_rejects_garbage():
    with pytest.raises(ExtractionError) as exc_info:
        extract_text(b"definitely not a pdf")
    assert exc_info.value.reason == "invalid-format"


def test_extract_text_encrypted(monkeypatch):
    def encrypted(stream):
        raise PDFPasswordIncorrect()

    monkeypatch.setattr(pdf_parser.pdfplumber, "open", encrypted)
    with pytest.raises(ExtractionError) as exc_info:
        extract_text(b"%PDF-fake")
    assert exc_info.value.reason == "encrypted"
    assert isinstance(exc_info.value.__cause__, PDFPasswordIncorrect)


@pytest.mark.parametrize(
    "exc, reason",
    [
        (PDFSyntaxError("No /Root object!"), "invalid-format"),
        (PDFPasswordIncorrect(), "encrypted"),
        (RuntimeError(PDFSyntaxError("bad xref")), "invalid-format"),
        (RuntimeError("PDF is encrypted"), "encrypted"),
        (RuntimeError("Unexpected EOF"), "invalid-format"),
        (RuntimeError("something else"), "unknown"),
    ],
)
def test_classify(exc, reason):
    assert _classify(exc) == reason
