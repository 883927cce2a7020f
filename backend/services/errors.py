"""Error taxonomy shared by extraction, backends, and the API layer."""

from typing import Literal

ExtractionFailureReason = Literal["invalid-format", "encrypted", "unknown"]


class EmptyInputError(ValueError):
    """The whole document text is empty or whitespace-only."""

    def __init__(self, message: str = "Empty text provided for parsing") -> None:
        super().__init__(message)


class PartialExtractionFailure(Exception):
    """One field extractor raised; the field keeps its empty default."""

    def __init__(self, field: str, cause: BaseException) -> None:
        super().__init__(f"{field} extraction failed: {cause}")
        self.field = field
        self.cause = cause


class ExtractionError(Exception):
    """PDF bytes could not be turned into text."""

    def __init__(self, reason: ExtractionFailureReason, message: str = "") -> None:
        super().__init__(message or f"PDF parsing failed ({reason})")
        self.reason = reason


class BackendError(Exception):
    """Base class for generative backend failures."""


class BackendUnavailable(BackendError):
    """Backend unconfigured, unreachable, erroring, or returned empty text."""


class BackendMalformedOutput(BackendError):
    """Backend returned text that could not be reconciled into a result."""
