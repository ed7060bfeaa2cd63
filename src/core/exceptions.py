"""
Review Assistant exception hierarchy.

All application-specific exceptions inherit from ReviewAssistantError,
so the UI layer can render any of them with a single ``except`` clause.
"""

from datetime import UTC, datetime


class ReviewAssistantError(Exception):
    """Base exception for all Review Assistant errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "REVIEW_ASSISTANT_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class MissingAPIKeyError(ReviewAssistantError):
    """Raised when a generation is attempted without a user API key."""

    def __init__(self, detail: str = "Please enter your API key.") -> None:
        super().__init__(detail=detail, code="MISSING_API_KEY")


class TranscriptionError(ReviewAssistantError):
    """Raised when the transcription endpoint fails."""

    def __init__(self, detail: str = "Transcription failed") -> None:
        super().__init__(detail=detail, code="TRANSCRIPTION_ERROR")


class ReviewGenerationError(ReviewAssistantError):
    """Raised when the review or self-review endpoint fails."""

    def __init__(self, detail: str = "Review generation failed") -> None:
        super().__init__(detail=detail, code="REVIEW_GENERATION_ERROR")
