"""Review submission orchestrator.

Owns the per-browser-session form state and sequences the optional
transcription step before a review-generation call. Nothing here touches
Streamlit, so the whole flow can run under plain pytest.

Usage::

    from src.services.orchestrator import ReviewOrchestrator, ReviewSession

    session = ReviewSession()
    orchestrator = ReviewOrchestrator(client, session, notify=st.warning)
    orchestrator.on_recording_stopped(audio_bytes)
    items = orchestrator.submit_review(ReviewType.performance)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from src.core.config import get_settings
from src.core.exceptions import (
    MissingAPIKeyError,
    ReviewAssistantError,
    ReviewGenerationError,
    TranscriptionError,
)
from src.core.models import (
    ReviewItem,
    ReviewRequest,
    ReviewResponse,
    ReviewType,
    SelfReviewRequest,
    SelfReviewResponse,
    TranscriptionResponse,
)
from src.core.utils import split_questions
from src.services.audio import AudioProcessor
from src.ui.api_client import APIError

logger = logging.getLogger(__name__)


class ReviewClient(Protocol):
    """The subset of ``APIClient`` the orchestrator depends on."""

    def generate_review(self, request: ReviewRequest) -> ReviewResponse: ...

    def generate_self_review(self, request: SelfReviewRequest) -> SelfReviewResponse: ...

    def transcribe_audio_blob(
        self, audio: bytes, groq_api_key: str
    ) -> TranscriptionResponse: ...


@dataclass
class ReviewForm:
    """Every value the sidebar and the main form collect."""

    review_type: ReviewType = ReviewType.performance
    llm_type: str = "openai"
    model_size: str = "small"
    user_api_key: str = ""
    groq_api_key: str = ""

    # Performance review
    your_role: str = ""
    candidate_role: str = ""
    perf_question: str = ""
    your_review: str = ""

    # Self review
    text_dump: str = ""
    questions: str = ""
    instructions: str = ""

    @classmethod
    def from_settings(cls) -> "ReviewForm":
        settings = get_settings()
        return cls(llm_type=settings.default_llm_type, model_size=settings.default_model_size)


@dataclass
class ReviewSession:
    """State held for one browser session between Streamlit reruns."""

    form: ReviewForm = field(default_factory=ReviewForm.from_settings)
    review: list[ReviewItem] = field(default_factory=list)
    transcription: str = ""
    audio_blob: bytes | None = None
    last_error: str | None = None


class ReviewOrchestrator:
    """Runs transcription and review generation against a ``ReviewClient``.

    Args:
        client: HTTP client for the review backend.
        session: Mutable session state to read the form from and write results to.
        notify: Callback for non-blocking user warnings (e.g. ``st.warning``).
        processor: Audio normaliser applied before upload.
    """

    def __init__(
        self,
        client: ReviewClient,
        session: ReviewSession,
        notify: Callable[[str], None] | None = None,
        processor: AudioProcessor | None = None,
    ) -> None:
        self._client = client
        self.session = session
        self._notify = notify or (lambda _message: None)
        self._processor = processor or AudioProcessor(get_settings().upload_sample_rate)

    # -- audio --

    def on_recording_stopped(self, audio_blob: bytes) -> str:
        """Store a finished recording and transcribe it for preview."""
        self.session.audio_blob = audio_blob
        return self.transcribe_audio()

    def transcribe_audio(self) -> str:
        """Transcribe the stored blob, replacing the current transcription.

        Returns an empty string without calling the backend when there is no
        blob or no Groq API key, and when the transcription call fails.
        """
        blob = self.session.audio_blob
        groq_api_key = self.session.form.groq_api_key
        if not blob or not groq_api_key:
            self._notify("Please provide an audio recording and Groq API key.")
            return ""

        try:
            result = self._transcribe(blob, groq_api_key)
        except TranscriptionError as exc:
            self._notify(f"Transcription failed: {exc.detail}")
            return ""

        self.session.transcription = result
        return result

    def _transcribe(self, blob: bytes, groq_api_key: str) -> str:
        try:
            response = self._client.transcribe_audio_blob(
                self._processor.to_upload_wav(blob), groq_api_key
            )
        except APIError as exc:
            logger.error("Error transcribing audio (%s): %s", exc.category, exc.message)
            raise TranscriptionError(exc.message) from exc
        logger.info("Transcribed %d characters of audio", len(response.transcribed_text))
        return response.transcribed_text

    # -- submission --

    def submit_review(self, mode: ReviewType) -> list[ReviewItem]:
        """Generate a review for ``mode`` and replace the displayed review list.

        Raises:
            MissingAPIKeyError: No user API key; nothing is sent.
            ReviewGenerationError: The backend call failed; the previous
                review list is kept.
        """
        session = self.session
        if not session.form.user_api_key:
            raise MissingAPIKeyError()

        try:
            transcribed_text = ""
            if session.audio_blob:
                transcribed_text = self.transcribe_audio()
                # The blob is consumed by exactly one submission
                session.audio_blob = None

            if mode == ReviewType.performance:
                items = self._generate_review(transcribed_text)
            else:
                items = self._generate_self_review(transcribed_text)
        except ReviewAssistantError as exc:
            session.last_error = exc.detail
            raise

        session.review = items
        session.last_error = None
        return items

    def build_review_request(self, transcribed_text: str = "") -> ReviewRequest:
        form = self.session.form
        return ReviewRequest(
            your_role=form.your_role,
            candidate_role=form.candidate_role,
            perf_question=form.perf_question,
            your_review=form.your_review + transcribed_text,
            llm_type=form.llm_type,
            user_api_key=form.user_api_key,
            model_size=form.model_size,
        )

    def build_self_review_request(self, transcribed_text: str = "") -> SelfReviewRequest:
        form = self.session.form
        return SelfReviewRequest(
            text_dump=form.text_dump + transcribed_text,
            questions=split_questions(form.questions),
            instructions=form.instructions or None,
            llm_type=form.llm_type,
            user_api_key=form.user_api_key,
            model_size=form.model_size,
        )

    def _generate_review(self, transcribed_text: str) -> list[ReviewItem]:
        request = self.build_review_request(transcribed_text)
        try:
            response = self._client.generate_review(request)
        except APIError as exc:
            logger.error("Error generating review (%s): %s", exc.category, exc.message)
            raise ReviewGenerationError(exc.message) from exc
        logger.info("Generated performance review with %d items", len(response.review))
        return response.review

    def _generate_self_review(self, transcribed_text: str) -> list[ReviewItem]:
        request = self.build_self_review_request(transcribed_text)
        try:
            response = self._client.generate_self_review(request)
        except APIError as exc:
            logger.error("Error generating self-review (%s): %s", exc.category, exc.message)
            raise ReviewGenerationError(exc.message) from exc
        logger.info("Generated self-review with %d items", len(response.self_review))
        return response.self_review
