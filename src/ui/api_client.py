"""
Synchronous HTTP client for the external review-generation API.

Uses ``httpx.Client`` (sync) because Streamlit scripts run synchronously.
"""

import logging

import httpx
import streamlit as st
from pydantic import BaseModel, ValidationError
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.core.config import get_settings
from src.core.models import (
    ReviewRequest,
    ReviewResponse,
    SelfReviewRequest,
    SelfReviewResponse,
    TranscriptionResponse,
)

logger = logging.getLogger(__name__)


class APIError(Exception):
    """User-friendly API error with categorized message.

    Categories: "connection", "timeout", "http", "network", "decode", "unknown".
    Used by the UI to display appropriate error messages.
    """

    def __init__(self, message: str, category: str = "unknown") -> None:
        self.message = message
        self.category = category
        super().__init__(message)


class APIClient:
    """Thin synchronous wrapper around httpx for calling the review backend.

    Failures to establish a connection are retried with exponential backoff.
    Read timeouts and HTTP status errors are returned on the first attempt,
    since the POST may already be running on the backend.
    All public methods return validated pydantic models or raise ``APIError``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float | None = None,
        retry_attempts: int | None = None,
        retry_wait: float = 1.0,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Base URL of the review backend.
            timeout: Default request timeout in seconds (settings value if None).
            retry_attempts: Total attempts for retryable failures (settings value if None).
            retry_wait: Multiplier for the exponential backoff between attempts.
        """
        settings = get_settings()
        self._settings = settings
        self._base_url = base_url.rstrip("/")
        self._retry_attempts = (
            settings.retry_attempts if retry_attempts is None else retry_attempts
        )
        self._retry_wait = retry_wait
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=settings.request_timeout if timeout is None else timeout,
        )

    def _send(self, method: str, path: str, attempts: int, **kwargs) -> httpx.Response:
        """Issue the request, retrying failures to connect up to ``attempts`` times."""
        retrying = Retrying(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(multiplier=self._retry_wait, max=8),
            retry=retry_if_exception_type((httpx.ConnectError, httpx.ConnectTimeout)),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(
                        "Retrying %s %s (attempt %d/%d)",
                        method.upper(),
                        path,
                        attempt.retry_state.attempt_number,
                        attempts,
                    )
                resp = getattr(self._client, method)(path, **kwargs)
                resp.raise_for_status()
        return resp

    def _request(
        self, method: str, path: str, attempts: int | None = None, **kwargs
    ) -> httpx.Response:
        """Execute an HTTP request with user-friendly error handling.

        Args:
            method: HTTP method name ("get", "post").
            path: API endpoint path (e.g. "/generate_review").
            attempts: Total attempts for connect failures (client default if None).
            **kwargs: Passed through to httpx (json, data, files, timeout, etc.).

        Returns:
            The httpx Response object with a successful status code.

        Raises:
            APIError: On connection, timeout, HTTP status, or network errors.
        """
        try:
            if attempts is None:
                attempts = self._retry_attempts
            return self._send(method, path, attempts, **kwargs)
        except httpx.ConnectError:
            raise APIError(
                f"Review service is not reachable at {self._base_url}.",
                category="connection",
            ) from None
        except httpx.TimeoutException:
            raise APIError(
                "Request timed out. The review service may be overloaded.",
                category="timeout",
            ) from None
        except httpx.HTTPStatusError as exc:
            try:
                detail = exc.response.json().get("detail", exc.response.text)
            except Exception:
                detail = exc.response.text or str(exc)
            raise APIError(str(detail), category="http") from None
        except httpx.HTTPError as exc:
            raise APIError(f"Network error: {exc}", category="network") from None

    def _parse(self, resp: httpx.Response, model: type[BaseModel]) -> BaseModel:
        """Decode a JSON body into ``model``, mapping failures to ``APIError``."""
        try:
            return model.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Unexpected response from review service: %s", exc)
            raise APIError(
                "The review service returned an unexpected response.",
                category="decode",
            ) from None

    # -- health --

    def health_check(self) -> dict:
        """Single short GET; the sidebar calls this on every rerun."""
        return self._request(
            "get",
            self._settings.health_path,
            attempts=1,
            timeout=self._settings.health_timeout,
        ).json()

    def check_connection(self) -> tuple[bool, str]:
        """Check if the backend is reachable. Returns (ok, message)."""
        try:
            self.health_check()
            return True, "Connected"
        except APIError as exc:
            return False, exc.message
        except ValueError:
            return False, "Health endpoint returned a non-JSON response"

    # -- reviews --

    def generate_review(self, request: ReviewRequest) -> ReviewResponse:
        resp = self._request(
            "post", self._settings.review_path, json=request.model_dump()
        )
        return self._parse(resp, ReviewResponse)

    def generate_self_review(self, request: SelfReviewRequest) -> SelfReviewResponse:
        resp = self._request(
            "post", self._settings.self_review_path, json=request.model_dump()
        )
        return self._parse(resp, SelfReviewResponse)

    # -- transcription --

    def transcribe_audio_blob(
        self, audio: bytes, groq_api_key: str
    ) -> TranscriptionResponse:
        """Upload a WAV recording as multipart form data for speech-to-text."""
        resp = self._request(
            "post",
            self._settings.transcribe_path,
            files={"file": ("audio.wav", audio, "audio/wav")},
            data={"groq_api_key": groq_api_key},
            timeout=self._settings.transcription_timeout,
        )
        return self._parse(resp, TranscriptionResponse)


@st.cache_resource
def get_api_client(base_url: str = "http://localhost:8000") -> APIClient:
    """Return a cached APIClient, keyed by base_url.

    Uses Streamlit's ``cache_resource`` to persist the client across reruns.
    When the base URL changes (e.g. user updates sidebar), a new client
    is created automatically because the cache key includes the parameter.
    """
    return APIClient(base_url=base_url)
