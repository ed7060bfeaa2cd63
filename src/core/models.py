"""
Pydantic v2 request / response models for the external review API.

Request models mirror the JSON bodies the backend expects; response models
validate what comes back before it reaches session state.
"""

from enum import StrEnum

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Review type
# ---------------------------------------------------------------------------


class ReviewType(StrEnum):
    """The two form modes offered in the sidebar."""

    performance = "Performance Review"
    self_review = "Self Review"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ReviewRequest(BaseModel):
    """POST /generate_review request body (reviewing someone else)."""

    your_role: str = ""
    candidate_role: str = ""
    perf_question: str = ""
    your_review: str = ""
    llm_type: str
    user_api_key: str
    model_size: str


class SelfReviewRequest(BaseModel):
    """POST /generate_self_review request body."""

    text_dump: str = ""
    questions: list[str] = Field(default_factory=list)
    instructions: str | None = None
    llm_type: str
    user_api_key: str
    model_size: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ReviewItem(BaseModel):
    """A single generated question/answer pair."""

    question: str
    answer: str


class ReviewResponse(BaseModel):
    """POST /generate_review response."""

    review: list[ReviewItem]


class SelfReviewResponse(BaseModel):
    """POST /generate_self_review response."""

    self_review: list[ReviewItem]


class TranscriptionResponse(BaseModel):
    """POST /transcribe_audio response."""

    transcribed_text: str
