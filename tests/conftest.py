"""Shared pytest fixtures for the Review Assistant test suite.

Provides a mock review client, fresh session state, and small WAV
recordings used across unit tests.
"""

import io
import math
import struct
import wave
from unittest.mock import MagicMock

import pytest

from src.core.models import (
    ReviewItem,
    ReviewResponse,
    SelfReviewResponse,
    TranscriptionResponse,
)

# ---------------------------------------------------------------------------
# Client Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_client():
    """Create a mock review client with successful default responses.

    Returns:
        MagicMock: Implements ``generate_review``, ``generate_self_review``
        and ``transcribe_audio_blob``.
    """
    client = MagicMock()
    client.generate_review.return_value = ReviewResponse(
        review=[ReviewItem(question="Strengths?", answer="Ships on time.")]
    )
    client.generate_self_review.return_value = SelfReviewResponse(
        self_review=[ReviewItem(question="Q1", answer="A1")]
    )
    client.transcribe_audio_blob.return_value = TranscriptionResponse(
        transcribed_text=" on time."
    )
    return client


# ---------------------------------------------------------------------------
# Session Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def session():
    """A fresh ReviewSession with a user API key already entered."""
    from src.services.orchestrator import ReviewSession

    s = ReviewSession()
    s.form.user_api_key = "sk-test"
    return s


@pytest.fixture
def passthrough_processor():
    """An AudioProcessor stand-in that uploads bytes unchanged."""
    processor = MagicMock()
    processor.to_upload_wav.side_effect = lambda audio: audio
    return processor


@pytest.fixture
def orchestrator(mock_client, session, passthrough_processor):
    """ReviewOrchestrator wired to the mock client, collecting notifications."""
    from src.services.orchestrator import ReviewOrchestrator

    notices: list[str] = []
    orch = ReviewOrchestrator(
        mock_client,
        session,
        notify=notices.append,
        processor=passthrough_processor,
    )
    orch.notices = notices  # expose for assertions
    return orch


# ---------------------------------------------------------------------------
# Audio Fixtures
# ---------------------------------------------------------------------------


def _wav_bytes(sample_rate: int, channels: int, duration: float = 1.0) -> bytes:
    """Encode a 440Hz sine wave as a 16-bit WAV file in memory."""
    frames = []
    for i in range(int(sample_rate * duration)):
        value = int(16000 * math.sin(2 * math.pi * 440.0 * i / sample_rate))
        frames.append(struct.pack("<h", value) * channels)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(b"".join(frames))
    return buf.getvalue()


@pytest.fixture
def wav_16k_mono():
    """One second of 16 kHz mono WAV audio."""
    return _wav_bytes(16000, 1)


@pytest.fixture
def wav_44k_stereo():
    """One second of 44.1 kHz stereo WAV audio, as browsers often record."""
    return _wav_bytes(44100, 2)
