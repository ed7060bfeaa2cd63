"""
Recorder component — optional audio review captured in the browser.

``st.audio_input`` provides the start/stop controls and playback. Each new
recording is handed to the orchestrator once; later reruns that still see
the same widget value are ignored.
"""

import hashlib
import logging

import streamlit as st

from src.services.orchestrator import ReviewOrchestrator

logger = logging.getLogger(__name__)

_DIGEST_KEY = "_last_audio_digest"


def render_recorder(orchestrator: ReviewOrchestrator) -> None:
    """Render the recorder and the read-only transcription preview."""
    audio = st.audio_input("Record Audio Review (optional)")

    if audio is not None:
        audio_bytes = audio.getvalue()
        digest = hashlib.sha1(audio_bytes).hexdigest()
        if st.session_state.get(_DIGEST_KEY) != digest:
            st.session_state[_DIGEST_KEY] = digest
            logger.info("New recording captured (%d bytes)", len(audio_bytes))
            with st.spinner("Transcribing audio..."):
                orchestrator.on_recording_stopped(audio_bytes)

    transcription = orchestrator.session.transcription
    if transcription:
        st.text_area(
            "Transcribed Text",
            value=transcription,
            height=120,
            disabled=True,
        )
