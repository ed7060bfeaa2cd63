"""
Sidebar component — review type, LLM selection, and API keys.
"""

import streamlit as st

from src.core.config import get_settings
from src.core.models import ReviewType
from src.services.orchestrator import ReviewForm
from src.ui.api_client import get_api_client
from src.ui.components.widget_state import bind


def render_sidebar(form: ReviewForm) -> None:
    """Render configuration controls and write the selections into ``form``."""
    settings = get_settings()

    with st.sidebar:
        st.title("Review Assistant")
        st.caption("Turn rough notes into a structured review")
        st.divider()

        form.review_type = st.radio(
            "Review Type",
            list(ReviewType),
            key=bind(form, "review_type"),
            format_func=lambda t: t.value,
        )

        form.llm_type = st.selectbox(
            "LLM Type",
            settings.llm_types,
            key=bind(form, "llm_type"),
        )
        form.model_size = st.selectbox(
            "Model Size",
            settings.model_sizes,
            key=bind(form, "model_size"),
        )

        form.user_api_key = st.text_input(
            "API Key",
            key=bind(form, "user_api_key"),
            type="password",
            help="Key for the selected LLM provider.",
        )
        form.groq_api_key = st.text_input(
            "Groq API Key (for transcription)",
            key=bind(form, "groq_api_key"),
            type="password",
            help="Only needed when recording an audio review.",
        )

        st.divider()
        st.text_input(
            "Review API URL",
            key="api_base_url",
            help=f"URL of the review backend (default: {settings.review_api_base_url})",
        )

        # Connection status indicator
        client = get_api_client(st.session_state.api_base_url)
        conn_ok, conn_msg = client.check_connection()
        if conn_ok:
            st.success(f"Backend: {conn_msg}")
        else:
            st.error(f"Backend: {conn_msg}")
