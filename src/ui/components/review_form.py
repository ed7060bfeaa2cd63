"""
Review form components — one input group per review type.
"""

import streamlit as st

from src.services.orchestrator import ReviewForm
from src.ui.components.widget_state import bind


def render_performance_form(form: ReviewForm) -> bool:
    """Render the performance-review inputs. Returns True when submitted."""
    form.your_role = st.text_input(
        "Your Role",
        key=bind(form, "your_role"),
        placeholder="Please enter your role",
    )
    form.candidate_role = st.text_input(
        "Candidate Role",
        key=bind(form, "candidate_role"),
        placeholder="Please enter candidate role",
    )
    form.perf_question = st.text_area(
        "Performance Review Questions (one per line)",
        key=bind(form, "perf_question"),
        placeholder="Please enter questions...",
        height=120,
    )
    form.your_review = st.text_area(
        "Your Review",
        key=bind(form, "your_review"),
        placeholder="Please enter your review...",
        height=120,
    )
    return st.button(
        "Generate Performance Review",
        key="generate_review",
        type="primary",
        use_container_width=True,
    )


def render_self_review_form(form: ReviewForm) -> bool:
    """Render the self-review inputs. Returns True when submitted."""
    form.text_dump = st.text_area(
        "Text Dump (information about your performance)",
        key=bind(form, "text_dump"),
        height=120,
    )
    form.questions = st.text_area(
        "Questions to Answer in Self-Review (one per line)",
        key=bind(form, "questions"),
        height=120,
    )
    form.instructions = st.text_area(
        "Additional Instructions (optional)",
        key=bind(form, "instructions"),
        height=120,
    )
    return st.button(
        "Generate Self-Review",
        key="generate_self_review",
        type="primary",
        use_container_width=True,
    )
