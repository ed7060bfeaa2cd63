"""
Generated review display components.
"""

import streamlit as st

from src.core.models import ReviewItem
from src.core.utils import format_review_text


def render_review_item(item: ReviewItem) -> None:
    """Render a single question/answer pair as a bordered card."""
    with st.container(border=True):
        st.markdown(f"**{item.question}**")
        st.write(item.answer)


def render_review_list(items: list[ReviewItem]) -> None:
    """Render the generated review, or nothing when there is none yet."""
    if not items:
        return

    st.subheader("Generated Review")
    st.caption(f"{len(items)} question(s)")
    for item in items:
        render_review_item(item)

    with st.expander("Copy as text"):
        text = format_review_text(items)
        st.code(text, language=None)
