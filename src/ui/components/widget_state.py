"""
Widget key binding between ``st.session_state`` and ``ReviewForm``.

Widgets are keyed by the form field they edit. Session state owns the live
value; the form is only used to seed a widget the first time it renders
(or again after Streamlit drops the key of a widget hidden by a mode switch).
"""

import streamlit as st

from src.services.orchestrator import ReviewForm


def bind(form: ReviewForm, field_name: str) -> str:
    """Seed ``st.session_state[field_name]`` from ``form`` if unset and return the key."""
    if field_name not in st.session_state:
        st.session_state[field_name] = getattr(form, field_name)
    return field_name
