"""
Review Assistant Streamlit UI — main entry point.

Run with: ``streamlit run src/ui/app.py``
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from src.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (src/ui/),
# which removes the project root needed for absolute ``src.*`` imports.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging  # noqa: E402

import streamlit as st  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.core.exceptions import MissingAPIKeyError, ReviewAssistantError  # noqa: E402
from src.core.models import ReviewType  # noqa: E402
from src.services.orchestrator import ReviewOrchestrator, ReviewSession  # noqa: E402
from src.ui.api_client import get_api_client  # noqa: E402
from src.ui.components.recorder import render_recorder  # noqa: E402
from src.ui.components.review_form import (  # noqa: E402
    render_performance_form,
    render_self_review_form,
)
from src.ui.components.review_list import render_review_list  # noqa: E402
from src.ui.components.sidebar import render_sidebar  # noqa: E402

_settings = get_settings()
logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Review Assistant",
    page_icon="\U0001f4dd",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
if "api_base_url" not in st.session_state:
    st.session_state.api_base_url = _settings.review_api_base_url
if "review_session" not in st.session_state:
    st.session_state.review_session = ReviewSession()

session: ReviewSession = st.session_state.review_session
form = session.form

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
render_sidebar(form)

orchestrator = ReviewOrchestrator(
    get_api_client(st.session_state.api_base_url),
    session,
    notify=st.warning,
)

# ---------------------------------------------------------------------------
# Main form
# ---------------------------------------------------------------------------
st.title("Performance Review Assistant")

with st.container(border=True):
    render_recorder(orchestrator)

    if form.review_type == ReviewType.performance:
        submitted = render_performance_form(form)
    else:
        submitted = render_self_review_form(form)

if submitted:
    try:
        with st.spinner("Generating review..."):
            orchestrator.submit_review(form.review_type)
    except MissingAPIKeyError as exc:
        st.warning(exc.detail)
    except ReviewAssistantError as exc:
        logger.warning("Submission failed: %s", exc.code)

if session.last_error:
    st.error(f"Could not generate review: {session.last_error}")

render_review_list(session.review)
