"""Streamlit application entrypoint for the ROI calculator."""
from __future__ import annotations

import streamlit as st

from apps.streamlit import runtime

ROOT = runtime.prepare_runtime()

from apps.streamlit.services.ui import (  # noqa: E402
    ensure_session_defaults,
    inject_css,
    resolve_page_icon,
)
from apps.streamlit.views.calculator import render_calculator  # noqa: E402
from apps.streamlit.views.explainer import render_explainer  # noqa: E402
from apps.streamlit.views.footer import render_footer  # noqa: E402
from apps.streamlit.views.header import render_header  # noqa: E402
from apps.streamlit.views.results import render_results  # noqa: E402
from roicalc.infrastructure.config import SETTINGS  # noqa: E402
from roicalc.infrastructure.logging_setup import configure_logging  # noqa: E402


def main() -> None:
    runtime.chdir_to_root(ROOT)
    configure_logging()

    st.set_page_config(
        page_title=SETTINGS.PAGE_TITLE, page_icon=resolve_page_icon(), layout="wide"
    )
    st.markdown(
        """
<style>
  #MainMenu{visibility:hidden;}
  footer{visibility:hidden;}
</style>
""",
        unsafe_allow_html=True,
    )
    inject_css()
    ensure_session_defaults()

    render_header()

    left, right = st.columns([2, 1], gap="large")
    with left:
        render_calculator()
    with right:
        render_results()

    render_explainer()
    render_footer()


__all__ = ["main"]

if __name__ == "__main__":
    main()
