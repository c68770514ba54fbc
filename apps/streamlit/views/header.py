# views/header.py
import streamlit as st

from roicalc.infrastructure.config import SETTINGS


def render_header() -> None:
    """Render the page title and the short pitch under it."""

    st.markdown(
        f"""
        <div class="roi-header">
          <div class="roi-header-icon">🧮</div>
          <h1 class="roi-header-title">{SETTINGS.PAGE_TITLE}</h1>
          <p class="roi-header-lead">
            Discover your potential return on investment and see how modernization
            can transform your business outcomes
          </p>
        </div>
        """,
        unsafe_allow_html=True,
    )
