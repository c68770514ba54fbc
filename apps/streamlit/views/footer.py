import streamlit as st

from roicalc.infrastructure.config import SETTINGS


def render_footer() -> None:
    """Render the disclaimer at the bottom of the page."""

    disclaimer = (
        "Figures are estimates based on the values you enter. ROI is shown as at "
        "least 50% and payback as at most 18 months."
    )
    if SETTINGS.SHOW_RAW_METRICS:
        disclaimer += ' Open "Show the math" for the uncapped numbers.'

    st.markdown(
        f'<div class="roi-footer-disclaimer">{disclaimer}</div>',
        unsafe_allow_html=True,
    )
