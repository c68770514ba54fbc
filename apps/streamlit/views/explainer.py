# views/explainer.py
import streamlit as st

from roicalc.domain.roi.fields import (
    EXPLAINER_SECTIONS,
    EXPLAINER_TITLE,
    POSITIVE_RESULTS_TEXT,
    POSITIVE_RESULTS_TITLE,
)


def render_explainer() -> None:
    st.divider()
    st.markdown(f"## {EXPLAINER_TITLE}")

    half = (len(EXPLAINER_SECTIONS) + 1) // 2
    columns = st.columns(2, gap="large")
    for col, sections in zip(columns, (EXPLAINER_SECTIONS[:half], EXPLAINER_SECTIONS[half:])):
        with col:
            for title, why, benefit in sections:
                st.markdown(f"#### {title}")
                st.markdown(f"**Why it matters:** {why}  \n**Benefit:** {benefit}")

    st.success(f"**{POSITIVE_RESULTS_TITLE}**\n\n{POSITIVE_RESULTS_TEXT}")
