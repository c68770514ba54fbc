# views/results.py
from __future__ import annotations

import html
from typing import Any, Dict, List

import streamlit as st

from apps.streamlit.services.ui import get_session
from roicalc.infrastructure.config import SETTINGS

CTA_LABEL = "💬 Get Free Consultation"


def _tone_class(tone: Any) -> str:
    key = tone.strip().lower() if isinstance(tone, str) else ""
    return {"red": "red", "green": "green", "neutral": "neutral"}.get(key, "neutral")


def key_figure_cards(figures: List[Dict[str, Any]]) -> str:
    cards: List[str] = []
    for fig in figures:
        name = html.escape(str(fig.get("name", "")))
        value = html.escape(str(fig.get("value", "")))
        tone_cls = _tone_class(fig.get("tone"))
        cards.append(
            f"<div class=\"roi-keycard\"><div class=\"roi-keyname\">{name}</div>"
            f"<div class=\"roi-keyvalue {tone_cls}\">{value}</div></div>"
        )
    return f"<div class=\"roi-keygrid\">{''.join(cards)}</div>" if cards else ""


def _render_raw_breakdown(rows: List[Dict[str, str]]) -> None:
    if not rows:
        return
    with st.expander("Show the math (uncapped figures)"):
        for row in rows:
            st.markdown(f"- **{html.escape(row['name'])}:** {html.escape(row['value'])}")


def _render_cta() -> None:
    st.markdown("#### Ready to unlock these benefits?")
    if SETTINGS.CONSULTATION_URL:
        st.link_button(CTA_LABEL, SETTINGS.CONSULTATION_URL, use_container_width=True)
    elif st.button(CTA_LABEL, key="consultation_cta", use_container_width=True):
        st.info("Thanks! Reach out to our modernization team to book your session.")


def render_results() -> None:
    """Result panel for the current inputs."""

    ui: Dict[str, Any] = get_session().analysis.ui

    with st.container(border=True):
        st.markdown("### Your ROI Results")
        cards = key_figure_cards(ui["key_figures"])
        if cards:
            st.markdown(cards, unsafe_allow_html=True)

        for note in ui["notes"]:
            st.caption(note)

        _render_raw_breakdown(ui["raw_breakdown"])
        st.divider()
        _render_cta()
