from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st
from PIL import Image

from roicalc.domain.roi_service import INPUT_FIELDS, RoiAnalysis
from roicalc.domain.roi_session import RoiSession
from roicalc.infrastructure.config import SETTINGS

LOGGER = logging.getLogger(__name__)

SESSION_KEY = "roi_session"


def _assets_dir() -> Path:
    from bootstrap import ASSETS  # Lazy import; runtime ensures availability.

    return ASSETS


def resolve_page_icon() -> Image.Image | str:
    icon_path = _assets_dir() / "logo_64.png"
    if icon_path.exists():
        try:
            return Image.open(icon_path)
        except OSError:
            LOGGER.warning("Could not open page icon %s", icon_path)
    return "🧮"


def inject_css() -> None:
    css_path = _assets_dir() / "styles.css"
    if css_path.exists():
        st.markdown(
            f"<style>{css_path.read_text(encoding='utf-8')}</style>",
            unsafe_allow_html=True,
        )


def input_key(field: str) -> str:
    return f"input_{field}"


def format_input_value(value: float) -> str:
    """Text shown in a form field: ``250000`` rather than ``250000.0``."""
    value = float(value)
    return f"{value:.0f}" if value.is_integer() else str(value)


def _log_recompute(analysis: RoiAnalysis) -> None:
    LOGGER.debug(
        "Recomputed ROI: roi=%s payback=%s annual_savings=%s",
        analysis.results.roi_percentage,
        analysis.results.payback_months,
        analysis.results.annual_savings,
    )


def get_session() -> RoiSession:
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = RoiSession(include_raw=SETTINGS.SHOW_RAW_METRICS)
        session.subscribe(_log_recompute)
        st.session_state[SESSION_KEY] = session
    return session


def sync_widget_state(session: RoiSession, *, overwrite: bool = False) -> None:
    """Mirror the session's inputs into the text widgets' state."""
    for field in INPUT_FIELDS:
        key = input_key(field)
        if overwrite or key not in st.session_state:
            st.session_state[key] = format_input_value(getattr(session.inputs, field))


def ensure_session_defaults() -> RoiSession:
    session = get_session()
    sync_widget_state(session)
    return session


__all__ = [
    "SESSION_KEY",
    "ensure_session_defaults",
    "format_input_value",
    "get_session",
    "inject_css",
    "input_key",
    "resolve_page_icon",
    "sync_widget_state",
]
