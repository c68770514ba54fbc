# views/calculator.py
from __future__ import annotations

import streamlit as st

from apps.streamlit.services.ui import get_session, input_key, sync_widget_state
from roicalc.domain.roi.fields import STEP_TITLES, FieldSpec, fields_for_step

_STEP_ICONS = {1: "💵", 2: "📈", 3: "⚡"}


def _on_input_change(field: str) -> None:
    session = get_session()
    session.set_input(field, st.session_state.get(input_key(field), ""))


def _on_reset() -> None:
    session = get_session()
    session.reset()
    sync_widget_state(session, overwrite=True)


def _render_field(spec: FieldSpec) -> None:
    st.text_input(
        spec.label,
        key=input_key(spec.key),
        help=spec.help,
        placeholder=spec.placeholder,
        on_change=_on_input_change,
        args=(spec.key,),
    )


def _render_step(step: int) -> None:
    specs = fields_for_step(step)
    with st.container(border=True):
        st.markdown(f"#### {_STEP_ICONS.get(step, '')} {STEP_TITLES[step]}")
        narrow = [spec for spec in specs if not spec.wide]
        if len(narrow) > 1:
            cols = st.columns(2, gap="medium")
            for idx, spec in enumerate(narrow):
                with cols[idx % 2]:
                    _render_field(spec)
        else:
            for spec in narrow:
                _render_field(spec)
        for spec in specs:
            if spec.wide:
                _render_field(spec)


def render_calculator() -> None:
    for step in sorted(STEP_TITLES):
        _render_step(step)

    st.button("Reset to example values", on_click=_on_reset, key="reset_inputs")
