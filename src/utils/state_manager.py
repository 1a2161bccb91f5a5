"""
Session state management utilities for Streamlit.
"""

from typing import Any, MutableMapping

import streamlit as st

from src.config import STATE_KEYS, VIEW_CALCULATOR, VIEWS
from src.utils.chart_handle import ChartHandle


def initialize_session_state() -> None:
    """
    Initialize Streamlit session state with default values.

    Creates one ChartHandle per view; they live for the whole session and
    only their figure is replaced on redraw.
    """
    if STATE_KEYS["initialized"] in st.session_state:
        return

    st.session_state[STATE_KEYS["active_view"]] = VIEW_CALCULATOR
    st.session_state[STATE_KEYS["calculator_chart"]] = ChartHandle("calculator")
    st.session_state[STATE_KEYS["comparison_chart"]] = ChartHandle("comparison")

    # Mark as initialized
    st.session_state[STATE_KEYS["initialized"]] = True


def get_active_view() -> str:
    """Get the active view name from session state."""
    view = st.session_state.get(STATE_KEYS["active_view"], VIEW_CALCULATOR)
    return view if view in VIEWS else VIEW_CALCULATOR


def set_active_view(view: str) -> None:
    if view in VIEWS:
        st.session_state[STATE_KEYS["active_view"]] = view


def get_chart_handle(state_key: str) -> ChartHandle:
    """
    Get the chart handle stored under ``STATE_KEYS[state_key]``.

    Parameters
    ----------
    state_key : str
        ``"calculator_chart"`` or ``"comparison_chart"``
    """
    key = STATE_KEYS[state_key]
    handle = st.session_state.get(key)
    if handle is None:
        handle = ChartHandle(state_key.replace("_chart", ""))
        st.session_state[key] = handle
    return handle


def seed_default(state: MutableMapping, key: str, value: Any) -> None:
    """
    Give a widget its default value on first render only.

    Widgets keyed this way keep whatever the user entered across reruns,
    including reruns where the label or the default would differ.

    Parameters
    ----------
    state : MutableMapping
        Usually ``st.session_state``
    key : str
        Widget key
    value : Any
        Initial value
    """
    if key not in state:
        state[key] = value
