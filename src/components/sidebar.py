"""
Sidebar Component

This module provides the view selector and the input form for each view.
"""

from typing import Optional, Tuple

import streamlit as st

from aortic.conversions import cm_to_inches, kg_to_lbs

from src.config import (
    AGE_SLIDER_MAX,
    AGE_SLIDER_MIN,
    DEFAULT_AGE,
    DEFAULT_HEIGHT_CM,
    DEFAULT_WEIGHT_KG,
    HEIGHT_UNITS,
    MEASURED_TYPES,
    VIEW_CALCULATOR,
    VIEWS,
    WEIGHT_UNITS,
)
from src.utils.formatting import (
    height_conversion_hint,
    measured_conversion_hint,
    weight_conversion_hint,
)
from src.utils.input_adapter import RawInputs
from src.utils.state_manager import seed_default


def _optional(value: Optional[float]) -> Optional[float]:
    """Number inputs use 0 for 'not entered'."""
    return value if value else None


def _height_inputs(key_prefix: str) -> Tuple[float, str]:
    unit = st.radio(
        "Height unit",
        HEIGHT_UNITS,
        horizontal=True,
        key=f"{key_prefix}_height_unit",
    )
    # One key for both units: switching unit re-reads the entered number
    key = f"{key_prefix}_height"
    default = (
        DEFAULT_HEIGHT_CM if unit == "cm" else round(cm_to_inches(DEFAULT_HEIGHT_CM), 1)
    )
    seed_default(st.session_state, key, default)
    height = st.number_input("Height", min_value=0.0, step=0.5, key=key)
    hint = height_conversion_hint(height, unit)
    if hint:
        st.caption(hint)
    return height, unit


def _render_calculator_inputs() -> RawInputs:
    age = st.number_input(
        "Age (years)", min_value=0, max_value=120, value=DEFAULT_AGE, step=1,
        key="calc_age",
    )
    height, height_unit = _height_inputs("calc")

    st.divider()
    st.subheader("📏 Your Measurement (optional)")
    measured_type = st.radio(
        "Measurement type",
        MEASURED_TYPES,
        horizontal=True,
        key="calc_measured_type",
    )
    unit = "cm" if measured_type == "diameter" else "cm²"
    measured_value = st.number_input(
        f"Measured {measured_type} ({unit})",
        min_value=0.0,
        value=0.0,
        step=0.1,
        key="calc_measured_value",
        help="Leave at 0 to show the upper limits only",
    )
    hint = measured_conversion_hint(measured_value, measured_type)
    if hint:
        st.caption(hint)

    return RawInputs(
        age=age,
        height=_optional(height),
        height_unit=height_unit,
        measured_value=_optional(measured_value),
        measured_type=measured_type,
    )


def _render_comparison_inputs() -> RawInputs:
    age = st.slider(
        "Age (years)", AGE_SLIDER_MIN, AGE_SLIDER_MAX, DEFAULT_AGE, key="cmp_age"
    )
    sex = st.radio(
        "Sex",
        ["female", "male"],
        format_func=str.capitalize,
        horizontal=True,
        key="cmp_sex",
    )
    height, height_unit = _height_inputs("cmp")

    weight_unit = st.radio(
        "Weight unit", WEIGHT_UNITS, horizontal=True, key="cmp_weight_unit"
    )
    seed_default(
        st.session_state,
        "cmp_weight",
        DEFAULT_WEIGHT_KG
        if weight_unit == "kg"
        else round(kg_to_lbs(DEFAULT_WEIGHT_KG), 1),
    )
    weight = st.number_input("Weight", min_value=0.0, step=0.5, key="cmp_weight")
    hint = weight_conversion_hint(weight, weight_unit)
    if hint:
        st.caption(hint)

    st.divider()
    measured_value = st.number_input(
        "Measured diameter (cm, optional)",
        min_value=0.0,
        value=0.0,
        step=0.1,
        key="cmp_measured_value",
    )

    return RawInputs(
        age=age,
        sex=sex,
        height=_optional(height),
        height_unit=height_unit,
        weight=_optional(weight),
        weight_unit=weight_unit,
        measured_value=_optional(measured_value),
        measured_type="diameter",
    )


def render_sidebar(current_view: str) -> Tuple[str, RawInputs]:
    """
    Render the sidebar with view selection and inputs.

    Args:
        current_view: Currently active view name

    Returns:
        Tuple of (selected view, raw inputs for that view)
    """
    with st.sidebar:
        st.title("🫀 Aortic Upper Limits")
        view = st.radio(
            "View",
            VIEWS,
            index=VIEWS.index(current_view) if current_view in VIEWS else 0,
            key="view_selector",
        )
        st.divider()

        if view == VIEW_CALCULATOR:
            raw = _render_calculator_inputs()
        else:
            raw = _render_comparison_inputs()

    return view, raw
