"""
Main Streamlit Application for Aortic Upper Limits

Every widget change reruns the script: raw inputs are converted to canonical
units, the upper limits are recomputed and a new chart replaces the old one.
"""

import sys
from pathlib import Path

# Add project root and src/ to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "src"))

import streamlit as st
import plotly.graph_objects as go

from aortic.advisories import check_age, check_height, collect_advisories
from aortic.bsa import dubois_bsa
from aortic.chart_data import comparison_chart_data, normative_chart_data
from aortic.methods import calculate_all, registry
from aortic.normative import (
    calculate_normative_values,
    compare_to_methods,
    compare_to_sexes,
)

# Import components
from src.components.sidebar import render_sidebar
from src.components.normative_chart import render_normative_chart
from src.components.comparison_chart import render_comparison_chart
from src.components.results_panel import (
    render_advisories,
    render_method_results,
    render_normative_results,
    render_user_comparison,
)

# Import utilities
from src.utils.chart_handle import ChartHandle
from src.utils.input_adapter import (
    canonical_height_cm,
    to_demographics,
    to_user_measurement,
)
from src.utils.state_manager import (
    get_active_view,
    get_chart_handle,
    initialize_session_state,
    seed_default,
    set_active_view,
)

# Import config
from src.config import CHART_CONFIG, CHART_TYPE_KEY, CHART_TYPES, VIEW_CALCULATOR


def draw_chart(handle: ChartHandle, figure: go.Figure) -> None:
    """Replace the handle's figure and render it."""
    handle.replace(figure)
    st.plotly_chart(
        handle.figure,
        use_container_width=True,
        key=handle.widget_key,
        config=CHART_CONFIG,
    )


def render_calculator_view(raw) -> None:
    """Age/height calculator: JACC limits for both sexes."""
    st.markdown("### 📊 Upper Limits by Age and Height")

    height_cm = canonical_height_cm(raw)
    if not raw.age or height_cm is None:
        st.info("👈 Please enter age and height")
        return

    advisories = [a for a in (check_age(raw.age), check_height(height_cm)) if a]
    render_advisories(advisories)

    normative = calculate_normative_values(raw.age, height_cm / 100.0)
    measurement = to_user_measurement(raw, height_cm)
    comparisons = compare_to_sexes(measurement, normative) if measurement else {}

    # First render follows the representation the user measured in
    seed_default(
        st.session_state,
        CHART_TYPE_KEY,
        measurement.measured_type if measurement else "area",
    )
    chart_type = st.radio(
        "Chart type", CHART_TYPES, horizontal=True, key=CHART_TYPE_KEY
    )

    try:
        series = normative_chart_data(raw.age, height_cm, chart_type, measurement)
        figure = render_normative_chart(series, raw.age, height_cm, chart_type)
        draw_chart(get_chart_handle("calculator_chart"), figure)
    except Exception as e:
        st.error(f"Error rendering chart: {e}")

    render_normative_results(normative)
    render_user_comparison(measurement, comparisons)


def render_comparison_view(raw) -> None:
    """Method comparison: JACC, NORRE and ASE for one sex."""
    st.markdown("### 📊 Reference Method Comparison")

    demographics = to_demographics(raw, require_weight=True)
    if demographics is None:
        st.info("👈 Please enter height and weight")
        return

    render_advisories(collect_advisories(demographics))

    results = calculate_all(demographics)
    bsa = float(dubois_bsa(demographics.height_cm, demographics.weight_kg))
    labels = {key: method.label.split(" - ")[0] for key, method in registry.items()}
    comparisons = (
        compare_to_methods(raw.measured_value, results, labels)
        if raw.measured_value
        else []
    )

    try:
        series = comparison_chart_data(demographics, results, raw.measured_value)
        figure = render_comparison_chart(series, demographics)
        draw_chart(get_chart_handle("comparison_chart"), figure)
    except Exception as e:
        st.error(f"Error rendering chart: {e}")

    render_method_results(results, bsa, comparisons)


def main():
    """Main application entry point."""

    # Initialize session state
    initialize_session_state()

    view, raw = render_sidebar(get_active_view())
    set_active_view(view)

    if view == VIEW_CALCULATOR:
        render_calculator_view(raw)
    else:
        render_comparison_view(raw)


if __name__ == "__main__":
    main()
