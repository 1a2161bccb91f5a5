"""
Results Panel Component

Displays normative upper limits, the user's measurement and the comparison
against each upper limit.
"""

from typing import Dict, List, Mapping, Optional

import pandas as pd
import streamlit as st

from aortic.methods import registry
from aortic.models import Advisory, Comparison, NormativeResult, Sex, UserMeasurement
from src.utils.formatting import format_value


def render_advisories(advisories: List[Advisory]) -> None:
    for advisory in advisories:
        st.warning(f"⚠️ {advisory.message}")


def render_normative_results(normative: Mapping[Sex, NormativeResult]) -> None:
    """
    Render female and male upper limits side by side.

    Args:
        normative: Upper limits keyed by sex
    """
    columns = st.columns(len(normative))
    for col, (sex, result) in zip(columns, normative.items()):
        with col:
            st.markdown(f"#### {sex.label} upper limit (97.5th percentile)")
            st.metric("Area/height index (cm²/m)", format_value(result.index))
            st.metric("Area (cm²)", format_value(result.area))
            st.metric("Diameter (cm)", format_value(result.diameter))


def render_user_comparison(
    measurement: Optional[UserMeasurement],
    comparisons: Dict[Sex, Comparison],
) -> None:
    """
    Render the user's measurement and its deviation from each sex's limit.

    Nothing is shown when no measurement was entered.
    """
    if measurement is None:
        return

    st.markdown("#### 📏 Your Measurement")
    col1, col2, col3 = st.columns(3)
    col1.metric("Diameter (cm)", format_value(measurement.diameter))
    col2.metric("Area (cm²)", format_value(measurement.area))
    col3.metric("Area/height index (cm²/m)", format_value(measurement.index))

    for sex, comparison in comparisons.items():
        text = comparison.describe()
        if comparison.direction == "above":
            st.error(f"{sex.label}: {text}")
        else:
            st.success(f"{sex.label}: {text}")


def method_results_table(results: Mapping[str, NormativeResult]) -> pd.DataFrame:
    """Table of upper-limit diameters per method, formatted for display."""
    rows = []
    for key, result in results.items():
        method = registry[key]
        rows.append({
            "Method": method.label,
            "Modality": method.modality,
            "Indexed ULN": format_value(result.index),
            "ULN diameter (cm)": format_value(result.diameter),
        })
    return pd.DataFrame(rows)


def render_method_results(
    results: Mapping[str, NormativeResult],
    bsa: Optional[float],
    comparisons: List[Comparison],
) -> None:
    """
    Render the per-method upper limits, BSA and optional diameter comparisons.
    """
    st.dataframe(method_results_table(results), hide_index=True, use_container_width=True)
    if bsa is not None:
        st.metric("Body surface area (m², DuBois)", format_value(bsa))

    for comparison in comparisons:
        text = comparison.describe()
        if comparison.direction == "above":
            st.error(text)
        else:
            st.success(text)
