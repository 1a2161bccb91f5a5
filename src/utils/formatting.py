"""
Display formatting for computed values.

Lengths and areas are shown with two decimals, percentages and unit
conversion hints with one (height in cm with two, matching the form hint).
"""

from typing import Optional

from aortic.conversions import (
    area_to_diameter,
    cm_to_inches,
    diameter_to_area,
    inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)


def format_value(value: Optional[float], decimals: int = 2) -> str:
    """Fixed-decimal string, or "-" for missing values."""
    if value is None:
        return "-"
    return f"{value:.{decimals}f}"


def unit_suffix(chart_type: str) -> str:
    return "cm²" if chart_type == "area" else "cm"


def axis_label(chart_type: str) -> str:
    return "Area (cm²)" if chart_type == "area" else "Diameter (cm)"


def hover_label(label: str, value: float, chart_type: str) -> str:
    """Tooltip text, e.g. ``Female (97.5th percentile): 9.04 cm²``."""
    return f"{label}: {value:.2f} {unit_suffix(chart_type)}"


def height_conversion_hint(value: Optional[float], unit: str) -> str:
    """
    Converted height shown next to the height field.

    Returns an empty string when no positive height is entered.
    """
    if not value or value <= 0:
        return ""
    if unit == "cm":
        return f"= {cm_to_inches(value):.1f} inches"
    return f"= {inches_to_cm(value):.2f} cm"


def weight_conversion_hint(value: Optional[float], unit: str) -> str:
    if not value or value <= 0:
        return ""
    if unit == "kg":
        return f"= {kg_to_lbs(value):.1f} lbs"
    return f"= {lbs_to_kg(value):.1f} kg"


def measured_conversion_hint(value: Optional[float], measured_type: Optional[str]) -> str:
    """Other representation of the measured value (area <-> diameter)."""
    if not value or value <= 0 or not measured_type:
        return ""
    if measured_type == "diameter":
        return f"= {diameter_to_area(value):.2f} cm² area"
    return f"= {area_to_diameter(value):.2f} cm diameter"
