"""
Configuration constants for the aortic upper-limit calculator app.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent

# Views
VIEW_CALCULATOR = "Age/Height Calculator"
VIEW_COMPARISON = "Method Comparison"
VIEWS = [VIEW_CALCULATOR, VIEW_COMPARISON]

# Input defaults and widget bounds
DEFAULT_AGE = 55
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_WEIGHT_KG = 70.0
AGE_SLIDER_MIN = 18
AGE_SLIDER_MAX = 90
HEIGHT_UNITS = ["cm", "in"]
WEIGHT_UNITS = ["kg", "lbs"]
MEASURED_TYPES = ["diameter", "area"]
CHART_TYPES = ["area", "diameter"]
CHART_TYPE_KEY = "chart_type"

# Plot configuration
PLOT_HEIGHT = 500
PLOT_COLORS = {
    "female": "rgb(219, 39, 119)",
    "male": "rgb(59, 130, 246)",
    "user": "rgb(234, 179, 8)",
    "user_line": "rgba(234, 179, 8, 0.5)",
    "jacc": "rgb(34, 197, 94)",
    "norre": "rgb(219, 39, 119)",
    "ase": "rgb(59, 130, 246)",
    "height_line": "rgba(100, 100, 100, 0.3)",
}

# Line dash per comparison method curve
METHOD_DASH = {
    "jacc": "solid",
    "norre": "dash",
    "ase": "dot",
}

# Marker symbol per comparison method point
METHOD_SYMBOL = {
    "jacc": "circle",
    "norre": "triangle-up",
    "ase": "square",
}

# Plot settings
CHART_CONFIG = {
    "displayModeBar": True,
    "displaylogo": False,
    "staticPlot": False,
    "responsive": True,
    "modeBarButtonsToRemove": ["select2d", "lasso2d"],
}

# Session state keys
STATE_KEYS = {
    "initialized": "initialized",
    "active_view": "active_view",
    "calculator_chart": "calculator_chart_handle",
    "comparison_chart": "comparison_chart_handle",
}
