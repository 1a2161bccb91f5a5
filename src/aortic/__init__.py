"""
Normative upper limits for the ascending aorta.

Pure computational core: unit conversions, DuBois BSA, the JACC, NORRE and
ASE reference methods, comparison of a measured value against the limits, and
reference-curve sampling for charts.
"""

from aortic.models import (
    Advisory,
    ChartSeries,
    Comparison,
    Demographics,
    NormativeResult,
    Sex,
    UserMeasurement,
)

__version__ = "0.1.0"

__all__ = [
    "Advisory",
    "ChartSeries",
    "Comparison",
    "Demographics",
    "NormativeResult",
    "Sex",
    "UserMeasurement",
]
