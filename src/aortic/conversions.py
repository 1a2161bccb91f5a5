"""
Unit conversion utilities.

All functions are pure and accept either scalars or numpy arrays. Callers are
responsible for passing finite, non-negative values.
"""

import numpy as np

from aortic.config import CM_PER_INCH, LBS_PER_KG


def cm_to_inches(cm):
    return cm / CM_PER_INCH


def inches_to_cm(inches):
    return inches * CM_PER_INCH


def kg_to_lbs(kg):
    return kg * LBS_PER_KG


def lbs_to_kg(lbs):
    return lbs / LBS_PER_KG


def cm_to_m(cm):
    return cm / 100.0


def mm_to_cm(mm):
    return mm / 10.0


def diameter_to_area(diameter):
    """Area (cm²) of a circle with the given diameter (cm)."""
    return np.pi * (diameter / 2.0) ** 2


def area_to_diameter(area):
    """Diameter (cm) of a circle with the given area (cm²). Zero area gives zero."""
    return 2.0 * np.sqrt(area / np.pi)


def height_to_cm(value: float, unit: str) -> float:
    """
    Normalize a height to centimeters.

    Parameters
    ----------
    value : float
        Height in ``unit``
    unit : str
        ``"cm"`` or ``"in"``

    Returns
    -------
    float
        Height in centimeters
    """
    return value if unit == "cm" else inches_to_cm(value)


def weight_to_kg(value: float, unit: str) -> float:
    """
    Normalize a weight to kilograms.

    Parameters
    ----------
    value : float
        Weight in ``unit``
    unit : str
        ``"kg"`` or ``"lbs"``

    Returns
    -------
    float
        Weight in kilograms
    """
    return value if unit == "kg" else lbs_to_kg(value)


def bmi(height_cm, weight_kg):
    """BMI (kg/m²) from height in cm and weight in kg."""
    return weight_kg / cm_to_m(height_cm) ** 2


def weight_for_bmi(bmi_value, height_cm):
    """Weight (kg) that gives ``bmi_value`` at ``height_cm``."""
    return bmi_value * cm_to_m(height_cm) ** 2
