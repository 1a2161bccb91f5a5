"""
Body surface area estimation.
"""

import numpy as np

from aortic.config import (
    DUBOIS_COEFFICIENT,
    DUBOIS_HEIGHT_EXPONENT,
    DUBOIS_WEIGHT_EXPONENT,
)


def dubois_bsa(height_cm, weight_kg):
    """
    Body surface area (m²) using the DuBois & DuBois (1916) formula.

    BSA = 0.007184 * height_cm^0.725 * weight_kg^0.425

    Args:
        height_cm: Height in centimeters (scalar or array, > 0)
        weight_kg: Weight in kilograms (scalar or array, > 0)

    Returns:
        BSA in m², same shape as the broadcast inputs
    """
    return (
        DUBOIS_COEFFICIENT
        * np.power(height_cm, DUBOIS_HEIGHT_EXPONENT)
        * np.power(weight_kg, DUBOIS_WEIGHT_EXPONENT)
    )
