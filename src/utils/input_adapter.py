"""
Conversion of raw form values into canonical core inputs.

The core only accepts positive heights and weights in cm and kg. Anything
missing or invalid is mapped to None so the caller can show a prompt instead of
results.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ValidationError

from aortic.conversions import height_to_cm, weight_to_kg
from aortic.models import Demographics, Sex, UserMeasurement
from aortic.normative import user_measurement


class RawInputs(BaseModel):
    """Form values as entered, before unit conversion."""

    age: Optional[float] = None
    sex: Optional[str] = None
    height: Optional[float] = None
    height_unit: str = "cm"
    weight: Optional[float] = None
    weight_unit: str = "kg"
    measured_value: Optional[float] = None
    measured_type: Optional[str] = None


def parse_sex(value: Optional[str]) -> Optional[Sex]:
    """Accept ``"F"``/``"M"`` or ``"female"``/``"male"`` in any case."""
    if not value:
        return None
    normalized = value.strip().upper()[:1]
    try:
        return Sex(normalized)
    except ValueError:
        return None


def canonical_height_cm(raw: RawInputs) -> Optional[float]:
    if raw.height is None or raw.height <= 0:
        return None
    return float(height_to_cm(raw.height, raw.height_unit))


def canonical_weight_kg(raw: RawInputs) -> Optional[float]:
    if raw.weight is None or raw.weight <= 0:
        return None
    return float(weight_to_kg(raw.weight, raw.weight_unit))


def to_demographics(raw: RawInputs, require_weight: bool = False) -> Optional[Demographics]:
    """
    Build Demographics from raw inputs.

    Parameters
    ----------
    raw : RawInputs
        Form values
    require_weight : bool
        Treat a missing weight as invalid input

    Returns
    -------
    Demographics or None
        None when age, sex or height (or weight, if required) is unusable
    """
    height_cm = canonical_height_cm(raw)
    weight_kg = canonical_weight_kg(raw)
    sex = parse_sex(raw.sex)
    if not raw.age or height_cm is None or sex is None:
        return None
    if require_weight and weight_kg is None:
        return None

    try:
        return Demographics(
            age=raw.age, sex=sex, height_cm=height_cm, weight_kg=weight_kg
        )
    except ValidationError as e:
        logging.warning(f"Invalid demographic inputs: {e}")
        return None


def to_user_measurement(raw: RawInputs, height_cm: Optional[float]) -> Optional[UserMeasurement]:
    """User's measurement normalized to area/diameter, or None if not supplied."""
    if height_cm is None:
        return None
    measured_type = raw.measured_type if raw.measured_type in ("area", "diameter") else None
    return user_measurement(raw.measured_value, measured_type, height_cm / 100.0)
