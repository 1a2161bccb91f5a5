"""
Normative values and comparison of a user's own measurement.

The age/height calculator reports the JACC upper limit for both sexes side by
side. When a measurement is supplied it is normalized to area and diameter,
indexed to height, and compared against each sex's upper-limit index.
"""

import logging
from typing import Dict, List, Mapping, Optional

from aortic.config import DEFAULT_CONFIG, ReferenceConfig
from aortic.conversions import area_to_diameter, diameter_to_area
from aortic.methods import jacc
from aortic.models import (
    Comparison,
    Demographics,
    MeasuredType,
    NormativeResult,
    Sex,
    UserMeasurement,
)


def calculate_normative_values(
    age: float, height_m: float, config: ReferenceConfig = DEFAULT_CONFIG
) -> Dict[Sex, NormativeResult]:
    """
    Compute the JACC upper limit for both sexes.

    Parameters
    ----------
    age : float
        Age in years
    height_m : float
        Height in meters
    config : ReferenceConfig, optional
        Reference constants

    Returns
    -------
    dict
        ``{Sex.FEMALE: NormativeResult, Sex.MALE: NormativeResult}``
    """
    return {
        sex: jacc.normative_result(age, sex, height_m, config)
        for sex in (Sex.FEMALE, Sex.MALE)
    }


def normative_for(
    demographics: Demographics, config: ReferenceConfig = DEFAULT_CONFIG
) -> Dict[Sex, NormativeResult]:
    """Shortcut for :func:`calculate_normative_values` from Demographics."""
    return calculate_normative_values(demographics.age, demographics.height_m, config)


def user_measurement(
    value: Optional[float],
    measured_type: Optional[MeasuredType],
    height_m: float,
) -> Optional[UserMeasurement]:
    """
    Normalize a measured value to area, diameter and area/height index.

    Returns None when no usable measurement was supplied (missing or
    non-positive value, or no measurement type selected).
    """
    if value is None or measured_type is None:
        return None
    if value <= 0 or height_m <= 0:
        logging.warning(f"Ignoring non-positive measurement input: value={value}")
        return None

    if measured_type == "diameter":
        diameter = value
        area = diameter_to_area(diameter)
    else:
        area = value
        diameter = area_to_diameter(area)

    return UserMeasurement(
        value=value,
        measured_type=measured_type,
        area=float(area),
        diameter=float(diameter),
        index=float(area / height_m),
    )


def percent_deviation(observed: float, reference: float) -> float:
    """
    Signed percent difference of ``observed`` from ``reference``.

    Positive means above the reference, negative below, zero exactly at it.
    """
    return (observed - reference) / reference * 100


def compare(observed: float, reference: float, target: str) -> Comparison:
    return Comparison(
        target=target,
        observed=observed,
        reference=reference,
        percent_deviation=percent_deviation(observed, reference),
    )


def compare_to_sexes(
    measurement: UserMeasurement, normative: Mapping[Sex, NormativeResult]
) -> Dict[Sex, Comparison]:
    """Compare the user's area/height index with each sex's upper-limit index."""
    return {
        sex: compare(measurement.index, result.index, sex.label.lower())
        for sex, result in normative.items()
    }


def compare_to_methods(
    diameter: float,
    results: Mapping[str, NormativeResult],
    labels: Optional[Mapping[str, str]] = None,
) -> List[Comparison]:
    """
    Compare a measured diameter with each method's upper-limit diameter.

    Args:
        diameter: Measured diameter in cm.
        results: Method key -> NormativeResult, e.g. from ``calculate_all``.
        labels: Optional display names per method key; defaults to the
            upper-cased key.

    Returns:
        One Comparison per method, in the order of ``results``.
    """
    labels = labels or {}
    return [
        compare(diameter, result.diameter, labels.get(key, key.upper()))
        for key, result in results.items()
    ]
