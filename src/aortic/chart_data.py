"""
Chart data generation for reference curves.

Curves are produced by re-evaluating the method formulas at every height of a
fixed domain while holding age and sex fixed. The BSA-indexed method holds the
user's BMI fixed instead of weight, so weight is derived at each sampled
height. Output is deterministic for identical inputs.
"""

from typing import Dict, List, Optional

import numpy as np

from aortic.config import DEFAULT_CONFIG, HeightDomain, ReferenceConfig
from aortic.conversions import area_to_diameter, weight_for_bmi
from aortic.methods import ase, jacc, norre, registry
from aortic.models import (
    ChartSeries,
    ChartType,
    Demographics,
    NormativeResult,
    Sex,
    UserMeasurement,
)

USER_MEASUREMENT_KEY = "user_measurement"
USER_MEASUREMENT_LABEL = "Your Measurement"


def generate_height_range(
    domain: HeightDomain = DEFAULT_CONFIG.height_domain,
) -> np.ndarray:
    """
    Heights (cm) from ``min_cm`` to ``max_cm`` inclusive in ``step_cm`` steps.

    The number of samples is floor((max - min) / step) + 1.
    """
    # Tolerance keeps an exact multiple of step from being dropped by rounding
    n = int(np.floor((domain.max_cm - domain.min_cm) / domain.step_cm + 1e-9)) + 1
    return domain.min_cm + domain.step_cm * np.arange(n)


def _to_points(heights: np.ndarray, values: np.ndarray) -> List[tuple]:
    return [(float(h), float(v)) for h, v in zip(heights, values)]


def _jacc_value(age, sex: Sex, heights_cm, chart_type: ChartType, config):
    area = jacc.jacc_area(age, sex, heights_cm, config)
    if chart_type == "area":
        return area
    return area_to_diameter(area)


def calculate_data_points(
    age: float,
    sex: Sex,
    chart_type: ChartType = "area",
    domain: HeightDomain = DEFAULT_CONFIG.height_domain,
    config: ReferenceConfig = DEFAULT_CONFIG,
) -> ChartSeries:
    """
    JACC upper-limit curve across the height domain.

    Parameters
    ----------
    age : float
        Age in years
    sex : Sex
        Sex selecting the slope/intercept pair
    chart_type : str
        ``"area"`` (cm²) or ``"diameter"`` (cm)
    domain : HeightDomain
        Sampled height range
    config : ReferenceConfig
        Reference constants

    Returns
    -------
    ChartSeries
        One point per sampled height
    """
    sex = Sex(sex)
    heights = generate_height_range(domain)
    values = _jacc_value(age, sex, heights, chart_type, config)
    return ChartSeries(
        key=f"{jacc.KEY}_{sex.value}",
        label=f"{sex.label} (97.5th percentile)",
        method=jacc.KEY,
        sex=sex,
        points=_to_points(heights, values),
    )


def calculate_value_at_height(
    age: float,
    sex: Sex,
    height_cm: float,
    chart_type: ChartType = "area",
    config: ReferenceConfig = DEFAULT_CONFIG,
) -> float:
    """JACC upper limit (area or diameter) at a single height."""
    return float(_jacc_value(age, Sex(sex), height_cm, chart_type, config))


def calculate_method_series(
    age: float,
    sex: Sex,
    bmi: Optional[float],
    domain: HeightDomain = DEFAULT_CONFIG.height_domain,
    config: ReferenceConfig = DEFAULT_CONFIG,
) -> Dict[str, ChartSeries]:
    """
    Diameter curves for all three methods.

    Args:
        age: Age in years.
        sex: Sex selecting the per-sex constants.
        bmi: BMI held fixed along the BSA-indexed curve. The BSA curve is
            omitted when None.
        domain: Sampled height range.
        config: Reference constants.

    Returns:
        Method key -> ChartSeries, in registry order.
    """
    sex = Sex(sex)
    heights = generate_height_range(domain)
    values = {
        jacc.KEY: jacc.jacc_uln(age, sex, heights, config),
        norre.KEY: norre.norre_uln(sex, heights, config),
    }
    if bmi is not None:
        weights = weight_for_bmi(bmi, heights)
        values[ase.KEY] = ase.ase_uln(sex, heights, weights, config)

    series = {}
    for key in registry:
        if key not in values:
            continue
        series[key] = ChartSeries(
            key=key,
            label=registry[key].label,
            method=key,
            sex=sex,
            points=_to_points(heights, values[key]),
        )
    return series


def marker_series(
    key: str,
    label: str,
    height_cm: float,
    value: float,
    method: Optional[str] = None,
    sex: Optional[Sex] = None,
) -> ChartSeries:
    """Single-point series at the user's height."""
    return ChartSeries(
        key=key,
        label=label,
        method=method,
        sex=sex,
        kind="marker",
        points=[(float(height_cm), float(value))],
    )


def normative_chart_data(
    age: float,
    height_cm: Optional[float],
    chart_type: ChartType = "area",
    measurement: Optional[UserMeasurement] = None,
    domain: HeightDomain = DEFAULT_CONFIG.height_domain,
    config: ReferenceConfig = DEFAULT_CONFIG,
) -> List[ChartSeries]:
    """
    All series for the age/height calculator chart.

    Order: female curve, male curve, the limit of each sex at the user's
    height, then the user's own measurement.
    """
    series = [
        calculate_data_points(age, sex, chart_type, domain, config)
        for sex in (Sex.FEMALE, Sex.MALE)
    ]
    if not height_cm:
        return series

    for sex in (Sex.FEMALE, Sex.MALE):
        series.append(
            marker_series(
                key=f"{jacc.KEY}_{sex.value}_at_height",
                label=f"{sex.label} limit at your height",
                height_cm=height_cm,
                value=calculate_value_at_height(age, sex, height_cm, chart_type, config),
                method=jacc.KEY,
                sex=sex,
            )
        )

    if measurement is not None:
        user_value = measurement.area if chart_type == "area" else measurement.diameter
        series.append(
            marker_series(
                USER_MEASUREMENT_KEY, USER_MEASUREMENT_LABEL, height_cm, user_value
            )
        )
    return series


def comparison_chart_data(
    demographics: Demographics,
    results: Dict[str, NormativeResult],
    measured_diameter: Optional[float] = None,
    domain: HeightDomain = DEFAULT_CONFIG.height_domain,
    config: ReferenceConfig = DEFAULT_CONFIG,
) -> List[ChartSeries]:
    """
    All series for the method comparison chart.

    Order: one diameter curve per method, each method's limit at the user's
    height, then the user's measured diameter when given.
    """
    curves = calculate_method_series(
        demographics.age, demographics.sex, demographics.bmi, domain, config
    )
    series = list(curves.values())
    for key, result in results.items():
        series.append(
            marker_series(
                key=f"{key}_at_height",
                label=f"Your {key.upper()} ULN",
                height_cm=demographics.height_cm,
                value=result.diameter,
                method=key,
                sex=demographics.sex,
            )
        )
    if measured_diameter:
        series.append(
            marker_series(
                USER_MEASUREMENT_KEY,
                USER_MEASUREMENT_LABEL,
                demographics.height_cm,
                measured_diameter,
            )
        )
    return series
